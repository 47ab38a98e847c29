"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter verdict. UNUSED only appears in keyboard tracking."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"


class SessionState(Enum):
    """Lifecycle of a single game session."""
    ACTIVE = "ACTIVE"
    WON = "WON"
    LOST = "LOST"


class Disposition(Enum):
    """What the caller should do after a submission."""
    RETRY = "RETRY"    # rejected, attempt not consumed
    COMMIT = "COMMIT"  # scored, attempt consumed


Feedback = Tuple[LetterStatus, ...]


@dataclass(frozen=True)
class AttemptRecord:
    """One scored guess."""
    number: int
    guess: str
    feedback: Feedback


@dataclass
class GameState:
    """Read-only snapshot of a session for the presentation layer."""
    game_id: str
    state: SessionState
    current_attempt: int
    attempts_used: int
    max_attempts: int
    word_length: int
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # (letter, status value) pairs
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.state is not SessionState.ACTIVE

    @property
    def won(self) -> bool:
        return self.state is SessionState.WON
