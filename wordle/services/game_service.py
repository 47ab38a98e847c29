"""
Game Service

Contains the game session state machine for single player Wordle.
"""

import random
import string
import uuid
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..models.game import AttemptRecord, Feedback, GameState, LetterStatus, SessionState
from .errors import (
    EmptyWordList,
    GuessRejected,
    InvalidLength,
    InvalidWordList,
    SessionTerminated,
    UnknownWord,
)
from .feedback_service import evaluate, is_solved

_ALPHABET = frozenset(string.ascii_lowercase)


class GameSession:
    """
    One game against one secret word.

    This class handles:
    - Secret selection, drawn once at construction
    - Guess validation against the word list
    - Scoring through the feedback service
    - Win/loss transitions and the attempt history

    A rejected guess never changes the session. A scored guess always
    consumes exactly one attempt.
    """

    def __init__(self,
                 word_list: Sequence[str],
                 max_attempts: int = MAX_ROUNDS,
                 rng: Optional[random.Random] = None,
                 word_length: int = WORD_LENGTH):
        """
        Args:
            word_list: Lowercase words of word_length letters
            max_attempts: Scored guesses allowed before the game is lost
            rng: Source for the secret draw, anything with randint(a, b).
                Defaults to a freshly seeded random.Random
            word_length: Letters per word

        Raises:
            EmptyWordList: If word_list has no words
            InvalidWordList: If a word has the wrong length or format
            ValueError: If max_attempts is not positive
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        words = tuple(word_list)
        if not words:
            raise EmptyWordList()
        for index, word in enumerate(words):
            if len(word) != word_length or not set(word) <= _ALPHABET:
                raise InvalidWordList(
                    f"Word at index {index} '{word}' is not a lowercase {word_length}-letter word"
                )

        self.game_id = str(uuid.uuid4())
        self.word_length = word_length
        self.max_attempts = max_attempts
        self._words = words
        self._vocabulary = frozenset(words)

        rng = rng if rng is not None else random.Random()
        self._secret = words[rng.randint(0, len(words) - 1)]

        self._history: List[AttemptRecord] = []
        self._state = SessionState.ACTIVE
        self._letter_status: Dict[str, LetterStatus] = {
            letter: LetterStatus.UNUSED for letter in sorted(_ALPHABET)
        }

    # Observers

    @property
    def outcome(self) -> SessionState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state is not SessionState.ACTIVE

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - len(self._history)

    @property
    def current_attempt(self) -> int:
        """1-based number of the attempt being played, or of the last one once over."""
        if self.is_terminal:
            return len(self._history)
        return len(self._history) + 1

    @property
    def history(self) -> Tuple[AttemptRecord, ...]:
        return tuple(self._history)

    @property
    def revealed_secret(self) -> Optional[str]:
        """The secret word, or None while the game is still being played."""
        if not self.is_terminal:
            return None
        return self._secret

    @property
    def letter_status(self) -> Dict[str, LetterStatus]:
        return dict(self._letter_status)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def normalize_guess(self, raw_guess: str) -> str:
        return (raw_guess or "").strip().lower()

    def is_valid_guess(self, raw_guess: str) -> Tuple[bool, str]:
        """
        Validates a guess without submitting it.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            self._validate(self.normalize_guess(raw_guess))
        except (GuessRejected, SessionTerminated) as e:
            return False, str(e)
        return True, ""

    def _validate(self, guess: str) -> None:
        if self.is_terminal:
            raise SessionTerminated(self._state)

        if len(guess) != self.word_length:
            raise InvalidLength(guess, self.word_length)

        if guess not in self._vocabulary:
            raise UnknownWord(guess)

    def submit(self, raw_guess: str) -> Tuple[Feedback, SessionState]:
        """
        Scores a guess and advances the game.

        Args:
            raw_guess: Player input, surrounding whitespace and case ignored

        Returns:
            Tuple of (feedback, state after this guess)

        Raises:
            SessionTerminated: If the game is already over
            InvalidLength: If the guess has the wrong number of letters
            UnknownWord: If the guess is not in the word list
        """
        guess = self.normalize_guess(raw_guess)
        self._validate(guess)

        feedback = evaluate(self._secret, guess)
        self._history.append(AttemptRecord(len(self._history) + 1, guess, feedback))
        self._update_letter_status(zip(guess, feedback))

        if is_solved(feedback):
            self._state = SessionState.WON
        elif len(self._history) >= self.max_attempts:
            self._state = SessionState.LOST

        return feedback, self._state

    def _update_letter_status(self, evaluations: Iterable[Tuple[str, LetterStatus]]) -> None:
        """
        Updates keyboard letter tracking based on guess results.

        Status only moves up: UNUSED < ABSENT < PRESENT < CORRECT.
        """
        for letter, new_status in evaluations:
            current_status = self._letter_status[letter]

            if new_status == LetterStatus.CORRECT:
                self._letter_status[letter] = LetterStatus.CORRECT
            elif new_status == LetterStatus.PRESENT and current_status != LetterStatus.CORRECT:
                self._letter_status[letter] = LetterStatus.PRESENT
            elif new_status == LetterStatus.ABSENT and current_status == LetterStatus.UNUSED:
                self._letter_status[letter] = LetterStatus.ABSENT

    def get_state(self) -> GameState:
        """
        Returns a snapshot of the session (without revealing the answer
        until the game is over).
        """
        return GameState(
            game_id=self.game_id,
            state=self._state,
            current_attempt=self.current_attempt,
            attempts_used=self.attempts_used,
            max_attempts=self.max_attempts,
            word_length=self.word_length,
            guesses=[record.guess for record in self._history],
            guess_results=[
                [(letter, status.value) for letter, status in zip(record.guess, record.feedback)]
                for record in self._history
            ],
            letter_status={letter: status.value for letter, status in self._letter_status.items()},
            answer=self.revealed_secret,
        )


def start(word_list: Sequence[str],
          max_attempts: int = MAX_ROUNDS,
          rng: Optional[random.Random] = None,
          word_length: int = WORD_LENGTH) -> GameSession:
    """Creates a new game session with a randomly drawn secret."""
    return GameSession(word_list, max_attempts=max_attempts, rng=rng, word_length=word_length)
