"""
Feedback Service

Scores a guess against the secret word.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import Feedback, LetterStatus
from .errors import InvalidInput

_PATTERN_CHARS = {
    LetterStatus.CORRECT: "G",
    LetterStatus.PRESENT: "Y",
    LetterStatus.ABSENT: "_",
}


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first. The remaining guess letters are then
    scanned left to right against a count of the unmatched secret letters,
    so a repeated letter is marked PRESENT at most as many times as it
    occurs unmatched in the secret, earlier positions first.

    Args:
        secret: The word being guessed
        guess: The submitted word, same length as the secret

    Returns:
        Feedback: One LetterStatus per position

    Raises:
        InvalidInput: If the two words differ in length
    """
    if len(secret) != len(guess):
        raise InvalidInput(
            f"Guess '{guess}' has {len(guess)} letters, secret has {len(secret)}"
        )

    result: List[Optional[LetterStatus]] = [None] * len(secret)

    # Unmatched secret letters available for PRESENT marks
    remaining = Counter(s for s, g in zip(secret, guess) if s != g)

    # First pass: exact position matches
    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            result[i] = LetterStatus.CORRECT

    # Second pass: present letters consume the remaining counts in order
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return tuple(result)


def is_solved(feedback: Feedback) -> bool:
    return bool(feedback) and all(status is LetterStatus.CORRECT for status in feedback)


def feedback_to_pattern(feedback: Feedback) -> str:
    """Render feedback as G (correct), Y (present) and _ (absent)."""
    return "".join(_PATTERN_CHARS[status] for status in feedback)
