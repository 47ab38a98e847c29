"""
Game Configuration Constants Module

Game rule constants and the word source. The word list itself is never
held in module state: callers load it and hand it to the session.
"""

import logging
import os
from typing import Final, Iterable, List, Optional

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

WORD_LENGTH: Final[int] = 5

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)

# Used when the word file cannot be read and a fallback is allowed
FALLBACK_WORDS: Final[List[str]] = [
    'hello', 'world', 'games', 'apple', 'grape',
    'house', 'ocean', 'piano', 'tiger', 'cloud',
]

logger = logging.getLogger('wordle_game')


def normalize_words(tokens: Iterable[str], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Lowercase tokens and keep only alphabetic words of the given length.

    Duplicates are dropped, first occurrence wins.
    """
    seen = set()
    words = []
    for token in tokens:
        word = token.strip().lower()
        if len(word) != word_length or not (word.isascii() and word.isalpha()) or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_word_list(path: Optional[str] = None,
                   word_length: int = WORD_LENGTH,
                   use_fallback: bool = False) -> List[str]:
    """
    Load the word list from a whitespace separated text file.

    Args:
        path: Word file, defaults to the bundled words.txt
        word_length: Only tokens of exactly this length are kept
        use_fallback: Return FALLBACK_WORDS instead of raising when the
            file cannot be read

    Returns:
        List[str]: Lowercase words in file order

    Raises:
        FileNotFoundError: If the file is missing and no fallback is allowed
    """
    path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = normalize_words(f.read().split(), word_length)
    except OSError as e:
        if not use_fallback:
            raise FileNotFoundError(f"Word list file not found: {path}") from e
        logger.warning(f"Error loading words from {path} ({e}). Using backup list.")
        return normalize_words(FALLBACK_WORDS, word_length)

    logger.info(f"Loaded {len(words)} {word_length}-letter words from {path}")
    return words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True
