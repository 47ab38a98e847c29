"""
Game Errors

Exceptions raised by the feedback engine and the game session.
"""

from ..models.game import Disposition


class WordleError(Exception):
    """Base class for all game errors."""


class InvalidInput(WordleError, ValueError):
    """Secret and guess lengths differ. The session never lets this happen."""


class WordListError(WordleError, ValueError):
    """The word list cannot be used to start a session."""


class EmptyWordList(WordListError):
    """No words to draw a secret from."""

    def __init__(self, message: str = "Word list cannot be empty"):
        super().__init__(message)


class InvalidWordList(WordListError):
    """A word list member has the wrong length or non-letter characters."""


class SessionTerminated(WordleError):
    """A guess was submitted after the game ended."""

    def __init__(self, state):
        self.state = state
        super().__init__(f"Game is already over ({state.value.lower()})")


class GuessRejected(WordleError):
    """
    A guess failed validation.

    The attempt is not consumed and the session is unchanged, so the caller
    may prompt again for the same attempt slot.
    """
    disposition = Disposition.RETRY

    def __init__(self, guess: str, message: str):
        self.guess = guess
        super().__init__(message)


class InvalidLength(GuessRejected):
    def __init__(self, guess: str, word_length: int):
        self.word_length = word_length
        super().__init__(guess, f"Enter a {word_length}-letter word.")


class UnknownWord(GuessRejected):
    def __init__(self, guess: str):
        super().__init__(guess, "Word not in list. Try another.")
