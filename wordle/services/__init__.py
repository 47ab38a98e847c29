"""
Services Package

Contains all business logic and service classes.
"""

from .errors import (
    EmptyWordList, GuessRejected, InvalidInput, InvalidLength,
    InvalidWordList, SessionTerminated, UnknownWord, WordListError, WordleError
)
from .feedback_service import evaluate, feedback_to_pattern, is_solved
from .game_service import GameSession, start

__all__ = [
    'EmptyWordList', 'GuessRejected', 'InvalidInput', 'InvalidLength',
    'InvalidWordList', 'SessionTerminated', 'UnknownWord', 'WordListError', 'WordleError',
    'evaluate', 'feedback_to_pattern', 'is_solved',
    'GameSession', 'start'
]
