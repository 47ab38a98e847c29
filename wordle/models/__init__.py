"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import AttemptRecord, Disposition, Feedback, GameState, LetterStatus, SessionState

__all__ = ['AttemptRecord', 'Disposition', 'Feedback', 'GameState', 'LetterStatus', 'SessionState']
