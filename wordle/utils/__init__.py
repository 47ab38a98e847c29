"""
Utilities Package

Contains logging and terminal display helpers.
"""

from .display import colorize_feedback, render_keyboard, render_legend, supports_color
from .game_logger import GameLogger, game_logger

__all__ = [
    'colorize_feedback', 'render_keyboard', 'render_legend', 'supports_color',
    'GameLogger', 'game_logger'
]
