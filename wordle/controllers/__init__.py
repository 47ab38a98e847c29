"""
Controllers Package

Contains the front ends that drive a game session.
"""

from .game_controller import ConsoleGameController

__all__ = ['ConsoleGameController']
