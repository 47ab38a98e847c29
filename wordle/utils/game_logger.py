"""
Game Logger Module for Wordle

This module provides logging for player actions, rejected guesses and
game events as JSON structured entries.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the Wordle game.

    Features:
    - Player action tracking per game id
    - Game event logging (start, win, loss)
    - JSON structured logs for easy parsing
    - Daily log file plus console output for warnings and errors
    """

    def __init__(self,
                 log_dir: str = "logs",
                 level: str = "INFO",
                 log_to_file: bool = True):
        self.logger = logging.getLogger('wordle_game')
        self.configure(log_dir=log_dir, level=level, log_to_file=log_to_file)

    def configure(self,
                  log_dir: Optional[str] = None,
                  level: Optional[str] = None,
                  log_to_file: Optional[bool] = None) -> logging.Logger:
        """(Re)build the handlers, keeping any setting that is not given."""
        if log_dir is not None:
            self.log_dir = Path(log_dir)
        if level is not None:
            self.level = level.upper() if isinstance(level, str) else level
        if log_to_file is not None:
            self.log_to_file = log_to_file

        self.logger = self._setup_logger()
        return self.logger

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with file and console handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

            # File handler for detailed logs
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions.

        Args:
            action: Type of action (e.g., 'new_game', 'submit_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_guess_rejected(self,
                           game_id: Optional[str],
                           guess: str,
                           reason: str,
                           attempt: int):
        """Log a guess that failed validation. No attempt was consumed."""
        details = {
            'game_id': game_id,
            'guess': guess,
            'reason': reason,
            'attempt': attempt
        }
        self.logger.info(self._create_log_entry('GUESS_REJECTED', 'submit_guess', details))

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger(
    log_dir=Config.LOG_DIR,
    level=Config.LOG_LEVEL,
    log_to_file=Config.LOG_TO_FILE
)
