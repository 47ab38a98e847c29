"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules, constants and the word source
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_WORD_LIST_PATH,
    FALLBACK_WORDS,
    MAX_ROUNDS,
    WORD_LENGTH,
    load_word_list,
    normalize_words,
    validate_word_list_integrity,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_WORD_LIST_PATH', 'FALLBACK_WORDS', 'MAX_ROUNDS', 'WORD_LENGTH',
    'load_word_list', 'normalize_words', 'validate_word_list_integrity'
]
