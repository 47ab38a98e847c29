"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import logging
import os
from dotenv import load_dotenv

from . import game_settings

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _int_env(name, default=None):
    """Integer setting from the environment, default when unset or malformed."""
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger('wordle_game').warning(
            f"Ignoring {name}={value!r}, expected an integer. Using {default}."
        )
        return default


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Game Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', game_settings.DEFAULT_WORD_LIST_PATH)
    WORD_LENGTH = _int_env('WORD_LENGTH', game_settings.WORD_LENGTH)
    MAX_ATTEMPTS = _int_env('MAX_ATTEMPTS', game_settings.MAX_ROUNDS)
    RANDOM_SEED = _int_env('RANDOM_SEED')
    USE_FALLBACK_WORDS = os.getenv('USE_FALLBACK_WORDS', 'True').lower() == 'true'

    # Display Settings
    USE_COLOR = os.getenv('USE_COLOR', 'True').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'True').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 0
    USE_COLOR = False
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
