"""
Wordle Console Game Package

A single player Wordle in the terminal, split into configuration, models,
services (feedback engine and game session), utilities and a console
controller.
"""

from .config import Config, load_word_list, validate_word_list_integrity
from .services.errors import EmptyWordList, InvalidWordList


def create_app(config_class=Config, words=None, **controller_kwargs):
    """
    Application factory for the console game.

    Args:
        config_class: Configuration class to use
        words: Word list to play with, loaded from config_class.WORD_LIST_PATH
            when not given
        **controller_kwargs: Passed through to ConsoleGameController
            (rng, input_func, output, use_color)

    Returns:
        ConsoleGameController ready to run
    """
    from .controllers.game_controller import ConsoleGameController
    from .utils.game_logger import game_logger

    game_logger.configure(
        log_dir=config_class.LOG_DIR,
        level=config_class.LOG_LEVEL,
        log_to_file=config_class.LOG_TO_FILE
    )

    if words is None:
        words = load_word_list(
            config_class.WORD_LIST_PATH,
            word_length=config_class.WORD_LENGTH,
            use_fallback=config_class.USE_FALLBACK_WORDS
        )

    # Fail before the first prompt rather than mid-game
    if not words:
        raise EmptyWordList(f"No {config_class.WORD_LENGTH}-letter words available")
    try:
        validate_word_list_integrity(words, word_length=config_class.WORD_LENGTH)
    except ValueError as e:
        raise InvalidWordList(str(e)) from e
    if config_class.MAX_ATTEMPTS < 1:
        raise ValueError(f"MAX_ATTEMPTS must be at least 1, got {config_class.MAX_ATTEMPTS}")

    return ConsoleGameController(words, config_class=config_class, **controller_kwargs)
