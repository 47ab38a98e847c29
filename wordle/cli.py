"""
Command line entry point for the console game.
"""

import argparse
import sys

from colorama import just_fix_windows_console

from . import create_app
from .config import config
from .services.errors import WordListError
from .utils.display import supports_color
from .utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordle',
        description='Guess the secret word in a limited number of tries.'
    )
    parser.add_argument('--words', dest='WORD_LIST_PATH',
                        help='whitespace separated word file (default: bundled list)')
    parser.add_argument('--max-attempts', dest='MAX_ATTEMPTS', type=int,
                        help='number of scored guesses allowed (default: 6)')
    parser.add_argument('--seed', dest='RANDOM_SEED', type=int,
                        help='seed the secret word draw')
    parser.add_argument('--no-color', dest='USE_COLOR', action='store_false', default=None,
                        help='plain text feedback')
    parser.add_argument('--log-level', dest='LOG_LEVEL',
                        help='log level for the game log (default: INFO)')
    parser.add_argument('--env', default='default', choices=sorted(config),
                        help='configuration profile')
    return parser


def make_config(args: argparse.Namespace):
    """Subclass the chosen profile with the options given on the command line."""
    base = config[args.env]
    overrides = {
        key: value for key, value in vars(args).items()
        if key.isupper() and value is not None
    }
    # The backup list only stands in for the bundled file, never for --words
    if 'WORD_LIST_PATH' in overrides:
        overrides['USE_FALLBACK_WORDS'] = False
    if 'USE_COLOR' not in overrides and base.USE_COLOR and not supports_color():
        overrides['USE_COLOR'] = False
    return type('CommandLineConfig', (base,), overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config_class = make_config(args)

    if config_class.USE_COLOR:
        just_fix_windows_console()

    try:
        controller = create_app(config_class)
    except (WordListError, OSError, ValueError) as e:
        game_logger.log_error(e, 'start_game')
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 1

    try:
        controller.run()
    except KeyboardInterrupt:
        print()
        game_logger.logger.info("Game interrupted (KeyboardInterrupt)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
