"""
Wordle Console Game - Main Entry Point

Loads configuration and the word list, then starts the console game.
"""

import sys

from wordle.cli import main


if __name__ == '__main__':
    sys.exit(main())
