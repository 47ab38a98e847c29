"""
Display Helpers

Terminal rendering for feedback rows and the keyboard.
"""

import os
import string
from typing import Dict, Sequence

from colorama import Back, Fore, Style

from ..models.game import LetterStatus
from ..services.feedback_service import feedback_to_pattern

TILE_COLORS = {
    LetterStatus.CORRECT: Back.GREEN + Fore.BLACK,
    LetterStatus.PRESENT: Back.YELLOW + Fore.BLACK,
    LetterStatus.ABSENT: Back.WHITE + Fore.BLACK,
}

KEY_COLORS = {
    LetterStatus.CORRECT: Fore.GREEN,
    LetterStatus.PRESENT: Fore.YELLOW,
    LetterStatus.ABSENT: Style.DIM,
}

PLAIN_KEYS = {
    LetterStatus.CORRECT: "[{}]",
    LetterStatus.PRESENT: "({})",
    LetterStatus.ABSENT: "-",
}


def supports_color(environ=None) -> bool:
    """True unless TERM is missing or 'dumb'."""
    environ = os.environ if environ is None else environ
    term = environ.get('TERM')
    return bool(term) and term != 'dumb'


def colorize(text: str, color: str, use_color: bool = True) -> str:
    if not use_color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def colorize_feedback(guess: str, feedback: Sequence[LetterStatus], use_color: bool = True) -> str:
    """
    Render one scored guess.

    With color each letter gets a tile background. Without color the
    letters are followed by the G/Y/_ pattern.
    """
    if not use_color:
        return f"{' '.join(guess.upper())}   {feedback_to_pattern(feedback)}"
    return " ".join(
        colorize(f" {letter.upper()} ", TILE_COLORS[status])
        for letter, status in zip(guess, feedback)
    )


def render_legend(use_color: bool = True) -> str:
    return (
        f"Feedback: {colorize('G', Fore.GREEN, use_color)}=correct, "
        f"{colorize('Y', Fore.YELLOW, use_color)}=present, _=absent"
    )


def render_keyboard(letter_status: Dict[str, LetterStatus], use_color: bool = True) -> str:
    """One line of the alphabet marked with the best verdict seen per letter."""
    keys = []
    for letter in string.ascii_lowercase:
        status = letter_status.get(letter, LetterStatus.UNUSED)
        if status is LetterStatus.UNUSED:
            keys.append(letter.upper())
        elif use_color:
            keys.append(colorize(letter.upper(), KEY_COLORS[status]))
        else:
            keys.append(PLAIN_KEYS[status].format(letter.upper()))
    return " ".join(keys)
