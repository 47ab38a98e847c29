"""Shared test helpers."""

WORDS = [
    "spelt", "spent", "erase", "eager", "crane", "slate",
    "cigar", "rebut", "humph", "awake", "blush", "focal",
]


class FixedDraw:
    """Stands in for random.Random, always draws the same index."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.index


def draw_word(word, words=WORDS):
    return FixedDraw(words.index(word))


def scripted_input(lines):
    """An input() replacement that replays lines, then signals end of input."""
    remaining = iter(lines)
    prompts = []

    def _input(prompt=""):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    _input.prompts = prompts
    return _input
