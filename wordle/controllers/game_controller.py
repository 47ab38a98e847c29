"""
Game Controller

Runs the console prompt loop around a game session.
"""

import random
from typing import Callable, Optional, Sequence

from ..config import Config
from ..models.game import Disposition, SessionState
from ..services.errors import GuessRejected
from ..services.game_service import GameSession, start
from ..utils.display import colorize_feedback, render_keyboard, render_legend
from ..utils.game_logger import game_logger


class ConsoleGameController:
    """
    Console front end for one player.

    Reads guesses through input_func and writes through output, so tests
    can drive it with scripted input.
    """

    def __init__(self,
                 words: Sequence[str],
                 config_class=Config,
                 rng: Optional[random.Random] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None,
                 use_color: Optional[bool] = None):
        self.words = words
        self.config = config_class
        self.rng = rng if rng is not None else random.Random(config_class.RANDOM_SEED)
        self.input_func = input_func or (lambda prompt: input(prompt))
        self.output = output or (lambda line: print(line))
        self.use_color = config_class.USE_COLOR if use_color is None else use_color

    def new_game(self) -> GameSession:
        """Create a new game session and log it."""
        session = start(
            self.words,
            max_attempts=self.config.MAX_ATTEMPTS,
            rng=self.rng,
            word_length=self.config.WORD_LENGTH
        )
        game_logger.log_game_event(
            session.game_id, 'game_started',
            word_length=session.word_length,
            max_attempts=session.max_attempts,
            word_count=len(session.words)
        )
        return session

    def print_banner(self, session: GameSession):
        self.output("=== WORDLE (console) ===")
        self.output(
            f"Guess the {session.word_length}-letter word. "
            f"You have {session.max_attempts} tries."
        )
        self.output(render_legend(self.use_color))
        self.output("")

    def read_guess(self, session: GameSession) -> Optional[str]:
        """Prompt once. Returns None at end of input."""
        try:
            return self.input_func(f"Try {session.current_attempt}/{session.max_attempts} > ")
        except EOFError:
            return None

    def submit_guess(self, session: GameSession, raw_guess: str) -> Disposition:
        """
        Submit one guess and report the result.

        Returns:
            Disposition.RETRY if the guess was rejected, otherwise
            Disposition.COMMIT
        """
        try:
            feedback, state = session.submit(raw_guess)
        except GuessRejected as e:
            game_logger.log_guess_rejected(
                session.game_id, e.guess, type(e).__name__, session.current_attempt
            )
            self.output(str(e))
            return e.disposition

        record = session.history[-1]
        game_logger.log_user_action(
            'submit_guess', session.game_id,
            attempt=record.number,
            guess=record.guess,
            result=[status.value for status in feedback],
            state=state.value
        )

        self.output(colorize_feedback(record.guess, feedback, self.use_color))
        self.output(render_keyboard(session.letter_status, self.use_color))
        self.output("")
        return Disposition.COMMIT

    def report_outcome(self, session: GameSession):
        secret = session.revealed_secret
        if session.outcome is SessionState.WON:
            game_logger.log_game_event(
                session.game_id, 'game_won', attempts=session.attempts_used, answer=secret
            )
            self.output(f'\U0001F389 You got it in {session.attempts_used} tries! The word was "{secret}".')
        else:
            game_logger.log_game_event(
                session.game_id, 'game_lost', attempts=session.attempts_used, answer=secret
            )
            self.output(f"Out of tries, the word was: {secret}")

    def play(self, session: Optional[GameSession] = None) -> Optional[SessionState]:
        """
        Play one game to the end.

        Returns:
            The final SessionState, or None if input ran out first
        """
        session = session or self.new_game()
        self.print_banner(session)

        while not session.is_terminal:
            raw_guess = self.read_guess(session)
            if raw_guess is None:
                game_logger.log_user_action(
                    'quit', session.game_id, attempts=session.attempts_used
                )
                return None
            self.submit_guess(session, raw_guess)

        self.report_outcome(session)
        return session.outcome

    def ask_play_again(self) -> bool:
        try:
            answer = self.input_func("Play again? [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")

    def run(self) -> Optional[SessionState]:
        """Play games until the player declines another one."""
        outcome = self.play()
        while outcome is not None and self.ask_play_again():
            self.output("")
            outcome = self.play()
        return outcome
