"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the game is played in
the console instead: type a number 1-9 to place your X.
"""

import logging
import math
import random
import time
from typing import Callable, Optional

from board_view.alerts import alert_for
from board_view.config import ViewConfig
from board_view.renderer import format_board
from logic.ai_player import AIPlayer
from logic.errors import IllegalMove
from logic.game_state import Side, CELL_COUNT
from logic.session import GameSession


logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. Human types a cell number (1-9)
    2. Computer "thinks" for a moment, then answers
    3. Repeat until someone wins or it's a draw
    4. Offer a rematch; the first move alternates every game
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        delay: float = ViewConfig.COMPUTER_DELAY_MS / 1000,
        input_fn: Optional[Callable[[str], str]] = None,
        sleep_fn: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the console game.

        Args:
            session: The game session. A new one if not provided.
            delay: Seconds to wait before the computer moves.
            input_fn: Where to read the human's answers from (default: input).
            sleep_fn: How to wait out the delay.
        """
        self.session = session or GameSession()
        self.delay = delay
        self.input_fn = input_fn or input
        self.sleep_fn = sleep_fn

    def play(self):
        """Play games until the human stops."""
        print("\n" + "=" * 40)
        print("   Tic Tac Toe")
        print("=" * 40)
        print("You are X, the computer is O.\n")

        while True:
            self._play_one_game()
            if not self._ask_rematch():
                break
            if self.session.new_game():
                print("\nComputer starts this time.")
            else:
                print("\nYou start this time.")

        print("Goodbye!")

    def _play_one_game(self):
        while not self.session.is_over:
            if self.session.computer_to_move:
                self._computer_move()
            else:
                print("\n" + format_board(self.session.board))
                self._human_move()

        print("\n" + format_board(self.session.board))
        alert = alert_for(self.session.outcome)
        print(f"\n{alert.title} {alert.message}")

    def _human_move(self):
        """Read moves until a legal one is played."""
        while True:
            answer = self.input_fn(f"Your move [1-{CELL_COUNT}]: ").strip()
            try:
                position = int(answer) - 1
            except ValueError:
                print(f"Please type a number 1..{CELL_COUNT}.")
                continue

            if not 0 <= position < CELL_COUNT:
                print(f"Please type a number 1..{CELL_COUNT}.")
                continue

            try:
                self.session.play_human(position)
            except IllegalMove:
                print("That cell is taken. Try again.")
                continue

            logger.debug("Human played cell %d", position)
            return

    def _computer_move(self):
        print("Computer is thinking...")
        if self.delay > 0:
            self.sleep_fn(self.delay)

        position = self.session.play_computer()
        logger.debug("Computer played cell %d (%s)", position, self.session.ai.last_tier.value)
        print(f"Computer plays {position + 1}")

    def _ask_rematch(self) -> bool:
        answer = self.input_fn("Play again? [y/n]: ").strip().lower()
        return answer in ("y", "yes")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe against the computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds the computer waits before moving (default: %.1f)"
             % (ViewConfig.COMPUTER_DELAY_MS / 1000)
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer open the first game"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.delay is not None and not (math.isfinite(args.delay) and args.delay >= 0):
        parser.error("--delay must be a non-negative number of seconds")

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        delay_ms = None if args.delay is None else int(args.delay * 1000)
        ui = TicTacToeUI(
            computer_delay_ms=delay_ms,
            seed=args.seed,
            human_first=not args.computer_first
        )
        ui.run()
        return 0

    # Console mode (--no-ui)
    session = GameSession(
        ai=AIPlayer(Side.COMPUTER, rng=random.Random(args.seed)),
        human_first=not args.computer_first
    )
    delay = ViewConfig.COMPUTER_DELAY_MS / 1000 if args.delay is None else args.delay
    game = ConsoleGame(session, delay=delay)

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
