"""
Game session for TicTacToe.

Holds everything that changes during play: the current board, whether
the board is locked while the computer is to move, and who opens the
next game. The rest of the logic package is stateless.
"""

from typing import Optional

from .ai_player import AIPlayer
from .errors import NoLegalMove
from .game_state import Board, Side
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome


class GameSession:
    """
    One human against the computer, over as many games as they like.

    Game flow:
    1. Human plays with play_human(); the board locks if the game goes on
    2. Caller waits as long as it wants, then calls play_computer()
    3. Board unlocks for the human
    4. When the game ends, new_game() starts the next one; the first
       move alternates between human and computer
    """

    def __init__(self, ai: Optional[AIPlayer] = None, human_first: bool = True):
        """
        Initialize the session.

        Args:
            ai: The computer's player. A fresh AIPlayer if not given.
            human_first: Whether the human opens the first game.
        """
        self.ai = ai or AIPlayer(Side.COMPUTER)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.board = Board.empty()
        self.human_first = human_first
        self.is_board_locked = not human_first
        self.games_started = 1

    @property
    def outcome(self) -> Outcome:
        return self.win_checker.outcome(self.board)

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def computer_to_move(self) -> bool:
        """True while the board is locked waiting for the computer."""
        return self.is_board_locked and not self.is_over

    def play_human(self, position: int) -> Optional[Outcome]:
        """
        Play the human's move.

        Args:
            position: Cell index (0-8).

        Returns:
            The outcome after the move, or None if the move was not
            accepted because the board is locked or the game is over.

        Raises:
            InvalidArgument: If the position is out of range.
            IllegalMove: If the cell is already taken.
        """
        if self.is_board_locked or self.is_over:
            return None

        self.board = self.validator.apply_move(self.board, Side.HUMAN, position)

        outcome = self.outcome
        # Computer moves next unless the game just ended
        self.is_board_locked = not outcome.is_terminal
        return outcome

    def play_computer(self) -> int:
        """
        Let the AI pick and play its move, then hand the board back.

        Returns:
            The cell the computer took.

        Raises:
            NoLegalMove: If the game is already over or the board is full.
        """
        if self.is_over:
            raise NoLegalMove(f"Game is already over ({self.outcome.value})")

        position = self.ai.choose_move(self.board)
        self.board = self.validator.apply_move(self.board, self.ai.side, position)
        self.is_board_locked = False
        return position

    def new_game(self) -> bool:
        """
        Clear the board and start the next game.

        The side that opens alternates every game.

        Returns:
            True if the computer opens the new game. The board stays
            locked until play_computer() is called.
        """
        self.board = Board.empty()
        self.human_first = not self.human_first
        self.is_board_locked = not self.human_first
        self.games_started += 1
        return not self.human_first
