"""
Win checker for TicTacToe.
Checks if a side has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, FrozenSet

from .game_state import Board, Side


# All possible winning lines, in the order they are checked
WIN_PATTERNS = (
    # Rows
    frozenset({0, 1, 2}),
    frozenset({3, 4, 5}),
    frozenset({6, 7, 8}),
    # Columns
    frozenset({0, 3, 6}),
    frozenset({1, 4, 7}),
    frozenset({2, 5, 8}),
    # Diagonals
    frozenset({0, 4, 8}),
    frozenset({2, 4, 6}),
)


class Outcome(Enum):
    """Where a game stands after a move."""
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: one side holds all 3 cells of a row, column or diagonal.
    """

    def has_won(self, board: Board, side: Side) -> bool:
        """
        Check if a side has completed any winning line.

        Args:
            board: The board.
            side: The side to check.

        Returns:
            True if at least one line belongs entirely to that side.
        """
        positions = board.positions_of(side)
        return any(line <= positions for line in WIN_PATTERNS)

    def is_draw(self, board: Board) -> bool:
        """
        Check if the board is full.

        This says nothing about winners. A full board can also be won,
        so check has_won first (outcome() does that for you).
        """
        return board.is_full()

    def outcome(self, board: Board) -> Outcome:
        """
        Work out the state of the game.

        Args:
            board: The board.

        Returns:
            The Outcome. Wins take priority over a full board.
        """
        if self.has_won(board, Side.HUMAN):
            return Outcome.HUMAN_WON
        if self.has_won(board, Side.COMPUTER):
            return Outcome.COMPUTER_WON
        if self.is_draw(board):
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def get_winning_pattern(self, board: Board) -> Optional[FrozenSet[int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The first completed line in check order, or None.
        """
        for side in Side:
            positions = board.positions_of(side)
            for line in WIN_PATTERNS:
                if line <= positions:
                    return line
        return None
