"""
AI player for TicTacToe.
Picks moves with a simple priority heuristic: win, block, center, random.

This is not a perfect player. It never looks more than one move ahead,
so a human can beat it with a fork.
"""

import random
from enum import Enum
from typing import Optional

from .errors import NoLegalMove
from .game_state import Board, Side, CENTER
from .win_checker import WIN_PATTERNS


class Tier(Enum):
    """Which rule of the heuristic picked a move."""
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    RANDOM = "random"


class AIPlayer:
    """
    An AI that plays TicTacToe with a fixed set of priorities.

    In order:
    1. Complete one of its own lines if it can
    2. Block a line the opponent is about to complete
    3. Take the center
    4. Take any free cell at random
    """

    def __init__(self, side: Side = Side.COMPUTER, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            side: Which side the AI controls (default: COMPUTER).
            rng: Random source for the last-resort pick. Anything with a
                 choice() method works; pass a seeded random.Random for
                 repeatable games.
        """
        self.side = side
        self.rng = rng if rng is not None else random.Random()

        # Which rule picked the last move (for debugging)
        self.last_tier: Optional[Tier] = None

    def choose_move(self, board: Board) -> int:
        """
        Pick the next cell to play.

        Args:
            board: Current board.

        Returns:
            Cell index (0-8) of an empty cell.

        Raises:
            NoLegalMove: If the board is full.
        """
        empty_cells = board.empty_cells()
        if not empty_cells:
            raise NoLegalMove("No empty cells left for the AI to play")

        # Win if we can
        move = self._completing_cell(board, self.side)
        if move is not None:
            self.last_tier = Tier.WIN
            return move

        # Otherwise stop the opponent from winning
        move = self._completing_cell(board, self.side.opposite())
        if move is not None:
            self.last_tier = Tier.BLOCK
            return move

        if not board.is_occupied(CENTER):
            self.last_tier = Tier.CENTER
            return CENTER

        self.last_tier = Tier.RANDOM
        return self.rng.choice(empty_cells)

    def _completing_cell(self, board: Board, side: Side) -> Optional[int]:
        """
        Find a free cell that would complete a line for a side.

        Args:
            board: Current board.
            side: Whose lines to look at.

        Returns:
            The cell from the first such line in pattern order, or None.
        """
        positions = board.positions_of(side)

        for pattern in WIN_PATTERNS:
            missing = pattern - positions
            if len(missing) == 1:
                (cell,) = missing
                if not board.is_occupied(cell):
                    return cell

        return None
