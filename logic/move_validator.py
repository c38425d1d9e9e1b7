"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies them.
"""

from typing import Optional, List
from dataclasses import dataclass

from .errors import IllegalMove, InvalidArgument
from .game_state import Board, Move, Side, CELL_COUNT


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The cell index must be 0-8
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, position: int) -> ValidationResult:
        """
        Validate a move without raising.

        Args:
            board: Current board.
            position: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if position is in valid range
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = board.cells[position]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {occupant.side.value}"
            )

        return ValidationResult(is_valid=True)

    def apply_move(self, board: Board, side: Side, position: int) -> Board:
        """
        Place a mark on the board.

        Args:
            board: Current board. Left untouched.
            side: Who is moving.
            position: Cell to take (0-8).

        Returns:
            A new board with the mark placed.

        Raises:
            InvalidArgument: If the position is out of range.
            IllegalMove: If the cell is already taken.
        """
        if board.is_occupied(position):
            raise IllegalMove(f"Cell {position} is already occupied")
        if not isinstance(side, Side):
            raise InvalidArgument(f"Unknown side {side!r}")

        return board.with_move(Move(side=side, position=position))

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all legal cells to play.

        Args:
            board: Current board.

        Returns:
            Empty cell indices in ascending order.
        """
        return board.empty_cells()
