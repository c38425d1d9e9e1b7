"""
Board state for TicTacToe.
Tracks which side holds each of the 9 cells.

Cells are numbered 0-8, row by row:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Optional, List, Tuple, FrozenSet
from dataclasses import dataclass, field

from .errors import InvalidArgument


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
CENTER = 4


class Side(Enum):
    """The two sides in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Side":
        """Get the opposite side."""
        return Side.COMPUTER if self == Side.HUMAN else Side.HUMAN

    @property
    def mark(self) -> str:
        """The mark drawn for this side: X for the human, O for the computer."""
        return "X" if self == Side.HUMAN else "O"


def check_position(position: int) -> int:
    """
    Make sure a cell index is usable.

    Args:
        position: Cell index (0-8).

    Returns:
        The same index.

    Raises:
        InvalidArgument: If the index is not an int in 0-8.
    """
    # bool is an int subclass, but True/False are never cell indices
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidArgument(f"Cell index must be an int, got {position!r}")
    if not 0 <= position < CELL_COUNT:
        raise InvalidArgument(f"Invalid cell index {position}. Must be 0-{CELL_COUNT - 1}.")
    return position


@dataclass(frozen=True)
class Move:
    """
    A mark placed on the board. Never changes once placed.
    """
    side: Side              # Who made the move
    position: int           # Cell index (0-8)

    @property
    def mark(self) -> str:
        return self.side.mark


@dataclass(frozen=True)
class Board:
    """
    An immutable 3x3 board.

    Each slot is None (empty) or the Move that took that cell.
    Placing a mark gives back a new Board, so a board handed to
    someone else never changes under them.
    """

    cells: Tuple[Optional[Move], ...] = field(
        default_factory=lambda: (None,) * CELL_COUNT
    )

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise InvalidArgument(f"Board needs {CELL_COUNT} cells, got {len(cells)}")

        for index, move in enumerate(cells):
            if move is None:
                continue
            if not isinstance(move, Move) or not isinstance(move.side, Side):
                raise InvalidArgument(f"Slot {index} holds {move!r}, not a Move")
            if move.position != index:
                raise InvalidArgument(
                    f"Move for cell {move.position} stored in slot {index}"
                )

        # Accept lists from callers but always store a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with no marks on it."""
        return cls()

    @classmethod
    def from_positions(cls, human=(), computer=()) -> "Board":
        """
        Build a board from the cells each side holds.

        Args:
            human: Cell indices taken by the human.
            computer: Cell indices taken by the computer.

        Returns:
            The board.

        Raises:
            InvalidArgument: On a bad index or a cell claimed by both sides.
        """
        cells: List[Optional[Move]] = [None] * CELL_COUNT
        for side, positions in ((Side.HUMAN, human), (Side.COMPUTER, computer)):
            for position in positions:
                check_position(position)
                if cells[position] is not None:
                    raise InvalidArgument(f"Cell {position} is claimed twice")
                cells[position] = Move(side, position)
        return cls(tuple(cells))

    def is_occupied(self, position: int) -> bool:
        """
        Check if a cell already holds a mark.

        Args:
            position: Cell index (0-8).

        Returns:
            True if the cell is taken.

        Raises:
            InvalidArgument: If the index is out of range.
        """
        return self.cells[check_position(position)] is not None

    def positions_of(self, side: Side) -> FrozenSet[int]:
        """Get the cells held by a side."""
        return frozenset(
            move.position for move in self.cells
            if move is not None and move.side == side
        )

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [index for index, move in enumerate(self.cells) if move is None]

    @property
    def move_count(self) -> int:
        """How many marks are on the board."""
        return sum(1 for move in self.cells if move is not None)

    def is_full(self) -> bool:
        return self.move_count == CELL_COUNT

    def with_move(self, move: Move) -> "Board":
        """
        Get a copy of the board with one more mark.

        No legality checks beyond the index; use MoveValidator.apply_move
        for rule-checked placement.
        """
        check_position(move.position)
        cells = list(self.cells)
        cells[move.position] = move
        return Board(tuple(cells))
