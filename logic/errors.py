"""
Errors raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class InvalidArgument(TicTacToeError, ValueError):
    """A cell index outside 0-8, or a malformed board."""


class IllegalMove(TicTacToeError):
    """Tried to place a mark on a cell that is already occupied."""


class NoLegalMove(TicTacToeError):
    """The AI was asked to move on a full board."""
