"""
Logic module for TicTacToe.
Handles board state, rules, the AI opponent and the game session.
"""

__version__ = "1.0.0"

from .errors import TicTacToeError, InvalidArgument, IllegalMove, NoLegalMove
from .game_state import Board, Move, Side, CELL_COUNT, CENTER
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome, WIN_PATTERNS
from .ai_player import AIPlayer, Tier
from .session import GameSession
