"""
View module for TicTacToe.
Handles drawing the board and the end-of-game messages.
"""

from .config import ViewConfig
from .renderer import BoardRenderer, format_board
from .alerts import AlertItem, AlertContext, alert_for
