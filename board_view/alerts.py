"""
End-of-game messages for TicTacToe.
"""

from typing import Optional
from dataclasses import dataclass

from logic.win_checker import Outcome


@dataclass(frozen=True)
class AlertItem:
    """A message shown when a game ends."""
    title: str
    message: str
    button_title: str


class AlertContext:
    """The messages for each way a game can end."""

    HUMAN_WIN = AlertItem(title="You Win!", message="You so great", button_title="Wow")
    DRAW = AlertItem(title="Draw", message="What a fight", button_title="Try again")
    COMPUTER_WIN = AlertItem(
        title="You Lost!",
        message="Computer is smart than you",
        button_title="Rematch",
    )


_ALERTS = {
    Outcome.HUMAN_WON: AlertContext.HUMAN_WIN,
    Outcome.COMPUTER_WON: AlertContext.COMPUTER_WIN,
    Outcome.DRAW: AlertContext.DRAW,
}


def alert_for(outcome: Outcome) -> Optional[AlertItem]:
    """Get the message for a finished game, or None while it is still going."""
    return _ALERTS.get(outcome)
