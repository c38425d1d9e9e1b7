"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer using Tkinter.

Shows:
- The board (click a tile to play)
- Game status
- A dialog when the game ends, whose button starts the next game
"""

import logging
import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

import cv2
from PIL import Image, ImageTk

from board_view.alerts import AlertItem, alert_for
from board_view.config import ViewConfig
from board_view.renderer import BoardRenderer
from logic.ai_player import AIPlayer
from logic.errors import IllegalMove
from logic.game_state import Side
from logic.session import GameSession


logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        config: Optional[ViewConfig] = None,
        computer_delay_ms: Optional[int] = None,
        seed: Optional[int] = None,
        human_first: bool = True
    ):
        """
        Initialize the UI.

        Args:
            config: View configuration. Uses defaults if not provided.
            computer_delay_ms: Pause before the computer answers. Defaults
                to the config value.
            seed: Seed for the computer's random moves.
            human_first: Whether the human opens the first game.
        """
        self.config = config or ViewConfig()
        self.computer_delay_ms = (
            self.config.COMPUTER_DELAY_MS if computer_delay_ms is None else computer_delay_ms
        )
        self.renderer = BoardRenderer(self.config)
        self.session = GameSession(
            ai=AIPlayer(Side.COMPUTER, rng=random.Random(seed)),
            human_first=human_first
        )
        self.alert_window: Optional[tk.Toplevel] = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text=self.config.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 10))

        self.board_canvas = tk.Canvas(
            main_frame,
            width=self.config.BOARD_PIXELS,
            height=self.config.BOARD_PIXELS,
            highlightthickness=0,
            bg='#1a1a2e'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text="X = You  ", foreground='#00ff88').pack(side=tk.LEFT)
        ttk.Label(legend_frame, text="O = Computer", foreground='#ff6b6b').pack(side=tk.LEFT)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=20,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._refresh()
        if self.session.computer_to_move:
            self.root.after(self.config.OPENING_DELAY_MS, self._computer_move)

    def _on_board_click(self, event):
        """Handle a click on the board canvas."""
        if self.session.is_board_locked or self.session.is_over:
            return

        position = self.renderer.cell_at(event.x, event.y)
        if position is None:
            return

        try:
            outcome = self.session.play_human(position)
        except IllegalMove:
            # Clicking a taken cell does nothing
            logger.debug("Ignoring click on occupied cell %d", position)
            return

        logger.info("Human played cell %d", position)
        self._refresh()

        if outcome is not None and outcome.is_terminal:
            self._show_alert(alert_for(outcome))
        else:
            self.root.after(self.computer_delay_ms, self._computer_move)

    def _computer_move(self):
        """Play the computer's move (runs on the UI thread via after())."""
        if not self.session.computer_to_move:
            return

        position = self.session.play_computer()
        logger.info("Computer played cell %d (%s)", position, self.session.ai.last_tier.value)
        self._refresh()

        alert = alert_for(self.session.outcome)
        if alert is not None:
            self._show_alert(alert)

    def _refresh(self):
        """Redraw the board and the status text."""
        board = self.session.board
        winning_pattern = self.session.win_checker.get_winning_pattern(board)
        image = self.renderer.render(board, winning_pattern)

        # Convert BGR to RGB
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        photo = ImageTk.PhotoImage(Image.fromarray(image_rgb))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        alert = alert_for(self.session.outcome)
        if alert is not None:
            self.status_label.configure(text=alert.title)
        elif self.session.is_board_locked:
            self.status_label.configure(text="Computer is thinking...")
        else:
            self.status_label.configure(text="Your turn")

    def _show_alert(self, alert: AlertItem):
        """Show the end-of-game dialog. Its button starts the next game."""
        logger.info("Game over: %s", alert.title)

        window = tk.Toplevel(self.root)
        window.title(alert.title)
        window.configure(bg='#1a1a2e')
        window.transient(self.root)
        window.resizable(False, False)

        ttk.Label(window, text=alert.title, style='Title.TLabel').pack(padx=20, pady=(15, 5))
        ttk.Label(window, text=alert.message).pack(padx=20, pady=5)
        tk.Button(
            window,
            text=alert.button_title,
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(pady=(5, 15))

        # Closing the dialog any other way also starts the next game
        window.protocol("WM_DELETE_WINDOW", self._reset_game)
        window.grab_set()
        self.alert_window = window

    def _reset_game(self):
        """Close the dialog and start the next game."""
        if self.alert_window is not None:
            self.alert_window.grab_release()
            self.alert_window.destroy()
            self.alert_window = None

        computer_first = self.session.new_game()
        logger.info(
            "Starting game %d, %s moves first",
            self.session.games_started, "computer" if computer_first else "human"
        )
        self._refresh()

        if computer_first:
            self.root.after(self.config.OPENING_DELAY_MS, self._computer_move)

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
