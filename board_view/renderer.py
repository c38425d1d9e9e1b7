"""
Board renderer for TicTacToe.
Draws the board into an image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, FrozenSet, Tuple

from logic.game_state import Board, Side, BOARD_SIZE
from .config import ViewConfig


class BoardRenderer:
    """
    Draws a Board with OpenCV.

    Each cell is a square tile with a gap around it. The human's mark is
    an X, the computer's an O.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: View configuration. Uses defaults if not provided.
        """
        self.config = config or ViewConfig()

    def cell_rect(self, position: int) -> Tuple[int, int, int, int]:
        """
        Get the tile rectangle for a cell.

        Args:
            position: Cell index (0-8).

        Returns:
            (x1, y1, x2, y2) in pixels, corners inclusive.
        """
        row, col = divmod(position, BOARD_SIZE)
        size = self.config.CELL_PIXELS
        pad = self.config.CELL_PADDING

        x1 = col * size + pad
        y1 = row * size + pad
        return x1, y1, x1 + size - 2 * pad - 1, y1 + size - 2 * pad - 1

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find which cell a point falls on.

        Args:
            x: Horizontal pixel position.
            y: Vertical pixel position.

        Returns:
            Cell index (0-8), or None for the gaps between tiles and
            points outside the board.
        """
        size = self.config.CELL_PIXELS
        if not (0 <= x < self.config.BOARD_PIXELS and 0 <= y < self.config.BOARD_PIXELS):
            return None

        position = (y // size) * BOARD_SIZE + (x // size)
        x1, y1, x2, y2 = self.cell_rect(position)
        if x1 <= x <= x2 and y1 <= y <= y2:
            return position
        return None

    def render(
        self,
        board: Board,
        winning_pattern: Optional[FrozenSet[int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: The board to draw.
            winning_pattern: Cells to highlight, if the game was won.

        Returns:
            BGR image of BOARD_PIXELS x BOARD_PIXELS.
        """
        cfg = self.config
        image = np.full(
            (cfg.BOARD_PIXELS, cfg.BOARD_PIXELS, 3),
            cfg.BACKGROUND_COLOR,
            dtype=np.uint8
        )

        highlight = winning_pattern or frozenset()

        for position, move in enumerate(board.cells):
            x1, y1, x2, y2 = self.cell_rect(position)
            color = cfg.WIN_TILE_COLOR if position in highlight else cfg.TILE_COLOR
            cv2.rectangle(image, (x1, y1), (x2, y2), color, -1)

            if move is None:
                continue
            if move.side == Side.HUMAN:
                self._draw_cross(image, (x1, y1, x2, y2))
            else:
                self._draw_circle(image, (x1, y1, x2, y2))

        return image

    def _draw_cross(self, image: np.ndarray, rect: Tuple[int, int, int, int]):
        cx, cy, half = self._mark_geometry(rect)
        cfg = self.config
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                 cfg.MARK_COLOR, cfg.MARK_THICKNESS, cfg.LINE_TYPE)
        cv2.line(image, (cx - half, cy + half), (cx + half, cy - half),
                 cfg.MARK_COLOR, cfg.MARK_THICKNESS, cfg.LINE_TYPE)

    def _draw_circle(self, image: np.ndarray, rect: Tuple[int, int, int, int]):
        cx, cy, half = self._mark_geometry(rect)
        cfg = self.config
        cv2.circle(image, (cx, cy), half, cfg.MARK_COLOR, cfg.MARK_THICKNESS, cfg.LINE_TYPE)

    def _mark_geometry(self, rect: Tuple[int, int, int, int]) -> Tuple[int, int, int]:
        """Center and half-size of a mark inside a tile."""
        x1, y1, x2, y2 = rect
        half = int((x2 - x1) * self.config.MARK_SCALE / 2)
        return (x1 + x2) // 2, (y1 + y2) // 2, half


def format_board(board: Board) -> str:
    """
    Draw the board as text for the console.

    Empty cells show their number (1-9) so the player knows what to type.
    """
    rows = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            position = row * BOARD_SIZE + col
            move = board.cells[position]
            cells.append(move.mark if move is not None else str(position + 1))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
