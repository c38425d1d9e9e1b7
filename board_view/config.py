"""
View configuration for TicTacToe.
All the settings for drawing the board and pacing the computer's moves.
"""

import cv2


class ViewConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Size of each cell on screen, in pixels
    CELL_PIXELS = 140

    # Gap around each tile inside its cell (clicks here hit nothing)
    CELL_PADDING = 8

    # Total canvas size
    BOARD_PIXELS = CELL_PIXELS * BOARD_SIZE  # 420px

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)     # Dark navy
    TILE_COLOR = (230, 150, 90)          # Light blue
    WIN_TILE_COLOR = (120, 200, 60)      # Green for the winning line
    MARK_COLOR = (255, 255, 255)

    # ==================== MARKS ====================
    # Marks take up half of a tile
    MARK_SCALE = 0.5
    MARK_THICKNESS = 10
    LINE_TYPE = cv2.LINE_AA

    # ==================== TIMING ====================
    # Pause before the computer answers a human move (milliseconds)
    COMPUTER_DELAY_MS = 500

    # Pause before the computer opens a new game (milliseconds)
    OPENING_DELAY_MS = 800

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
