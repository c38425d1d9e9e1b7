"""
Tests for drawing the board, click mapping and end-of-game messages.
"""

import numpy as np
import pytest

from board_view.alerts import AlertContext, alert_for
from board_view.config import ViewConfig
from board_view.renderer import BoardRenderer, format_board
from logic.game_state import Board
from logic.win_checker import Outcome


@pytest.fixture
def renderer():
    return BoardRenderer(ViewConfig())


def cell_center(renderer, position):
    x1, y1, x2, y2 = renderer.cell_rect(position)
    return (x1 + x2) // 2, (y1 + y2) // 2


@pytest.mark.parametrize("position", range(9))
def test_click_on_tile_center_hits_that_cell(renderer, position):
    x, y = cell_center(renderer, position)
    assert renderer.cell_at(x, y) == position


def test_click_in_gap_or_outside_hits_nothing(renderer):
    cfg = renderer.config
    assert renderer.cell_at(0, 0) is None
    assert renderer.cell_at(cfg.CELL_PIXELS, cfg.CELL_PIXELS // 2) is None
    assert renderer.cell_at(-5, 10) is None
    assert renderer.cell_at(cfg.BOARD_PIXELS, 10) is None


def test_tile_corners_are_inside(renderer):
    x1, y1, x2, y2 = renderer.cell_rect(8)
    assert renderer.cell_at(x1, y1) == 8
    assert renderer.cell_at(x2, y2) == 8


def test_render_empty_board(renderer):
    cfg = renderer.config
    image = renderer.render(Board.empty())
    assert image.shape == (cfg.BOARD_PIXELS, cfg.BOARD_PIXELS, 3)
    assert image.dtype == np.uint8

    # Tile centers are plain tile color, gaps are background
    x, y = cell_center(renderer, 4)
    assert tuple(image[y, x]) == cfg.TILE_COLOR
    assert tuple(image[0, 0]) == cfg.BACKGROUND_COLOR


def test_render_marks(renderer):
    cfg = renderer.config
    board = Board.from_positions(human=[0], computer=[4])
    image = renderer.render(board)

    # The X crosses at the tile center, the O leaves its center empty
    x, y = cell_center(renderer, 0)
    assert tuple(image[y, x]) == cfg.MARK_COLOR
    x, y = cell_center(renderer, 4)
    assert tuple(image[y, x]) == cfg.TILE_COLOR

    assert not np.array_equal(image, renderer.render(Board.empty()))


def test_render_highlights_winning_line(renderer):
    cfg = renderer.config
    board = Board.from_positions(human=[0, 1, 2], computer=[4, 8])
    image = renderer.render(board, frozenset({0, 1, 2}))

    x1, y1, _, _ = renderer.cell_rect(1)
    assert tuple(image[y1 + 1, x1 + 1]) == cfg.WIN_TILE_COLOR
    x1, y1, _, _ = renderer.cell_rect(4)
    assert tuple(image[y1 + 1, x1 + 1]) == cfg.TILE_COLOR


def test_format_board():
    board = Board.from_positions(human=[0, 8], computer=[4])
    assert format_board(board) == (
        " X | 2 | 3\n"
        "---+---+---\n"
        " 4 | O | 6\n"
        "---+---+---\n"
        " 7 | 8 | X"
    )


def test_alert_for_each_outcome():
    assert alert_for(Outcome.HUMAN_WON) == AlertContext.HUMAN_WIN
    assert alert_for(Outcome.COMPUTER_WON) == AlertContext.COMPUTER_WIN
    assert alert_for(Outcome.DRAW) == AlertContext.DRAW
    assert alert_for(Outcome.IN_PROGRESS) is None


def test_alert_texts():
    assert AlertContext.HUMAN_WIN.title == "You Win!"
    assert AlertContext.DRAW.button_title == "Try again"
    assert AlertContext.COMPUTER_WIN.message == "Computer is smart than you"
