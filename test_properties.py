"""
Property-based tests over random legal games.
"""

import random

from hypothesis import given, strategies as st

from logic.ai_player import AIPlayer, Tier
from logic.game_state import Board, Side
from logic.move_validator import MoveValidator
from logic.win_checker import WIN_PATTERNS, WinChecker


validator = MoveValidator()
checker = WinChecker()


@st.composite
def boards(draw):
    """Any board reachable by placing marks on distinct cells, either side."""
    order = draw(st.permutations(range(9)))
    count = draw(st.integers(min_value=0, max_value=9))
    sides = draw(st.lists(st.sampled_from(list(Side)), min_size=count, max_size=count))

    board = Board.empty()
    for position, side in zip(order[:count], sides):
        board = validator.apply_move(board, side, position)
    return board


@given(boards(), st.sampled_from(list(Side)))
def test_has_won_matches_pattern_subsets(board, side):
    positions = board.positions_of(side)
    expected = any(pattern <= positions for pattern in WIN_PATTERNS)
    assert checker.has_won(board, side) == expected


@given(boards())
def test_is_draw_iff_nine_moves(board):
    assert checker.is_draw(board) == (board.move_count == 9)


@given(boards())
def test_positions_partition_occupied_cells(board):
    human = board.positions_of(Side.HUMAN)
    computer = board.positions_of(Side.COMPUTER)
    assert not human & computer
    assert human | computer == {i for i in range(9) if board.is_occupied(i)}


@given(boards(), st.integers(min_value=0, max_value=8), st.sampled_from(list(Side)))
def test_apply_move_legality(board, position, side):
    if board.is_occupied(position):
        assert not validator.validate_move(board, position).is_valid
        return

    after = validator.apply_move(board, side, position)
    assert after.is_occupied(position)
    assert after.move_count == board.move_count + 1
    assert after.positions_of(side) == board.positions_of(side) | {position}


@given(boards(), st.integers(min_value=0, max_value=2**32 - 1))
def test_ai_only_picks_empty_cells(board, seed):
    if board.is_full():
        return

    ai = AIPlayer(rng=random.Random(seed))
    move = ai.choose_move(board)
    assert not board.is_occupied(move)

    if ai.last_tier == Tier.CENTER:
        assert move == 4
    if ai.last_tier == Tier.RANDOM:
        assert board.is_occupied(4)
    if ai.last_tier == Tier.WIN:
        after = validator.apply_move(board, Side.COMPUTER, move)
        assert checker.has_won(after, Side.COMPUTER)
