import pytest

from gomoku.board import (
    board_to_display_coord,
    create_board,
    display_to_board_coord,
    get_coordinate_unicode,
    is_valid_move,
)
from gomoku.constants import CELL_CROSSES, CELL_EMPTY

SIZE = 19


@pytest.fixture
def board():
    return create_board(SIZE)


def test_board_creation(board):
    assert len(board) == SIZE
    assert all(len(row) == SIZE for row in board)
    assert all(cell == CELL_EMPTY for row in board for cell in row)


def test_board_rows_are_independent(board):
    board[0][0] = CELL_CROSSES
    assert board[1][0] == CELL_EMPTY


def test_create_board_rejects_non_positive_size():
    with pytest.raises(ValueError):
        create_board(0)


def test_coordinate_utilities():
    assert board_to_display_coord(0) == 1
    assert board_to_display_coord(18) == 19
    assert display_to_board_coord(1) == 0
    assert display_to_board_coord(19) == 18
    assert get_coordinate_unicode(0) == "❶"


@pytest.mark.parametrize(
    "index, glyph",
    [(9, "❿"), (10, "⓫"), (18, "⓳"), (19, "?"), (-1, "?")],
)
def test_coordinate_glyphs(index, glyph):
    assert get_coordinate_unicode(index) == glyph


@pytest.mark.parametrize("value", [0, 5, 18])
def test_coordinate_round_trip(value):
    assert display_to_board_coord(board_to_display_coord(value)) == value


def test_move_validation(board):
    assert is_valid_move(board, 0, 0) is True
    assert is_valid_move(board, 9, 9) is True
    assert is_valid_move(board, 18, 18) is True

    assert is_valid_move(board, -1, 0) is False
    assert is_valid_move(board, 0, -1) is False
    assert is_valid_move(board, 19, 0) is False
    assert is_valid_move(board, 0, 19) is False

    board[9][9] = CELL_CROSSES
    assert is_valid_move(board, 9, 9) is False


def test_move_validation_on_small_board():
    small = create_board(15)
    assert is_valid_move(small, 14, 14) is True
    assert is_valid_move(small, 15, 0) is False