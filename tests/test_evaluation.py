import pytest

from gomoku.constants import CELL_CROSSES, CELL_EMPTY, CELL_NAUGHTS, OUT_OF_BOUNDS
from gomoku.evaluation import (
    Threat,
    calc_combination_threat,
    calc_score_at,
    calc_threat_in_one_dimension,
    evaluate_position,
    evaluate_position_incremental,
    has_winner,
    minimax_example,
    other_player,
)

SIZE = 19


@pytest.fixture
def board():
    return [[CELL_EMPTY] * SIZE for _ in range(SIZE)]


def test_horizontal_win_detection(board):
    for i in range(5):
        board[7][i] = CELL_CROSSES
    assert has_winner(board, CELL_CROSSES) is True
    assert has_winner(board, CELL_NAUGHTS) is False


def test_vertical_win_detection(board):
    for i in range(5):
        board[i][7] = CELL_NAUGHTS
    assert has_winner(board, CELL_NAUGHTS) is True
    assert has_winner(board, CELL_CROSSES) is False


def test_diagonal_win_detection(board):
    for i in range(5):
        board[i][i] = CELL_CROSSES
    assert has_winner(board, CELL_CROSSES) is True
    assert has_winner(board, CELL_NAUGHTS) is False


def test_anti_diagonal_win_detection(board):
    for i in range(5):
        board[i][4 - i] = CELL_NAUGHTS
    assert has_winner(board, CELL_NAUGHTS) is True
    assert has_winner(board, CELL_CROSSES) is False


def test_no_winner_detection(board):
    board[7][7] = CELL_CROSSES
    board[7][8] = CELL_CROSSES
    board[8][7] = CELL_NAUGHTS
    board[8][8] = CELL_NAUGHTS
    assert has_winner(board, CELL_CROSSES) is False
    assert has_winner(board, CELL_NAUGHTS) is False


def test_four_is_not_a_win_but_six_is(board):
    for i in range(4):
        board[3][i] = CELL_CROSSES
    assert has_winner(board, CELL_CROSSES) is False
    for i in range(4, 6):
        board[3][i] = CELL_CROSSES
    assert has_winner(board, CELL_CROSSES) is True


def test_evaluation_function(board):
    assert evaluate_position(board, CELL_CROSSES) == 0
    score = calc_score_at(board, CELL_CROSSES, 7, 7)
    assert score == 0
    board[7][6] = CELL_CROSSES
    score_with_support = calc_score_at(board, CELL_CROSSES, 7, 7)
    assert score_with_support > score
    assert score_with_support == 20


def test_evaluation_with_win(board):
    for i in range(5):
        board[7][i] = CELL_CROSSES
    assert evaluate_position(board, CELL_CROSSES) == 1_000_000
    assert evaluate_position(board, CELL_NAUGHTS) == -1_000_000


def test_incremental_evaluation_with_win(board):
    for i in range(5):
        board[7][i] = CELL_CROSSES
    assert evaluate_position_incremental(board, CELL_CROSSES, 7, 4) == 1_000_000
    assert evaluate_position_incremental(board, CELL_NAUGHTS, 7, 4) == -1_000_000


def test_incremental_evaluation_empty_board(board):
    assert evaluate_position_incremental(board, CELL_CROSSES, 9, 9) == 0


def test_other_player():
    assert other_player(CELL_CROSSES) == CELL_NAUGHTS
    assert other_player(CELL_NAUGHTS) == CELL_CROSSES


def test_corner_cases(board):
    assert calc_score_at(board, CELL_CROSSES, 0, 0) == 0
    assert calc_score_at(board, CELL_CROSSES, 9, 9) == 0


def test_multi_direction_threats(board):
    board[7][7] = CELL_CROSSES
    board[7][6] = CELL_CROSSES
    board[7][8] = CELL_CROSSES
    board[6][7] = CELL_CROSSES
    board[8][7] = CELL_CROSSES
    score = calc_score_at(board, CELL_CROSSES, 7, 7)
    assert score > 100
    assert score == 7000


def test_blocked_patterns(board):
    board[7][4] = CELL_CROSSES
    board[7][5] = CELL_CROSSES
    board[7][6] = CELL_CROSSES
    board[7][3] = CELL_NAUGHTS
    board[7][7] = CELL_NAUGHTS
    blocked = calc_score_at(board, CELL_CROSSES, 7, 5)
    board[7][3] = CELL_EMPTY
    board[7][7] = CELL_EMPTY
    unblocked = calc_score_at(board, CELL_CROSSES, 7, 5)
    assert unblocked > blocked
    assert blocked == 5
    assert unblocked == 1000


@pytest.mark.parametrize(
    "row, expected",
    [
        ([0, 0, 1, 1, 1, 1, 1, 0, 0], Threat.FIVE),
        ([0, 0, 0, 1, 1, 1, 1, 0, 0], Threat.STRAIGHT_FOUR),
        ([0, 0, -1, 1, 1, 1, 1, 0, 0], Threat.FOUR),
        ([0, 0, 0, 1, 1, 1, 0, 0, 0], Threat.THREE),
        ([0, 0, 0, 0, 1, 1, 0, 0, 0], Threat.TWO),
        ([0, 0, 0, -1, 1, 0, 0, 0, 0], Threat.NEAR_ENEMY),
        ([0, 0, 0, 0, 1, 0, 0, 0, 0], Threat.NOTHING),
        ([OUT_OF_BOUNDS] * 4 + [1] + [OUT_OF_BOUNDS] * 4, Threat.NOTHING),
    ],
)
def test_threat_in_one_dimension(row, expected):
    assert calc_threat_in_one_dimension(row, 1) == expected


def test_threat_row_length_is_checked():
    with pytest.raises(ValueError):
        calc_threat_in_one_dimension([0, 1, 0], 1)


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (Threat.THREE, Threat.FOUR, 5000),
        (Threat.FOUR_BROKEN, Threat.THREE, 5000),
        (Threat.THREE, Threat.THREE, 5000),
        (Threat.TWO, Threat.THREE, 0),
        (Threat.NOTHING, Threat.NOTHING, 0),
    ],
)
def test_combination_threat(one, two, expected):
    assert calc_combination_threat(one, two) == expected


def test_minimax_example_with_win_on_board(board):
    for i in range(5):
        board[7][i] = CELL_CROSSES
    assert minimax_example(board, 2, -1_000_000, 1_000_000, True, CELL_CROSSES) == 1_000_000


def test_minimax_example_finds_completing_move():
    small = [[CELL_EMPTY] * 5 for _ in range(5)]
    for i in range(4):
        small[0][i] = CELL_CROSSES
    score = minimax_example(small, 1, -1_000_000, 1_000_000, True, CELL_CROSSES)
    assert score == 1_000_000
    assert small[0][4] == CELL_EMPTY


def test_minimax_example_depth_zero_is_evaluation(board):
    board[7][7] = CELL_CROSSES
    board[7][8] = CELL_CROSSES
    expected = evaluate_position(board, CELL_CROSSES)
    assert minimax_example(board, 0, -1_000_000, 1_000_000, True, CELL_CROSSES) == expected