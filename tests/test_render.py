import re

import pytest

from gomoku.cli import CliConfig
from gomoku.constants import (
    CELL_CROSSES,
    CELL_NAUGHTS,
    COLOR_O_LAST_MOVE,
    COLOR_O_NORMAL,
    GAME_DESCRIPTION,
    GAME_VERSION,
    UNICODE_CROSSES,
    UNICODE_NAUGHTS,
    UNICODE_OCCUPIED,
)
from gomoku.game import GameState, GameStatus
from gomoku.render import (
    render_board,
    render_header,
    render_history_sidebar,
    render_rules,
    render_status,
)

ANSI = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def plain(text):
    return ANSI.sub("", text)


def make_game(**kwargs):
    return GameState(CliConfig(**kwargs))


def test_header_mentions_description_and_version():
    text = render_header()
    assert GAME_DESCRIPTION in text
    assert f"(v{GAME_VERSION}" in plain(text)
    assert "Press ENTER to start the game" in text


def test_board_has_one_row_per_line_plus_labels():
    game = make_game(board_size=15)
    text = render_board(game)
    board_part = text.split("\033[2;50H")[0]
    rows = [line for line in board_part.split("\n") if line]
    assert len(rows) == 15 + 1
    assert "❶" in rows[0]


def test_board_counts_stones_and_cursor():
    game = make_game(board_size=15)
    game.board[0][0] = CELL_CROSSES
    game.board[1][1] = CELL_CROSSES
    game.board[2][2] = CELL_NAUGHTS
    text = render_board(game)
    # Cursor on an empty cell is drawn with the crosses glyph as well.
    assert text.count(UNICODE_CROSSES) == 3
    assert text.count(UNICODE_NAUGHTS) == 1


def test_board_cursor_on_occupied_cell():
    game = make_game(board_size=15)
    game.board[game.cursor_x][game.cursor_y] = CELL_NAUGHTS
    text = render_board(game)
    assert UNICODE_OCCUPIED in text
    assert text.count(UNICODE_NAUGHTS) == 0


def test_board_highlights_last_ai_move():
    game = make_game(board_size=15)
    game.board[3][3] = CELL_NAUGHTS
    game.board[4][4] = CELL_NAUGHTS
    game.last_ai_move_x, game.last_ai_move_y = 3, 3
    text = render_board(game)
    assert text.count(COLOR_O_LAST_MOVE + UNICODE_NAUGHTS) == 1
    assert text.count(COLOR_O_NORMAL + UNICODE_NAUGHTS) == 1


def test_sidebar_lists_moves_with_display_coordinates():
    game = make_game()
    game.make_move(0, 4, CELL_CROSSES, 1.5, 0)
    game.make_move(9, 9, CELL_NAUGHTS, 0.25, 7)
    text = plain(render_history_sidebar(game, 2))
    assert "Game History:" in text
    assert " 1 | player x moved to [ 1,  5] (in   1.50s)" in text
    assert " 2 | player o moved to [10, 10] (in   0.25s,   7 moves evaluated)" in text


def test_sidebar_shows_only_last_fifteen_moves():
    game = make_game()
    for n in range(20):
        player = CELL_CROSSES if n % 2 == 0 else CELL_NAUGHTS
        game.make_move(n // 19, n % 19, player, 0.0, 0)
    text = plain(render_history_sidebar(game, 2))
    assert text.count("moved to") == 15
    assert " 5 | player" not in text
    assert "20 | player" in text


def test_status_current_player():
    game = make_game()
    assert "Current Player : You (X)" in render_status(game)
    game.current_player = CELL_NAUGHTS
    assert "Current Player : Computer (O)" in render_status(game)


@pytest.mark.parametrize(
    "depth, name",
    [(1, "Easy"), (2, "Intermediate"), (4, "Hard"), (6, "Custom")],
)
def test_status_difficulty_names(depth, name):
    game = make_game(max_depth=depth)
    assert f"Difficulty     : {name}" in render_status(game)


def test_status_undo_line_only_when_enabled():
    assert "Undo last move pair" not in render_status(make_game())
    assert "Undo last move pair" in render_status(make_game(enable_undo=True))


def test_status_strips_colour_from_ai_message():
    game = make_game()
    game.ai_status_message = "\033[34mO\033[0m It's a checkmate ;-)"
    text = render_status(game)
    assert "O It's a checkmate ;-)" in text


@pytest.mark.parametrize(
    "status, message",
    [
        (GameStatus.HUMAN_WIN, "Human wins! Great job!"),
        (GameStatus.AI_WIN, "AI wins! Try again!"),
        (GameStatus.DRAW, "The Game is a draw!"),
    ],
)
def test_status_end_of_game_messages(status, message):
    game = make_game()
    game.status = status
    game.total_human_time = 1.25
    text = render_status(game)
    assert message in text
    assert "Time: Human: 1.2s | AI: 0.0s" in text
    assert "Press any key to exit..." in text


def test_status_running_game_has_no_exit_prompt():
    text = render_status(make_game())
    assert "Press any key to exit..." not in text


def test_status_box_lines_have_equal_visible_width():
    game = make_game(enable_undo=True)
    lines = [plain(line) for line in render_status(game).split("\n") if "│" in line]
    widths = {len(line) for line in lines if "—" in line}
    assert len(widths) == 1


def test_rules_cover_sections():
    text = render_rules()
    for section in ("OBJECTIVE", "HOW TO PLAY", "WINNING CONDITIONS", "GAME CONTROLS"):
        assert section in text
    assert "Press any key to return to game" in text
    assert text.count(UNICODE_CROSSES) >= 5