"""Terminal input handling and screen output."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import IntEnum
from typing import IO

from gomoku.board import is_valid_move
from gomoku.constants import CELL_CROSSES
from gomoku.game import GameState, GameStatus
from gomoku.render import render_board, render_header, render_rules, render_status

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None

_CLEAR_SCREEN = "\033[2J\033[H"


class Key(IntEnum):
    """Key codes recognised by the game."""

    CTRL_Z = 26
    ESC = 27
    ENTER = 13
    SPACE = 32
    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77


_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


def _input(stream: IO | None) -> IO:
    return sys.stdin if stream is None else stream


def _read_char(stream: IO) -> str:
    data = stream.read(1)
    if isinstance(data, bytes):
        return data.decode("latin-1")
    return data


@contextmanager
def raw_mode(stream: IO | None = None) -> Iterator[None]:
    """Turn off echo and line buffering on a terminal for the duration of the block.

    Streams that are not terminals are left untouched.
    """
    stream = _input(stream)
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        fd = None
    if termios is None or fd is None or not stream.isatty():
        yield
        return

    original = termios.tcgetattr(fd)
    raw = list(original)
    raw[3] &= ~(termios.ECHO | termios.ICANON)
    termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, original)


def get_key(stream: IO | None = None) -> int:
    """Read one key press; arrow sequences map to Key values, -1 at end of input."""
    stream = _input(stream)
    char = _read_char(stream)
    if not char:
        return -1
    if char == "\033":
        first = _read_char(stream)
        if not first:
            return Key.ESC
        second = _read_char(stream)
        if not second:
            return Key.ESC
        if first == "[" and second in _ARROWS:
            return _ARROWS[second]
        return Key.ESC
    if char in ("\n", "\r"):
        return Key.ENTER
    return ord(char)


def handle_input(game: GameState, key: int | None = None, stream: IO | None = None) -> None:
    """Apply one key press to the game; reads the key from ``stream`` if not given."""
    if key is None:
        key = get_key(stream)

    if key == Key.UP:
        if game.cursor_x > 0:
            game.cursor_x -= 1
    elif key == Key.DOWN:
        if game.cursor_x < game.board_size - 1:
            game.cursor_x += 1
    elif key == Key.LEFT:
        if game.cursor_y > 0:
            game.cursor_y -= 1
    elif key == Key.RIGHT:
        if game.cursor_y < game.board_size - 1:
            game.cursor_y += 1
    elif key in (Key.SPACE, Key.ENTER):
        if game.current_player == CELL_CROSSES and is_valid_move(
            game.board, game.cursor_x, game.cursor_y
        ):
            move_time = game.end_move_timer()
            game.make_move(game.cursor_x, game.cursor_y, CELL_CROSSES, move_time, 0)
    elif key in (ord("U"), ord("u")):
        if game.can_undo():
            game.undo_last_moves()
    elif key == ord("?"):
        display_rules(stream)
    elif key in (Key.ESC, ord("q"), ord("Q")):
        game.status = GameStatus.QUIT


def clear_screen() -> None:
    """Clear the terminal and move the cursor home."""
    print(_CLEAR_SCREEN, end="", flush=True)


def draw_game_header(stream: IO | None = None) -> None:
    """Show the welcome screen and wait for a key."""
    print(render_header(), end="", flush=True)
    get_key(stream)
    clear_screen()


def display_rules(stream: IO | None = None) -> None:
    """Show the rules screen and wait for a key."""
    clear_screen()
    print(render_rules(), end="", flush=True)
    get_key(stream)


def refresh_display(game: GameState) -> None:
    """Redraw the board, history sidebar and status panel."""
    clear_screen()
    print(render_board(game), end="")
    print(render_status(game), end="", flush=True)