"""Board creation, move validation and coordinate helpers."""

from __future__ import annotations

from collections.abc import Sequence

from gomoku.constants import CELL_EMPTY

_COORDINATE_GLYPHS = (
    "❶", "❷", "❸", "❹", "❺", "❻", "❼", "❽", "❾", "❿",
    "⓫", "⓬", "⓭", "⓮", "⓯", "⓰", "⓱", "⓲", "⓳",
)


def create_board(size: int) -> list[list[int]]:
    """Return a new empty square board of the given size."""
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    return [[CELL_EMPTY] * size for _ in range(size)]


def is_valid_move(board: Sequence[Sequence[int]], x: int, y: int) -> bool:
    """Return True if (x, y) lies on the board and the cell is empty."""
    size = len(board)
    return 0 <= x < size and 0 <= y < size and board[x][y] == CELL_EMPTY


def get_coordinate_unicode(index: int) -> str:
    """Circled-number glyph for a 0-based index, or "?" outside 0..18."""
    if 0 <= index < len(_COORDINATE_GLYPHS):
        return _COORDINATE_GLYPHS[index]
    return "?"


def board_to_display_coord(board_coord: int) -> int:
    """Convert a 0-based board coordinate to a 1-based display one."""
    return board_coord + 1


def display_to_board_coord(display_coord: int) -> int:
    """Convert a 1-based display coordinate to a 0-based board one."""
    return display_coord - 1