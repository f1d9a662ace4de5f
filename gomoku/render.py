"""Text rendering of the board, history sidebar, status panel and help screens."""

from __future__ import annotations

import re

from gomoku.board import board_to_display_coord, get_coordinate_unicode
from gomoku.constants import (
    CELL_CROSSES,
    CELL_EMPTY,
    COLOR_BG_CELL_AVAILABLE,
    COLOR_BLUE,
    COLOR_BOLD_BLACK,
    COLOR_BRIGHT_BLUE,
    COLOR_BRIGHT_CYAN,
    COLOR_BRIGHT_YELLOW,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_O_INVALID,
    COLOR_O_LAST_MOVE,
    COLOR_O_NORMAL,
    COLOR_RED,
    COLOR_RESET,
    COLOR_X_CURSOR,
    COLOR_X_INVALID,
    COLOR_X_NORMAL,
    COLOR_YELLOW,
    DEPTH_LEVEL_EASY,
    DEPTH_LEVEL_HARD,
    DEPTH_LEVEL_MEDIUM,
    ESCAPE_CODE_BOLD,
    ESCAPE_CODE_RESET,
    ESCAPE_MOVE_CURSOR_TO,
    GAME_DESCRIPTION,
    GAME_RULES_BRIEF,
    GAME_RULES_LONG,
    GAME_VERSION,
    UNICODE_CROSSES,
    UNICODE_CURSOR,
    UNICODE_EMPTY,
    UNICODE_NAUGHTS,
    UNICODE_OCCUPIED,
)
from gomoku.game import GameState, GameStatus

SIDEBAR_COLUMN = 50
HISTORY_LINES_SHOWN = 15
STATUS_ROW = 24

_BOX_WIDTH = 19 * 2 + 2
_CONTROL_WIDTH = 14
_ACTION_WIDTH = _BOX_WIDTH - _CONTROL_WIDTH - 6
_INNER_WIDTH = _BOX_WIDTH - 4
_PREFIX = f"{ESCAPE_CODE_RESET}  "
_SEPARATOR = "─" * (_BOX_WIDTH - 2)
_RULE = "═" * 79
_MAX_STATUS_CHARS = 99
_ANSI_ESCAPE = re.compile(r"\033[^m]*m?")

_DIFFICULTIES = {
    DEPTH_LEVEL_EASY: ("Easy", COLOR_GREEN),
    DEPTH_LEVEL_MEDIUM: ("Intermediate", COLOR_YELLOW),
    DEPTH_LEVEL_HARD: ("Hard", COLOR_RED),
}


def _move_cursor(row: int, col: int) -> str:
    return ESCAPE_MOVE_CURSOR_TO.format(row, col)


def render_header() -> str:
    """The welcome screen text."""
    return (
        "\n"
        f" {COLOR_YELLOW}{GAME_DESCRIPTION} {COLOR_RED}(v{GAME_VERSION}{COLOR_RESET})\n\n"
        f" {ESCAPE_CODE_BOLD}{COLOR_MAGENTA}HINT:\n"
        f" {ESCAPE_CODE_BOLD}{COLOR_MAGENTA}{GAME_RULES_BRIEF}\n\n\n"
        f" {COLOR_RESET}{COLOR_BRIGHT_CYAN}{GAME_RULES_LONG}{COLOR_RESET}\n\n\n"
        f"\n\n\n {COLOR_YELLOW}{ESCAPE_CODE_BOLD}"
        f"Press ENTER to start the game, or CTRL-C to quit...{COLOR_RESET}\n\n\n\n\n\n\n"
    )


def render_history_sidebar(game: GameState, start_row: int) -> str:
    """The move history panel, positioned to the right of the board."""
    col = SIDEBAR_COLUMN
    parts = [
        _move_cursor(start_row, col),
        f"{COLOR_BOLD_BLACK}{COLOR_GREEN}Game History:{COLOR_RESET}",
        _move_cursor(start_row + 1, col),
        f"{COLOR_BOLD_BLACK}Move Player [Time] (AI positions evaluated){COLOR_RESET}",
        _move_cursor(start_row + 2, col),
        "─" * 47,
    ]
    history = game.move_history
    display_start = max(0, len(history) - HISTORY_LINES_SHOWN)
    for offset, move in enumerate(history[display_start:]):
        number = display_start + offset + 1
        human = move.player == CELL_CROSSES
        color = COLOR_RED if human else COLOR_BLUE
        symbol = "x" if human else "o"
        where = (
            f"[{board_to_display_coord(move.x):2d}, {board_to_display_coord(move.y):2d}]"
        )
        if human:
            detail = f"(in {move.time_taken:6.2f}s)"
        else:
            detail = (
                f"(in {move.time_taken:6.2f}s, "
                f"{move.positions_evaluated:3d} moves evaluated)"
            )
        line = f"{color}{number:2d} | player {symbol} moved to {where} {detail}{COLOR_RESET}"
        parts.append(f"{_move_cursor(start_row + 3 + offset, col)}{line}")
    return "".join(parts)


def _label(index: int) -> str:
    if index > 9:
        color, glyph = COLOR_BLUE, get_coordinate_unicode(index - 10)
    else:
        color, glyph = COLOR_GREEN, get_coordinate_unicode(index)
    if glyph.isascii():
        glyph = glyph.rjust(2)
    return f"{color}{glyph}{COLOR_RESET} "


def _cell(game: GameState, i: int, j: int) -> str:
    cell = game.board[i][j]
    cursor_here = i == game.cursor_x and j == game.cursor_y
    if cell == CELL_EMPTY:
        if cursor_here:
            return f"{COLOR_X_CURSOR}{UNICODE_CURSOR}{COLOR_RESET}"
        return f"{COLOR_RESET}{UNICODE_EMPTY}{COLOR_RESET}"
    if cursor_here:
        return f"{COLOR_RESET}{UNICODE_OCCUPIED}{COLOR_RESET}"
    if cell == CELL_CROSSES:
        return f"{COLOR_X_NORMAL}{UNICODE_CROSSES}{COLOR_RESET}"
    if i == game.last_ai_move_x and j == game.last_ai_move_y:
        return f"{COLOR_O_LAST_MOVE}{UNICODE_NAUGHTS}{COLOR_RESET}"
    return f"{COLOR_O_NORMAL}{UNICODE_NAUGHTS}{COLOR_RESET}"


def render_board(game: GameState) -> str:
    """The board with coordinates, stones and cursor, followed by the sidebar."""
    size = game.board_size
    lines = ["\n     " + "".join(_label(j) for j in range(size)) + "\n"]
    for i in range(size):
        cells = "".join(f" {_cell(game, i, j)}" for j in range(size))
        lines.append(f"  {_label(i)}{cells}\n")
    lines.append(render_history_sidebar(game, 2))
    return "".join(lines)


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)[:_MAX_STATUS_CHARS]


def _boxed(text: str) -> str:
    return f"{_PREFIX}{COLOR_RESET}│ {text:<{_INNER_WIDTH}} {COLOR_RESET}│\n"


def _control(key: str, action: str) -> str:
    return (
        f"{_PREFIX}{COLOR_RESET}│ {COLOR_BRIGHT_YELLOW}{key:<{_CONTROL_WIDTH}} — "
        f"{COLOR_GREEN}{action:<{_ACTION_WIDTH}}{COLOR_RESET}│\n"
    )


def render_status(game: GameState) -> str:
    """The status panel: player, position, difficulty, controls and results."""
    out = [_move_cursor(STATUS_ROW, 1)]
    out.append(f"{_PREFIX}{COLOR_RESET}┌{_SEPARATOR}┐{COLOR_RESET}\n")

    if game.current_player == CELL_CROSSES:
        color, who = COLOR_YELLOW, "Current Player : You (X)"
    else:
        color, who = COLOR_BLUE, "Current Player : Computer (O)"
    width = _ACTION_WIDTH + _CONTROL_WIDTH + 2
    out.append(f"{_PREFIX}│{color} {who:<{width}} {COLOR_RESET}│{COLOR_RESET}{color}\n")

    position = (
        f"Position       : [ {board_to_display_coord(game.cursor_x):2d}, "
        f"{board_to_display_coord(game.cursor_y):2d} ]"
    )
    out.append(f"{_PREFIX}{COLOR_RESET}│ {position:<{_INNER_WIDTH}} │\n")

    name, diff_color = _DIFFICULTIES.get(game.max_depth, ("Custom", COLOR_MAGENTA))
    limit = _BOX_WIDTH - 1
    difficulty = f"{diff_color}Difficulty     : {name:<{_ACTION_WIDTH}}"[:limit]
    out.append(f"{_PREFIX}{COLOR_RESET}│ {difficulty} {COLOR_RESET}  │\n")
    depth = f"{diff_color}Search Depth   : {game.max_depth:<{_ACTION_WIDTH}d}"[:limit]
    out.append(f"{_PREFIX}{COLOR_RESET}│ {depth} {COLOR_RESET}  │{COLOR_RESET}\n")

    out.append(f"{_PREFIX}{COLOR_RESET}│ {'':<{_INNER_WIDTH}} {COLOR_RESET}│{COLOR_RESET}\n")
    out.append(
        f"{_PREFIX}{COLOR_RESET}│ {COLOR_BRIGHT_BLUE}{'Controls':<{_INNER_WIDTH}} {COLOR_RESET}│\n"
    )
    out.append(_control("Arrow Keys", "Move cursor"))
    out.append(_control("Space / Enter", "Make move"))
    if game.config.enable_undo:
        out.append(_control("U", "Undo last move pair"))
    out.append(_control("?", "Show game rules"))
    out.append(_control("ESC", "Quit game"))
    out.append(f"{_PREFIX}{COLOR_RESET}│ {' ':<{_INNER_WIDTH}} │{COLOR_RESET}\n")

    divider = f"{_PREFIX}{COLOR_RESET}├{_SEPARATOR}┤{COLOR_RESET}\n"
    if game.ai_status_message:
        out.append(divider)
        clean = _strip_ansi(game.ai_status_message)
        out.append(
            f"{_PREFIX}{COLOR_RESET}│{COLOR_MAGENTA} {clean:<{_INNER_WIDTH}} {COLOR_RESET}│\n"
        )

    if game.status != GameStatus.RUNNING:
        out.append(divider)
        out.append(
            f"{_PREFIX}{COLOR_RESET}│{COLOR_RESET} {'':<{_INNER_WIDTH}} {COLOR_RESET}│\n"
        )
        if game.status == GameStatus.HUMAN_WIN:
            out.append(_boxed("Human wins! Great job!"))
        elif game.status == GameStatus.AI_WIN:
            out.append(_boxed("AI wins! Try again!"))
        elif game.status == GameStatus.DRAW:
            out.append(
                f"{_PREFIX}{COLOR_RESET}│{COLOR_RESET} "
                f"{'The Game is a draw!':<{_CONTROL_WIDTH}} {COLOR_RESET}│\n"
            )
        summary = (
            f"Time: Human: {game.total_human_time:.1f}s | AI: {game.total_ai_time:.1f}s"
        )
        out.append(_boxed(summary))
        out.append(_boxed("Press any key to exit..."))

    out.append(f"  {COLOR_RESET}└{_SEPARATOR}┘{COLOR_RESET}\n")
    return "".join(out)


def _heading(title: str) -> str:
    return f"{COLOR_BOLD_BLACK}{title}{COLOR_RESET}\n"


def render_rules() -> str:
    """The full rules and help screen."""
    cross = f"{COLOR_RED}{UNICODE_CROSSES}{COLOR_RESET}"
    parts = [
        f"{COLOR_RESET}{_RULE}{COLOR_RESET}\n",
        f"{COLOR_RESET}        GOMOKU RULES & HELP (RECOMMENDED TO HAVE 66-LINE TERMINAL)"
        f"             {COLOR_RESET}\n",
        f"{COLOR_RESET}{_RULE}{COLOR_RESET}\n",
        "\n",
        _heading("OBJECTIVE"),
        "   Gomoku (Five in a Row) is a strategy game where players take turns placing\n",
        "   stones on a board. The goal is to be the first to get five stones in a row\n",
        "   (horizontally, vertically, or diagonally).\n\n",
        _heading("GAME PIECES"),
        f"   {COLOR_RED}{UNICODE_CROSSES}{COLOR_RESET}          — Human Player (Crosses)"
        " - You play first\n",
        f"   {COLOR_BLUE}{UNICODE_NAUGHTS}{COLOR_RESET}          — AI Player (Naughts)"
        " - Computer opponent\n",
        f"   {COLOR_BG_CELL_AVAILABLE}{UNICODE_CURSOR}{COLOR_RESET}          — Current cursor"
        " position (available move)\n\n",
        f"   {COLOR_O_INVALID} {UNICODE_NAUGHTS} {COLOR_RESET} or "
        f"{COLOR_X_INVALID} {UNICODE_CROSSES} {COLOR_RESET} — Current cursor position"
        " (occupied cell)\n\n",
        _heading("HOW TO PLAY"),
        "   1. Crosses (Human) always goes first\n",
        "   2. Players alternate turns placing one stone per turn\n",
        "   3. Stones are placed on intersections of the grid lines\n",
        "   4. Once placed, stones cannot be moved or removed\n",
        "   5. Win by creating an unbroken line of exactly 5 stones\n\n",
        _heading("WINNING CONDITIONS"),
        "   Win by creating an unbroken line of exactly 5 stones:\n",
        "   • Horizontal: " + " ".join([cross] * 5) + "\n",
        "   • Vertical:   Lines going up and down\n",
        "   • Diagonal:   Lines going diagonally in any direction\n",
        "   • Six or more stones in a row do NOT count as a win (overline rule)\n\n",
        _heading("BASIC STRATEGIES"),
        f"   {COLOR_BOLD_BLACK}Offense & Defense:{COLOR_RESET} Balance creating your own"
        " lines with blocking\n",
        "   opponent's attempts to get five in a row.\n\n",
        f"   {COLOR_BOLD_BLACK}Control the Center:{COLOR_RESET} The center of the board"
        " provides more\n",
        "   opportunities to create lines in multiple directions.\n\n",
        f"   {COLOR_BOLD_BLACK}Watch for Threats:{COLOR_RESET} An 'open three' (three stones"
        " with both ends\n",
        "   open) must be blocked immediately, or it becomes an unstoppable 'open four'.\n\n",
        _heading("GAME CONTROLS"),
        "   • Arrow Keys: Move cursor\n",
        "   • Space/Enter: Place stone\n",
        "   • U: Undo last move pair (human + AI) if enabled\n",
        "   • ?: Show this help screen\n",
        "   • ESC: Quit game\n\n",
        _heading("COMMAND LINE OPTIONS"),
        "   -d, --depth N        Search depth (1-10) for AI minimax algorithm\n",
        "   -l, --level M        Difficulty: easy, intermediate, hard\n",
        "   -t, --timeout T      Move timeout in seconds (optional)\n",
        "   -b, --board SIZE     Board size: 15 or 19 (default: 19)\n",
        "   -h, --help           Show command line help\n\n",
        _heading("EXAMPLES"),
        "   gomoku --level easy --board 15\n",
        "   gomoku -d 4 -t 30 -b 19\n",
        "   gomoku --level hard --timeout 60\n\n",
        _heading("DIFFICULTY LEVELS"),
        "   • Easy (depth 1):         Quick moves, good for beginners\n",
        "   • Intermediate (depth 3): Balanced gameplay, default setting\n",
        "   • Hard (depth 4):         Advanced AI, challenging for experts\n\n",
        f"{COLOR_BOLD_BLACK}{_RULE}{COLOR_RESET}\n",
        f"                      {COLOR_YELLOW}Press any key to return to game{COLOR_RESET}\n",
        f"{COLOR_BOLD_BLACK}{_RULE}{COLOR_RESET}\n",
    ]
    return "".join(parts)