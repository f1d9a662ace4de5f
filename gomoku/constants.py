"""Shared constants: cell values, scores, difficulty levels, glyphs and ANSI codes."""

# Board cell values
CELL_EMPTY = 0
CELL_CROSSES = 1
CELL_NAUGHTS = -1

DEFAULT_BOARD_SIZE = 19
ALLOWED_BOARD_SIZES = (15, 19)

# Pattern search parameters
SEARCH_RADIUS = 4
NEED_TO_WIN = 5
NUM_DIRECTIONS = 4
OUT_OF_BOUNDS = 32

# Scores used by the search
WIN_SCORE = 1_000_000
LOSE_SCORE = -1_000_000

# Difficulty levels (search depth)
DEPTH_LEVEL_EASY = 1
DEPTH_LEVEL_MEDIUM = 2
DEPTH_LEVEL_HARD = 4
DEPTH_LEVEL_MAX = 8
DEPTH_LEVEL_WARN = 5

DIFFICULTY_LEVELS = {
    "easy": DEPTH_LEVEL_EASY,
    "intermediate": DEPTH_LEVEL_MEDIUM,
    "hard": DEPTH_LEVEL_HARD,
}

# Game identity
GAME_NAME = "Gomoku"
GAME_VERSION = "0.1.2"
GAME_DESCRIPTION = "Gomoku, also known as Five in a Row"

GAME_RULES_BRIEF = (
    " ↑ ↓ ← → (arrows) ───→ to move around, \n"
    "  Enter or Space   ───→ to make a move, \n"
    "  U                ───→ to undo last move pair (if --undo is enabled), \n"
    "  ?                ───→ to show game rules, \n"
    "  ESC              ───→ to quit game."
)

GAME_RULES_LONG = (
    "Gomoku, also known as Five in a Row, is a two-player strategy board game. \n "
    "The objective is to get five crosses or naughts in a row, either horizontally,\n "
    "vertically, or diagonally. The game is played on a 15x15 grid, or 19x19 \n "
    "grid, with each player taking turns placing their crosses or naughts. The \n "
    "first player to get five crosses or naughts in a row wins the game.\n\n "
    "In this version you get to always play X which gives you a slight advantage.\n "
    "The computer will play O (and will go second). Slightly brigher O denotes the\n "
    "computer's last move (you can Undo moves if you enable Undo).\n"
)

# Unicode glyphs for the board
UNICODE_EMPTY = "·"
UNICODE_CROSSES = "✕"
UNICODE_NAUGHTS = "○"
UNICODE_CURSOR = "✕"
UNICODE_OCCUPIED = "\033[0;33m◼︎"
UNICODE_CORNER_TL = "┌"
UNICODE_CORNER_TR = "┐"
UNICODE_CORNER_BL = "└"
UNICODE_CORNER_BR = "┘"
UNICODE_EDGE_H = "─"
UNICODE_EDGE_V = "│"
UNICODE_T_TOP = "┬"
UNICODE_T_BOT = "┴"
UNICODE_T_LEFT = "├"
UNICODE_T_RIGHT = "┤"

# ANSI colours
COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_BLUE = "\033[34m"
COLOR_CYAN = "\033[36m"
COLOR_YELLOW = "\033[33m"
COLOR_GREEN = "\033[32m"
COLOR_MAGENTA = "\033[35m"

COLOR_BRIGHT_RED = "\033[91m"
COLOR_BRIGHT_BLUE = "\033[94m"
COLOR_BRIGHT_YELLOW = "\033[93m"
COLOR_BRIGHT_MAGENTA = "\033[95m"
COLOR_BRIGHT_CYAN = "\033[96m"
COLOR_BRIGHT_WHITE = "\033[97m"
COLOR_BRIGHT_GREEN = "\033[92m"

COLOR_BOLD_BLACK = "\033[1;30m"

ESCAPE_CODE_BLINK = "\033[1;33;5m"
ESCAPE_CODE_BOLD = "\033[1m"
ESCAPE_CODE_ITALIC = "\033[3m"
ESCAPE_CODE_UNDERLINE = "\033[4m"
ESCAPE_CODE_REVERSE = "\033[7m"
ESCAPE_CODE_STRIKE = "\033[9m"
ESCAPE_CODE_RESET = "\033[0m"

# Cell colouring
COLOR_BG_CELL_AVAILABLE = "\033[0m"
COLOR_X_NORMAL = "\033[0;31m"
COLOR_X_LAST_MOVE = "\033[1;31m"
COLOR_X_CURSOR = "\033[1;33m"
COLOR_O_NORMAL = "\033[0m\033[0;34m"
COLOR_O_LAST_MOVE = "\033[0m\033[1;36m"
COLOR_O_INVALID = "\033[0m\033[5;37;41m"
COLOR_X_INVALID = "\033[0m\033[5;37;41m"

# Cursor movement
ESCAPE_RESTORE_CURSOR_POSITION = "\033[u"
ESCAPE_SAVE_CURSOR_POSITION = "\033[s"
ESCAPE_CLEAR_SCREEN = "\033[2J"
ESCAPE_MOVE_CURSOR_UP = "\033[A"
ESCAPE_MOVE_CURSOR_DOWN = "\033[B"
ESCAPE_MOVE_CURSOR_RIGHT = "\033[C"
ESCAPE_MOVE_CURSOR_LEFT = "\033[D"
ESCAPE_MOVE_CURSOR_TO = "\033[{};{}H"
ESCAPE_MOVE_CURSOR_TO_HOME = "\033[H"