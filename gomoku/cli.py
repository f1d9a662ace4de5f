"""Command-line argument parsing and help output."""

from __future__ import annotations

import getopt
import re
import sys
import time
from dataclasses import dataclass

from gomoku.constants import (
    ALLOWED_BOARD_SIZES,
    COLOR_BLUE,
    COLOR_BRIGHT_GREEN,
    COLOR_BRIGHT_MAGENTA,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_RESET,
    COLOR_X_CURSOR,
    COLOR_YELLOW,
    DEFAULT_BOARD_SIZE,
    DEPTH_LEVEL_EASY,
    DEPTH_LEVEL_HARD,
    DEPTH_LEVEL_MAX,
    DEPTH_LEVEL_MEDIUM,
    DEPTH_LEVEL_WARN,
    DIFFICULTY_LEVELS,
    GAME_VERSION,
    UNICODE_CROSSES,
    UNICODE_CURSOR,
    UNICODE_NAUGHTS,
    UNICODE_OCCUPIED,
)

_SHORT_OPTIONS = "d:l:t:b:hus"
_LONG_OPTIONS = ["depth=", "level=", "timeout=", "board=", "help", "undo", "skip-welcome"]
_WARN_PAUSE_SECONDS = 3
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class CliConfig:
    """Settings gathered from the command line."""

    board_size: int = DEFAULT_BOARD_SIZE
    max_depth: int = 4
    move_timeout: int = 0
    show_help: bool = False
    invalid_args: bool = False
    enable_undo: bool = False
    skip_welcome: bool = False


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: garbage gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_arguments(argv: list[str] | None = None) -> CliConfig:
    """Parse command-line arguments (without the program name) into a CliConfig.

    Problems are reported on stdout and flagged in ``invalid_args``.
    """
    if argv is None:
        argv = sys.argv[1:]
    config = CliConfig()

    try:
        options, rest = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError:
        print("Unknown option or missing argument\n")
        config.invalid_args = True
        return config

    for option, value in options:
        if option in ("-d", "--depth"):
            config.max_depth = _atoi(value)
            if not 1 <= config.max_depth <= DEPTH_LEVEL_MAX:
                print(f"Error: Search depth must be between 1 and {DEPTH_LEVEL_MAX}")
                config.invalid_args = True
            if config.max_depth >= DEPTH_LEVEL_WARN:
                print(
                    f"  {COLOR_YELLOW}WARNING: Search at or above the depth of "
                    f"{DEPTH_LEVEL_WARN} is slow. \n"
                    f"  {COLOR_BRIGHT_GREEN}(This message will disappear in 3 seconds.)"
                    f"{COLOR_RESET}"
                )
                time.sleep(_WARN_PAUSE_SECONDS)
        elif option in ("-l", "--level"):
            depth = DIFFICULTY_LEVELS.get(value)
            if depth is None:
                print(f"Error: Invalid difficulty level '{value}'")
                print("Valid options are: easy, intermediate, hard\n")
                config.invalid_args = True
            else:
                config.max_depth = depth
        elif option in ("-t", "--timeout"):
            config.move_timeout = _atoi(value)
            if config.move_timeout < 0:
                print("Error: Timeout must be a positive number")
                config.invalid_args = True
        elif option in ("-b", "--board"):
            config.board_size = _atoi(value)
            if config.board_size not in ALLOWED_BOARD_SIZES:
                print("Error: Board size must be either 15 or 19")
                config.invalid_args = True
        elif option in ("-u", "--undo"):
            config.enable_undo = True
        elif option in ("-s", "--skip-welcome"):
            config.skip_welcome = True
        elif option in ("-h", "--help"):
            config.show_help = True

    if rest:
        print("Error: Unexpected arguments: " + "".join(f"{arg} " for arg in rest))
        print()
        config.invalid_args = True

    return config


def _help_lines(program_name: str):
    heading = COLOR_BRIGHT_MAGENTA
    flag = COLOR_YELLOW
    yield f"\n{heading}NAME{COLOR_RESET}"
    yield f"  {program_name} - an entertaining and engaging five-in-a-row version\n"
    yield f"{heading}FLAGS:{COLOR_RESET}"
    yield f"  {flag}-d, --depth N{COLOR_RESET}         The depth of search in the MiniMax algorithm"
    yield f'  {flag}-l, --level M{COLOR_RESET}         Can be "easy", "intermediate", "hard"'
    yield f"  {flag}-t, --timeout T{COLOR_RESET}       Timeout in seconds that AI (and human)"
    yield "                        have to make their move, otherwise AI must choose"
    yield "                        the best move found so far, while human looses the game."
    yield f"  {flag}-b, --board 15,19{COLOR_RESET}     Board size. Can be either 19 or 15."
    yield f"  {flag}-u, --undo       {COLOR_RESET}     Enable the Undo feature (disabled by the default)."
    yield f"  {flag}-s, --skip-welcome{COLOR_RESET}    Skip the welcome screen."
    yield f"  {flag}-h, --help{COLOR_RESET}            Show this help message"
    yield f"\n{heading}EXAMPLES:{COLOR_RESET}"
    yield f"  {flag}{program_name} --level easy --board 15"
    yield f"  {flag}{program_name} -d 4 -t 30 -b 19"
    yield f"  {flag}{program_name} --level hard --timeout 60"
    yield f"\n{heading}DIFFICULTY LEVELS:{COLOR_RESET}"
    yield (
        f"  {COLOR_GREEN}easy{COLOR_RESET}         - Search depth {DEPTH_LEVEL_EASY}"
        " (quick moves, good for beginners)"
    )
    yield (
        f"  {COLOR_GREEN}intermediate{COLOR_RESET} - Search depth {DEPTH_LEVEL_MEDIUM}"
        " (balanced gameplay, default setting)"
    )
    yield (
        f"  {COLOR_GREEN}hard{COLOR_RESET}         - Search depth {DEPTH_LEVEL_HARD}"
        " (advanced AI, challenging for experts)"
    )
    yield f"\n{heading}GAME SYMBOLS:{COLOR_RESET}"
    yield f"  {COLOR_RED}{UNICODE_CROSSES}{COLOR_RESET} - Human player (crosses)"
    yield f"  {COLOR_BLUE}{UNICODE_NAUGHTS}{COLOR_RESET} - AI player (naughts)"
    yield f"  {COLOR_X_CURSOR}{UNICODE_CURSOR}{COLOR_RESET} - Current cursor (x on an empty cell)"
    yield f"  {UNICODE_OCCUPIED}{COLOR_RESET} - Current cursor on an occupied cell"
    yield f"\n{heading}CONTROLS IN GAME:{COLOR_RESET}"
    yield "  Arrow Keys    - Move cursor"
    yield "  Space/Enter   - Place stone"
    yield "  U             - Undo last move pair"
    yield "  ?             - Show detailed game rules"
    yield "  ESC           - Quit game"
    yield f"\n{heading}VERSION:{COLOR_RESET}"
    yield f"  {COLOR_BRIGHT_GREEN}Version {GAME_VERSION}{COLOR_RESET}"
    yield ""


def print_help(program_name: str) -> None:
    """Print usage information for the given program name."""
    print("\n".join(_help_lines(program_name)))


def validate_config(config: CliConfig) -> bool:
    """Return True when the configuration holds no invalid arguments."""
    return not config.invalid_args