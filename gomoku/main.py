"""Entry point: parse options and run the interactive game loop."""

from __future__ import annotations

import re
import sys

from gomoku.ai import find_best_ai_move
from gomoku.cli import parse_arguments, print_help, validate_config
from gomoku.constants import CELL_CROSSES, CELL_NAUGHTS, GAME_NAME
from gomoku.game import GameState, GameStatus
from gomoku.ui import (
    clear_screen,
    draw_game_header,
    get_key,
    handle_input,
    raw_mode,
    refresh_display,
)

_PROGRAM_NAME = GAME_NAME.lower()
_POSITIONS_EVALUATED = re.compile(r"\s*\d+\s*\|\s*(\d+) positions evaluated")


def _positions_evaluated(game: GameState) -> int:
    """Number of positions the AI reported for its latest move."""
    if game.move_history and game.ai_history:
        match = _POSITIONS_EVALUATED.match(game.ai_history[-1])
        if match:
            return int(match.group(1))
    return 1


def _play_ai_turn(game: GameState) -> None:
    game.start_move_timer()
    ai_x, ai_y = find_best_ai_move(game)
    ai_move_time = game.end_move_timer()
    if ai_x >= 0 and ai_y >= 0:
        positions = _positions_evaluated(game)
        game.make_move(ai_x, ai_y, CELL_NAUGHTS, ai_move_time, positions)
        game.last_ai_move_x = ai_x
        game.last_ai_move_y = ai_y


def main(argv: list[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    config = parse_arguments(argv)

    if config.show_help:
        print_help(_PROGRAM_NAME)
        return 0
    if not validate_config(config):
        print_help(_PROGRAM_NAME)
        return 1

    stream = sys.stdin
    clear_screen()
    if not config.skip_welcome:
        draw_game_header(stream)

    game = GameState(config)

    with raw_mode(stream):
        human_timer_started = False
        while game.status == GameStatus.RUNNING:
            refresh_display(game)
            if game.current_player == CELL_CROSSES:
                if not human_timer_started:
                    game.start_move_timer()
                    human_timer_started = True
                key = get_key(stream)
                if key == -1:
                    game.status = GameStatus.QUIT
                    break
                handle_input(game, key, stream)
                if game.current_player != CELL_CROSSES:
                    human_timer_started = False
            else:
                _play_ai_turn(game)

        if game.status != GameStatus.QUIT:
            refresh_display(game)
            get_key(stream)

    return 0


if __name__ == "__main__":
    sys.exit(main())