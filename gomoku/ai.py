"""Computer opponent: move ordering, alpha-beta search and move selection."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from gomoku.cli import CliConfig
from gomoku.constants import (
    CELL_CROSSES,
    CELL_EMPTY,
    CELL_NAUGHTS,
    COLOR_BLUE,
    COLOR_RESET,
    WIN_SCORE,
)
from gomoku.evaluation import (
    calc_score_at,
    evaluate_position_incremental,
    has_winner,
    other_player,
)
from gomoku.game import GameState, get_current_time

MAX_RADIUS = 2
_WIN_PRIORITY = 100_000
_BLOCK_PRIORITY = 50_000
_GOOD_ENOUGH_SCORE = WIN_SCORE - 1000


@dataclass(frozen=True)
class Move:
    """A candidate move and its ordering priority (higher is tried first)."""

    x: int
    y: int
    priority: int = 0


def is_move_interesting(
    board: Sequence[Sequence[int]], x: int, y: int, stones_on_board: int
) -> bool:
    """True if (x, y) is worth searching: near the centre on an empty board,
    otherwise within two cells of some stone."""
    size = len(board)
    if stones_on_board == 0:
        center = size // 2
        return abs(x - center) <= 2 and abs(y - center) <= 2
    rows = range(max(0, x - MAX_RADIUS), min(size - 1, x + MAX_RADIUS) + 1)
    cols = range(max(0, y - MAX_RADIUS), min(size - 1, y + MAX_RADIUS) + 1)
    return any(board[i][j] != CELL_EMPTY for i in rows for j in cols)


def is_winning_move(board: list[list[int]], x: int, y: int, player: int) -> bool:
    """True if placing ``player`` at (x, y) leaves that player with five in a row."""
    board[x][y] = player
    try:
        return has_winner(board, player)
    finally:
        board[x][y] = CELL_EMPTY


def get_move_priority(board: list[list[int]], x: int, y: int, player: int) -> int:
    """Ordering priority for ``player`` moving at (x, y)."""
    if is_winning_move(board, x, y, player):
        return _WIN_PRIORITY
    opponent = other_player(player)
    if is_winning_move(board, x, y, opponent):
        return _BLOCK_PRIORITY

    size = len(board)
    center = size // 2
    center_dist = abs(x - center) + abs(y - center)
    priority = max(0, size - center_dist)

    board[x][y] = player
    my_score = calc_score_at(board, player, x, y)
    board[x][y] = opponent
    opp_score = calc_score_at(board, opponent, x, y)
    board[x][y] = CELL_EMPTY

    return priority + my_score // 10 + opp_score // 5


def _count_stones(board: Sequence[Sequence[int]]) -> int:
    return sum(cell != CELL_EMPTY for row in board for cell in row)


def _ordered_moves(board: list[list[int]], player: int, stones_on_board: int) -> list[Move]:
    """Interesting empty cells for ``player``, best priority first."""
    moves = [
        Move(i, j, get_move_priority(board, i, j, player))
        for i, row in enumerate(board)
        for j, cell in enumerate(row)
        if cell == CELL_EMPTY and is_move_interesting(board, i, j, stones_on_board)
    ]
    moves.sort(key=lambda move: move.priority, reverse=True)
    return moves


def minimax_with_timeout(
    game: GameState,
    board: list[list[int]],
    depth: int,
    alpha: int,
    beta: int,
    maximizing_player: bool,
    ai_player: int,
    last_x: int,
    last_y: int,
) -> int:
    """Alpha-beta minimax that stops early once ``game``'s search time is used up."""
    if game.is_search_timed_out():
        game.search_timed_out = True
        return evaluate_position_incremental(board, ai_player, last_x, last_y)

    if has_winner(board, ai_player):
        return WIN_SCORE + depth
    if has_winner(board, other_player(ai_player)):
        return -WIN_SCORE - depth

    if depth == 0:
        return evaluate_position_incremental(board, ai_player, last_x, last_y)

    stones_on_board = _count_stones(board)
    if stones_on_board == len(board) ** 2:
        return 0

    current = ai_player if maximizing_player else other_player(ai_player)
    moves = _ordered_moves(board, current, stones_on_board)

    best = -WIN_SCORE - 1 if maximizing_player else WIN_SCORE + 1
    for move in moves:
        if game.is_search_timed_out():
            game.search_timed_out = True
            return best
        board[move.x][move.y] = current
        value = minimax_with_timeout(
            game, board, depth - 1, alpha, beta,
            not maximizing_player, ai_player, move.x, move.y,
        )
        board[move.x][move.y] = CELL_EMPTY

        if maximizing_player:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            return best
    return best


def minimax(
    board: list[list[int]],
    depth: int,
    alpha: int,
    beta: int,
    maximizing_player: bool,
    ai_player: int,
) -> int:
    """Alpha-beta minimax with no time limit."""
    game = GameState(CliConfig(board_size=len(board), move_timeout=0))
    center = len(board) // 2
    return minimax_with_timeout(
        game, board, depth, alpha, beta, maximizing_player, ai_player, center, center
    )


def find_first_ai_move(game: GameState, rng: random.Random | None = None) -> tuple[int, int]:
    """Reply to the human's opening stone with a random nearby cell."""
    chooser = rng if rng is not None else random
    size = game.board_size
    human = next(
        (
            (i, j)
            for i, row in enumerate(game.board)
            for j, cell in enumerate(row)
            if cell == CELL_CROSSES
        ),
        None,
    )
    if human is None:
        return size // 2, size // 2

    hx, hy = human
    candidates = [
        (hx + dx, hy + dy)
        for distance in (1, 2)
        for dx in range(-distance, distance + 1)
        for dy in range(-distance, distance + 1)
        if (dx, dy) != (0, 0)
        and 0 <= hx + dx < size
        and 0 <= hy + dy < size
        and game.board[hx + dx][hy + dy] == CELL_EMPTY
    ]
    if candidates:
        return candidates[chooser.randrange(len(candidates))]

    x = hx + chooser.randrange(3) - 1
    y = hy + chooser.randrange(3) - 1
    return max(0, min(size - 1, x)), max(0, min(size - 1, y))


def find_best_ai_move(game: GameState) -> tuple[int, int]:
    """Choose the computer's move; (-1, -1) if there is nothing to play."""
    game.search_start_time = get_current_time()
    game.search_timed_out = False

    stones_on_board = _count_stones(game.board)
    if stones_on_board == 1:
        move = find_first_ai_move(game)
        game.add_ai_history_entry(1)
        return move

    best_score = -WIN_SCORE - 1
    best = (-1, -1)

    game.ai_status_message = ""
    if game.move_timeout > 0:
        print(
            f"{COLOR_BLUE}O{COLOR_RESET} It's AI's Turn... Please wait... "
            f"(timeout: {game.move_timeout}s)",
            flush=True,
        )
    else:
        print(f"{COLOR_BLUE}O{COLOR_RESET} It's AI's Turn... Please wait...", flush=True)

    board = game.board
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if (
                cell == CELL_EMPTY
                and is_move_interesting(board, i, j, stones_on_board)
                and is_winning_move(board, i, j, CELL_NAUGHTS)
            ):
                game.ai_status_message = (
                    f"{COLOR_BLUE}O{COLOR_RESET} It's a checkmate ;-)"
                )
                game.add_ai_history_entry(1)
                return i, j

    moves = _ordered_moves(board, CELL_NAUGHTS, stones_on_board)
    if moves:
        best = (moves[0].x, moves[0].y)

    moves_considered = 0
    for move in moves:
        if game.is_search_timed_out():
            game.search_timed_out = True
            break

        board[move.x][move.y] = CELL_NAUGHTS
        score = minimax_with_timeout(
            game, board, game.max_depth - 1, -WIN_SCORE - 1, WIN_SCORE + 1,
            False, CELL_NAUGHTS, move.x, move.y,
        )
        board[move.x][move.y] = CELL_EMPTY

        if score > best_score:
            best_score = score
            best = (move.x, move.y)
            if score >= _GOOD_ENOUGH_SCORE:
                game.ai_status_message = (
                    f"{COLOR_BLUE}O{COLOR_RESET} Win "
                    f"({moves_considered + 1} moves evaluated)."
                )
                game.add_ai_history_entry(moves_considered + 1)
                return best

        moves_considered += 1
        print(f"{COLOR_BLUE}•{COLOR_RESET}", end="", flush=True)

        if game.search_timed_out:
            break

    if not game.ai_status_message:
        elapsed = get_current_time() - game.search_start_time
        if game.search_timed_out:
            game.ai_status_message = (
                f"{elapsed:.0f}s timeout, checked {moves_considered} moves"
            )
        else:
            game.ai_status_message = (
                f"Done in {elapsed:.0f}s (checked {moves_considered} moves)"
            )

    game.add_ai_history_entry(moves_considered)
    return best