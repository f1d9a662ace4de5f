"""Pattern-based position evaluation and win detection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

from gomoku.constants import (
    CELL_EMPTY,
    NEED_TO_WIN,
    OUT_OF_BOUNDS,
    SEARCH_RADIUS,
    WIN_SCORE,
)

Board = list[list[int]]

_ROW_SIZE = SEARCH_RADIUS * 2 + 1
_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


class Threat(IntEnum):
    """Kinds of pattern a stone can take part in along one line."""

    NOTHING = 0
    FIVE = 1
    STRAIGHT_FOUR = 2
    FOUR = 3
    THREE = 4
    FOUR_BROKEN = 5
    THREE_BROKEN = 6
    TWO = 7
    NEAR_ENEMY = 8
    THREE_AND_FOUR = 9
    THREE_AND_THREE = 10
    THREE_AND_THREE_BROKEN = 11


THREAT_COST: dict[Threat, int] = {
    Threat.NOTHING: 0,
    Threat.FIVE: 100_000,
    Threat.STRAIGHT_FOUR: 50_000,
    Threat.THREE: 1000,
    Threat.FOUR: 300,
    Threat.FOUR_BROKEN: 150,
    Threat.THREE_BROKEN: 30,
    Threat.TWO: 20,
    Threat.NEAR_ENEMY: 5,
    Threat.THREE_AND_FOUR: 5000,
    Threat.THREE_AND_THREE: 5000,
    Threat.THREE_AND_THREE_BROKEN: 300,
}


def other_player(player: int) -> int:
    """Return the opponent of ``player``."""
    return -player


def has_winner(board: Sequence[Sequence[int]], player: int) -> bool:
    """Return True if ``player`` has five or more stones in a line anywhere."""
    size = len(board)

    def run_length(i: int, j: int, dx: int, dy: int) -> int:
        count = 0
        x, y = i + dx, j + dy
        while 0 <= x < size and 0 <= y < size and board[x][y] == player:
            count += 1
            x += dx
            y += dy
        return count

    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell != player:
                continue
            for dx, dy in _DIRECTIONS:
                count = 1 + run_length(i, j, dx, dy) + run_length(i, j, -dx, -dy)
                if count >= NEED_TO_WIN:
                    return True
    return False


def _line_through(
    board: Sequence[Sequence[int]], player: int, x: int, y: int, dx: int, dy: int
) -> list[int]:
    """Cells within the search radius along one direction, ``player`` at the centre."""
    size = len(board)
    row = [OUT_OF_BOUNDS] * _ROW_SIZE
    row[SEARCH_RADIUS] = player
    for sign in (1, -1):
        for step in range(1, SEARCH_RADIUS + 1):
            nx, ny = x + sign * step * dx, y + sign * step * dy
            if not (0 <= nx < size and 0 <= ny < size):
                break
            row[SEARCH_RADIUS + sign * step] = board[nx][ny]
    return row


def _scan_side(cells: Iterable[int], player: int) -> tuple[int, int, int, int]:
    """Walk outward from the centre; return (squares, contiguous, holes, enemies)."""
    squares = contiguous = holes = enemies = 0
    last = player
    for value in cells:
        if value == OUT_OF_BOUNDS:
            break
        if value == player:
            squares += 1
            if holes == 0:
                contiguous += 1
        elif value == CELL_EMPTY:
            if last == CELL_EMPTY:
                break
            holes += 1
        elif value == -player:
            enemies += 1
            break
        last = value
    return squares, contiguous, holes, enemies


def calc_threat_in_one_dimension(row: Sequence[int], player: int) -> Threat:
    """Classify the pattern along one line; the stone of interest sits at the centre."""
    if len(row) != _ROW_SIZE:
        raise ValueError(f"row must hold {_ROW_SIZE} cells, got {len(row)}")

    r_sq, r_contig, right_holes, r_enemy = _scan_side(row[SEARCH_RADIUS + 1:], player)
    l_sq, l_contig, left_holes, l_enemy = _scan_side(
        reversed(row[:SEARCH_RADIUS]), player
    )

    squares = 1 + r_sq + l_sq
    contiguous = 1 + r_contig + l_contig
    enemies = r_enemy + l_enemy
    total = left_holes + right_holes + squares
    any_hole = right_holes > 0 or left_holes > 0
    both_holes = right_holes > 0 and left_holes > 0

    if contiguous >= NEED_TO_WIN:
        return Threat.FIVE
    if contiguous == 4 and both_holes:
        return Threat.STRAIGHT_FOUR
    if contiguous == 4 and any_hole:
        return Threat.FOUR
    if contiguous == 3 and both_holes:
        return Threat.THREE
    if squares >= 4 and any_hole and total >= 5:
        return Threat.FOUR_BROKEN
    if squares >= 3 and any_hole and total >= 5:
        return Threat.THREE_BROKEN
    if contiguous >= 2 and any_hole and total >= 4:
        return Threat.TWO
    if contiguous >= 1 and (right_holes == 0 or left_holes == 0) and enemies > 0:
        return Threat.NEAR_ENEMY
    return Threat.NOTHING


def calc_combination_threat(one: Threat, two: Threat) -> int:
    """Extra score for two threats that reinforce each other."""
    fours = (Threat.FOUR, Threat.FOUR_BROKEN)
    if (one == Threat.THREE and two in fours) or (two == Threat.THREE and one in fours):
        return THREAT_COST[Threat.THREE_AND_FOUR]
    if one == Threat.THREE and two == Threat.THREE:
        return THREAT_COST[Threat.THREE_AND_THREE]
    return 0


def calc_score_at(board: Sequence[Sequence[int]], player: int, x: int, y: int) -> int:
    """Threat score for a stone of ``player`` at (x, y), over all four directions."""
    threats = [
        calc_threat_in_one_dimension(_line_through(board, player, x, y, dx, dy), player)
        for dx, dy in _DIRECTIONS
    ]
    score = 0
    for index, threat in enumerate(threats):
        score += THREAT_COST[threat]
        score += sum(calc_combination_threat(threat, other) for other in threats[index + 1:])
    return score


def _score_cells(board, player, rows: range, cols: range) -> int:
    opponent = other_player(player)
    total = 0
    for i in rows:
        for j in cols:
            cell = board[i][j]
            if cell == player:
                total += calc_score_at(board, player, i, j)
            elif cell == opponent:
                total -= calc_score_at(board, opponent, i, j)
    return total


def evaluate_position(board: Sequence[Sequence[int]], player: int) -> int:
    """Score the whole board from ``player``'s point of view."""
    if has_winner(board, player):
        return WIN_SCORE
    if has_winner(board, other_player(player)):
        return -WIN_SCORE
    size = len(board)
    return _score_cells(board, player, range(size), range(size))


def evaluate_position_incremental(
    board: Sequence[Sequence[int]], player: int, last_x: int, last_y: int
) -> int:
    """Score only the neighbourhood of the last move, from ``player``'s point of view."""
    if has_winner(board, player):
        return WIN_SCORE
    if has_winner(board, other_player(player)):
        return -WIN_SCORE
    size = len(board)
    radius = 3
    rows = range(max(0, last_x - radius), min(size - 1, last_x + radius) + 1)
    cols = range(max(0, last_y - radius), min(size - 1, last_y + radius) + 1)
    return _score_cells(board, player, rows, cols)


def minimax_example(
    board: Board, depth: int, alpha: int, beta: int, maximizing_player: bool, ai_player: int
) -> int:
    """Plain minimax with alpha-beta over every empty cell, using full evaluation."""
    if (
        depth == 0
        or has_winner(board, ai_player)
        or has_winner(board, other_player(ai_player))
    ):
        return evaluate_position(board, ai_player)

    current = ai_player if maximizing_player else other_player(ai_player)
    best = -WIN_SCORE if maximizing_player else WIN_SCORE

    for row in board:
        for j, cell in enumerate(row):
            if cell != CELL_EMPTY:
                continue
            row[j] = current
            value = minimax_example(
                board, depth - 1, alpha, beta, not maximizing_player, ai_player
            )
            row[j] = CELL_EMPTY
            if maximizing_player:
                best = max(best, value)
                alpha = max(alpha, value)
            else:
                best = min(best, value)
                beta = min(beta, value)
            if beta <= alpha:
                # pruning abandons the rest of this row only
                break
    return best