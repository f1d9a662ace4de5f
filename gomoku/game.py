"""Game state, move history, undo and timing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum

from gomoku.board import create_board, is_valid_move
from gomoku.cli import CliConfig
from gomoku.constants import CELL_CROSSES, CELL_EMPTY, CELL_NAUGHTS
from gomoku.evaluation import has_winner, other_player

MAX_MOVE_HISTORY = 400
MAX_AI_HISTORY = 20


class GameStatus(IntEnum):
    """Whether the game is still being played and, if not, how it ended."""

    RUNNING = 0
    HUMAN_WIN = 1
    AI_WIN = 2
    DRAW = 3
    QUIT = 4


@dataclass(frozen=True)
class MoveRecord:
    """One move as kept in the game history."""

    x: int
    y: int
    player: int
    time_taken: float
    positions_evaluated: int


def get_current_time() -> float:
    """Monotonic clock reading in seconds."""
    return time.monotonic()


@dataclass
class GameState:
    """Everything that describes a game in progress."""

    config: CliConfig = field(default_factory=CliConfig)
    board: list[list[int]] = field(init=False)
    board_size: int = field(init=False)
    cursor_x: int = field(init=False)
    cursor_y: int = field(init=False)
    current_player: int = field(init=False, default=CELL_CROSSES)
    status: GameStatus = field(init=False, default=GameStatus.RUNNING)
    max_depth: int = field(init=False)
    move_timeout: int = field(init=False)
    move_history: list[MoveRecord] = field(init=False, default_factory=list)
    ai_history: list[str] = field(init=False, default_factory=list)
    ai_status_message: str = field(init=False, default="")
    last_ai_move_x: int = field(init=False, default=-1)
    last_ai_move_y: int = field(init=False, default=-1)
    total_human_time: float = field(init=False, default=0.0)
    total_ai_time: float = field(init=False, default=0.0)
    move_start_time: float = field(init=False, default=0.0)
    search_start_time: float = field(init=False, default=0.0)
    search_timed_out: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.board = create_board(self.config.board_size)
        self.board_size = self.config.board_size
        self.cursor_x = self.board_size // 2
        self.cursor_y = self.board_size // 2
        self.max_depth = self.config.max_depth
        self.move_timeout = self.config.move_timeout

    # -- game logic -------------------------------------------------------

    def check_game_state(self) -> None:
        """Update ``status`` for a win by either side or a full board."""
        if has_winner(self.board, CELL_CROSSES):
            self.status = GameStatus.HUMAN_WIN
        elif has_winner(self.board, CELL_NAUGHTS):
            self.status = GameStatus.AI_WIN
        elif all(cell != CELL_EMPTY for row in self.board for cell in row):
            self.status = GameStatus.DRAW

    def make_move(
        self, x: int, y: int, player: int, time_taken: float, positions_evaluated: int
    ) -> bool:
        """Place a stone, record it and pass the turn; False if the cell is not free."""
        if not is_valid_move(self.board, x, y):
            return False
        self.add_move_to_history(x, y, player, time_taken, positions_evaluated)
        self.board[x][y] = player
        self.check_game_state()
        if self.status == GameStatus.RUNNING:
            self.current_player = other_player(self.current_player)
        return True

    def can_undo(self) -> bool:
        """True when undo is enabled and a human/AI move pair can be taken back."""
        return bool(self.config.enable_undo) and len(self.move_history) >= 2

    def undo_last_moves(self) -> None:
        """Take back the last move pair and hand the turn to the human."""
        if not self.can_undo():
            return
        for _ in range(2):
            if not self.move_history:
                break
            last = self.move_history.pop()
            self.board[last.x][last.y] = CELL_EMPTY
            if last.player == CELL_CROSSES:
                self.total_human_time -= last.time_taken
            else:
                self.total_ai_time -= last.time_taken
        if self.ai_history:
            self.ai_history.pop()
        self.last_ai_move_x = -1
        self.last_ai_move_y = -1
        self.current_player = CELL_CROSSES
        self.ai_status_message = ""
        self.status = GameStatus.RUNNING

    # -- timing -----------------------------------------------------------

    def start_move_timer(self) -> None:
        """Mark the start of a move."""
        self.move_start_time = get_current_time()

    def end_move_timer(self) -> float:
        """Seconds since the move timer was started."""
        return get_current_time() - self.move_start_time

    def is_search_timed_out(self) -> bool:
        """True when a timeout is set and the current search has used it up."""
        if self.move_timeout <= 0:
            return False
        return get_current_time() - self.search_start_time >= self.move_timeout

    # -- history ----------------------------------------------------------

    def add_move_to_history(
        self, x: int, y: int, player: int, time_taken: float, positions_evaluated: int
    ) -> None:
        """Record a move and add its time to the player's total; full history is left as is."""
        if len(self.move_history) >= MAX_MOVE_HISTORY:
            return
        self.move_history.append(MoveRecord(x, y, player, time_taken, positions_evaluated))
        if player == CELL_CROSSES:
            self.total_human_time += time_taken
        else:
            self.total_ai_time += time_taken

    def add_ai_history_entry(self, moves_evaluated: int) -> None:
        """Append an AI thinking line, dropping the oldest once the list is full."""
        if len(self.ai_history) >= MAX_AI_HISTORY:
            del self.ai_history[: len(self.ai_history) - (MAX_AI_HISTORY - 1)]
        number = len(self.ai_history) + 1
        self.ai_history.append(f"{number:2d} | {moves_evaluated:3d} positions evaluated")