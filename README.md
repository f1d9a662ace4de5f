# gomoku

Gomoku, also known as Five in a Row, played in the terminal. You play
crosses (✕) and move first. The computer plays naughts (○) and picks its
reply with minimax search and alpha-beta pruning.

## Installing

    pip install .

The package has no dependencies outside the standard library. The game
needs a terminal that understands ANSI escape codes. On a POSIX terminal,
keys are read one at a time with echo turned off. Elsewhere, input stays
line-buffered.

## Playing

    gomoku

Options:

| Flag | Meaning |
| --- | --- |
| `-d, --depth N` | Search depth of the minimax algorithm, from 1 to 8. A depth of 5 or more prints a warning and pauses for 3 seconds. |
| `-l, --level M` | `easy` (depth 1), `intermediate` (depth 2) or `hard` (depth 4) |
| `-t, --timeout T` | Seconds the computer may think before it plays the best move found so far |
| `-b, --board 15,19` | Board size, 15 or 19 (default 19) |
| `-u, --undo` | Turn on undo of the last move pair |
| `-s, --skip-welcome` | Skip the welcome screen |
| `-h, --help` | Show help |

The default search depth is 4. An invalid option prints an error and the help text, and the command exits with status 1.

Examples:

    gomoku --level easy --board 15
    gomoku -d 4 -t 30 -b 19
    gomoku --level hard --timeout 60

Controls during a game:

- Arrow keys: move the cursor
- Space or Enter: place a stone
- `U`: undo the last move pair, when the game was started with `--undo` and at least two moves have been made
- `?`: show the rules
- `Esc`, `q` or `Q`: quit

A sidebar shows the last 15 moves with the time each one took. For the computer's moves it also shows how many moves were evaluated. At the end of the game, the status panel shows the total thinking time of each side.

## Using the engine from Python

You can use the board and the search without the terminal interface:

```python
from gomoku.board import create_board
from gomoku.evaluation import has_winner, evaluate_position
from gomoku.ai import minimax
from gomoku.constants import CELL_CROSSES, CELL_NAUGHTS

board = create_board(19)
board[7][7] = CELL_CROSSES
board[7][8] = CELL_NAUGHTS
score = minimax(board, 1, -1_000_000, 1_000_000, True, CELL_NAUGHTS)
print(score, has_winner(board, CELL_CROSSES), evaluate_position(board, CELL_NAUGHTS))
```

Main entry points:

- `gomoku.board`: `create_board`, `is_valid_move` and the coordinate helpers.
- `gomoku.evaluation`: `has_winner`, `calc_score_at`, `evaluate_position`, `evaluate_position_incremental` and the `Threat` classification.
- `gomoku.game.GameState`: holds the board, the move history, undo and the timers.
- `gomoku.ai.find_best_ai_move(game)`: returns the computer's `(x, y)` for a game state.
- `gomoku.ai.find_first_ai_move(game, rng)`: takes an optional `random.Random`, so that the opening reply can be reproduced.
- `gomoku.render`: builds each screen as a string, so a screen can be used without printing it.

## What it does not do

- Any line of five or more stones wins. The rules screen mentions an overline rule, but the engine does not enforce it.
- `--timeout` limits only the computer's thinking. Your own time is recorded and shown, but it has no limit.
- There is no saving or loading of games, and no play between two humans.

## Running the tests

    pip install ".[test]"
    pytest