"""Five-in-a-row in the terminal against a minimax opponent, with a reusable board, evaluation and search."""

__version__ = "0.1.2"