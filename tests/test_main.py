import io
import sys

from gomoku.constants import GAME_DESCRIPTION
from gomoku.main import main


def run(monkeypatch, argv, keys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(keys))
    return main(argv)


def test_help_exits_zero(monkeypatch, capsys):
    assert run(monkeypatch, ["--help"], "") == 0
    out = capsys.readouterr().out
    assert "FLAGS:" in out


def test_invalid_board_size_exits_one(monkeypatch, capsys):
    assert run(monkeypatch, ["-b", "17"], "") == 1
    out = capsys.readouterr().out
    assert "Error: Board size must be either 15 or 19" in out
    assert "FLAGS:" in out


def test_escape_quits_without_final_prompt(monkeypatch, capsys):
    assert run(monkeypatch, ["--skip-welcome"], "\033") == 0
    out = capsys.readouterr().out
    assert "Current Player : You (X)" in out
    assert "Press any key to exit..." not in out
    assert GAME_DESCRIPTION not in out


def test_end_of_input_ends_game(monkeypatch, capsys):
    assert run(monkeypatch, ["-s"], "") == 0
    assert "Game History:" in capsys.readouterr().out


def test_welcome_screen_shown_by_default(monkeypatch, capsys):
    assert run(monkeypatch, [], "\nq") == 0
    out = capsys.readouterr().out
    assert GAME_DESCRIPTION in out
    assert "Press ENTER to start the game" in out


def test_human_move_then_ai_reply(monkeypatch, capsys):
    assert run(monkeypatch, ["-s", "-b", "15"], " q") == 0
    out = capsys.readouterr().out
    assert "player x moved to [ 8,  8]" in out
    assert "player o moved to" in out
    assert "Current Player : Computer (O)" in out
    assert "Press any key to exit..." not in out
    assert "1 positions evaluated" not in out
    assert "moves evaluated)" in out