"""Tests for the console game."""

import builtins

from engine import Outcome, Player
from main import TicTacToeConsole, main


def test_quit_right_away(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "q")

    console = TicTacToeConsole(computer_player=Player.PLAYER_ONE, seed=3)
    console.start()

    assert not console.is_running
    assert "Game quit by user." in capsys.readouterr().out


def test_full_game_against_first_empty_cell(monkeypatch, capsys):
    console = TicTacToeConsole(seed=11)
    answers = iter(["x", "h"])

    def fake_input(prompt=""):
        if prompt.strip().startswith("Play again"):
            return "n"
        # One bad entry and one hint, then the first empty cell every time
        answer = next(answers, None)
        if answer is not None:
            return answer
        return str(console.game.get_empty_cells()[0])

    monkeypatch.setattr(builtins, "input", fake_input)
    console.start()

    out = capsys.readouterr().out
    assert console.game.is_over
    assert console.game.outcome != Outcome.PLAYER_ONE_WINS
    assert "GAME OVER!" in out
    assert "Not a cell number: 'x'" in out


def test_main_parses_arguments(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "q")

    assert main(["--seed", "5", "--cpu-plays", "X", "--debug"]) == 0

    out = capsys.readouterr().out
    assert "Computer plays: X" in out
    assert "Goodbye!" in out
