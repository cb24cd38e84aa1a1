"""
Tests for the command-line interface.
"""
from connectfour.game.outcomes import IgnoreReason, MoveIgnored
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine
from connectfour.interfaces.cli import SimpleCLI, colorize


def make_cli(answers):
    answers = iter(answers)
    output = []
    cli = SimpleCLI(input_fn=lambda prompt: next(answers), output_fn=output.append)
    return cli, output


def test_play_until_win(monkeypatch):
    """Test a scripted game where the first player wins."""
    monkeypatch.delenv("CONNECTFOUR_HEIGHT", raising=False)
    monkeypatch.delenv("CONNECTFOUR_WIDTH", raising=False)
    cli, output = make_cli([
        "Ann", "red", "Bob", "blue",
        "0", "1", "0", "1", "0", "1", "0",
        "n",
    ])

    assert cli.run(["play"]) == 0
    assert "Ann player won!" in output
    assert cli.engine.winner.name == "Ann"


def test_play_defaults_and_bad_input(monkeypatch):
    """Test default players, rejected input, a full column and quitting."""
    monkeypatch.delenv("CONNECTFOUR_HEIGHT", raising=False)
    monkeypatch.delenv("CONNECTFOUR_WIDTH", raising=False)
    cli, output = make_cli([
        "", "", "", "",
        "x", "9",
        "0", "0", "0", "0", "0", "0", "0",
        "q",
    ])

    assert cli.run(["play"]) == 0
    assert cli.engine.players[0].name == "Red"
    assert any("Invalid input" in line for line in output)
    assert "Column must be between 0 and 6." in output
    assert "Column 0 is full, pick another." in output
    assert output[-1] == "Quitting game."
    assert cli.engine.moves_made == 6


def test_play_restart():
    """Test restarting mid-game."""
    cli, output = make_cli(["", "", "", "", "3", "r", "q"])

    assert cli.run(["--width", "7", "play"]) == 0
    assert "Game restarted." in output
    assert cli.engine.moves_made == 0


def test_check_position_with_win():
    """Test position analysis for a bottom-row win."""
    cells = [0] * 42
    for col in range(4):
        cells[35 + col] = 1
    cli, output = make_cli([])

    assert cli.run(["--height", "6", "--width", "7", "check", ",".join(map(str, cells))]) == 0
    assert "Win for Red: [(5, 0), (5, 1), (5, 2), (5, 3)]" in output
    assert "Empty cells: 38" in output


def test_check_position_rejects_bad_input():
    """Test that malformed positions are reported."""
    cli, output = make_cli([])

    assert cli.run(["--height", "2", "--width", "2", "check", "0,1,2"]) == 2
    assert output[0].startswith("Error parsing position")

    cli, output = make_cli([])
    assert cli.run(["--height", "2", "--width", "2", "check", "0,1,2,3"]) == 2


def test_bad_board_size():
    """Test that invalid dimensions are reported, not raised."""
    cli, output = make_cli([])

    assert cli.run(["--height", "0", "play"]) == 2
    assert output[0].startswith("Error:")


def test_benchmark():
    """Test that the benchmark plays the requested number of games."""
    cli, output = make_cli([])

    assert cli.run(["--debug-level", "warning", "benchmark", "--games", "5", "--seed", "1"]) == 0
    assert output[0].startswith("Played 5 games")


def test_no_command():
    """Test that running without a command asks for one."""
    cli, output = make_cli([])

    assert cli.run([]) == 1


def test_colorize():
    """Test that known colors are wrapped in ANSI codes."""
    assert colorize(Player("red", "Ann")) == "\033[31mAnn\033[0m"
    assert colorize(Player("#123456", "Bob")) == "Bob"


def test_show_result_only_reports_full_columns():
    """Test that ignored moves after the game ends print nothing."""
    cli, output = make_cli([])
    cli.engine = GameEngine()

    cli.show_result(MoveIgnored(2, IgnoreReason.GAME_OVER))
    assert output == []

    cli.show_result(MoveIgnored(2, IgnoreReason.COLUMN_FULL))
    assert output == ["Column 2 is full, pick another."]
