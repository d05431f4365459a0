"""Command-line front end tests."""

from __future__ import annotations

from typer.testing import CliRunner

from conundrum_cli.app import app

runner = CliRunner()


def test_prints_moves() -> None:
    result = runner.invoke(app, ["1", "2", "3", "4", "5", "0", "6", "7"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "5"


def test_goal_already_solved() -> None:
    result = runner.invoke(app, ["1", "2", "3", "4", "0", "5", "6", "7"])
    assert result.exit_code == 0, result.output
    # empty move sequence is an empty line on stdout
    assert result.output.splitlines()[0] == ""
    assert "Already solved" in result.output


def test_check_and_stats() -> None:
    result = runner.invoke(
        app, ["1", "0", "3", "2", "4", "5", "6", "7", "--check", "--stats"]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "2 4"
    assert "Expanded" in result.output
    assert "Verified: goal reached in 2 moves." in result.output


def test_invalid_input_exits_with_usage_error() -> None:
    result = runner.invoke(app, ["1", "1", "3", "4", "0", "5", "6", "7"])
    assert result.exit_code == 2


def test_wrong_length() -> None:
    result = runner.invoke(app, ["1", "2", "0"])
    assert result.exit_code == 2
