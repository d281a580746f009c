"""Tests for the Typer command line interface."""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cli import main as cli_main


@pytest.fixture
def runner(monkeypatch):
    # Fixed size so the table check does not depend on the real terminal
    monkeypatch.setattr(cli_main, "console", Console(width=100, height=40))
    return CliRunner()


class TestDealCommand:
    """Tests for `blackjack deal`."""

    def test_plain(self, runner):
        result = runner.invoke(cli_main.app, ["deal", "--count", "3", "--seed", "1", "--plain"])
        assert result.exit_code == 0
        lines = [l for l in result.output.splitlines() if " of " in l]
        assert len(lines) == 3

    def test_reproducible(self, runner):
        args = ["deal", "-n", "10", "--seed", "7", "--plain"]
        first = runner.invoke(cli_main.app, args).output
        second = runner.invoke(cli_main.app, args).output
        assert first == second

    def test_table_output(self, runner):
        result = runner.invoke(cli_main.app, ["deal", "-n", "2", "--seed", "3"])
        assert result.exit_code == 0
        assert "Dealt Cards (2)" in result.output

    def test_reshuffle_note(self, runner):
        result = runner.invoke(cli_main.app, ["deal", "-n", "53", "--seed", "3", "--plain"])
        assert result.exit_code == 0
        assert "reshuffled 1 time(s)" in result.output

    def test_negative_count_rejected(self, runner):
        result = runner.invoke(cli_main.app, ["deal", "-n", "-1"])
        assert result.exit_code != 0


class TestCheckCommand:
    """Tests for `blackjack check`."""

    def test_passes(self, runner):
        result = runner.invoke(cli_main.app, ["check", "--seed", "5"])
        assert result.exit_code == 0
        assert "-Good:" in result.output
        assert "-Bad:" not in result.output

    def test_plain_lists_first_deck(self, runner):
        result = runner.invoke(cli_main.app, ["check", "--seed", "5", "--plain",
                                              "--extra-draws", "0"])
        assert result.exit_code == 0
        first_deck = result.output.split("-" * 32)[0].strip().splitlines()
        assert len(first_deck) == 52
        assert all(" of " in line for line in first_deck)


class TestPlayCommand:
    """Tests for `blackjack play`."""

    def test_quit_immediately(self, runner):
        result = runner.invoke(cli_main.app, ["play", "--seed", "11"], input="q\n")
        assert result.exit_code == 0
        assert "B L A C K J A C K" in result.output
        assert "Final score" in result.output

    def test_stand_then_quit(self, runner):
        result = runner.invoke(cli_main.app, ["play", "--seed", "12"],
                               input="\ns\nq\n")
        assert result.exit_code == 0
        assert "Final score" in result.output

    def test_several_rounds(self, runner):
        moves = "h\ns\nc\n" * 4 + "q\n"
        result = runner.invoke(cli_main.app, ["play", "--seed", "13"], input=moves)
        assert result.exit_code == 0
        assert "Final score" in result.output

    def test_end_of_input_quits(self, runner):
        result = runner.invoke(cli_main.app, ["play", "--seed", "14"], input="")
        assert result.exit_code == 0
        assert "Final score" in result.output

    def test_terminal_too_small(self, monkeypatch):
        monkeypatch.setattr(cli_main, "console", Console(width=60, height=20))
        result = CliRunner().invoke(cli_main.app, ["play"], input="q\n")
        assert result.exit_code == 1
        assert "minimum size of 80 x 24" in result.output
