"""Tests for the terminal interface."""

import pytest

from multiconnect.debug import DebugLevel, debug
from multiconnect.interfaces.cli import SimpleCLI, build_colors
from multiconnect.utils import DEFAULT_COLORS


def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestBuildColors:

    def test_explicit_colors_first(self):
        assert build_colors(3, ["#123456"]) == ["#123456", DEFAULT_COLORS[0], DEFAULT_COLORS[1]]

    def test_more_players_than_defaults(self):
        colors = build_colors(len(DEFAULT_COLORS) + 2)
        assert colors[:len(DEFAULT_COLORS)] == DEFAULT_COLORS
        assert len(colors) == len(DEFAULT_COLORS) + 2


class TestPlay:

    def teardown_method(self):
        debug.configure(level=DebugLevel.INFO)

    def test_game_to_a_win(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "1", "x", "0", "1", "9", "0", "1", "0"])
        SimpleCLI().run(["play"])
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Column must be between 0 and 6." in out
        assert "Player 1 won!" in out

    def test_three_players_small_board(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "0", "1", "1", "1"])
        SimpleCLI().run(["play", "--players", "3", "--height", "2", "--width", "2"])
        out = capsys.readouterr().out
        assert "Column 1 is full." not in out
        assert "Tie!" in out

    def test_full_column_message(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "0", "q"])
        SimpleCLI().run(["play", "--height", "1", "--width", "4"])
        out = capsys.readouterr().out
        assert "Column 0 is full." in out
        assert "Quitting game." in out

    def test_benchmark(self, capsys):
        SimpleCLI().run(["benchmark", "--iterations", "3", "--seed", "1", "--players", "3"])
        out = capsys.readouterr().out
        assert "Played 3 games" in out
        assert "win checks" in out


class TestArgumentChecks:

    def teardown_method(self):
        debug.configure(level=DebugLevel.INFO)

    def test_benchmark_needs_a_player(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            SimpleCLI().run(["benchmark", "--players", "0", "--iterations", "1"])
        assert excinfo.value.code == 1
        assert "--players must be at least 1, got 0." in capsys.readouterr().out

    def test_benchmark_rejects_negative_iterations(self, capsys):
        with pytest.raises(SystemExit):
            SimpleCLI().run(["benchmark", "--iterations", "-1"])
        assert "--iterations must not be negative" in capsys.readouterr().out

    def test_play_needs_positive_board(self, capsys):
        with pytest.raises(SystemExit):
            SimpleCLI().run(["play", "--width", "0"])
        assert "--width must be at least 1, got 0." in capsys.readouterr().out

    def test_play_rejects_undrawable_colors(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            SimpleCLI().run(["play", "--colors", "red", "notacolor"])
        assert excinfo.value.code == 2
        assert "cannot draw color 'notacolor'" in capsys.readouterr().err

    def test_play_accepts_color_names(self, monkeypatch, capsys):
        feed(monkeypatch, ["q"])
        SimpleCLI().run(["play", "--colors", "red", "steelblue"])
        out = capsys.readouterr().out
        assert "Player 2: steelblue" in out
        assert "Quitting game." in out
