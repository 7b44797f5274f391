"""Tests for the command line entry point."""

import csv

import pytest

from connect4.main import main


def test_play_computer_vs_computer(capsys):
    code = main(["play", "--player1", "random", "--player2", "minimax:1", "--seed", "4", "--no-color"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Game level: 1" in out
    assert "Game level: 3" not in out
    assert "GAME OVER!" in out or "Draw game." in out


def test_play_rejects_unknown_strategy():
    with pytest.raises(SystemExit):
        main(["play", "--player1", "alphazero"])


def test_series_writes_csv(tmp_path, capsys):
    code = main([
        "series",
        "--player1", "random",
        "--player2", "random",
        "--games", "2",
        "--results-dir", str(tmp_path),
    ])
    assert code == 0
    assert "Wrote CSV:" in capsys.readouterr().out
    assert len(list(tmp_path.glob("series_results_*.csv"))) == 1


def test_series_names_both_sides(tmp_path, capsys):
    code = main([
        "series",
        "--player1", "random",
        "--player2", "random",
        "--name1", "Lefty",
        "--name2", "Righty",
        "--games", "2",
        "--results-dir", str(tmp_path),
    ])
    assert code == 0
    (path,) = tmp_path.glob("series_results_*.csv")
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert {(r["player1"], r["player2"]) for r in rows} == {("Lefty", "Righty"), ("Righty", "Lefty")}


def test_series_rejects_duplicate_names(tmp_path):
    with pytest.raises(SystemExit):
        main(["series", "--name1", "Same", "--name2", "Same", "--games", "1", "--results-dir", str(tmp_path)])
