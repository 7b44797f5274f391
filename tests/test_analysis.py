"""Tests for loading and summarising series results."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from connect4.scripts.series import GameRecord, export_csv
from connect4_analysis.__main__ import main as analysis_main
from connect4_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connect4_analysis.metrics.summarize import (
    SummaryConfig,
    first_move_advantage,
    matchup_table,
    per_agent,
    top_table,
)
from connect4_analysis.plots.chart import plot_outcomes, plot_plies_histogram, plot_win_rates


def _rec(game, p1, p2, outcome, plies=10):
    winner = {"player1": p1, "player2": p2, "draw": ""}[outcome]
    return GameRecord(game, p1, p2, "random", "minimax:2", winner, outcome, plies, "0 6", "1", 5)


@pytest.fixture
def results_csv(tmp_path):
    records = [
        _rec(1, "Rand", "Mini", "player2", plies=8),
        _rec(2, "Mini", "Rand", "player1", plies=12),
        _rec(3, "Rand", "Mini", "draw", plies=42),
        _rec(4, "Mini", "Rand", "player2", plies=20),
    ]
    return export_csv(records, tmp_path)


@pytest.fixture
def df(results_csv):
    return load_results(LoadSpec(csv_path=results_csv))


def test_load_results(df):
    assert len(df) == 4
    assert df.loc[df["outcome"] == "draw", "winner"].iloc[0] == ""
    assert pd.api.types.is_numeric_dtype(df["plies"])


def test_load_results_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))


def test_load_results_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("a,b\n1,2\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=path))


def test_load_latest_from_dir(tmp_path):
    (tmp_path / "series_results_20240101_000000.csv").write_text("x\n")
    (tmp_path / "series_results_20250101_000000.csv").write_text("x\n")
    assert load_latest_from_dir(tmp_path).name == "series_results_20250101_000000.csv"
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "missing")


def test_per_agent(df):
    summary = per_agent(df).set_index("name")
    assert summary.loc["Mini", "games"] == 4
    assert summary.loc["Mini", "wins"] == 2
    assert summary.loc["Mini", "draws"] == 1
    assert summary.loc["Mini", "losses"] == 1
    assert summary.loc["Rand", "wins"] == 1
    assert summary.loc["Mini", "win_rate"] == pytest.approx(0.5)
    assert summary.loc["Rand", "avg_plies"] == pytest.approx(20.5)


def test_top_table_orders_by_metric(df):
    table = top_table(df, SummaryConfig(metric="win_rate"))
    assert list(table["name"]) == ["Mini", "Rand"]
    assert list(table["rk"]) == [1, 2]

    assert top_table(df, SummaryConfig(min_games=5)).empty


def test_matchup_table(df):
    table = matchup_table(df)
    assert table.loc["Mini", "Rand"] == pytest.approx(0.5)
    assert table.loc["Rand", "Mini"] == pytest.approx(0.25)


def test_first_move_advantage(df):
    counts = first_move_advantage(df)
    assert counts.to_dict() == {"player1": 1, "player2": 2, "draw": 1}


def test_plots_are_saved(df, tmp_path):
    outdir = tmp_path / "figures"
    paths = [
        plot_win_rates(per_agent(df), outdir, show=False),
        plot_outcomes(df, outdir, show=False),
        plot_plies_histogram(df, outdir, show=False),
    ]
    for p in paths:
        assert p is not None and p.exists()


def test_plots_skip_empty_input(tmp_path):
    assert plot_win_rates(pd.DataFrame(), tmp_path, show=False) is None
    assert plot_outcomes(pd.DataFrame(), tmp_path, show=False) is None


def test_analysis_cli(results_csv, tmp_path, capsys):
    assert analysis_main(["analyze", "--csv", str(results_csv), "--outdir", str(tmp_path / "f")]) == 0
    out = capsys.readouterr().out
    assert "=== Agents ===" in out
    assert (tmp_path / "f" / "win_rate.png").exists()


def test_analysis_cli_unknown_command(capsys):
    assert analysis_main(["bogus"]) == 2
