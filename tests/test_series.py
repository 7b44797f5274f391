"""Tests for headless series and CSV export."""

import csv

import pytest

from connect4.scripts.series import GameRecord, default_names, export_csv, run_series, tally


def test_series_plays_every_game():
    records = run_series("random", "random", games=4, seed=7, name1="A", name2="B")
    assert len(records) == 4
    for i, rec in enumerate(records, start=1):
        assert rec.game == i
        assert rec.outcome in {"player1", "player2", "draw"}
        assert 7 <= rec.plies <= 42
        assert len(rec.moves1.split()) + len(rec.moves2.split()) == rec.plies


def test_series_swaps_sides():
    records = run_series("random", "minimax:0", games=2, seed=1, name1="A", name2="B")
    assert (records[0].player1, records[0].player2) == ("A", "B")
    assert (records[1].player1, records[1].player2) == ("B", "A")
    assert records[1].strategy1 == "minimax:0"


def test_series_without_swap():
    records = run_series("random", "random", games=2, seed=1, swap_sides=False, name1="A", name2="B")
    assert all(r.player1 == "A" for r in records)


def test_series_is_reproducible():
    a = run_series("random", "random", games=3, seed=99)
    b = run_series("random", "random", games=3, seed=99)
    assert [(r.moves1, r.moves2, r.outcome) for r in a] == [(r.moves1, r.moves2, r.outcome) for r in b]


def test_series_rejects_humans():
    with pytest.raises(ValueError):
        run_series("human", "random", games=1)


def test_export_csv(tmp_path):
    records = run_series("random", "random", games=2, seed=3, name1="A", name2="B")
    path = export_csv(records, tmp_path / "results")

    assert path.parent == tmp_path / "results"
    assert path.name.startswith("series_results_")

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["player1"] == "A"
    assert int(rows[0]["plies"]) == records[0].plies


def test_tally():
    def rec(winner):
        return GameRecord(1, "A", "B", "random", "random", winner, "player1", 7, "", "", 1)

    assert tally([rec("A"), rec("A"), rec(""), rec("B")]) == {"draw": 1, "A": 2, "B": 1}


def test_equal_specs_get_distinct_names():
    """Two copies of one strategy stay apart in the records and the tally."""
    records = run_series("random", "random", games=6, seed=5)
    assert {(r.player1, r.player2) for r in records} == {
        ("random (A)", "random (B)"),
        ("random (B)", "random (A)"),
    }
    counts = tally(records)
    assert set(counts) <= {"draw", "random (A)", "random (B)"}
    assert sum(counts.values()) == 6


def test_default_names():
    assert default_names("random", "minimax:2") == ("random", "minimax:2")
    assert default_names("random", "random") == ("random (A)", "random (B)")
    assert default_names("random", "random", name1="X") == ("X", "random (B)")


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        run_series("random", "minimax:1", games=1, name1="Same", name2="Same")


def test_series_seeds_each_game():
    """Game seeds come from the series seed, not from the agents' own state."""
    first = run_series("random", "random", games=2, seed=10)
    again = run_series("random", "random", games=2, seed=10)
    other = run_series("random", "random", games=2, seed=11)
    assert [r.moves1 for r in first] == [r.moves1 for r in again]
    assert [r.moves1 for r in first] != [r.moves1 for r in other]
