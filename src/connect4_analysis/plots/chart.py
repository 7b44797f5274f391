from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_win_rates(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "name" not in summary.columns or "win_rate" not in summary.columns or summary.empty:
        return None

    ranked = summary.sort_values("win_rate", ascending=False)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(ranked["name"].astype(str), ranked["win_rate"].astype(float))
    plt.title("Win rate by agent")
    plt.xlabel("agent")
    plt.ylabel("win rate")
    plt.ylim(0, 1)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, "win_rate.png", show)


def plot_outcomes(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked bar: first mover wins / second mover wins / draws."""
    if "outcome" not in df.columns or df.empty:
        return None

    counts = df["outcome"].value_counts().reindex(["player1", "player2", "draw"], fill_value=0)
    fig = plt.figure()
    plt.bar(["first mover", "second mover", "draw"], counts.to_numpy())
    plt.title("Outcomes by seat")
    plt.ylabel("games")

    return _finish(fig, outdir, "outcomes.png", show)


def plot_plies_histogram(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "plies" not in df.columns or not pd.api.types.is_numeric_dtype(df["plies"]):
        return None

    fig = plt.figure()
    plt.hist(df["plies"].dropna(), bins=range(0, 44, 2))
    plt.title("Game length")
    plt.xlabel("plies")
    plt.ylabel("count")

    return _finish(fig, outdir, "hist_plies.png", show)
