from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "win_rate",
    "wins",
    "games",
    "avg_plies",
    "avg_ms_per_game",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "win_rate"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def per_side(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (game, seat): who sat there, whether they moved first, and
    how the game ended for them ("win", "loss" or "draw").
    """
    _require_cols(df, ["player1", "player2", "outcome"])

    parts = []
    for seat, other in ((1, 2), (2, 1)):
        part = pd.DataFrame({
            "name": df[f"player{seat}"].astype(str),
            "opponent": df[f"player{other}"].astype(str),
            "first": seat == 1,
        })
        for col in ("plies", "time_ms"):
            if col in df.columns:
                part[col] = df[col]
        part["result"] = "loss"
        part.loc[df["outcome"].eq(f"player{seat}").to_numpy(), "result"] = "win"
        part.loc[df["outcome"].eq("draw").to_numpy(), "result"] = "draw"
        parts.append(part)

    return pd.concat(parts, ignore_index=True)


def per_agent(df: pd.DataFrame) -> pd.DataFrame:
    sides = per_side(df)
    g = sides.groupby("name")

    out = pd.DataFrame({
        "games": g.size(),
        "wins": g["result"].apply(lambda s: int((s == "win").sum())),
        "draws": g["result"].apply(lambda s: int((s == "draw").sum())),
        "losses": g["result"].apply(lambda s: int((s == "loss").sum())),
    })
    if "plies" in sides.columns:
        out["avg_plies"] = g["plies"].mean()
    if "time_ms" in sides.columns:
        out["avg_ms_per_game"] = g["time_ms"].mean()
    out["win_rate"] = out["wins"] / out["games"]
    return out.reset_index()


def matchup_table(df: pd.DataFrame) -> pd.DataFrame:
    """Win rate of the row agent against the column agent."""
    sides = per_side(df)
    sides["won"] = (sides["result"] == "win").astype(float)
    return sides.pivot_table(index="name", columns="opponent", values="won", aggfunc="mean")


def first_move_advantage(df: pd.DataFrame) -> pd.Series:
    _require_cols(df, ["outcome"])
    counts = df["outcome"].value_counts()
    return counts.reindex(["player1", "player2", "draw"], fill_value=0)


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = per_agent(df)
    _require_cols(out, ["name", cfg.metric])

    if cfg.min_games > 0:
        out = out[out["games"] >= cfg.min_games].copy()

    # Lower is better only for speed and game length
    ascending = cfg.metric in {"avg_ms_per_game", "avg_plies"}
    out = out.sort_values(cfg.metric, ascending=ascending)

    out = out.head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out
