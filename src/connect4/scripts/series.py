from __future__ import annotations

import csv
import logging
import time
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Iterable, List, Optional

from connect4.ai.pick import make_agent, seed_agent
from connect4.config import RESULTS_DIR
from connect4.game.controller import play
from connect4.game.results import outcome, winner
from connect4.game.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    game: int
    player1: str
    player2: str
    strategy1: str
    strategy2: str
    winner: str       # agent name, "" on a draw
    outcome: str      # player1 | player2 | draw
    plies: int
    moves1: str       # space separated packed moves
    moves2: str
    time_ms: int


def play_headless(state: GameState, game: int = 0) -> GameRecord:
    """Play to the end with no rendering and summarise the result."""
    start = time.perf_counter()
    while outcome(state) is None:
        state = play(state)
    elapsed = time.perf_counter() - start

    w = winner(state)
    return GameRecord(
        game=game,
        player1=state.agent1.name,
        player2=state.agent2.name,
        strategy1=state.agent1.strategy.describe(),
        strategy2=state.agent2.strategy.describe(),
        winner=w.name if w is not None else "",
        outcome=str(outcome(state)),
        plies=state.board.ply,
        moves1=" ".join(str(m) for m in state.moves1),
        moves2=" ".join(str(m) for m in state.moves2),
        time_ms=max(1, int(elapsed * 1000)),
    )


def default_names(
    spec1: str, spec2: str, name1: Optional[str] = None, name2: Optional[str] = None
) -> tuple[str, str]:
    """Agents are named after their specs, tagged A and B when the specs match."""
    same = spec1.strip().lower() == spec2.strip().lower()
    if name1 is None:
        name1 = f"{spec1} (A)" if same else spec1
    if name2 is None:
        name2 = f"{spec2} (B)" if same else spec2
    return name1, name2


def run_series(
    spec1: str,
    spec2: str,
    games: int = 10,
    seed: int = 1234,
    swap_sides: bool = True,
    name1: Optional[str] = None,
    name2: Optional[str] = None,
) -> List[GameRecord]:
    """
    Play ``games`` games between two strategy specs.
    With ``swap_sides`` the agents alternate who moves first.
    """
    if "human" in (spec1.strip().lower(), spec2.strip().lower()):
        raise ValueError("A series can only be played between automated strategies.")

    name1, name2 = default_names(spec1, spec2, name1, name2)
    if name1 == name2:
        raise ValueError(f"Both agents are called {name1!r}; give them distinct names.")
    records: List[GameRecord] = []

    for g in range(games):
        a = make_agent(name1, spec1)
        b = make_agent(name2, spec2)
        seed_agent(a, seed + 2 * g)
        seed_agent(b, seed + 2 * g + 1)
        if swap_sides and g % 2 == 1:
            a, b = b, a

        rec = play_headless(GameState(agent1=a, agent2=b), game=g + 1)
        records.append(rec)
        logger.info("Game %d/%d: %s (%d plies)", g + 1, games, rec.winner or "draw", rec.plies)

    return records


def export_csv(records: Iterable[GameRecord], out_dir: str | Path = RESULTS_DIR) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"series_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow([fl.name for fl in fields(GameRecord)])
        for rec in records:
            w.writerow(asdict(rec).values())

    return out_path


def tally(records: Iterable[GameRecord]) -> dict[str, int]:
    wins: dict[str, int] = {"draw": 0}
    for rec in records:
        key = rec.winner or "draw"
        wins[key] = wins.get(key, 0) + 1
    return wins
