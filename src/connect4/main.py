from __future__ import annotations

import argparse
import logging
import random
import sys

from connect4.ai.minimax import MinimaxStrategy
from connect4.ai.pick import parse_strategy
from connect4.config import DEFAULT_LEVEL, MAX_LEVEL, PLAYER1_NAME, PLAYER2_NAME, RESULTS_DIR, USE_COLOR
from connect4.game.controller import run_game
from connect4.game.state import Agent, GameState


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4", description="Play Connect 4 in the terminal.")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG shows the minimax values)")
    sub = ap.add_subparsers(dest="cmd")

    p = sub.add_parser("play", help="Play one game (default)")
    p.add_argument("-l", "--level", type=int, default=DEFAULT_LEVEL, help=f"Computer strength (0-{MAX_LEVEL})")
    p.add_argument("-n", "--name", type=str, default=PLAYER1_NAME, help="Name of the human player")
    p.add_argument("--player1", type=str, default="human", help="human | random | minimax:<level>")
    p.add_argument("--player2", type=str, default=None, help="Defaults to minimax:<level>")
    p.add_argument("--name2", type=str, default=PLAYER2_NAME, help="Name of the second player")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer players")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")

    s = sub.add_parser("series", help="Play automated games and export a CSV")
    s.add_argument("--player1", type=str, default="random")
    s.add_argument("--player2", type=str, default=f"minimax:{DEFAULT_LEVEL}")
    s.add_argument("--games", type=int, default=10)
    s.add_argument("--seed", type=int, default=1234)
    s.add_argument("--name1", type=str, default=None, help="Defaults to the player1 spec")
    s.add_argument("--name2", type=str, default=None, help="Defaults to the player2 spec")
    s.add_argument("--no-swap", action="store_true", help="Player 1 always moves first")
    s.add_argument("--results-dir", type=str, default=RESULTS_DIR)

    return ap


def _play(ap: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    spec2 = args.player2 or f"minimax:{args.level}"
    try:
        s1 = parse_strategy(args.player1, rng=random.Random(rng.random()))
        s2 = parse_strategy(spec2, rng=random.Random(rng.random()))
    except ValueError as e:
        ap.error(str(e))

    for s in (s1, s2):
        if isinstance(s, MinimaxStrategy):
            print(f"Game level: {s.level}")
    state = GameState(agent1=Agent(args.name, s1), agent2=Agent(args.name2, s2))
    run_game(state, color=USE_COLOR and not args.no_color)
    return 0


def _series(ap: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from connect4.scripts.series import export_csv, run_series, tally

    try:
        records = run_series(
            args.player1,
            args.player2,
            games=args.games,
            seed=args.seed,
            swap_sides=not args.no_swap,
            name1=args.name1,
            name2=args.name2,
        )
    except ValueError as e:
        ap.error(str(e))

    for name, n in tally(records).items():
        print(f"{name:<20} {n}")
    print(f"Wrote CSV: {export_csv(records, args.results_dir)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "series":
        return _series(ap, args)
    if args.cmd is None:
        args = ap.parse_args([*(sys.argv[1:] if argv is None else argv), "play"])
    return _play(ap, args)


if __name__ == "__main__":
    raise SystemExit(main())
