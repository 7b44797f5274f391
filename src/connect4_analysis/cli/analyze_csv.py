from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, first_move_advantage, matchup_table, top_table
from ..plots.chart import plot_outcomes, plot_plies_histogram, plot_win_rates


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect-4 series CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing series_results_*.csv")
    ap.add_argument("--pattern", type=str, default="series_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Only print tables")

    ap.add_argument("--top", type=int, default=20, help="Top N agents in the table")
    ap.add_argument("--metric", type=str, default="win_rate", help="Ranking metric (win_rate, wins, avg_plies, avg_ms_per_game)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
    )

    table = top_table(df, cfg)
    print("\n=== Agents ===")
    print(table.to_string(index=False))

    print("\n=== Head to head (row win rate) ===")
    print(matchup_table(df).round(3).to_string())

    print("\n=== Outcomes by seat ===")
    print(first_move_advantage(df).to_string())

    if not args.no_plots:
        plot_win_rates(table, outdir, show=args.show)
        plot_outcomes(df, outdir, show=args.show)
        plot_plies_histogram(df, outdir, show=args.show)

        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
