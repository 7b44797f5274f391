from .chart import (
    plot_outcomes,
    plot_plies_histogram,
    plot_win_rates,
)

__all__ = [
    "plot_outcomes",
    "plot_plies_histogram",
    "plot_win_rates",
]
