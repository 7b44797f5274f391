# src/connect4/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Minimax scoring
WIN_SCORE = 1001
LOSS_SCORE = -1001
HORIZON_MAX = 999  # sentinel magnitude at the search horizon

# Human-facing level == max search depth
DEFAULT_LEVEL = 3
MAX_LEVEL = 8

# Root fan-out pool size (None = one per legal action, capped at cpu count; 1 = in-process)
MAX_WORKERS = None

# Default names
PLAYER1_NAME = "Adrian"
PLAYER2_NAME = "Botty"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Series export
RESULTS_DIR = "data/results"
