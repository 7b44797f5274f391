from __future__ import annotations
from typing import Optional

from connect4.config import COLS


def parse_column(raw: str, cols: int = COLS) -> Optional[int]:
    """Zero-based column from a 1-based entry. None means the player quit."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return col
