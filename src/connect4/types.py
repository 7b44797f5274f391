# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Phase = Literal["live", "final"]
Cell = Optional[int]          # 1 or 2 (agent index), None for empty
Move = NewType("Move", int)   # column * ROWS + row, 0..41
