# src/connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from connect4.config import ROWS, COLS
from connect4.types import Cell, Move, Phase


def encode(col: int, row: int) -> Move:
    return Move(col * ROWS + row)


def column(move: int) -> int:
    return move // ROWS


def row(move: int) -> int:
    return move % ROWS


@dataclass(frozen=True)
class Board:
    """
    One position: both move histories, column heights and the phase.

    Moves are packed as ``column * ROWS + row`` where ``row`` counts up from
    the bottom. Player 1 is to move whenever both histories have the same
    length. Boards are never mutated; every move yields a new Board.
    """

    moves1: Tuple[Move, ...] = ()
    moves2: Tuple[Move, ...] = ()
    heights: Tuple[int, ...] = field(default_factory=lambda: (0,) * COLS)
    phase: Phase = "live"

    @property
    def to_play(self) -> int:
        return 1 if len(self.moves1) == len(self.moves2) else 2

    @property
    def mover_moves(self) -> Tuple[Move, ...]:
        return self.moves1 if self.to_play == 1 else self.moves2

    @property
    def ply(self) -> int:
        return len(self.moves1) + len(self.moves2)

    def is_full(self) -> bool:
        return all(h >= ROWS for h in self.heights)

    def with_move(self, move: Move, phase: Phase) -> "Board":
        heights = list(self.heights)
        heights[column(move)] += 1
        if self.to_play == 1:
            return replace(self, moves1=self.moves1 + (move,), heights=tuple(heights), phase=phase)
        return replace(self, moves2=self.moves2 + (move,), heights=tuple(heights), phase=phase)

    def grid(self) -> List[List[Cell]]:
        """
        Rows top-down (row ROWS-1 first), each a list of COLS cells holding the
        owning player index or None.
        """
        g: List[List[Cell]] = [[None for _ in range(COLS)] for _ in range(ROWS)]
        for player, moves in ((1, self.moves1), (2, self.moves2)):
            for m in moves:
                g[ROWS - 1 - row(m)][column(m)] = player
        return g
