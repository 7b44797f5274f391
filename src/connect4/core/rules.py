from __future__ import annotations
from itertools import combinations
from typing import List, Optional

from connect4.config import CONNECT_N, ROWS, COLS
from connect4.core.board import Board, encode, row
from connect4.types import Move


def legal_moves(board: Board) -> List[Move]:
    """Landing slot of every non-full column, column-ascending. Empty once final."""
    if board.phase == "final":
        return []
    return [encode(c, board.heights[c]) for c in range(COLS) if board.heights[c] < ROWS]


def is_winning_quad(m0: int, m1: int, m2: int, m3: int) -> bool:
    """
    Four sorted packed moves form a line when they are evenly spaced by:
      6 -> horizontal
      1 -> vertical (start row must leave room for 3 more)
      7 -> diagonal up-right (same row bound)
      5 -> diagonal down-right (start row must be >= 3)
    """
    d = m1 - m0
    if not (d == m2 - m1 == m3 - m2):
        return False

    if d == 6:
        return True
    # (21, 22, 23, 24) wraps into the next column
    if d == 1 and row(m0) < 3:
        return True
    # (3, 10, 17, 24) wraps as well
    if d == 7 and row(m0) < 3:
        return True
    # (2, 7, 12, 17) is not a line
    if d == 5 and row(m0) > 2:
        return True
    return False


def is_winning_move(board: Board, move: Move) -> bool:
    prior = board.mover_moves
    if len(prior) < CONNECT_N - 1:
        return False

    for trio in combinations(prior, CONNECT_N - 1):
        quad = sorted((*trio, move))
        if is_winning_quad(*quad):
            return True
    return False


def is_draw(board: Board) -> bool:
    return board.phase == "live" and board.is_full()


def winner_index(board: Board) -> Optional[int]:
    """
    Player index (1 or 2) who played the winning move, or None.
    After the winning move, equal counts mean player 2 moved last.
    """
    if board.phase != "final":
        return None
    return 2 if len(board.moves1) == len(board.moves2) else 1
