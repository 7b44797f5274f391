from __future__ import annotations

import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import repeat
from typing import ClassVar, List, Optional, Sequence

from connect4.config import DEFAULT_LEVEL, HORIZON_MAX, LOSS_SCORE, MAX_WORKERS, WIN_SCORE
from connect4.core.board import Board, column
from connect4.core.rules import is_winning_move, legal_moves
from connect4.errors import IllegalMoveError
from connect4.game.state import GameState
from connect4.types import Move

logger = logging.getLogger(__name__)


def _child(board: Board, move: Move) -> Board:
    # callers only pass moves from legal_moves(board)
    return board.with_move(move, "final" if is_winning_move(board, move) else "live")


def max_value(board: Board, depth: int, max_depth: int) -> int:
    """
    Score for the side to move in ``board`` when it tries to maximise.

    A final board means the opponent just won: the sooner, the worse.
    Past the horizon nothing is evaluated and the pessimistic sentinel is returned.
    """
    depth += 1
    if board.phase == "final":
        return LOSS_SCORE + depth

    value = -HORIZON_MAX
    if depth > max_depth:
        return value

    for m in legal_moves(board):
        value = max(value, min_value(_child(board, m), depth, max_depth))
    return value


def min_value(board: Board, depth: int, max_depth: int) -> int:
    depth += 1
    if board.phase == "final":
        return WIN_SCORE - depth

    value = HORIZON_MAX
    if depth > max_depth:
        return value

    for m in legal_moves(board):
        value = min(value, max_value(_child(board, m), depth, max_depth))
    return value


def _score_child(child: Board, max_depth: int) -> int:
    return min_value(child, 0, max_depth)


def evaluate_actions(board: Board, max_depth: int, max_workers: Optional[int] = MAX_WORKERS) -> List[int]:
    """
    Value of every legal move of ``board``, in ``legal_moves`` order.

    The root side is the maximiser, so each child is scored with ``min_value``.
    With more than one worker the children are spread over a process pool;
    ``Executor.map`` keeps results in submission order.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0.")

    children = [_child(board, m) for m in legal_moves(board)]
    if not children:
        return []

    workers = max_workers or min(len(children), os.cpu_count() or 1)
    if workers <= 1 or len(children) == 1:
        return [_score_child(c, max_depth) for c in children]

    with ProcessPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(_score_child, children, repeat(max_depth)))


def select_move(actions: Sequence[Move], values: Sequence[int], rng: random.Random) -> Move:
    """Uniform random pick among the actions sharing the best value."""
    if not actions or len(actions) != len(values):
        raise ValueError("Need one value per action.")

    best = max(values)
    candidates = [i for i, v in enumerate(values) if v == best]
    i = rng.randrange(len(candidates))

    logger.debug("Actions are %s", list(actions))
    logger.debug("Values are %s", list(values))
    logger.debug("Max value is %d", best)
    logger.debug("Candidates are %s", candidates)
    logger.debug("Selected index i %d", i)
    return actions[candidates[i]]


@dataclass
class MinimaxStrategy:
    kind: ClassVar[str] = "minimax"
    level: int = DEFAULT_LEVEL
    max_workers: Optional[int] = field(default=MAX_WORKERS, compare=False)
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    # Stats
    last_info: dict = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Minimax level must be >= 0.")

    def choose_move(self, state: GameState) -> Move:
        actions = state.actions()
        if not actions:
            raise IllegalMoveError("No valid moves.")

        start = time.perf_counter()
        values = evaluate_actions(state.board, self.level, self.max_workers)
        move = select_move(actions, values, self.rng)
        elapsed = time.perf_counter() - start

        best = max(values)
        self.last_info = {
            "actions": list(actions),
            "values": list(values),
            "max_value": best,
            "candidates": [a for a, v in zip(actions, values) if v == best],
            "move_col": column(move) + 1,
            "depth": self.level,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move

    def describe(self) -> str:
        return f"{self.kind}:{self.level}"
