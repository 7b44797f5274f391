"""Shared helpers for the test suite."""

import random
from dataclasses import dataclass, field
from typing import ClassVar, List

import pytest

from connect4.core.board import Board, encode
from connect4.game.actions import apply_move
from connect4.game.state import Agent, GameState

# Fills the board with no four in a row: even rows XXOOXXO, odd rows OOXXOOX.
DRAW_COLUMNS = [0, 2, 1, 3, 4, 6, 5] * 6


def board_from_columns(cols) -> Board:
    board = Board()
    for c in cols:
        board = apply_move(board, encode(c, board.heights[c]))
    return board


@dataclass
class ScriptedStrategy:
    """Plays the given zero-based columns in order."""

    kind: ClassVar[str] = "scripted"
    columns: List[int] = field(default_factory=list)

    def choose_move(self, state):
        c = self.columns.pop(0)
        return encode(c, state.heights[c])

    def describe(self):
        return self.kind


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def scripted_state():
    def make(cols1, cols2, board=None):
        return GameState(
            agent1=Agent("Alice", ScriptedStrategy(list(cols1))),
            agent2=Agent("Bob", ScriptedStrategy(list(cols2))),
            board=board or Board(),
        )

    return make
