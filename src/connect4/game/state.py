from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

from connect4.core.board import Board
from connect4.core.rules import legal_moves
from connect4.types import Move, Phase

if TYPE_CHECKING:
    from connect4.ai.base import Strategy


@dataclass(frozen=True)
class Agent:
    name: str
    strategy: "Strategy"


@dataclass(frozen=True)
class GameState:
    agent1: Agent
    agent2: Agent
    board: Board = field(default_factory=Board)

    @property
    def phase(self) -> Phase:
        return self.board.phase

    @property
    def moves1(self) -> Tuple[Move, ...]:
        return self.board.moves1

    @property
    def moves2(self) -> Tuple[Move, ...]:
        return self.board.moves2

    @property
    def heights(self) -> Tuple[int, ...]:
        return self.board.heights

    @property
    def current(self) -> Agent:
        return self.agent1 if self.board.to_play == 1 else self.agent2

    def actions(self) -> List[Move]:
        return legal_moves(self.board)
