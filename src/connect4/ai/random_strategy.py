from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import ClassVar

from connect4.errors import IllegalMoveError
from connect4.game.state import GameState
from connect4.types import Move

logger = logging.getLogger(__name__)


@dataclass
class RandomStrategy:
    kind: ClassVar[str] = "random"
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    def choose_move(self, state: GameState) -> Move:
        moves = state.actions()
        if not moves:
            raise IllegalMoveError("No valid moves.")
        move = self.rng.choice(moves)
        logger.debug("%s picked move %d at random from %s", state.current.name, move, moves)
        return move

    def describe(self) -> str:
        return self.kind
