from __future__ import annotations
from typing import Protocol

from connect4.game.state import GameState
from connect4.types import Move


class Strategy(Protocol):
    """
    Picks a legal move for the agent to play in ``state``.

    ``kind`` names the variant; ``describe()`` returns a spec string that
    ``connect4.ai.pick.parse_strategy`` turns back into an equal strategy.
    """

    kind: str

    def choose_move(self, state: GameState) -> Move:
        ...

    def describe(self) -> str:
        ...
