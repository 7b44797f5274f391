from __future__ import annotations
from typing import Literal, Optional

from connect4.core.rules import is_draw, winner_index
from connect4.game.state import Agent, GameState

Outcome = Literal["player1", "player2", "draw"]


def winner(state: GameState) -> Optional[Agent]:
    idx = winner_index(state.board)
    if idx is None:
        return None
    return state.agent1 if idx == 1 else state.agent2


def draw(state: GameState) -> bool:
    return is_draw(state.board)


def outcome(state: GameState) -> Optional[Outcome]:
    """None while the game is still in progress."""
    idx = winner_index(state.board)
    if idx is not None:
        return "player1" if idx == 1 else "player2"
    if draw(state):
        return "draw"
    return None
