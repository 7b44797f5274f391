from __future__ import annotations

import logging

from connect4.config import USE_COLOR
from connect4.core.board import column
from connect4.errors import GameAborted, IllegalMoveError
from connect4.game.actions import result
from connect4.game.results import draw, winner
from connect4.game.state import GameState
from connect4.ui.render import render

logger = logging.getLogger(__name__)


def play(state: GameState) -> GameState:
    """
    One ply: ask the agent whose turn it is for a move and apply it.
    Calling this once the game is over is an error.
    """
    if not state.actions():
        raise IllegalMoveError("No valid moves: the game is over.")

    agent = state.current
    move = agent.strategy.choose_move(state)
    logger.debug("%s plays move %d (column %d)", agent.name, move, column(move) + 1)
    return result(state, move)


def run_game(state: GameState, show: bool = True, color: bool = USE_COLOR) -> GameState:
    """Play ``state`` to the end, rendering every position. Returns the last state."""
    status = f"{state.current.name} starts."

    while True:
        if show:
            render(state, status, color=color)

        w = winner(state)
        if w is not None:
            if show:
                print(f"GAME OVER!  {w.name} won!")
            return state

        if draw(state):
            if show:
                print("Draw game.")
            return state

        mover, side = state.current, state.board.to_play
        try:
            state = play(state)
        except GameAborted:
            if show:
                print("Game quit.")
            return state

        last = state.moves1[-1] if side == 1 else state.moves2[-1]
        status = f"{mover.name} chose {column(last) + 1}"

        # Show search stats if available
        info = getattr(mover.strategy, "last_info", None)
        if info:
            status += (
                f" | d={info.get('depth')} | "
                f"values={info.get('values')} | "
                f"{info.get('time_ms')}ms"
            )
        status += f" | Next: {state.current.name}"
