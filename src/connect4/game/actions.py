from __future__ import annotations
from dataclasses import replace

from connect4.core.board import Board
from connect4.core.rules import is_winning_move, legal_moves
from connect4.errors import IllegalMoveError
from connect4.game.state import GameState
from connect4.types import Move


def apply_move(board: Board, move: Move) -> Board:
    """Successor position after the side to play drops ``move``."""
    if move not in legal_moves(board):
        raise IllegalMoveError(f"Illegal move {move}; legal moves are {legal_moves(board)}.")
    phase = "final" if is_winning_move(board, move) else "live"
    return board.with_move(move, phase)


def result(state: GameState, move: Move) -> GameState:
    return replace(state, board=apply_move(state.board, move))
