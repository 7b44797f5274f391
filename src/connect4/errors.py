# src/connect4/errors.py

from __future__ import annotations


class Connect4Error(Exception):
    """Base class for game errors."""


class IllegalMoveError(Connect4Error, ValueError):
    """A move outside the legal moves of the position was requested."""


class GameAborted(Connect4Error):
    """A human player asked to quit."""
