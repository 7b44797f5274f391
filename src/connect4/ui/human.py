from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, ClassVar

from connect4.config import COLS, ROWS
from connect4.core.board import encode
from connect4.errors import GameAborted, IllegalMoveError
from connect4.game.state import GameState
from connect4.types import Move
from connect4.ui.prompts import parse_column


@dataclass
class ManualStrategy:
    """Asks a human for a column until a playable one is entered."""

    kind: ClassVar[str] = "human"
    read: Callable[[str], str] = field(default=input, compare=False, repr=False)
    write: Callable[[str], None] = field(default=print, compare=False, repr=False)

    def choose_move(self, state: GameState) -> Move:
        legal = state.actions()
        if not legal:
            raise IllegalMoveError("No valid moves.")

        while True:
            raw = self.read(f"{state.current.name}, enter column number (1-{COLS}) and press Enter: ")
            try:
                col = parse_column(raw)
            except ValueError as e:
                self.write(str(e))
                continue

            if col is None:
                raise GameAborted(f"{state.current.name} quit.")

            if state.heights[col] < ROWS:
                return encode(col, state.heights[col])
            self.write(f"Column {col + 1} is full.")

    def describe(self) -> str:
        return self.kind
