from __future__ import annotations

from connect4.config import CLEAR_SCREEN, COLS, USE_COLOR
from connect4.game.state import GameState
from connect4.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"


def c(s: str, code: str, enabled: bool = USE_COLOR) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return c("·", FG_GRAY, color)
    if cell == 1:
        return c("●", FG_RED, color)
    return c("●", FG_YELLOW, color)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(state: GameState, color: bool = USE_COLOR) -> list[str]:
    """The grid as text, top row first, followed by the column numbers."""
    lines = []
    for cells in state.board.grid():
        lines.append(" | " + " ".join(_piece(p, color) for p in cells) + " |")
    lines.append(c("   " + "—" * (2 * COLS - 1), DIM, color))
    lines.append(c("   " + " ".join(str(i + 1) for i in range(COLS)), DIM, color))
    return lines


def render(state: GameState, status: str = "", color: bool = USE_COLOR) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD, color))
    p1 = c(f"● {state.agent1.name}", FG_RED, color)
    p2 = c(f"● {state.agent2.name}", FG_YELLOW, color)
    print(f"{p1}  vs  {p2}")
    if status:
        print(c(status, FG_CYAN, color))
    else:
        print()

    for line in board_lines(state, color):
        print(line)
