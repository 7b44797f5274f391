from __future__ import annotations

import random
from typing import Optional, Union

from connect4.ai.minimax import MinimaxStrategy
from connect4.ai.random_strategy import RandomStrategy
from connect4.config import MAX_LEVEL
from connect4.game.state import Agent
from connect4.ui.human import ManualStrategy

AnyStrategy = Union[ManualStrategy, RandomStrategy, MinimaxStrategy]


def parse_strategy(text: str, rng: Optional[random.Random] = None) -> AnyStrategy:
    """
    Build a strategy from ``human``, ``random`` or ``minimax:<level>``.
    ``rng`` seeds the random choices of the automated variants.
    """
    s = text.strip().lower()
    kind, _, arg = s.partition(":")
    rng = rng if rng is not None else random.Random()

    if kind in {"human", "manual"} and not arg:
        return ManualStrategy()

    if kind == "random" and not arg:
        return RandomStrategy(rng=rng)

    if kind == "minimax":
        if not arg.isdigit():
            raise ValueError(f"Minimax needs a level, e.g. minimax:3 (got {text!r}).")
        level = int(arg)
        if level > MAX_LEVEL:
            raise ValueError(f"Level must be between 0 and {MAX_LEVEL} (got {level}).")
        return MinimaxStrategy(level=level, rng=rng)

    raise ValueError(f"Unknown strategy {text!r}. Use human, random or minimax:<level>.")


def make_agent(name: str, spec: str, seed: Optional[int] = None) -> Agent:
    rng = random.Random(seed)
    return Agent(name=name, strategy=parse_strategy(spec, rng=rng))


def seed_agent(agent: Agent, seed: int) -> None:
    rng = getattr(agent.strategy, "rng", None)
    if rng is not None:
        rng.seed(seed)
