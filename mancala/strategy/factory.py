from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .alphabeta import AlphaBeta
from .base import Strategy
from .deepening import IterativeDeepening
from .minmax import MinMax
from .naive import FirstStrategy, RandomStrategy
from .user import UserStrategy

STRATEGY_NAMES = ("user", "first", "random", "minmax", "alphabeta", "deepening")


def make_strategy(
    name: str,
    depth_limit: Optional[int] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    time_budget: Optional[float] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Strategy:
    """Build a strategy by name, as used by the command-line scripts."""
    key = name.strip().lower()
    if key == "user":
        return UserStrategy(input_fn=input_fn, output_fn=output_fn)
    if key == "first":
        return FirstStrategy()
    if key == "random":
        return RandomStrategy(rng)
    if key == "minmax":
        return MinMax(depth_limit)
    if key == "alphabeta":
        return AlphaBeta(depth_limit)
    if key == "deepening":
        if depth_limit is None:
            raise ValueError("The deepening strategy needs a depth limit.")
        return IterativeDeepening(AlphaBeta(), depth_limit, time_budget=time_budget)
    raise ValueError(f"Unknown strategy {name!r}; choose one of {', '.join(STRATEGY_NAMES)}.")
