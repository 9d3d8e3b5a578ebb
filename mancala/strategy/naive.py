from __future__ import annotations

from typing import Optional

import numpy as np

from mancala.core import Position

from .base import Strategy


class FirstStrategy(Strategy):
    """Play the lowest-numbered non-empty bowl."""

    name = "first"

    def choose(self, position: Position) -> Optional[int]:
        legal = position.legal_moves()
        return legal[0] if legal else None


class RandomStrategy(Strategy):
    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, position: Position) -> Optional[int]:
        legal = position.legal_moves()
        if not legal:
            return None
        return int(self.rng.choice(legal))

    def spawn(self, seed: Optional[int] = None) -> "RandomStrategy":
        return RandomStrategy(np.random.default_rng(seed))
