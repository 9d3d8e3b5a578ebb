from __future__ import annotations

import math
from typing import Optional

from mancala.core import Position

from .tree import SearchResult, TreeSearch, next_depth, relative_value


class MinMax(TreeSearch):
    """Exhaustive depth-limited minimax, in negamax form."""

    name = "minmax"

    def _search(self, position: Position, depth: Optional[int]) -> SearchResult:
        self.stats.nodes += 1
        leaf = self.leaf_value(position, depth)
        if leaf is not None:
            return SearchResult(None, leaf)

        best_move: Optional[int] = None
        best_value = -math.inf
        for bowl in position.legal_moves():
            child = position.play(bowl)
            value = relative_value(position, child, self._search(child, next_depth(depth)).value)
            if value > best_value:
                best_move = bowl
                best_value = value
        return SearchResult(best_move, best_value)
