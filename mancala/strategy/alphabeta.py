from __future__ import annotations

import math
from typing import Optional

from mancala.core import Position

from .tree import SearchResult, TreeSearch, next_depth


class AlphaBeta(TreeSearch):
    """Minimax with alpha-beta pruning.

    Moves are tried in bowl order and a move only replaces the best one when
    it is strictly better, so the chosen move and value match ``MinMax``.
    """

    name = "alphabeta"

    def _search(self, position: Position, depth: Optional[int]) -> SearchResult:
        return self._alpha_beta(position, -math.inf, math.inf, depth)

    def _alpha_beta(self, position: Position, alpha: float, beta: float, depth: Optional[int]) -> SearchResult:
        self.stats.nodes += 1
        leaf = self.leaf_value(position, depth)
        if leaf is not None:
            return SearchResult(None, leaf)

        best_move: Optional[int] = None
        best_value = -math.inf
        for bowl in position.legal_moves():
            child = position.play(bowl)
            if child.turn == position.turn:
                value = self._alpha_beta(child, alpha, beta, next_depth(depth)).value
            else:
                value = -self._alpha_beta(child, -beta, -alpha, next_depth(depth)).value
            if value > best_value:
                best_move = bowl
                best_value = value
            alpha = max(alpha, value)
            if alpha >= beta:
                self.stats.cutoffs += 1
                break
        return SearchResult(best_move, best_value)
