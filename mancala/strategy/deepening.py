from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from mancala.core import InvalidConfiguration, Position

from .base import Strategy
from .tree import SearchResult, SearchStats, TreeSearch, validate_depth

logger = logging.getLogger(__name__)


class IterativeDeepening(Strategy):
    """Run a depth-limited search with depth 1, 2, ... up to ``max_depth``.

    With a ``time_budget`` (seconds) no new iteration starts once the budget is
    spent; the move of the deepest completed iteration is played.
    """

    name = "deepening"

    def __init__(
        self,
        searcher: TreeSearch,
        max_depth: int,
        *,
        time_budget: Optional[float] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        max_depth = validate_depth(max_depth)
        if max_depth is None:
            raise InvalidConfiguration("Iterative deepening needs a finite max_depth.")
        if time_budget is not None and time_budget <= 0:
            raise InvalidConfiguration(f"time_budget must be positive, got {time_budget}.")
        self.searcher = searcher
        self.max_depth = max_depth
        self.time_budget = time_budget
        self.clock = clock
        self.stats = SearchStats()
        self.completed_depth = 0
        self.last_result: Optional[SearchResult] = None

    def choose(self, position: Position) -> Optional[int]:
        legal = position.legal_moves()
        if not legal:
            return None

        self.stats.reset()
        self.completed_depth = 0
        self.last_result = None
        start = self.clock()
        for depth in range(1, self.max_depth + 1):
            self.last_result = self.searcher.search(position, depth)
            self.stats.nodes += self.searcher.stats.nodes
            self.stats.cutoffs += self.searcher.stats.cutoffs
            self.completed_depth = depth
            if self.time_budget is not None and self.clock() - start >= self.time_budget:
                logger.debug("time budget spent after depth %d", depth)
                break

        if self.last_result is None or self.last_result.move is None:
            return legal[0]
        return self.last_result.move

    def __repr__(self) -> str:
        return (
            f"IterativeDeepening({self.searcher!r}, max_depth={self.max_depth}, "
            f"time_budget={self.time_budget})"
        )
