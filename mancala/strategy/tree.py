"""
Shared machinery for depth-limited game-tree search.

Both tree strategies search in negamax form: a value is always expressed from
the perspective of the player to move at that node. A child keeps its sign
when the same player moves again (extra turn) and is negated otherwise.

Leaves are either finished positions, scored exactly with ``Position.score``,
or positions at the depth limit, estimated with a heuristic. The default
heuristic is the store difference of the player to move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from mancala.core import InvalidConfiguration, Position

from .base import Strategy

logger = logging.getLogger(__name__)

Heuristic = Callable[[Position], int]


def delta(position: Position) -> int:
    """Captured stones of the player to move minus those of the opponent."""
    return position.delta()


def validate_depth(depth_limit: Optional[int]) -> Optional[int]:
    """Accept ``None`` (unlimited) or a non-negative number of plies."""
    if depth_limit is None:
        return None
    if isinstance(depth_limit, bool) or not isinstance(depth_limit, int):
        raise InvalidConfiguration(f"depth_limit must be an integer or None, got {depth_limit!r}.")
    if depth_limit < 0:
        raise InvalidConfiguration(f"depth_limit must be non-negative, got {depth_limit}.")
    return depth_limit


def next_depth(depth: Optional[int]) -> Optional[int]:
    return None if depth is None else depth - 1


def relative_value(parent: Position, child: Position, value: int) -> int:
    """Express a child's value from the perspective of the parent's mover."""
    return value if child.turn == parent.turn else -value


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0

    def reset(self) -> None:
        self.nodes = 0
        self.cutoffs = 0


@dataclass(frozen=True)
class SearchResult:
    move: Optional[int]
    value: int


class TreeSearch(Strategy):
    def __init__(self, depth_limit: Optional[int] = None, heuristic: Heuristic = delta) -> None:
        self.depth_limit = validate_depth(depth_limit)
        self.heuristic = heuristic
        self.stats = SearchStats()

    def choose(self, position: Position) -> Optional[int]:
        legal = position.legal_moves()
        if not legal:
            return None
        result = self.search(position, self.depth_limit)
        # Depth 0 examines no successor, so every move is equally unexplored.
        move = result.move if result.move is not None else legal[0]
        logger.debug(
            "%s chose bowl %d for %s (value %d, %d nodes, %d cutoffs)",
            self.name,
            move,
            position.turn.name,
            result.value,
            self.stats.nodes,
            self.stats.cutoffs,
        )
        return move

    def search(self, position: Position, depth_limit: Optional[int]) -> SearchResult:
        """Search ``position`` to ``depth_limit`` plies and return the best move and its value."""
        depth_limit = validate_depth(depth_limit)
        self.stats.reset()
        return self._search(position, depth_limit)

    def leaf_value(self, position: Position, depth: Optional[int]) -> Optional[int]:
        if position.finished():
            return position.score()
        if depth == 0:
            return self.heuristic(position)
        return None

    def _search(self, position: Position, depth: Optional[int]) -> SearchResult:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(depth_limit={self.depth_limit})"
