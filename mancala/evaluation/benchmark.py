from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from mancala.core import GameConfig, Position
from mancala.strategy import AlphaBeta, MinMax, Strategy

from .match import play_match

StrategyFactory = Callable[[], Strategy]


@dataclass
class BenchmarkRow:
    stones: int
    red_score: int
    plies: int


def run_benchmark(
    red_factory: StrategyFactory,
    blue_factory: StrategyFactory,
    *,
    bowls_per_side: int,
    stones_range: Iterable[int],
    progress: Optional[Callable[[Iterable[int]], Iterable[int]]] = None,
) -> List[BenchmarkRow]:
    """Play one match per stones-per-bowl value and report Red's score."""
    stones_values = list(stones_range)
    iterator = progress(stones_values) if progress is not None else stones_values
    rows: List[BenchmarkRow] = []
    for stones in iterator:
        position = GameConfig(bowls_per_side=bowls_per_side, stones_per_bowl=stones).initial_position()
        record = play_match(red_factory(), blue_factory(), position)
        rows.append(BenchmarkRow(stones=stones, red_score=record.red_score, plies=record.plies))
    return rows


@dataclass
class NodeCountComparison:
    minmax_move: Optional[int]
    alphabeta_move: Optional[int]
    minmax_value: int
    alphabeta_value: int
    minmax_nodes: int
    alphabeta_nodes: int

    @property
    def ratio(self) -> float:
        return self.minmax_nodes / max(1, self.alphabeta_nodes)

    @property
    def agree(self) -> bool:
        return self.minmax_move == self.alphabeta_move and self.minmax_value == self.alphabeta_value


def compare_node_counts(position: Position, depth_limit: Optional[int]) -> NodeCountComparison:
    minmax = MinMax(depth_limit)
    alphabeta = AlphaBeta(depth_limit)
    minmax_result = minmax.search(position, depth_limit)
    alphabeta_result = alphabeta.search(position, depth_limit)
    return NodeCountComparison(
        minmax_move=minmax_result.move,
        alphabeta_move=alphabeta_result.move,
        minmax_value=minmax_result.value,
        alphabeta_value=alphabeta_result.value,
        minmax_nodes=minmax.stats.nodes,
        alphabeta_nodes=alphabeta.stats.nodes,
    )
