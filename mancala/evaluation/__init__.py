"""Match driving and benchmarking helpers."""

from .match import IllegalPlay, MatchError, MatchRecord, NoPlay, play_match
from .benchmark import BenchmarkRow, NodeCountComparison, compare_node_counts, run_benchmark

__all__ = [
    "MatchError",
    "IllegalPlay",
    "NoPlay",
    "MatchRecord",
    "play_match",
    "BenchmarkRow",
    "NodeCountComparison",
    "compare_node_counts",
    "run_benchmark",
]
