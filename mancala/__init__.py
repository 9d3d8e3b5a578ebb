"""Kalah (Mancala) rules engine and game-tree search strategies."""

from . import core, strategy, evaluation
from .core import (
    GameConfig,
    IllegalMove,
    InvalidConfiguration,
    MancalaError,
    Player,
    Position,
    UndefinedScore,
    initialize_position,
)
from .strategy import (
    AlphaBeta,
    DelegateStrategy,
    FirstStrategy,
    IterativeDeepening,
    MinMax,
    RandomStrategy,
    Strategy,
    UserStrategy,
    make_strategy,
)
from .evaluation import MatchRecord, compare_node_counts, play_match, run_benchmark

__all__ = [
    "core",
    "strategy",
    "evaluation",
    "GameConfig",
    "Position",
    "Player",
    "MancalaError",
    "IllegalMove",
    "InvalidConfiguration",
    "UndefinedScore",
    "initialize_position",
    "Strategy",
    "MinMax",
    "AlphaBeta",
    "IterativeDeepening",
    "FirstStrategy",
    "RandomStrategy",
    "UserStrategy",
    "DelegateStrategy",
    "make_strategy",
    "MatchRecord",
    "play_match",
    "run_benchmark",
    "compare_node_counts",
]
