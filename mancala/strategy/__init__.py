"""Move-choosing strategies: tree search, naive baselines and external input."""

from .base import Strategy
from .tree import SearchResult, SearchStats, TreeSearch, delta, validate_depth
from .minmax import MinMax
from .alphabeta import AlphaBeta
from .deepening import IterativeDeepening
from .naive import FirstStrategy, RandomStrategy
from .user import DelegateStrategy, UserStrategy
from .factory import STRATEGY_NAMES, make_strategy

__all__ = [
    "Strategy",
    "TreeSearch",
    "SearchResult",
    "SearchStats",
    "delta",
    "validate_depth",
    "MinMax",
    "AlphaBeta",
    "IterativeDeepening",
    "FirstStrategy",
    "RandomStrategy",
    "UserStrategy",
    "DelegateStrategy",
    "STRATEGY_NAMES",
    "make_strategy",
]
