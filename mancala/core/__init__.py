"""Core game logic for Kalah."""

from .errors import IllegalMove, InvalidConfiguration, MancalaError, UndefinedScore
from .state import Player, Position
from .rules import (
    DEFAULT_BOWLS_PER_SIDE,
    DEFAULT_STONES_PER_BOWL,
    GameConfig,
    apply_move,
    enumerate_legal_moves,
    initialize_position,
)

__all__ = [
    "Player",
    "Position",
    "GameConfig",
    "DEFAULT_BOWLS_PER_SIDE",
    "DEFAULT_STONES_PER_BOWL",
    "MancalaError",
    "IllegalMove",
    "InvalidConfiguration",
    "UndefinedScore",
    "apply_move",
    "enumerate_legal_moves",
    "initialize_position",
]
