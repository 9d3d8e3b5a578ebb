from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidConfiguration
from .state import Player, Position

DEFAULT_BOWLS_PER_SIDE = 6
DEFAULT_STONES_PER_BOWL = 4


def _require_int(name: str, value: object, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidConfiguration(f"{name} must be at least {minimum}, got {value}.")


@dataclass(frozen=True)
class GameConfig:
    bowls_per_side: int = DEFAULT_BOWLS_PER_SIDE
    stones_per_bowl: int = DEFAULT_STONES_PER_BOWL

    def __post_init__(self) -> None:
        _require_int("bowls_per_side", self.bowls_per_side, 1)
        _require_int("stones_per_bowl", self.stones_per_bowl, 0)

    @property
    def total_stones(self) -> int:
        return 2 * self.bowls_per_side * self.stones_per_bowl

    def initial_position(self) -> Position:
        return Position.initial(self.bowls_per_side, self.stones_per_bowl)


def initialize_position(config: Optional[GameConfig] = None) -> Position:
    return (config or GameConfig()).initial_position()


def enumerate_legal_moves(position: Position, player: Optional[Player] = None) -> List[int]:
    if player is None or player == position.turn:
        return position.legal_moves()
    return [bowl for bowl in position.side(player) if position.bowls[bowl] > 0]


def apply_move(position: Position, bowl: int) -> Position:
    return position.play(bowl)
