from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from mancala.core import IllegalMove, Player, Position
from mancala.strategy import Strategy

logger = logging.getLogger(__name__)

MoveCallback = Callable[[Player, int, Position], None]


class MatchError(RuntimeError):
    pass


class IllegalPlay(MatchError):
    def __init__(self, player: Player, bowl: object, reason: str) -> None:
        super().__init__(f"{player.name} played illegal bowl {bowl!r}: {reason}")
        self.player = player
        self.bowl = bowl


class NoPlay(MatchError):
    def __init__(self, player: Player) -> None:
        super().__init__(f"{player.name} did not make a play")
        self.player = player


@dataclass
class MatchRecord:
    final_position: Position
    moves: List[Tuple[Player, int]] = field(default_factory=list)

    @property
    def plies(self) -> int:
        return len(self.moves)

    @property
    def red_score(self) -> int:
        return self.final_position.score_for(Player.RED)

    @property
    def winner(self) -> Optional[Player]:
        score = self.red_score
        if score > 0:
            return Player.RED
        if score < 0:
            return Player.BLUE
        return None


def play_match(
    red: Strategy,
    blue: Strategy,
    position: Position,
    *,
    on_move: Optional[MoveCallback] = None,
) -> MatchRecord:
    """Alternate ``red`` and ``blue`` from ``position`` until the game is finished."""
    moves: List[Tuple[Player, int]] = []
    while not position.finished():
        player = position.turn
        strategy = red if player == Player.RED else blue
        bowl = strategy.choose(position)
        if bowl is None:
            raise NoPlay(player)
        try:
            position = position.play(bowl)
        except IllegalMove as exc:
            raise IllegalPlay(player, bowl, exc.reason) from exc
        moves.append((player, bowl))
        logger.debug("ply %d: %s played bowl %d", len(moves), player.name, bowl)
        if on_move is not None:
            on_move(player, bowl, position)

    record = MatchRecord(final_position=position, moves=moves)
    logger.info(
        "match finished after %d plies, red score %d (stores %s)",
        record.plies,
        record.red_score,
        position.stores,
    )
    return record
