from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

from .errors import IllegalMove, InvalidConfiguration, UndefinedScore


class Player(IntEnum):
    RED = 0
    BLUE = 1

    @property
    def opponent(self) -> "Player":
        return Player.BLUE if self is Player.RED else Player.RED


@dataclass(frozen=True)
class Position:
    """Immutable Kalah board.

    Attributes:
        bowls: ``2 * n`` stone counts. Red owns ``0..n-1``, Blue owns ``n..2n-1``.
            Stones travel in index order; Red's store sits between bowl ``n-1``
            and bowl ``n``, Blue's store between bowl ``2n-1`` and bowl ``0``.
        stores: ``(red_store, blue_store)``.
        turn: Player to move.
    """

    bowls: Tuple[int, ...]
    stores: Tuple[int, int] = (0, 0)
    turn: Player = Player.RED

    # ------------------------- Construction helpers ------------------------- #
    @classmethod
    def from_bowls(
        cls,
        bowls: Iterable[int],
        stores: Sequence[int] = (0, 0),
        turn: Player = Player.RED,
    ) -> "Position":
        bowls = tuple(bowls)
        stores = tuple(stores)
        if not bowls or len(bowls) % 2 != 0:
            raise InvalidConfiguration("A position needs a non-empty, even number of bowls.")
        if len(stores) != 2:
            raise InvalidConfiguration("A position has exactly two stores.")
        for count in bowls + stores:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidConfiguration(f"Stone counts must be non-negative integers, got {count!r}.")
        return cls(bowls=bowls, stores=stores, turn=Player(turn))

    @classmethod
    def initial(cls, bowls_per_side: int, stones_per_bowl: int) -> "Position":
        return cls.from_bowls([stones_per_bowl] * (2 * bowls_per_side))

    # ----------------------------- Query methods ---------------------------- #
    @property
    def bowls_per_side(self) -> int:
        return len(self.bowls) // 2

    def side(self, player: Player) -> range:
        n = self.bowls_per_side
        return range(0, n) if player == Player.RED else range(n, 2 * n)

    def own_bowls(self, player: Player) -> Tuple[int, ...]:
        side = self.side(player)
        return self.bowls[side.start:side.stop]

    def owner(self, bowl: int) -> Player:
        return Player.RED if bowl < self.bowls_per_side else Player.BLUE

    def opposite(self, bowl: int) -> int:
        return len(self.bowls) - 1 - bowl

    def store(self, player: Player) -> int:
        return self.stores[player]

    def total_stones(self) -> int:
        return sum(self.bowls) + sum(self.stores)

    def legal_moves(self) -> List[int]:
        """Return the non-empty bowls of the player to move, in index order."""
        return [bowl for bowl in self.side(self.turn) if self.bowls[bowl] > 0]

    def finished(self) -> bool:
        return not any(self.own_bowls(self.turn))

    def score(self) -> int:
        """Final result from the perspective of ``turn``.

        Stones still lying in a side count for the owner of that side, which
        only matters for positions built directly with an empty side to move.
        """
        return self.score_for(self.turn)

    def score_for(self, player: Player) -> int:
        if not self.finished():
            raise UndefinedScore()
        mine = self.store(player) + sum(self.own_bowls(player))
        theirs = self.store(player.opponent) + sum(self.own_bowls(player.opponent))
        return mine - theirs

    def delta(self) -> int:
        return self.store(self.turn) - self.store(self.turn.opponent)

    # --------------------------- Move application --------------------------- #
    def play(self, bowl: int) -> "Position":
        """Sow the stones of ``bowl`` and return the resulting position.

        - The opponent's store is skipped; the emptied bowl is sown into on laps.
        - Last stone in the mover's store: the mover plays again.
        - Last stone in an empty bowl of the mover with stones opposite: both the
          stone and the opposite stones go to the mover's store.
        - When a side runs empty every remaining stone goes to its owner's store.
        """
        self._check_move(bowl)
        n = self.bowls_per_side
        mover = self.turn
        red_store_slot, blue_store_slot = n, 2 * n + 1
        ring = 2 * n + 2
        own_store_slot = red_store_slot if mover == Player.RED else blue_store_slot
        skipped_slot = blue_store_slot if mover == Player.RED else red_store_slot

        bowls = list(self.bowls)
        stores = list(self.stores)
        stones = bowls[bowl]
        bowls[bowl] = 0

        slot = _slot_of(bowl, n)
        while stones > 0:
            slot = (slot + 1) % ring
            if slot == skipped_slot:
                continue
            if slot == red_store_slot:
                stores[Player.RED] += 1
            elif slot == blue_store_slot:
                stores[Player.BLUE] += 1
            else:
                bowls[_bowl_of(slot, n)] += 1
            stones -= 1

        if slot == own_store_slot:
            next_turn = mover
        else:
            next_turn = mover.opponent
            last = _bowl_of(slot, n)
            opposite = self.opposite(last)
            if self.owner(last) == mover and bowls[last] == 1 and bowls[opposite] > 0:
                stores[mover] += bowls[last] + bowls[opposite]
                bowls[last] = 0
                bowls[opposite] = 0

        if not any(bowls[:n]) or not any(bowls[n:]):
            stores[Player.RED] += sum(bowls[:n])
            stores[Player.BLUE] += sum(bowls[n:])
            bowls = [0] * (2 * n)

        return Position(bowls=tuple(bowls), stores=(stores[0], stores[1]), turn=next_turn)

    # ------------------------------ Display --------------------------------- #
    def render(self) -> str:
        n = self.bowls_per_side
        blue_row = " ".join(f"{count:2d}" for count in reversed(self.bowls[n:]))
        red_row = " ".join(f"{count:2d}" for count in self.bowls[:n])
        gap = " " * len(red_row)
        return "\n".join(
            [
                f"    {blue_row}",
                f"{self.stores[Player.BLUE]:2d}  {gap}  {self.stores[Player.RED]:2d}",
                f"    {red_row}",
                f"turn: {self.turn.name}",
            ]
        )

    def __str__(self) -> str:
        return self.render()

    # ------------------------------ Internal API ---------------------------- #
    def _check_move(self, bowl: int) -> None:
        if isinstance(bowl, bool) or not isinstance(bowl, int):
            raise IllegalMove(bowl, "bowl index must be an integer")
        if not 0 <= bowl < len(self.bowls):
            raise IllegalMove(bowl, "bowl index out of range")
        if self.owner(bowl) != self.turn:
            raise IllegalMove(bowl, f"bowl belongs to {self.turn.opponent.name}")
        if self.bowls[bowl] == 0:
            raise IllegalMove(bowl, "bowl is empty")


def _slot_of(bowl: int, n: int) -> int:
    return bowl if bowl < n else bowl + 1


def _bowl_of(slot: int, n: int) -> int:
    return slot if slot < n else slot - 1
