from __future__ import annotations

from typing import Optional

from mancala.core import Position


class Strategy:
    """Strategy interface choosing a bowl to play for the player to move."""

    name = "strategy"

    def choose(self, position: Position) -> Optional[int]:
        """Return a legal bowl index, or ``None`` when there is nothing to play."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
