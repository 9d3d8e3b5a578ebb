from __future__ import annotations

from typing import Optional


class MancalaError(Exception):
    """Base class for errors raised by the game core."""


class InvalidConfiguration(MancalaError, ValueError):
    pass


class IllegalMove(MancalaError, ValueError):
    def __init__(self, bowl: object, reason: str) -> None:
        super().__init__(f"Illegal move {bowl!r}: {reason}")
        self.bowl = bowl
        self.reason = reason


class UndefinedScore(MancalaError, ValueError):
    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "Score is only defined for finished positions.")
