from __future__ import annotations

from typing import Callable, Optional

from mancala.core import Position

from .base import Strategy

QUIT_WORDS = {"q", "quit", "exit"}


class UserStrategy(Strategy):
    """Ask a person for a bowl through ``input_fn``, re-prompting until it is legal.

    Entering ``q`` (or reaching end of input) gives up and returns ``None``.
    """

    name = "user"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def choose(self, position: Position) -> Optional[int]:
        legal = position.legal_moves()
        if not legal:
            return None

        self.output_fn(position.render())
        self.output_fn("legal bowls: " + ", ".join(str(bowl) for bowl in legal))
        while True:
            try:
                raw = self.input_fn("enter a bowl (q to quit): ").strip()
            except EOFError:
                return None
            if raw.lower() in QUIT_WORDS:
                return None
            if not raw.isdigit():
                self.output_fn("enter a bowl number.")
                continue
            bowl = int(raw)
            if bowl in legal:
                return bowl
            self.output_fn("not an option, try again.")


class DelegateStrategy(Strategy):
    """Adapter turning any ``Position -> Optional[int]`` callable into a strategy."""

    name = "delegate"

    def __init__(self, choose_fn: Callable[[Position], Optional[int]]) -> None:
        self.choose_fn = choose_fn

    def choose(self, position: Position) -> Optional[int]:
        return self.choose_fn(position)
