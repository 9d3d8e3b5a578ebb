#!/usr/bin/env python3
"""Play Kalah against the computer in the console."""

import argparse
import sys
from typing import Callable

from mancala.config import parse_depth, setup_logging
from mancala.core import GameConfig, Player
from mancala.evaluation import MatchRecord, NoPlay, play_match
from mancala.strategy import AlphaBeta, UserStrategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Challenge the computer to a game of Kalah.")
    parser.add_argument("-b", "--bowls", type=int, default=6, help="the number of bowls per side")
    parser.add_argument("-s", "--stones", type=int, default=4, help="the number of stones per bowl")
    parser.add_argument(
        "-d", "--depth", type=parse_depth, default=5, help="the strength of the computer, higher is stronger"
    )
    parser.add_argument("--human", choices=["red", "blue"], default="red", help="the side you play")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def play_interactive(
    args: argparse.Namespace,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> MatchRecord:
    human_side = Player.RED if args.human == "red" else Player.BLUE
    human = UserStrategy(input_fn=input_fn, output_fn=output_fn)
    computer = AlphaBeta(args.depth)
    red, blue = (human, computer) if human_side == Player.RED else (computer, human)

    def announce(player: Player, bowl: int, position) -> None:
        if player != human_side:
            output_fn(f"computer ({player.name}) played {bowl}")

    position = GameConfig(bowls_per_side=args.bowls, stones_per_bowl=args.stones).initial_position()
    record = play_match(red, blue, position, on_move=announce)

    output_fn("\nfinal board:")
    output_fn(record.final_position.render())
    score = record.red_score if human_side == Player.RED else -record.red_score
    if score > 0:
        output_fn(f"you win by {score}!")
    elif score < 0:
        output_fn(f"the computer wins by {-score}.")
    else:
        output_fn("it is a draw.")
    return record


def main() -> None:
    args = build_parser().parse_args()
    setup_logging(args.log_level)
    try:
        play_interactive(args)
    except NoPlay:
        print("game abandoned.")
        sys.exit(0)


if __name__ == "__main__":
    main()
