#!/usr/bin/env python3
"""Pit two strategies against each other and print the result as JSON."""

import argparse
import json
from typing import Callable, Dict, Optional

import numpy as np

from mancala.config import MatchConfig, load_yaml_config, parse_depth, setup_logging
from mancala.evaluation import play_match
from mancala.strategy import STRATEGY_NAMES, make_strategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pit various strategies against each other in a game of Kalah.")
    parser.add_argument("--config", type=str, default="configs/battle.yaml")
    parser.add_argument("--bowls", type=int, help="number of bowls per side")
    parser.add_argument("--stones", type=int, help="number of stones per bowl")
    parser.add_argument(
        "--depth",
        type=parse_depth,
        default=argparse.SUPPRESS,
        help="search depth in plies, or 'none' for unlimited",
    )
    parser.add_argument("--red", choices=STRATEGY_NAMES)
    parser.add_argument("--blue", choices=STRATEGY_NAMES)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--show-moves", action="store_true", help="print every move as it is played")
    return parser


def resolve_config(args: argparse.Namespace) -> MatchConfig:
    """Values from the command line win over values from the YAML file."""
    cfg = load_yaml_config(args.config)
    overrides = {
        "bowls_per_side": args.bowls,
        "stones_per_bowl": args.stones,
        "red": args.red,
        "blue": args.blue,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            cfg[key] = value
    # "--depth none" must still override a finite depth from the file.
    if "depth" in vars(args):
        cfg["depth_limit"] = args.depth
    return MatchConfig.from_dict(cfg)


def run_battle(
    config: MatchConfig,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    show_moves: bool = False,
) -> Dict[str, object]:
    rng = np.random.default_rng(config.seed)
    red = make_strategy(config.red, config.depth_limit, rng=rng, input_fn=input_fn, output_fn=output_fn)
    blue = make_strategy(config.blue, config.depth_limit, rng=rng, input_fn=input_fn, output_fn=output_fn)

    on_move = None
    if show_moves:
        def on_move(player, bowl, position):
            output_fn(f"{player.name} played {bowl}")

    record = play_match(red, blue, config.game.initial_position(), on_move=on_move)
    winner: Optional[str] = record.winner.name if record.winner is not None else None
    return {
        "red": config.red,
        "blue": config.blue,
        "bowls_per_side": config.bowls_per_side,
        "stones_per_bowl": config.stones_per_bowl,
        "depth_limit": config.depth_limit,
        "plies": record.plies,
        "red_score": record.red_score,
        "winner": winner,
        "stores": list(record.final_position.stores),
        "moves": [[player.name, bowl] for player, bowl in record.moves],
    }


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    config = resolve_config(args)
    setup_logging(config.log_level)
    summary = run_battle(config, show_moves=args.show_moves)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
