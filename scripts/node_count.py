#!/usr/bin/env python3
"""Compare how many nodes MinMax and AlphaBeta visit from the starting position."""

import argparse
import json
from typing import Dict, List, Optional

from mancala.config import parse_depth
from mancala.core import Position
from mancala.evaluation import compare_node_counts


def node_counts(max_bowls: int, max_stones: int, depth: Optional[int]) -> List[Dict[str, object]]:
    rows = []
    for bowls in range(1, max_bowls + 1):
        for stones in range(1, max_stones + 1):
            comparison = compare_node_counts(Position.initial(bowls, stones), depth)
            rows.append(
                {
                    "bowls": bowls,
                    "stones": stones,
                    "move": comparison.alphabeta_move,
                    "value": comparison.alphabeta_value,
                    "minmax_nodes": comparison.minmax_nodes,
                    "alphabeta_nodes": comparison.alphabeta_nodes,
                    "ratio": round(comparison.ratio, 2),
                    "agree": comparison.agree,
                }
            )
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--max-bowls", type=int, default=3)
    parser.add_argument("--max-stones", type=int, default=3)
    parser.add_argument("--depth", type=parse_depth, default=8, help="plies, or 'none' for full depth")
    args = parser.parse_args()
    print(json.dumps(node_counts(args.max_bowls, args.max_stones, args.depth), indent=2))


if __name__ == "__main__":
    main()
