#!/usr/bin/env python3
"""Play a strategy pair over a range of stones-per-bowl values.

Example:
  python scripts/benchmark.py --bowls 2 --stones-min 1 --stones-max 14 --red alphabeta --blue minmax
"""

import argparse
import json
import time
from typing import Dict, List, Optional

from tqdm.auto import tqdm

from mancala.config import parse_depth, setup_logging
from mancala.evaluation import run_benchmark
from mancala.strategy import make_strategy

SEARCH_NAMES = ("first", "random", "minmax", "alphabeta", "deepening")


def benchmark(
    red: str,
    blue: str,
    *,
    bowls: int,
    stones_min: int,
    stones_max: int,
    depth: Optional[int],
    show_progress: bool = False,
) -> List[Dict[str, object]]:
    progress = (lambda values: tqdm(values, desc="Stones")) if show_progress else None
    rows = run_benchmark(
        lambda: make_strategy(red, depth),
        lambda: make_strategy(blue, depth),
        bowls_per_side=bowls,
        stones_range=range(stones_min, stones_max + 1),
        progress=progress,
    )
    return [{"stones": row.stones, "red_score": row.red_score, "plies": row.plies} for row in rows]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--bowls", type=int, default=2)
    parser.add_argument("--stones-min", type=int, default=1)
    parser.add_argument("--stones-max", type=int, default=14)
    parser.add_argument("--depth", type=parse_depth, default=None, help="plies, or 'none' for full depth")
    parser.add_argument("--red", choices=SEARCH_NAMES, default="alphabeta")
    parser.add_argument("--blue", choices=SEARCH_NAMES, default="alphabeta")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    setup_logging(args.log_level)
    start = time.perf_counter()
    rows = benchmark(
        args.red,
        args.blue,
        bowls=args.bowls,
        stones_min=args.stones_min,
        stones_max=args.stones_max,
        depth=args.depth,
        show_progress=True,
    )
    elapsed = time.perf_counter() - start
    print(json.dumps({"red": args.red, "blue": args.blue, "seconds": round(elapsed, 3), "rows": rows}, indent=2))


if __name__ == "__main__":
    main()
