"""
Configuration for the command-line scripts: YAML defaults and logging setup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mancala.core import DEFAULT_BOWLS_PER_SIDE, DEFAULT_STONES_PER_BOWL, GameConfig
from mancala.strategy import STRATEGY_NAMES, validate_depth

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_yaml_config(path_str: Optional[str]) -> Dict[str, Any]:
    """Read a YAML mapping; a missing path or file yields an empty dict."""
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")
    return data


def parse_depth(raw: str) -> Optional[int]:
    """argparse type for depth limits; ``none``/``inf`` mean unlimited."""
    if raw.strip().lower() in {"none", "inf", "infinite", "unlimited"}:
        return None
    return validate_depth(int(raw))


@dataclass
class MatchConfig:
    bowls_per_side: int = DEFAULT_BOWLS_PER_SIDE
    stones_per_bowl: int = DEFAULT_STONES_PER_BOWL
    depth_limit: Optional[int] = 5
    red: str = "user"
    blue: str = "alphabeta"
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.game
        validate_depth(self.depth_limit)
        for side in (self.red, self.blue):
            if side not in STRATEGY_NAMES:
                raise ValueError(f"Unknown strategy {side!r}; choose one of {', '.join(STRATEGY_NAMES)}.")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")

    @property
    def game(self) -> GameConfig:
        return GameConfig(bowls_per_side=self.bowls_per_side, stones_per_bowl=self.stones_per_bowl)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_yaml(cls, path_str: Optional[str]) -> "MatchConfig":
        return cls.from_dict(load_yaml_config(path_str))


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging once."""
    if getattr(setup_logging, "_configured", False):
        return
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
    setup_logging._configured = True  # type: ignore[attr-defined]
