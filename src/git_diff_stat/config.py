from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .errors import ConfigError

DEFAULT_COUNT = 10
DEFAULT_CONFIG_PATH = Path(".git-diff-stat.json")


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot read config {config_path}: {e}") from e
    if not isinstance(config, dict):
        raise ConfigError(f"config {config_path} must hold a JSON object, got {type(config).__name__}")
    return config


def parse_count(value: object) -> Optional[int]:
    """Non-negative integer from a CLI string or config value, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not (s.isascii() and s.isdigit()):
        return None
    return int(s)


def resolve_count(cli_value: Optional[str], config: dict) -> int:
    for candidate in (cli_value, config.get("count")):
        n = parse_count(candidate)
        if n is not None:
            return n
    return DEFAULT_COUNT
