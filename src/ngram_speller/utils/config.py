from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml


@dataclass(frozen=True)
class SpellerConfig:
    n: int = 2
    max_edits: int = 2
    num_considered: int = 5
    seed: Optional[int] = None


def load_yaml(path: Path) -> dict[str, Any]:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_speller_config(path: Optional[Path]) -> SpellerConfig:
    """Read a `SpellerConfig` from YAML; missing keys keep their defaults."""
    if path is None:
        return SpellerConfig()
    data = load_yaml(path)
    cfg = SpellerConfig(
        n=int(data.get("n", 2)),
        max_edits=int(data.get("max_edits", 2)),
        num_considered=int(data.get("num_considered", 5)),
        seed=(int(data["seed"]) if data.get("seed") is not None else None),
    )
    if cfg.n < 1:
        raise ValueError(f"n must be >= 1, got {cfg.n}")
    if cfg.max_edits < 0:
        raise ValueError(f"max_edits must be >= 0, got {cfg.max_edits}")
    if cfg.num_considered < 0:
        raise ValueError(f"num_considered must be >= 0, got {cfg.num_considered}")
    return cfg
