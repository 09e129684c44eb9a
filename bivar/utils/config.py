from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml

CONFIG_PATH = Path(os.environ.get("BIVAR_CONFIG", "config/config.yaml"))
DEFAULT_TOLERANCE = 1e-9


def load_cfg(path: Optional[Path] = None) -> dict:
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def tolerance(cfg: dict) -> float:
    return float(cfg.get("tolerance", DEFAULT_TOLERANCE))


def predict_points(cfg: dict, dataset: str) -> list[float]:
    return [float(v) for v in (cfg.get("predict_at") or {}).get(dataset, [])]
