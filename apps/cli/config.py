from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS = {
    "input": None,
    "json": None,
    "png": None,
    "cell_size": 60,
    "log_level": "WARNING",
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def build_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path:
        cfg.update(load_yaml(path))
    return merge_overrides(cfg, **overrides)
