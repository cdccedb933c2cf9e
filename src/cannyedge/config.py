# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Detector parameter presets and JSON overrides."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .border import BorderType

PRESETS: Dict[str, Dict[str, Any]] = {
    "default": {
        "high_ratio": 0.5,
        "low_ratio": 0.2,
        "border": "reflect",
        "smooth": True,
    },
    "sensitive": {
        "high_ratio": 0.3,
        "low_ratio": 0.05,
        "border": "reflect",
        "smooth": True,
    },
    "strict": {
        "high_ratio": 0.7,
        "low_ratio": 0.4,
        "border": "replicate",
        "smooth": True,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base without mutating inputs."""
    merged = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k] = _deep_merge(merged[k], v)
        else:
            merged[k] = v
    return merged


def load_config(path: Optional[Union[str, Path]] = None,
                preset: str = "default") -> Dict[str, Any]:
    """Start from a preset and merge an optional JSON override file.

    Raises:
        KeyError: Unknown preset name.
        FileNotFoundError: ``path`` given but missing.
    """
    if preset not in PRESETS:
        raise KeyError(f"unknown preset {preset!r}; choose from {sorted(PRESETS)}")
    cfg = dict(PRESETS[preset])
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            cfg = _deep_merge(cfg, json.load(f))
    return cfg


def border_from_name(name: Union[str, BorderType]) -> BorderType:
    """Parse a border policy name such as "reflect"."""
    if isinstance(name, BorderType):
        return name
    try:
        return BorderType(str(name).lower())
    except ValueError:
        choices = ", ".join(b.value for b in BorderType)
        raise ValueError(f"unknown border type {name!r}; choose from {choices}") from None
