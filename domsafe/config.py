from __future__ import annotations

import yaml
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .parser import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class SafetyConfig:
    """Resource limits for untrusted input."""

    max_depth: int = DEFAULT_MAX_DEPTH  # deeper elements are attached empty at the limit


@dataclass(frozen=True)
class Config:
    """Sanitizer behaviour switches.  The allowlist itself is not configurable."""

    strict_css: bool = False  # also reject @import, CSS escapes, vbscript:, -moz-binding
    warn_on_empty: bool = True  # warn when non-blank input sanitizes to nothing
    safety: SafetyConfig = field(default_factory=SafetyConfig)


def load_config(path: Optional[Path]) -> Config:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    return load_config_from_dict(data)


def load_config_from_dict(data: Mapping[str, Any]) -> Config:
    """Build a Config from a mapping with the same schema as the YAML file.

    Unknown keys are ignored.
    """
    if not isinstance(data, Mapping):
        raise TypeError("config data must be a mapping")

    safety = data.get("safety") or {}
    if not isinstance(safety, Mapping):
        raise TypeError("'safety' config section must be a mapping")

    top_fields = {
        k: v
        for k, v in data.items()
        if k in Config.__dataclass_fields__ and k != "safety"
    }
    safety_fields = {
        k: v
        for k, v in safety.items()
        if k in SafetyConfig.__dataclass_fields__
    }

    return Config(safety=SafetyConfig(**safety_fields), **top_fields)
