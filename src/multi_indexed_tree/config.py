"""Configuration management for Multi-Indexed Tree."""

import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from . import ENV_DUPLICATE_KEYS, ENV_MAX_RENDER_DEPTH

DuplicateKeyPolicy = Literal["reject", "replace"]


class TreeConfig(BaseModel):
    """Behaviour switches for a tree and its rendering."""

    version: int = 1
    duplicate_keys: DuplicateKeyPolicy = "reject"
    show_values: bool = True
    max_render_depth: int | None = Field(default=None, ge=0)


def load_config(config_path: Path | None = None) -> TreeConfig:
    """Load configuration from a JSON file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Environment variables can override config values.
    """
    if config_path is not None and config_path.exists():
        with open(config_path) as f:
            data = json.load(f)
        config = TreeConfig.model_validate(data)
    else:
        config = TreeConfig()

    return _apply_env_overrides(config)


def save_config(config: TreeConfig, config_path: Path) -> None:
    """Save configuration to a JSON file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config.model_dump(), f, indent=2)


def _apply_env_overrides(config: TreeConfig) -> TreeConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    # MITREE_DUPLICATE_KEYS
    if policy := os.environ.get(ENV_DUPLICATE_KEYS):
        if policy in ("reject", "replace"):
            data["duplicate_keys"] = policy

    # MITREE_MAX_RENDER_DEPTH
    if depth := os.environ.get(ENV_MAX_RENDER_DEPTH):
        if depth.isdecimal():
            data["max_render_depth"] = int(depth)

    return TreeConfig.model_validate(data)
