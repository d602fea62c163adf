"""YAML config loader with environment override and runtime get/set/save."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from mransnap.config.defaults import DEFAULT_MRAN_URL, MRAN_URL_ENV_VAR
from mransnap.config.schema import MransnapConfig


def load_config(path: str | Path | None = None) -> MransnapConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return MransnapConfig()
    path = Path(path)
    if not path.exists():
        return MransnapConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return MransnapConfig(**raw)


def save_config(config: MransnapConfig, path: str | Path) -> None:
    """Write config back to a YAML file, keeping field and repo order."""
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, sort_keys=False)


def resolve_mran_url(config: MransnapConfig | None = None) -> str:
    """Return the MRAN base URL in effect right now.

    CHECKPOINT_MRAN_URL wins over the config file, which wins over the
    hardcoded public host.
    """
    env_url = os.environ.get(MRAN_URL_ENV_VAR, "")
    if env_url:
        return env_url
    if config is not None:
        return config.mran_url
    return DEFAULT_MRAN_URL


def get_config_value(config: MransnapConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'repos.CRAN'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: MransnapConfig, dotted_key: str, value: Any) -> MransnapConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new MransnapConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    old_value = target.get(parts[-1])
    if isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return MransnapConfig(**data)
