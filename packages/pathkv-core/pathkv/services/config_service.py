"""Configuration loading and validated settings for pathkv."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigError
from ..persistence.fs_store import get_pathkv_home

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}


class StoreSettings(BaseModel):
    """Which backend holds the data, and where."""
    model_config = ConfigDict(extra="forbid")

    backend: Literal["memory", "file", "sqlite"] = "file"
    path: Optional[str] = None


class ResolverSettings(BaseModel):
    """Dotted-path lookup options."""
    model_config = ConfigDict(extra="forbid")

    strict_presence: bool = False


class PathKVSettings(BaseModel):
    """Top-level pathkv configuration."""
    model_config = ConfigDict(extra="forbid")

    store: StoreSettings = Field(default_factory=StoreSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)


def _default_config_path() -> Path:
    """Resolve the default config path (supports PATHKV_CONFIG_PATH override)."""
    env_path = os.getenv("PATHKV_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return get_pathkv_home() / "config.yaml"


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML configuration with caching.

    Args:
        path: Optional custom path. Defaults to PATHKV_CONFIG_PATH or
              PATHKV_HOME/config.yaml. Only the implicit PATHKV_HOME file may
              be missing, in which case an empty config is returned.
    """
    if path:
        resolved = Path(path).expanduser()
    else:
        resolved = _default_config_path()
        if not os.getenv("PATHKV_CONFIG_PATH") and not resolved.exists():
            return {}

    key = str(resolved.resolve())
    if key not in _CONFIG_CACHE:
        with open(resolved, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {resolved}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config root in {resolved} must be a mapping")
        _CONFIG_CACHE[key] = data
    return _CONFIG_CACHE[key]


def load_settings(path: str | Path | None = None) -> PathKVSettings:
    """Load and validate configuration into PathKVSettings."""
    try:
        return PathKVSettings.model_validate(load_config(path))
    except ValidationError as e:
        raise ConfigError(f"Invalid pathkv configuration:\n{e}") from e
