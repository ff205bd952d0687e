"""Configuration loading and resolution."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when configuration is invalid."""


STRATEGIES = ("iterative", "recursive")

DEFAULT_CONFIG: dict[str, Any] = {
    "cache": {
        "thread_safe": False,
    },
    "fibonacci": {
        "strategy": "iterative",
    },
}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries and return a new dictionary."""

    out = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping at root: {p}")
    return data


def resolve_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve configuration from defaults, an optional user file, and overrides."""

    resolved = deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        resolved = deep_merge(resolved, load_yaml(config_path))
    if overrides:
        resolved = deep_merge(resolved, overrides)
    _validate(resolved)
    return resolved


def dump_yaml(data: dict[str, Any], out_path: str | Path) -> None:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def _validate(cfg: dict[str, Any]) -> None:
    thread_safe = cfg.get("cache", {}).get("thread_safe")
    if not isinstance(thread_safe, bool):
        raise ConfigError(f"cache.thread_safe must be true or false, got {thread_safe!r}")

    strategy = cfg.get("fibonacci", {}).get("strategy")
    if strategy not in STRATEGIES:
        raise ConfigError(
            f"Unsupported fibonacci.strategy '{strategy}'. Supported: {'|'.join(STRATEGIES)}"
        )
