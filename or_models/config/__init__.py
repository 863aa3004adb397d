"""Unified configuration layer for the explorer.

Goals
-----
* Centralize defaults (endpoint, cache location, expiry, timeout).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by OR_MODELS_CONFIG_FILE
    3. Environment variables (OR_MODELS_API_URL, OR_MODELS_CACHE_DIR, ...)
    4. In-code overrides passed to the helper
* Read the environment exactly once, at startup, and hand the resulting
  immutable :class:`ExplorerConfig` to the fetch orchestrator. Tests pass an
  explicit mapping instead of mutating ``os.environ``.

External Config File (Optional)
-------------------------------
Structure example (YAML)::

    api_url: https://openrouter.ai/api/v1/models
    cache_dir: ~/.cache/or-models
    cache_ttl_hours: 12
    http_timeout_seconds: 10

Public API
----------
* load_config(env: Mapping | None = None, overrides: dict | None = None) -> ExplorerConfig
* default_cache_dir(env: Mapping) -> Path
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .defaults import (
    CACHE_DIR_NAME,
    CACHE_EXPIRATION_HOURS,
    CACHE_FILE_NAME,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    OPENROUTER_MODELS_URL,
)

CONFIG_FILE_ENV = "OR_MODELS_CONFIG_FILE"

ENV_FIELD_MAP = {
    "api_url": "OR_MODELS_API_URL",
    "cache_dir": "OR_MODELS_CACHE_DIR",
    "cache_ttl_hours": "OR_MODELS_CACHE_TTL_HOURS",
    "http_timeout_seconds": "OR_MODELS_HTTP_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class ExplorerConfig:
    """Resolved explorer settings.

    Attributes:
        api_url: Model listing endpoint.
        cache_dir: Directory holding the cache file.
        cache_file_name: Name of the cache file inside ``cache_dir``.
        cache_ttl_hours: Age below which the cache is served without a request.
        http_timeout_seconds: Timeout applied to the listing request.
    """

    api_url: str = OPENROUTER_MODELS_URL
    cache_dir: Path = Path.home() / ".cache" / CACHE_DIR_NAME
    cache_file_name: str = CACHE_FILE_NAME
    cache_ttl_hours: float = CACHE_EXPIRATION_HOURS
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / self.cache_file_name

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_hours * 3600.0


def default_cache_dir(env: Mapping[str, str]) -> Path:
    """Return the XDG-compliant cache directory for this app.

    Uses ``XDG_CACHE_HOME`` when set and non-empty, otherwise ``$HOME/.cache``.
    """
    root = env.get("XDG_CACHE_HOME")
    if root:
        return Path(root).expanduser() / CACHE_DIR_NAME
    home = env.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".cache" / CACHE_DIR_NAME


def _parse_positive_float(raw: Any, default: float) -> float:
    """Parse ``raw`` as a positive float, returning ``default`` otherwise."""
    if raw is None or raw == "":
        return default
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return default
    return val if val > 0 else default


def _load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load the optional external config file (JSON first, then YAML).

    Missing files and documents that are not mappings yield an empty dict.
    """
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field_name, var in ENV_FIELD_MAP.items():
        val = env.get(var)
        if val:
            out[field_name] = val
    return out


def load_config(
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ExplorerConfig:
    """Return the merged explorer configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``env`` defaults to ``os.environ``; it is the only environment access.
    """
    env = os.environ if env is None else env
    merged: Dict[str, Any] = {}
    merged |= _load_config_file(env.get(CONFIG_FILE_ENV))
    merged |= _env_overrides(env)
    if overrides:
        merged |= {k: v for k, v in overrides.items() if v is not None}

    cfg = ExplorerConfig(cache_dir=default_cache_dir(env))
    if merged.get("api_url"):
        cfg = replace(cfg, api_url=str(merged["api_url"]))
    if merged.get("cache_dir"):
        cfg = replace(cfg, cache_dir=Path(str(merged["cache_dir"])).expanduser())
    return replace(
        cfg,
        cache_ttl_hours=_parse_positive_float(merged.get("cache_ttl_hours"), cfg.cache_ttl_hours),
        http_timeout_seconds=_parse_positive_float(
            merged.get("http_timeout_seconds"), cfg.http_timeout_seconds
        ),
    )


__all__ = [
    "ExplorerConfig",
    "load_config",
    "default_cache_dir",
    "CONFIG_FILE_ENV",
    "ENV_FIELD_MAP",
]
