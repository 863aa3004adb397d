"""Layered configuration: defaults, config file, environment, overrides."""

from __future__ import annotations

import json
from pathlib import Path

from or_models.config import CONFIG_FILE_ENV, ExplorerConfig, default_cache_dir, load_config
from or_models.config.defaults import CACHE_EXPIRATION_HOURS, OPENROUTER_MODELS_URL


def test_defaults_under_home(tmp_path):
    cfg = load_config(env={"HOME": str(tmp_path)})
    assert cfg.api_url == OPENROUTER_MODELS_URL  # nosec B101
    assert cfg.cache_path == tmp_path / ".cache" / "or-models" / "models.json"  # nosec B101
    assert cfg.cache_ttl_hours == CACHE_EXPIRATION_HOURS == 24.0  # nosec B101
    assert cfg.cache_ttl_seconds == 24 * 3600  # nosec B101
    assert cfg.http_timeout_seconds == 30.0  # nosec B101


def test_xdg_cache_home_wins_over_home(tmp_path):
    env = {"HOME": "/nowhere", "XDG_CACHE_HOME": str(tmp_path / "xdg")}
    assert default_cache_dir(env) == tmp_path / "xdg" / "or-models"  # nosec B101


def test_empty_xdg_cache_home_is_ignored(tmp_path):
    env = {"HOME": str(tmp_path), "XDG_CACHE_HOME": ""}
    assert default_cache_dir(env) == tmp_path / ".cache" / "or-models"  # nosec B101


def test_env_vars_override_defaults(tmp_path):
    env = {
        "HOME": str(tmp_path),
        "OR_MODELS_API_URL": "http://localhost:9999/models",
        "OR_MODELS_CACHE_DIR": str(tmp_path / "custom"),
        "OR_MODELS_CACHE_TTL_HOURS": "0.5",
        "OR_MODELS_HTTP_TIMEOUT_SECONDS": "5",
    }
    cfg = load_config(env=env)
    assert cfg.api_url == "http://localhost:9999/models"  # nosec B101
    assert cfg.cache_dir == tmp_path / "custom"  # nosec B101
    assert cfg.cache_ttl_seconds == 1800  # nosec B101
    assert cfg.http_timeout_seconds == 5.0  # nosec B101


def test_invalid_numbers_fall_back_to_defaults(tmp_path):
    env = {"HOME": str(tmp_path), "OR_MODELS_CACHE_TTL_HOURS": "soon", "OR_MODELS_HTTP_TIMEOUT_SECONDS": "-3"}
    cfg = load_config(env=env)
    assert cfg.cache_ttl_hours == 24.0  # nosec B101
    assert cfg.http_timeout_seconds == 30.0  # nosec B101


def test_yaml_config_file_then_env_then_overrides(tmp_path):
    cfg_file = tmp_path / "or-models.yaml"
    cfg_file.write_text("api_url: http://file/models\ncache_ttl_hours: 12\nhttp_timeout_seconds: 7\n", encoding="utf-8")
    env = {"HOME": str(tmp_path), CONFIG_FILE_ENV: str(cfg_file), "OR_MODELS_CACHE_TTL_HOURS": "6"}

    cfg = load_config(env=env, overrides={"http_timeout_seconds": 2, "api_url": None})

    assert cfg.api_url == "http://file/models"  # nosec B101 - None overrides are ignored
    assert cfg.cache_ttl_hours == 6.0  # nosec B101 - env beats file
    assert cfg.http_timeout_seconds == 2.0  # nosec B101 - overrides beat env


def test_json_config_file(tmp_path):
    cfg_file = tmp_path / "or-models.json"
    cfg_file.write_text(json.dumps({"cache_dir": str(tmp_path / "from-json")}), encoding="utf-8")
    cfg = load_config(env={"HOME": str(tmp_path), CONFIG_FILE_ENV: str(cfg_file)})
    assert cfg.cache_dir == tmp_path / "from-json"  # nosec B101


def test_missing_or_malformed_config_file_is_ignored(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    for path in (bad, tmp_path / "absent.yaml"):
        cfg = load_config(env={"HOME": str(tmp_path), CONFIG_FILE_ENV: str(path)})
        assert cfg.api_url == OPENROUTER_MODELS_URL  # nosec B101


def test_config_is_immutable(tmp_path):
    cfg = load_config(env={"HOME": str(tmp_path)})
    try:
        cfg.api_url = "http://changed"  # type: ignore[misc]
    except AttributeError:
        pass
    else:  # pragma: no cover
        raise AssertionError("ExplorerConfig should be frozen")
    assert isinstance(cfg, ExplorerConfig) and isinstance(cfg.cache_dir, Path)  # nosec B101
