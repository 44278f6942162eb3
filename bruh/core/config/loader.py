"""
Configuration loader — reads ``config.yaml`` into a BruhConfig.

Search order (first hit wins):
    1. ``--config PATH`` (must exist)
    2. ``$XDG_CONFIG_HOME/bruh/`` or ``~/.config/bruh/``
    3. the current directory

A missing file is not an error: the defaults apply. ``BRUH_*``
environment variables override whatever the file says.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bruh.core.errors import BruhError
from bruh.core.models.config import BruhConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "bruh"
CONFIG_FILE_NAMES = ("config.yaml", "config.yml")

# env var → path inside the config mapping
_ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "BRUH_BRANCH_USING_TMUX": ("branch", "using_tmux"),
    "BRUH_BRANCH_EDITOR": ("branch", "editor"),
    "BRUH_AI_COMMAND": ("ai", "command"),
    "BRUH_ADDCHEAT_CHEAT_DIRECTORY": ("addcheat", "cheat_directory"),
    "BRUH_ADDCHEAT_HISTORY_FILE": ("addcheat", "history_file"),
}


class ConfigError(BruhError):
    """Raised when the configuration file is unreadable or invalid."""


def config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Per-user config directory (XDG aware)."""
    env = os.environ if env is None else env
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / CONFIG_DIR_NAME
    return Path.home() / ".config" / CONFIG_DIR_NAME


def config_search_path(
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> list[Path]:
    """Directories searched for a config file, in order."""
    return [config_dir(env), (cwd or Path.cwd()).resolve()]


def find_config_file(
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the first config file on the search path, or None."""
    for directory in config_search_path(cwd, env):
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config(
    path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> BruhConfig:
    """Load, override and validate the configuration.

    Args:
        path: Explicit config file. If None, the search path is used.
        env: Environment mapping (default: ``os.environ``).

    Raises:
        ConfigError: explicit path missing, unreadable file, bad YAML,
            or values that fail validation.
    """
    env = os.environ if env is None else env

    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is None:
        path = find_config_file(env=env)

    data: dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(path)
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No config file found, using defaults")

    _apply_env_overrides(data, env)

    try:
        return BruhConfig.model_validate(data)
    except ValidationError as e:
        where = path or "environment"
        raise ConfigError(f"Invalid configuration in {where}: {e}") from e


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return _drop_nulls(data)


def _drop_nulls(data: dict[str, Any]) -> dict[str, Any]:
    """Remove keys left empty in YAML (``branch:``) so their defaults apply."""
    return {
        key: _drop_nulls(value) if isinstance(value, dict) else value
        for key, value in data.items()
        if value is not None
    }


def _apply_env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> None:
    for var, keys in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value is None:
            continue
        section = data
        for key in keys[:-1]:
            nested = section.get(key)
            if not isinstance(nested, dict):
                nested = {}
                section[key] = nested
            section = nested
        section[keys[-1]] = value
        logger.debug("Config override from %s", var)
