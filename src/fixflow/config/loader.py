"""
fixflow.config.loader - Locate, parse and merge configuration.

Configuration lives in ``.fixflow.toml`` (searched for upward from the
working directory), is merged over DEFAULT_CONFIG, and can be overridden
per key with ``FIXFLOW_<SECTION>_<KEY>`` environment variables.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TOMLParseError

from fixflow.config.defaults import DEFAULT_CONFIG

CONFIG_FILENAME = ".fixflow.toml"
ENV_PREFIX = "FIXFLOW_"


class ConfigError(ValueError):
    """Configuration file could not be read."""


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text, keeping formatting for round-trip writes."""
    try:
        return tomlkit.parse(content)
    except TOMLParseError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python values."""
    return parse_toml_document(content).unwrap()


def find_config_file(start: Path) -> Path | None:
    """Find ``.fixflow.toml`` in ``start`` or any parent directory."""
    current = start.resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config(path: Path) -> dict[str, Any]:
    """Load a config file merged over the defaults."""
    user_config = parse_toml(path.read_text(encoding="utf-8"))
    return merge_configs(DEFAULT_CONFIG, user_config)


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed Python value.

    JSON lists and objects, booleans and integers are recognized;
    everything else (including malformed JSON) stays a string.
    """
    stripped = value.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    if stripped.lower() == "true":
        return True
    if stripped.lower() == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``FIXFLOW_SECTION_KEY`` environment variables to ``config``.

    The first underscore-separated part names the section and the rest
    the key, so ``FIXFLOW_FLOW_SOLUTION_PREFIX`` sets
    ``flow.solution_prefix``.
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        parts = name[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2 or not all(parts):
            continue
        section, key = parts
        target = config.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = _try_parse_env_value(raw)
    return config


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file; skips the upward search.
        start_dir: Directory to search from (defaults to the cwd).

    Returns:
        Config dict with defaults and environment overrides applied.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    if config_path is not None:
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)
    return _apply_env_overrides(config)
