"""
fixflow.config - Configuration loading and defaults
"""

from fixflow.config.defaults import DEFAULT_CONFIG
from fixflow.config.loader import (
    CONFIG_FILENAME,
    ConfigError,
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "load_config",
    "find_config_file",
    "get_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "ConfigError",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "_apply_env_overrides",
    "_try_parse_env_value",
]
