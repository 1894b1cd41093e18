"""Configuration loading for warden.

Configuration comes from two layers:
    - Key/value files in the config directory, merged by load_config into
      a ResolvedConfig
    - Environment variables, validated by EnvironmentOverrides

Example:
    >>> from pathlib import Path
    >>> from warden.config import config_sources, load_config
    >>> config = load_config(config_sources(Path("/opt/server/conf")))
    >>> config.get("dbms_memory_heap_max_size", "512")
"""

from ._discovery import (
    DEFAULT_SERVICE_NAME,
    config_sources,
    get_primary_config_path,
    get_wrapper_config_path,
)
from ._environment import ENVIRONMENT_VARIABLES, EnvironmentOverrides
from ._loader import load_config, merge_lines, normalize_key, parse_line
from ._models import ResolvedConfig

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "ENVIRONMENT_VARIABLES",
    "EnvironmentOverrides",
    "ResolvedConfig",
    "config_sources",
    "get_primary_config_path",
    "get_wrapper_config_path",
    "load_config",
    "merge_lines",
    "normalize_key",
    "parse_line",
]
