# move_name_matcher/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the matcher.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Dataset loaders, the selector's tracing, the CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
