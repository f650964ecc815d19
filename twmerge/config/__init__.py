from __future__ import annotations

from .load import CONFIG_FILE, ConfigNotFoundError, find_config, load_config, load_config_or_default
from .model import DEFAULT_CONFIG, MergeConfig
from .typed import ConfigCoerceError, build_typed

__all__ = [
    "MergeConfig",
    "DEFAULT_CONFIG",
    "CONFIG_FILE",
    "ConfigNotFoundError",
    "ConfigCoerceError",
    "build_typed",
    "find_config",
    "load_config",
    "load_config_or_default",
]
