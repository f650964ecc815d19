"""
Loader for ``twmerge.yaml``.

The file is an optional plain mapping with the fields of MergeConfig:

    class_prefix: "tw-"
    custom_colors: [brand, accent]
    decompose: true
    no_merge: [btn, card]

Loading never touches global state: the result is a MergeConfig value
that callers pass to merge/classify explicitly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import TWUserError
from .model import DEFAULT_CONFIG, MergeConfig
from .typed import ConfigCoerceError, build_typed

logger = logging.getLogger(__name__)

CONFIG_FILE = "twmerge.yaml"

_yaml = YAML(typ="safe")


class ConfigNotFoundError(TWUserError):
    """Explicitly requested config file does not exist."""
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Config file not found: {path}")


def _read_yaml_map(path: Path) -> dict:
    try:
        raw: Any = _yaml.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigCoerceError(f"invalid YAML in {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigCoerceError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Path | str) -> MergeConfig:
    """
    Load a MergeConfig from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Config with file values; absent keys keep their defaults

    Raises:
        ConfigNotFoundError: File does not exist
        ConfigCoerceError: Malformed YAML, unknown key or wrongly typed value
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(path)
    data = _read_yaml_map(path)
    cfg = build_typed(MergeConfig, data)
    logger.debug("Loaded config from %s: %r", path, cfg)
    return cfg


def find_config(start: Path | str) -> Optional[Path]:
    """Return ``<start>/twmerge.yaml`` if it exists."""
    candidate = Path(start) / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config_or_default(start: Path | str) -> MergeConfig:
    """Config from ``<start>/twmerge.yaml``, or defaults when there is none."""
    found = find_config(start)
    if found is None:
        logger.debug("No %s in %s, using defaults", CONFIG_FILE, start)
        return DEFAULT_CONFIG
    return load_config(found)


__all__ = ["CONFIG_FILE", "ConfigNotFoundError", "load_config", "find_config", "load_config_or_default"]
