"""
twmerge: merge utility class lists without conflicting classes.

    >>> from twmerge import merge, MergeConfig
    >>> merge("p-4 hover:bg-red-500", "px-2 hover:bg-blue-500")
    'px-2 hover:bg-blue-500'
    >>> merge("p-4", "pt-2", MergeConfig(decompose=True))
    'px-4 pb-4 pt-2'
"""

from __future__ import annotations

from .api import classes, classify, merge, remove, tw
from .classify import Classifier
from .config import ConfigCoerceError, ConfigNotFoundError, MergeConfig, load_config
from .errors import TWUserError
from .merge import Merger
from .tokens import ParsedToken, parse, parse_many, render, render_many

__all__ = [
    "merge",
    "remove",
    "classes",
    "tw",
    "classify",
    "parse",
    "parse_many",
    "render",
    "render_many",
    "ParsedToken",
    "Classifier",
    "Merger",
    "MergeConfig",
    "load_config",
    "TWUserError",
    "ConfigNotFoundError",
    "ConfigCoerceError",
]
