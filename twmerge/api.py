"""
Public entry points.

    >>> merge("p-4 text-red-500", "px-2 text-blue-500")
    'px-2 text-blue-500'
    >>> classes("btn", {"btn-active": True, "hidden": False}, ["p-4", None])
    'btn btn-active p-4'
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .classify import Classifier
from .config.model import DEFAULT_CONFIG, MergeConfig
from .merge import Merger
from .registry import GroupId
from .tokens import TokenParser, split_tokens

ClassInput = Any


def _flatten(value: ClassInput, out: List[str]) -> None:
    if value is None or value is False or value is True:
        return
    if isinstance(value, str):
        out.extend(split_tokens(value))
    elif isinstance(value, Mapping):
        for key, flag in value.items():
            if flag:
                _flatten(key, out)
    elif isinstance(value, tuple) and len(value) == 2 and isinstance(value[1], bool):
        # ("btn-active", is_active)
        if value[1]:
            _flatten(value[0], out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(item, out)
    else:
        raise TypeError(f"Unsupported class input: {type(value).__name__}")


def classes(*inputs: ClassInput) -> str:
    """
    Flatten nested and conditional class inputs into one class string.

    Strings are split on whitespace, lists and tuples recurse, mappings and
    ``(name, flag)`` pairs contribute their name when the flag is truthy,
    ``None`` and booleans are skipped. Conflicts are not resolved here.
    """
    out: List[str] = []
    for value in inputs:
        _flatten(value, out)
    return " ".join(out)


def merge(base: ClassInput, overrides: ClassInput = "", config: Optional[MergeConfig] = None) -> str:
    """Merge ``overrides`` into ``base``; both may be nested inputs accepted by classes()."""
    return Merger(config or DEFAULT_CONFIG).merge_text(classes(base), classes(overrides))


def tw(text: ClassInput, config: Optional[MergeConfig] = None) -> str:
    """Resolve conflicts inside a single class list (later classes win)."""
    return merge("", text, config)


def remove(text: str, literal_token: str) -> str:
    """Drop every occurrence of ``literal_token`` from ``text``; no classification involved."""
    return " ".join(part for part in split_tokens(text) if part != literal_token)


def classify(token_text: str, config: Optional[MergeConfig] = None) -> Optional[GroupId]:
    cfg = config or DEFAULT_CONFIG
    token = TokenParser(cfg.class_prefix).parse(token_text)
    return Classifier(cfg).classify(token)


__all__ = ["classes", "merge", "tw", "remove", "classify"]
