from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class MergeConfig:
    """
    Settings consumed by every merge/classify call.

    Passed explicitly instead of living in global state, so concurrent
    callers may use different settings.
    """
    class_prefix: str = ""                                    # e.g. "tw-", stripped and re-applied losslessly
    custom_colors: Tuple[str, ...] = ()                       # extra palette names for disambiguation
    decompose: bool = False                                   # split shorthands instead of dropping them
    no_merge: FrozenSet[str] = field(default_factory=frozenset)  # base names that never conflict


DEFAULT_CONFIG = MergeConfig()

__all__ = ["MergeConfig", "DEFAULT_CONFIG"]
