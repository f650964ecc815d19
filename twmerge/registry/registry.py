from __future__ import annotations

import logging
import threading
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .groups import (
    ALL_GROUPS,
    AMBIGUOUS_PREFIXES,
    ARBITRARY_DISPATCH,
    AmbiguousPrefix,
    GroupDefinition,
    GroupId,
)
from .hierarchy import HIERARCHY, OVERRIDE_CONFLICTS, Child, build_ancestors
from .trie import PrefixTrie, TrieMatch

logger = logging.getLogger(__name__)


class GroupRegistry:
    """
    Compiled view of the declarative group tables.

    Holds the prefix trie, the exact-name table, the hierarchy with its
    ancestor closure and the override-conflict table. Read-only after
    construction, so one instance is shared by all callers.
    """

    def __init__(
        self,
        groups: Iterable[GroupDefinition] = ALL_GROUPS,
        hierarchy: Dict[GroupId, Tuple[Child, ...]] = HIERARCHY,
        overrides: Dict[GroupId, FrozenSet[GroupId]] = OVERRIDE_CONFLICTS,
        ambiguous: Dict[GroupId, AmbiguousPrefix] = AMBIGUOUS_PREFIXES,
        arbitrary_dispatch: Dict[GroupId, Tuple[Tuple[str, GroupId], ...]] = ARBITRARY_DISPATCH,
    ):
        self.trie = PrefixTrie()
        self.exact: Dict[str, GroupId] = {}
        for definition in groups:
            if definition.kind == "enum":
                for name in definition.names:
                    self.exact[name] = definition.group
            else:
                self.trie.insert(definition.segments, definition.group, definition.values)

        self.hierarchy = dict(hierarchy)
        self.ancestors = build_ancestors(self.hierarchy)
        self.overrides = dict(overrides)
        self.ambiguous = dict(ambiguous)
        self.arbitrary_dispatch = dict(arbitrary_dispatch)

        logger.debug(
            "Group registry built: %d exact names, %d prefixes, %d shorthands, %d override rules",
            len(self.exact), len(self.trie), len(self.hierarchy), len(self.overrides),
        )

    # ------------------------------------------------------------ #

    def lookup_exact(self, name: str) -> Optional[GroupId]:
        return self.exact.get(name)

    def lookup_prefix(self, base: str) -> Optional[TrieMatch]:
        return self.trie.lookup(base.split("-"))

    def is_ancestor(self, shorthand: Optional[GroupId], longhand: Optional[GroupId]) -> bool:
        """True if ``shorthand`` is a strict ancestor of ``longhand`` in the hierarchy."""
        if shorthand is None or longhand is None:
            return False
        return shorthand in self.ancestors.get(longhand, ())

    def related(self, a: Optional[GroupId], b: Optional[GroupId]) -> bool:
        """Same group, or one is a shorthand of the other."""
        if a is None or b is None:
            return False
        return a == b or self.is_ancestor(a, b) or self.is_ancestor(b, a)

    def children_of(self, group: GroupId) -> Tuple[Child, ...]:
        return self.hierarchy.get(group, ())

    def conflicts_of(self, group: GroupId) -> FrozenSet[GroupId]:
        return self.overrides.get(group, frozenset())


_REGISTRY: Optional[GroupRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def get_registry() -> GroupRegistry:
    """
    Process-wide registry, built on first use.

    Construction happens under a lock and the instance is published only
    once fully built, so no caller sees a partial trie.
    """
    global _REGISTRY
    registry = _REGISTRY
    if registry is not None:
        return registry
    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            _REGISTRY = GroupRegistry()
        return _REGISTRY


__all__ = ["GroupRegistry", "get_registry"]
