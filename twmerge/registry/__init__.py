from __future__ import annotations

from .groups import AmbiguousPrefix, GroupDefinition, GroupId
from .registry import GroupRegistry, get_registry
from .trie import PrefixTrie, TrieMatch

__all__ = [
    "AmbiguousPrefix",
    "GroupDefinition",
    "GroupId",
    "GroupRegistry",
    "get_registry",
    "PrefixTrie",
    "TrieMatch",
]
