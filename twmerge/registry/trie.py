from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .groups import GroupId

Candidate = Tuple[GroupId, Optional[FrozenSet[str]]]


@dataclass(frozen=True)
class TrieMatch:
    """Result of a prefix lookup: the group and how many segments its prefix took."""
    group: GroupId
    depth: int


class _TrieNode:
    """Internal trie node: candidates ending here plus children by segment."""
    __slots__ = ("candidates", "children")

    def __init__(self) -> None:
        self.candidates: List[Candidate] = []
        self.children: Dict[str, "_TrieNode"] = {}


class PrefixTrie:
    """
    Trie over dash-separated class prefixes.

    ``bg`` and ``bg-linear`` share the ``bg`` node; a lookup for
    ``bg-linear-to-r`` walks as deep as it can and keeps the deepest node
    that produced a match.
    """

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, segments: Sequence[str], group: GroupId, values: Optional[FrozenSet[str]] = None) -> None:
        node = self._root
        for seg in segments:
            node = node.children.setdefault(seg, _TrieNode())
        node.candidates.append((group, values))
        self._size += 1

    def lookup(self, segments: Sequence[str]) -> Optional[TrieMatch]:
        """
        Walk ``segments`` and return the deepest match.

        At each node with candidates, one whose whitelist contains the
        remaining value (segments after this node joined by ``-``) wins over
        an unconstrained one; a node whose candidates all reject the value
        leaves the shallower match in place.
        """
        best: Optional[TrieMatch] = None
        node = self._root
        depth = 0
        while True:
            if node.candidates:
                group = self._pick(node.candidates, "-".join(segments[depth:]))
                if group is not None:
                    best = TrieMatch(group=group, depth=depth)
            if depth >= len(segments):
                return best
            nxt = node.children.get(segments[depth])
            if nxt is None:
                return best
            node = nxt
            depth += 1

    @staticmethod
    def _pick(candidates: List[Candidate], remaining: str) -> Optional[GroupId]:
        for group, values in candidates:
            if values is not None and remaining in values:
                return group
        for group, values in candidates:
            if values is None:
                return group
        return None


__all__ = ["PrefixTrie", "TrieMatch"]
