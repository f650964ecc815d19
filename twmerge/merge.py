from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .classify import Classifier
from .config.model import DEFAULT_CONFIG, MergeConfig
from .registry import GroupId, GroupRegistry, get_registry
from .tokens import ParsedToken, TokenParser, render_many

logger = logging.getLogger(__name__)

GroupOf = Callable[[ParsedToken], Optional[GroupId]]


class Merger:
    """
    Folds override tokens into a base token list.

    Overrides are applied left to right against the accumulator as it
    stands at that moment; they are never compared with each other
    directly. Within one variant scope a later token of a group replaces
    earlier ones, a longhand drops (or, with ``decompose``, splits) an
    earlier shorthand, and a shorthand drops earlier longhands it covers.
    """

    def __init__(self, config: MergeConfig = DEFAULT_CONFIG, registry: Optional[GroupRegistry] = None):
        self.config = config
        self.registry = registry or get_registry()
        self.classifier = Classifier(config, self.registry)
        self.parser = TokenParser(config.class_prefix)

    # ------------------------- public API ------------------------- #

    def merge_text(self, base: str, overrides: str) -> str:
        result = self.merge(self.parser.parse_many(base), self.parser.parse_many(overrides))
        return render_many(result)

    def merge(self, base_tokens: Sequence[ParsedToken], override_tokens: Sequence[ParsedToken]) -> List[ParsedToken]:
        cache: Dict[ParsedToken, Optional[GroupId]] = {}

        def group_of(token: ParsedToken) -> Optional[GroupId]:
            if token not in cache:
                cache[token] = self.classifier.classify(token)
            return cache[token]

        acc: List[ParsedToken] = list(base_tokens)
        for override in override_tokens:
            if override.remove_all:
                acc = [t for t in acc if t.base in self.config.no_merge]
                continue
            if override.remove:
                acc = [t for t in acc if not (t.base == override.base and t.variant_key == override.variant_key)]
                continue

            group = group_of(override)
            if group is None:
                acc.append(override)
                continue

            acc = self._prune_conflicts(acc, override, group, group_of)
            acc = self._resolve(acc, override, group, group_of)
            acc.append(override)
        return acc

    # ------------------------- internals ------------------------- #

    def _prune_conflicts(
        self,
        acc: List[ParsedToken],
        override: ParsedToken,
        group: GroupId,
        group_of: GroupOf,
    ) -> List[ParsedToken]:
        conflicts = self.registry.conflicts_of(group)
        if not conflicts:
            return acc
        return [t for t in acc if not (t.same_scope(override) and group_of(t) in conflicts)]

    def _resolve(
        self,
        acc: List[ParsedToken],
        override: ParsedToken,
        group: GroupId,
        group_of: GroupOf,
    ) -> List[ParsedToken]:
        out: List[ParsedToken] = []
        for idx, entry in enumerate(acc):
            if not entry.same_scope(override):
                out.append(entry)
                continue

            entry_group = group_of(entry)
            if entry_group is None:
                out.append(entry)
            elif entry_group == group:
                continue
            elif self.registry.is_ancestor(entry_group, group):
                if self.config.decompose:
                    children = self._decompose(entry, entry_group, group)
                    out = self._merge_children(out, children, acc[idx + 1:], group_of)
            elif self.registry.is_ancestor(group, entry_group):
                continue
            else:
                out.append(entry)
        return out

    def _decompose(self, token: ParsedToken, shorthand: GroupId, target: GroupId) -> List[ParsedToken]:
        """
        Split ``token`` (of group ``shorthand``) into the longhands not covered by ``target``.

        Children on the path towards ``target`` are split further; ``target``
        itself is skipped.
        """
        if token.arbitrary_value is None and token.arbitrary_variable is None:
            value = self.classifier.value_of(token)
        else:
            value = ""
        out: List[ParsedToken] = []
        for child_group, child_prefix in self.registry.children_of(shorthand):
            child = token.with_base(f"{child_prefix}-{value}" if value else child_prefix)
            if child_group == target:
                continue
            if self.registry.is_ancestor(child_group, target):
                out.extend(self._decompose(child, child_group, target))
            else:
                out.append(child)
        logger.debug("Decomposed %s for %s into %d longhands", token.base, target, len(out))
        return out

    def _merge_children(
        self,
        out: List[ParsedToken],
        children: List[ParsedToken],
        remaining: Sequence[ParsedToken],
        group_of: GroupOf,
    ) -> List[ParsedToken]:
        # Context is fixed before the children are added: siblings never
        # suppress each other.
        context = list(out) + list(remaining)
        merged = list(out)
        for child in children:
            child_group = group_of(child)
            if any(
                existing.same_scope(child) and self.registry.related(group_of(existing), child_group)
                for existing in context
            ):
                continue
            merged.append(child)
        return merged


__all__ = ["Merger"]
