"""
Classifier: maps a parsed token to the group of the property it sets.

Exact names are looked up first (closed enumerations such as ``flex`` or
``text-left``), then the prefix trie. When the trie lands on a prefix that
is shared by a color and a size/width property, the trailing value decides:

- ``text-sm`` → font_size, ``text-blue-500`` → text_color
- ``border-2`` → border_w, ``border-red-500`` → border_color
- ``shadow-lg`` → shadow_size, ``shadow-black/20`` → shadow_color
"""

from __future__ import annotations

import logging
from typing import Optional

from .config.model import DEFAULT_CONFIG, MergeConfig
from .registry import AmbiguousPrefix, GroupId, GroupRegistry, get_registry
from .registry import values
from .tokens import ParsedToken

logger = logging.getLogger(__name__)


class Classifier:
    """
    Token → group id, or ``None`` for tokens that belong to no known group.

    Unknown tokens are inert: the merger appends them and never compares
    them with anything.
    """

    def __init__(self, config: MergeConfig = DEFAULT_CONFIG, registry: Optional[GroupRegistry] = None):
        self.config = config
        self.registry = registry or get_registry()

    def classify(self, token: ParsedToken) -> Optional[GroupId]:
        base = token.base
        if base in self.config.no_merge:
            return None

        group = self.registry.lookup_exact(base)
        if group is not None:
            return group

        match = self.registry.lookup_prefix(base)
        if match is None:
            logger.debug("Unknown class %r", token.raw or base)
            return None

        group = match.group
        ambiguous = self.registry.ambiguous.get(group)
        if ambiguous is not None:
            return self._resolve_ambiguous(ambiguous, self._value_after(base, match.depth), token)

        if token.arbitrary_value is not None:
            return self._dispatch_arbitrary(group, token.arbitrary_value)
        return group

    def value_of(self, token: ParsedToken) -> str:
        """
        Value part of the base: the dash segments left after the matched prefix.
        ``p-4`` → ``4``, ``border-x-red-500`` → ``red-500``, ``border`` → ``""``.
        """
        match = self.registry.lookup_prefix(token.base)
        if match is None:
            return ""
        return self._value_after(token.base, match.depth)

    # ------------------------------------------------------------ #

    @staticmethod
    def _value_after(base: str, depth: int) -> str:
        return "-".join(base.split("-")[depth:])

    def _resolve_ambiguous(self, pair: AmbiguousPrefix, value: str, token: ParsedToken) -> GroupId:
        palette = self.config.custom_colors
        arb = token.arbitrary_value

        if arb is not None:
            if arb.startswith(values.LENGTH_TAGS):
                return pair.size_group
            if arb.startswith(values.COLOR_TAG):
                return pair.color_group
            if values.is_color(arb, palette):
                return pair.color_group
            if values.is_length(arb):
                return pair.size_group
            return pair.size_group if pair.arbitrary_fallback == "size" else pair.color_group

        if token.arbitrary_variable is not None:
            return pair.color_group

        if value == "":
            return pair.size_group if pair.bare_is_size else pair.color_group
        if value in pair.keywords:
            return pair.size_group
        if pair.numeric and values.is_number(value):
            return pair.size_group
        # Colors and everything unrecognised share the color group.
        return pair.color_group

    def _dispatch_arbitrary(self, group: GroupId, payload: str) -> GroupId:
        for head, target in self.registry.arbitrary_dispatch.get(group, ()):
            if payload.startswith(head):
                return target
        return group


def classify(token: ParsedToken, config: MergeConfig = DEFAULT_CONFIG) -> Optional[GroupId]:
    """Classify one parsed token with a throwaway Classifier."""
    return Classifier(config).classify(token)


__all__ = ["Classifier", "classify"]
