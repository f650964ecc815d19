"""
Token parser for utility class strings.

Breaks a single class token into its structural parts:
- removal directive (``remove:token`` / ``remove:*``)
- framework class prefix (``tw-``), only at the very start
- variants separated by ``:`` (colons inside ``[...]``/``(...)`` do not split)
- important marker (``!``), negative sign, ``/modifier``
- arbitrary values ``name-[...]`` and variables ``name-(...)``

Grammar:
token := [remove-directive] [prefix] (variant ":")* ["!"] ["-"] name [payload] [modifier] ["!"]
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .model import ParsedToken, VARIANT_SEP

REMOVE_DIRECTIVE = "remove:"
REMOVE_ALL_DIRECTIVE = "remove:*"
IMPORTANT_MARK = "!"
NEGATIVE_MARK = "-"
MODIFIER_SEP = "/"

_WS_RE = re.compile(r"\s+")
_ARBITRARY_VALUE_RE = re.compile(r"^(.+?)\[(.+)\]$", re.DOTALL)
_ARBITRARY_VARIABLE_RE = re.compile(r"^(.+?)\((.+)\)$", re.DOTALL)
_PAYLOAD_MODIFIER_RE = re.compile(r"^(.*[\])])/([^/\[\]()]+)$", re.DOTALL)

_OPENERS = "[("
_CLOSERS = "])"


def split_tokens(text: str) -> List[str]:
    """Split a class string on runs of whitespace, dropping empty entries."""
    return [part for part in _WS_RE.split(text) if part]


def split_variants(text: str) -> Tuple[List[str], str]:
    """
    Split ``a:b:base`` into (["a", "b"], "base").

    Nesting depth is tracked per character and never goes below zero, so an
    unbalanced closer cannot turn a later colon into literal text.
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    for ch in text:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == VARIANT_SEP and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts[:-1], parts[-1]


class TokenParser:
    """
    Parser bound to a framework class prefix.

    Pure and stateless apart from the prefix, so a single instance can be
    shared between threads.
    """

    def __init__(self, class_prefix: str = ""):
        self.class_prefix = class_prefix

    def parse(self, text: str) -> ParsedToken:
        """
        Parse one token.

        Args:
            text: Token text without surrounding whitespace

        Returns:
            Structured token; malformed input still yields a token with
            whatever could be matched
        """
        text, remove, remove_all = self._parse_remove(text)
        if remove_all:
            return ParsedToken(raw=REMOVE_ALL_DIRECTIVE, base="", remove_all=True)

        stripped, class_prefix = self._strip_class_prefix(text)
        variants, base = split_variants(stripped)
        base, important = self._parse_important(base)
        base, negative = self._parse_negative(base)
        base, modifier = self._parse_modifier(base)
        base, arbitrary_value = self._parse_payload(base, _ARBITRARY_VALUE_RE)
        arbitrary_variable = None
        if arbitrary_value is None:
            base, arbitrary_variable = self._parse_payload(base, _ARBITRARY_VARIABLE_RE)

        return ParsedToken(
            raw=text,
            base=base,
            class_prefix=class_prefix,
            variants=tuple(variants),
            important=important,
            negative=negative,
            modifier=modifier,
            arbitrary_value=arbitrary_value,
            arbitrary_variable=arbitrary_variable,
            remove=remove,
        )

    def parse_many(self, text: str) -> List[ParsedToken]:
        """Parse a whitespace-separated class string, preserving order."""
        return [self.parse(part) for part in split_tokens(text)]

    # ------------------------------------------------------------ #

    @staticmethod
    def _parse_remove(text: str) -> Tuple[str, bool, bool]:
        if text.startswith(REMOVE_ALL_DIRECTIVE):
            return "", False, True
        if text.startswith(REMOVE_DIRECTIVE):
            return text[len(REMOVE_DIRECTIVE):], True, False
        return text, False, False

    def _strip_class_prefix(self, text: str) -> Tuple[str, str]:
        prefix = self.class_prefix
        if prefix and text.startswith(prefix):
            return text[len(prefix):], prefix
        return text, ""

    @staticmethod
    def _parse_important(base: str) -> Tuple[str, bool]:
        if base.startswith(IMPORTANT_MARK):
            return base[1:], True
        if base.endswith(IMPORTANT_MARK):
            return base[:-1], True
        return base, False

    @staticmethod
    def _parse_negative(base: str) -> Tuple[str, bool]:
        if base.startswith(NEGATIVE_MARK):
            return base[1:], True
        return base, False

    @staticmethod
    def _parse_modifier(base: str) -> Tuple[str, Optional[str]]:
        # A slash inside a payload belongs to the payload (e.g. "w-[calc(1/2)]");
        # only one after the closing bracket is a modifier ("bg-(--x)/50").
        if "[" in base or "(" in base:
            m = _PAYLOAD_MODIFIER_RE.match(base)
            if m:
                return m.group(1), m.group(2)
            return base, None
        name, sep, modifier = base.partition(MODIFIER_SEP)
        if sep and modifier:
            return name, modifier
        return base, None

    @staticmethod
    def _parse_payload(base: str, pattern: "re.Pattern[str]") -> Tuple[str, Optional[str]]:
        m = pattern.match(base)
        if not m:
            return base, None
        return m.group(1).rstrip(NEGATIVE_MARK), m.group(2)


_DEFAULT_PARSER = TokenParser()


def parse(text: str, class_prefix: str = "") -> ParsedToken:
    """Parse one token (see TokenParser.parse)."""
    parser = _DEFAULT_PARSER if not class_prefix else TokenParser(class_prefix)
    return parser.parse(text)


def parse_many(text: str, class_prefix: str = "") -> List[ParsedToken]:
    """Parse a whitespace-separated class string (see TokenParser.parse_many)."""
    parser = _DEFAULT_PARSER if not class_prefix else TokenParser(class_prefix)
    return parser.parse_many(text)


__all__ = [
    "TokenParser",
    "parse",
    "parse_many",
    "split_tokens",
    "split_variants",
    "REMOVE_DIRECTIVE",
    "REMOVE_ALL_DIRECTIVE",
]
