"""
Data model for a single utility class token.

A token is one whitespace-separated entry of a class string, e.g.
``tw-hover:md:!-mt-4`` or ``bg-[#fff]``, broken down into the parts the
classifier and the merger care about.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

VARIANT_SEP = ":"


@dataclass(frozen=True)
class ParsedToken:
    """
    Structured representation of a class token.

    Attributes:
        raw: Original text (without a removal directive). ``None`` for
            tokens synthesized by decomposition; those are always rendered
            from their parts.
        class_prefix: Framework prefix that was stripped (``""`` if none).
        variants: Variant names in written order (``hover``, ``md``, ...).
        base: Core identifier without variants, flags, modifier or payload.
        important: ``!`` marker present (leading or trailing).
        negative: Leading ``-`` present.
        modifier: Text after ``/`` (opacity, line height, ...).
        arbitrary_value: Payload of ``name-[...]``.
        arbitrary_variable: Payload of ``name-(...)``.
        remove: Token came from a ``remove:<token>`` directive.
        remove_all: Token is a ``remove:*`` directive.
    """
    raw: Optional[str]
    base: str
    class_prefix: str = ""
    variants: Tuple[str, ...] = ()
    important: bool = False
    negative: bool = False
    modifier: Optional[str] = None
    arbitrary_value: Optional[str] = None
    arbitrary_variable: Optional[str] = None
    remove: bool = False
    remove_all: bool = False
    variant_key: Tuple[str, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Sorted, duplicates kept: "hover:hover:x" is its own scope.
        object.__setattr__(self, "variant_key", tuple(sorted(self.variants)))

    @property
    def is_directive(self) -> bool:
        return self.remove or self.remove_all

    def same_scope(self, other: "ParsedToken") -> bool:
        """Both tokens apply under the same set of variants."""
        return self.variant_key == other.variant_key

    def with_base(self, base: str) -> "ParsedToken":
        """Copy with a new base identifier; the copy is rendered from parts."""
        return replace(self, base=base, raw=None)


__all__ = ["ParsedToken", "VARIANT_SEP"]
