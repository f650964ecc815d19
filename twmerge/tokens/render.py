from __future__ import annotations

from typing import Iterable

from .model import ParsedToken, VARIANT_SEP
from .parser import IMPORTANT_MARK, MODIFIER_SEP, NEGATIVE_MARK


def render(token: ParsedToken) -> str:
    """
    Serialize a token back to class text.

    Tokens carried through untouched keep their original text; synthesized
    tokens are assembled from parts:
    prefix, variants, negative sign, base with payload, modifier, important.
    """
    if token.raw is not None:
        return token.raw

    base = token.base
    if token.arbitrary_value is not None:
        base = f"{base}-[{token.arbitrary_value}]"
    elif token.arbitrary_variable is not None:
        base = f"{base}-({token.arbitrary_variable})"

    if token.negative:
        base = NEGATIVE_MARK + base
    if token.modifier:
        base = f"{base}{MODIFIER_SEP}{token.modifier}"
    if token.important:
        base += IMPORTANT_MARK

    variant_prefix = "".join(f"{v}{VARIANT_SEP}" for v in token.variants)
    return f"{token.class_prefix}{variant_prefix}{base}"


def render_many(tokens: Iterable[ParsedToken]) -> str:
    """Render tokens joined by single spaces."""
    return " ".join(render(t) for t in tokens)


__all__ = ["render", "render_many"]
