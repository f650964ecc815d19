from __future__ import annotations

from .model import ParsedToken
from .parser import TokenParser, parse, parse_many, split_tokens
from .render import render, render_many

__all__ = [
    "ParsedToken",
    "TokenParser",
    "parse",
    "parse_many",
    "split_tokens",
    "render",
    "render_many",
]
