"""
Value-shape predicates used to disambiguate utility classes.

A prefix such as ``text-`` means font size or text color depending on what
follows it; ``border-`` means width or color. These helpers classify the
trailing value.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable

PALETTE_NAMES: FrozenSet[str] = frozenset("""
    slate gray zinc neutral stone
    red orange amber yellow lime green emerald teal cyan sky blue indigo violet purple fuchsia pink rose
""".split())

SHADE_STEPS: FrozenSet[str] = frozenset(
    "50 100 150 200 250 300 350 400 450 500 550 600 650 700 750 800 850 900 950".split()
)

CSS_NAMED_COLORS: FrozenSet[str] = frozenset("""
    black white transparent current currentcolor inherit
    aliceblue antiquewhite aqua aquamarine azure beige bisque blanchedalmond
    blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
    cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod
    darkgray darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange
    darkorchid darkred darksalmon darkseagreen darkslateblue darkslategray
    darkslategrey darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey
    dodgerblue firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite
    gold goldenrod gray green greenyellow grey honeydew hotpink indianred indigo
    ivory khaki lavender lavenderblush lawngreen lemonchiffon lightblue
    lightcoral lightcyan lightgoldenrodyellow lightgray lightgreen lightgrey
    lightpink lightsalmon lightseagreen lightskyblue lightslategray
    lightslategrey lightsteelblue lightyellow lime limegreen linen magenta
    maroon mediumaquamarine mediumblue mediumorchid mediumpurple mediumseagreen
    mediumslateblue mediumspringgreen mediumturquoise mediumvioletred
    midnightblue mintcream mistyrose moccasin navajowhite navy oldlace olive
    olivedrab orange orangered orchid palegoldenrod palegreen paleturquoise
    palevioletred papayawhip peachpuff peru pink plum powderblue purple
    rebeccapurple red rosybrown royalblue saddlebrown salmon sandybrown
    seagreen seashell sienna silver skyblue slateblue slategray slategrey
    snow springgreen steelblue tan teal thistle tomato turquoise violet wheat
    white whitesmoke yellow yellowgreen
""".split())

TSHIRT_SIZES: FrozenSet[str] = frozenset(
    "xs sm base md lg xl 2xl 3xl 4xl 5xl 6xl 7xl 8xl 9xl".split()
)

COLOR_FUNCTIONS = ("rgb", "rgba", "hsl", "hsla", "oklch", "oklab", "lab", "lch", "color")

LENGTH_TAGS = ("length:", "size:")
COLOR_TAG = "color:"

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NUMBER_RE = re.compile(r"^-?\d+\.?\d*$")
_INTEGER_RE = re.compile(r"^-?\d+$")
_LENGTH_RE = re.compile(
    r"^-?\d*\.?\d+(px|rem|em|%|vw|vh|dvw|dvh|svw|svh|lvw|lvh|ch|ex|cap|lh|rlh"
    r"|vmin|vmax|cqw|cqh|cqi|cqb|cqmin|cqmax)$"
)
_CALC_RE = re.compile(r"^(calc|min|max|clamp)\(")


def strip_opacity(value: str) -> str:
    """``red-500/50`` → ``red-500``."""
    return value.split("/", 1)[0]


def is_css_named_color(value: str) -> bool:
    return value in CSS_NAMED_COLORS


def is_palette_color(value: str, extra_palette: Iterable[str] = ()) -> bool:
    """
    ``<palette>`` or ``<palette>-<step>``.

    Extra palette names come from configuration and may contain dashes
    (``brand-blue``), so they are matched as whole prefixes.
    """
    name, _, shade = value.partition("-")
    if name in PALETTE_NAMES and (not shade or shade in SHADE_STEPS):
        return True
    for custom in extra_palette:
        if value == custom:
            return True
        if value.startswith(custom + "-") and value[len(custom) + 1:] in SHADE_STEPS:
            return True
    return False


def is_hex_color(value: str) -> bool:
    return bool(_HEX_RE.match(value))


def is_color_function(value: str) -> bool:
    return any(value.startswith(fn + "(") for fn in COLOR_FUNCTIONS)


def is_color(value: str, extra_palette: Iterable[str] = ()) -> bool:
    """
    True if the value is a color:
    a CSS named color, a palette color with optional shade step, a hex
    literal, or a color function call. A trailing ``/opacity`` is ignored.
    """
    base = strip_opacity(value)
    return (
        is_css_named_color(base)
        or is_palette_color(base, extra_palette)
        or is_hex_color(base)
        or is_color_function(base)
    )


def is_number(value: str) -> bool:
    """Plain number, integer or decimal."""
    return bool(_NUMBER_RE.match(value))


def is_integer(value: str) -> bool:
    return bool(_INTEGER_RE.match(value))


def is_length(value: str) -> bool:
    """Number, number with a CSS unit, or a calc()-like expression."""
    return is_number(value) or bool(_LENGTH_RE.match(value)) or bool(_CALC_RE.match(value))


def is_tshirt_size(value: str) -> bool:
    return value in TSHIRT_SIZES


__all__ = [
    "PALETTE_NAMES",
    "SHADE_STEPS",
    "CSS_NAMED_COLORS",
    "TSHIRT_SIZES",
    "COLOR_FUNCTIONS",
    "LENGTH_TAGS",
    "COLOR_TAG",
    "strip_opacity",
    "is_css_named_color",
    "is_palette_color",
    "is_hex_color",
    "is_color_function",
    "is_color",
    "is_number",
    "is_integer",
    "is_length",
    "is_tshirt_size",
]
