"""
Declarative definitions of utility class groups.

Each group is a bucket of classes that set the same property: of two classes
in one group (and one variant scope) only the later survives a merge.
Groups are declared in two forms:

- enum: an exact list of class names (``block``, ``flex``, ``hidden``, ...)
- prefix: any class starting with the given dash-separated prefix
  (``bg`` matches ``bg-red-500``), optionally restricted to a whitelist of
  remainder values (``overflow`` only with ``auto``, ``hidden``, ...)

Prefixes whose meaning depends on the value shape (``text-sm`` vs
``text-red-500``) are declared as their color group here and paired with a
size/width group in AMBIGUOUS_PREFIXES; the classifier picks between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Literal, NewType, Optional, Tuple

from .values import TSHIRT_SIZES

GroupId = NewType("GroupId", str)

GroupKind = Literal["enum", "prefix"]


@dataclass(frozen=True)
class GroupDefinition:
    group: GroupId
    kind: GroupKind
    names: Tuple[str, ...] = ()
    prefix: str = ""
    values: Optional[FrozenSet[str]] = None

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self.prefix.split("-")) if self.prefix else ()


def enum(group: str, names: str) -> GroupDefinition:
    return GroupDefinition(group=GroupId(group), kind="enum", names=tuple(names.split()))


def prefix(group: str, pfx: str, values: Optional[str] = None) -> GroupDefinition:
    allowed = frozenset(values.split()) if values is not None else None
    return GroupDefinition(group=GroupId(group), kind="prefix", prefix=pfx, values=allowed)


# ---- Layout -------------------------------------------------------------

LAYOUT: Tuple[GroupDefinition, ...] = (
    enum("display", """
        block inline-block inline flex inline-flex table inline-table table-caption
        table-cell table-column table-column-group table-footer-group table-header-group
        table-row-group table-row flow-root grid inline-grid contents list-item hidden
    """),
    enum("position", "static fixed absolute relative sticky"),
    enum("visibility", "visible invisible collapse"),
    prefix("inset", "inset"),
    prefix("inset_x", "inset-x"),
    prefix("inset_y", "inset-y"),
    prefix("top", "top"),
    prefix("right", "right"),
    prefix("bottom", "bottom"),
    prefix("left", "left"),
    prefix("start", "start"),
    prefix("end", "end"),
    prefix("z", "z"),
    enum("float", "float-left float-right float-start float-end float-none"),
    enum("clear", "clear-left clear-right clear-start clear-end clear-both clear-none"),
    enum("isolation", "isolate isolation-auto"),
    enum("object_fit", "object-contain object-cover object-fill object-none object-scale-down"),
    prefix("object_position", "object",
           "bottom center left left-bottom left-top right right-bottom right-top top"),
    prefix("overflow", "overflow", "auto hidden clip visible scroll"),
    prefix("overflow_x", "overflow-x", "auto hidden clip visible scroll"),
    prefix("overflow_y", "overflow-y", "auto hidden clip visible scroll"),
    prefix("overscroll", "overscroll", "auto contain none"),
    prefix("overscroll_x", "overscroll-x", "auto contain none"),
    prefix("overscroll_y", "overscroll-y", "auto contain none"),
    enum("box_sizing", "box-border box-content"),
    enum("box_decoration", "box-decoration-slice box-decoration-clone decoration-slice decoration-clone"),
    prefix("aspect", "aspect"),
    prefix("columns", "columns"),
    prefix("break_before", "break-before"),
    prefix("break_after", "break-after"),
    prefix("break_inside", "break-inside"),
    enum("container", "container"),
)

# ---- Flexbox & grid -----------------------------------------------------

FLEXBOX_GRID: Tuple[GroupDefinition, ...] = (
    enum("flex_direction", "flex-row flex-row-reverse flex-col flex-col-reverse"),
    enum("flex_wrap", "flex-wrap flex-wrap-reverse flex-nowrap"),
    prefix("flex", "flex", "1 auto initial none"),
    prefix("grow", "grow"),
    prefix("grow", "flex-grow"),
    prefix("shrink", "shrink"),
    prefix("shrink", "flex-shrink"),
    prefix("basis", "basis"),
    prefix("order", "order"),
    prefix("grid_cols", "grid-cols"),
    prefix("col_span", "col-span"),
    prefix("col_start", "col-start"),
    prefix("col_end", "col-end"),
    prefix("grid_rows", "grid-rows"),
    prefix("row_span", "row-span"),
    prefix("row_start", "row-start"),
    prefix("row_end", "row-end"),
    enum("grid_flow", "grid-flow-row grid-flow-col grid-flow-dense grid-flow-row-dense grid-flow-col-dense"),
    prefix("auto_cols", "auto-cols"),
    prefix("auto_rows", "auto-rows"),
    prefix("gap", "gap"),
    prefix("gap_x", "gap-x"),
    prefix("gap_y", "gap-y"),
    prefix("justify_content", "justify", "normal start end center between around evenly stretch"),
    prefix("justify_items", "justify-items"),
    prefix("justify_self", "justify-self"),
    prefix("align_content", "content", "normal center start end between around evenly baseline stretch"),
    prefix("align_items", "items"),
    prefix("align_self", "self"),
    prefix("place_content", "place-content"),
    prefix("place_items", "place-items"),
    prefix("place_self", "place-self"),
)

# ---- Spacing ------------------------------------------------------------

SPACING: Tuple[GroupDefinition, ...] = (
    prefix("p", "p"),
    prefix("px", "px"),
    prefix("py", "py"),
    prefix("ps", "ps"),
    prefix("pe", "pe"),
    prefix("pt", "pt"),
    prefix("pr", "pr"),
    prefix("pb", "pb"),
    prefix("pl", "pl"),
    prefix("m", "m"),
    prefix("mx", "mx"),
    prefix("my", "my"),
    prefix("ms", "ms"),
    prefix("me", "me"),
    prefix("mt", "mt"),
    prefix("mr", "mr"),
    prefix("mb", "mb"),
    prefix("ml", "ml"),
    prefix("space_x", "space-x"),
    prefix("space_y", "space-y"),
    enum("space_x_reverse", "space-x-reverse"),
    enum("space_y_reverse", "space-y-reverse"),
)

# ---- Sizing -------------------------------------------------------------

SIZING: Tuple[GroupDefinition, ...] = (
    prefix("size", "size"),
    prefix("w", "w"),
    prefix("min_w", "min-w"),
    prefix("max_w", "max-w"),
    prefix("h", "h"),
    prefix("min_h", "min-h"),
    prefix("max_h", "max-h"),
)

# ---- Typography ---------------------------------------------------------

TYPOGRAPHY: Tuple[GroupDefinition, ...] = (
    # Whitelisted weights/families win over the unconstrained family fallback
    # (custom families such as font-display).
    prefix("font_family", "font", "sans serif mono"),
    prefix("font_weight", "font", "thin extralight light normal medium semibold bold extrabold black"),
    prefix("font_family", "font"),
    enum("font_style", "italic not-italic"),
    prefix("font_stretch", "font-stretch"),
    enum("font_smoothing", "antialiased subpixel-antialiased"),
    enum("fvn_normal", "normal-nums"),
    enum("fvn_ordinal", "ordinal"),
    enum("fvn_slashed_zero", "slashed-zero"),
    enum("fvn_figure", "lining-nums oldstyle-nums"),
    enum("fvn_spacing", "proportional-nums tabular-nums"),
    enum("fvn_fraction", "diagonal-fractions stacked-fractions"),
    prefix("tracking", "tracking"),
    prefix("leading", "leading"),
    prefix("line_clamp", "line-clamp"),
    enum("list_style_position", "list-inside list-outside"),
    prefix("list_style_type", "list", "none disc decimal"),
    prefix("list_image", "list-image"),
    enum("text_align", "text-left text-center text-right text-justify text-start text-end"),
    prefix("text_color", "text"),
    prefix("text_shadow_color", "text-shadow"),
    enum("text_decoration", "underline overline line-through no-underline"),
    prefix("decoration_color", "decoration"),
    prefix("decoration_style", "decoration", "solid double dotted dashed wavy"),
    prefix("underline_offset", "underline-offset"),
    enum("text_transform", "uppercase lowercase capitalize normal-case"),
    enum("text_overflow", "truncate text-ellipsis text-clip"),
    enum("text_wrap", "text-wrap text-nowrap text-balance text-pretty"),
    enum("overflow_wrap", "wrap-normal wrap-break-word wrap-anywhere"),
    prefix("indent", "indent"),
    prefix("vertical_align", "align"),
    prefix("whitespace", "whitespace"),
    enum("word_break", "break-normal break-all break-keep"),
    prefix("hyphens", "hyphens"),
    prefix("content", "content"),
)

# ---- Backgrounds --------------------------------------------------------

BACKGROUNDS: Tuple[GroupDefinition, ...] = (
    enum("bg_attachment", "bg-fixed bg-local bg-scroll"),
    enum("bg_clip", "bg-clip-border bg-clip-padding bg-clip-content bg-clip-text"),
    enum("bg_origin", "bg-origin-border bg-origin-padding bg-origin-content"),
    enum("bg_position", """
        bg-bottom bg-center bg-left bg-left-bottom bg-left-top
        bg-right bg-right-bottom bg-right-top bg-top
    """),
    enum("bg_repeat", "bg-repeat bg-no-repeat bg-repeat-x bg-repeat-y bg-repeat-round bg-repeat-space"),
    enum("bg_size", "bg-auto bg-cover bg-contain"),
    enum("bg_image", "bg-none"),
    prefix("bg_color", "bg"),
    prefix("gradient_direction", "bg-gradient-to"),
    prefix("gradient_direction", "bg-linear-to"),
    prefix("gradient_direction", "bg-linear"),
    prefix("bg_conic", "bg-conic"),
    prefix("bg_radial", "bg-radial"),
    prefix("bg_blend", "bg-blend"),
    prefix("from_color", "from"),
    prefix("from_position", "from", "0% 5% 10% 15% 20% 25% 30% 35% 40% 45% 50% 55% 60% 65% 70% 75% 80% 85% 90% 95% 100%"),
    prefix("via_color", "via"),
    prefix("via_position", "via", "0% 5% 10% 15% 20% 25% 30% 35% 40% 45% 50% 55% 60% 65% 70% 75% 80% 85% 90% 95% 100%"),
    prefix("to_color", "to"),
    prefix("to_position", "to", "0% 5% 10% 15% 20% 25% 30% 35% 40% 45% 50% 55% 60% 65% 70% 75% 80% 85% 90% 95% 100%"),
)

# ---- Borders ------------------------------------------------------------

_BORDER_STYLES = "solid dashed dotted double hidden none"

BORDERS: Tuple[GroupDefinition, ...] = (
    prefix("rounded", "rounded"),
    prefix("rounded_s", "rounded-s"),
    prefix("rounded_e", "rounded-e"),
    prefix("rounded_t", "rounded-t"),
    prefix("rounded_r", "rounded-r"),
    prefix("rounded_b", "rounded-b"),
    prefix("rounded_l", "rounded-l"),
    prefix("rounded_ss", "rounded-ss"),
    prefix("rounded_se", "rounded-se"),
    prefix("rounded_ee", "rounded-ee"),
    prefix("rounded_es", "rounded-es"),
    prefix("rounded_tl", "rounded-tl"),
    prefix("rounded_tr", "rounded-tr"),
    prefix("rounded_br", "rounded-br"),
    prefix("rounded_bl", "rounded-bl"),
    prefix("border_style", "border", _BORDER_STYLES),
    # Width/color split happens in the classifier (see AMBIGUOUS_PREFIXES).
    prefix("border_color", "border"),
    prefix("border_color_x", "border-x"),
    prefix("border_color_y", "border-y"),
    prefix("border_color_t", "border-t"),
    prefix("border_color_r", "border-r"),
    prefix("border_color_b", "border-b"),
    prefix("border_color_l", "border-l"),
    prefix("border_color_s", "border-s"),
    prefix("border_color_e", "border-e"),
    prefix("divide_x", "divide-x"),
    prefix("divide_y", "divide-y"),
    enum("divide_x_reverse", "divide-x-reverse"),
    enum("divide_y_reverse", "divide-y-reverse"),
    prefix("divide_style", "divide", "solid dashed dotted double none"),
    prefix("divide_color", "divide"),
    enum("outline_style", "outline-none outline-hidden outline outline-solid outline-dashed outline-dotted outline-double"),
    prefix("outline_color", "outline"),
    prefix("outline_offset", "outline-offset"),
    prefix("ring_color", "ring"),
    prefix("ring_offset_color", "ring-offset"),
    enum("ring_inset", "ring-inset"),
    prefix("inset_ring_color", "inset-ring"),
)

# ---- Effects & filters --------------------------------------------------

EFFECTS: Tuple[GroupDefinition, ...] = (
    prefix("shadow_color", "shadow"),
    prefix("inset_shadow_color", "inset-shadow"),
    prefix("opacity", "opacity"),
    prefix("mix_blend", "mix-blend"),
)

FILTERS: Tuple[GroupDefinition, ...] = (
    prefix("blur", "blur"),
    prefix("brightness", "brightness"),
    prefix("contrast", "contrast"),
    prefix("drop_shadow_color", "drop-shadow"),
    prefix("grayscale", "grayscale"),
    prefix("hue_rotate", "hue-rotate"),
    prefix("invert", "invert"),
    prefix("saturate", "saturate"),
    prefix("sepia", "sepia"),
    prefix("backdrop_blur", "backdrop-blur"),
    prefix("backdrop_brightness", "backdrop-brightness"),
    prefix("backdrop_contrast", "backdrop-contrast"),
    prefix("backdrop_grayscale", "backdrop-grayscale"),
    prefix("backdrop_hue_rotate", "backdrop-hue-rotate"),
    prefix("backdrop_invert", "backdrop-invert"),
    prefix("backdrop_opacity", "backdrop-opacity"),
    prefix("backdrop_saturate", "backdrop-saturate"),
    prefix("backdrop_sepia", "backdrop-sepia"),
)

# ---- Transforms, transitions, interactivity -----------------------------

TRANSFORMS: Tuple[GroupDefinition, ...] = (
    enum("transform", "transform-cpu transform-gpu transform-none transform-3d"),
    prefix("rotate", "rotate"),
    prefix("rotate_x", "rotate-x"),
    prefix("rotate_y", "rotate-y"),
    prefix("rotate_z", "rotate-z"),
    prefix("scale", "scale"),
    prefix("scale_x", "scale-x"),
    prefix("scale_y", "scale-y"),
    prefix("scale_z", "scale-z"),
    prefix("skew_x", "skew-x"),
    prefix("skew_y", "skew-y"),
    prefix("translate", "translate"),
    prefix("translate_x", "translate-x"),
    prefix("translate_y", "translate-y"),
    prefix("translate_z", "translate-z"),
    enum("translate_none", "translate-none"),
    prefix("perspective", "perspective"),
    prefix("perspective_origin", "perspective-origin"),
    prefix("transform_origin", "origin"),
    enum("backface", "backface-visible backface-hidden"),
)

TRANSITIONS: Tuple[GroupDefinition, ...] = (
    enum("transition_property", """
        transition transition-all transition-colors transition-opacity
        transition-shadow transition-transform transition-none
    """),
    prefix("duration", "duration"),
    prefix("ease", "ease"),
    prefix("delay", "delay"),
    prefix("animate", "animate"),
)

INTERACTIVITY: Tuple[GroupDefinition, ...] = (
    prefix("accent", "accent"),
    prefix("appearance", "appearance"),
    prefix("caret", "caret"),
    enum("color_scheme", "color-scheme-normal color-scheme-dark color-scheme-light"),
    prefix("cursor", "cursor"),
    enum("field_sizing", "field-sizing-content field-sizing-fixed"),
    enum("pointer_events", "pointer-events-none pointer-events-auto"),
    enum("resize", "resize-none resize-y resize-x resize"),
    enum("scroll_behavior", "scroll-auto scroll-smooth"),
    prefix("scroll_m", "scroll-m"),
    prefix("scroll_mx", "scroll-mx"),
    prefix("scroll_my", "scroll-my"),
    prefix("scroll_ms", "scroll-ms"),
    prefix("scroll_me", "scroll-me"),
    prefix("scroll_mt", "scroll-mt"),
    prefix("scroll_mr", "scroll-mr"),
    prefix("scroll_mb", "scroll-mb"),
    prefix("scroll_ml", "scroll-ml"),
    prefix("scroll_p", "scroll-p"),
    prefix("scroll_px", "scroll-px"),
    prefix("scroll_py", "scroll-py"),
    prefix("scroll_ps", "scroll-ps"),
    prefix("scroll_pe", "scroll-pe"),
    prefix("scroll_pt", "scroll-pt"),
    prefix("scroll_pr", "scroll-pr"),
    prefix("scroll_pb", "scroll-pb"),
    prefix("scroll_pl", "scroll-pl"),
    prefix("snap_align", "snap", "start end center align-none"),
    prefix("snap_stop", "snap", "normal always"),
    prefix("snap_type", "snap", "none x y both mandatory proximity"),
    enum("touch", "touch-auto touch-none touch-manipulation"),
    enum("touch_x", "touch-pan-x touch-pan-left touch-pan-right"),
    enum("touch_y", "touch-pan-y touch-pan-up touch-pan-down"),
    enum("touch_pz", "touch-pinch-zoom"),
    prefix("select", "select"),
    prefix("will_change", "will-change"),
)

# ---- SVG, tables, accessibility -----------------------------------------

SVG: Tuple[GroupDefinition, ...] = (
    prefix("fill", "fill"),
    prefix("stroke_color", "stroke"),
)

TABLES: Tuple[GroupDefinition, ...] = (
    enum("border_collapse", "border-collapse border-separate"),
    prefix("border_spacing", "border-spacing"),
    prefix("border_spacing_x", "border-spacing-x"),
    prefix("border_spacing_y", "border-spacing-y"),
    enum("table_layout", "table-auto table-fixed"),
    prefix("caption", "caption"),
)

ACCESSIBILITY: Tuple[GroupDefinition, ...] = (
    enum("sr_only", "sr-only not-sr-only"),
    enum("forced_color_adjust", "forced-color-adjust-auto forced-color-adjust-none"),
)

ALL_GROUPS: Tuple[GroupDefinition, ...] = (
    LAYOUT
    + FLEXBOX_GRID
    + SPACING
    + SIZING
    + TYPOGRAPHY
    + BACKGROUNDS
    + BORDERS
    + EFFECTS
    + FILTERS
    + TRANSFORMS
    + TRANSITIONS
    + INTERACTIVITY
    + SVG
    + TABLES
    + ACCESSIBILITY
)


# ---- Ambiguous prefixes -------------------------------------------------

@dataclass(frozen=True)
class AmbiguousPrefix:
    """
    A prefix shared by a color group and a size/width group.

    Attributes:
        color_group: Group declared in the tables above; also the fallback.
        size_group: Group chosen when the value looks like a size/width.
        keywords: Literal values that select the size group.
        numeric: Bare numbers select the size group.
        bare_is_size: The prefix alone (``border``, ``shadow``) is a size.
        arbitrary_fallback: Group kind for an arbitrary value that is
            neither a color nor a length.
    """
    color_group: GroupId
    size_group: GroupId
    keywords: FrozenSet[str] = frozenset()
    numeric: bool = False
    bare_is_size: bool = False
    arbitrary_fallback: Literal["color", "size"] = "color"


_SHADOW_KEYWORDS = TSHIRT_SIZES | frozenset({"2xs", "3xs", "none", "inner"})


def _ambiguous(color: str, size: str, **kw) -> Tuple[GroupId, AmbiguousPrefix]:
    entry = AmbiguousPrefix(color_group=GroupId(color), size_group=GroupId(size), **kw)
    return entry.color_group, entry


def _border(direction: str = "") -> Tuple[GroupId, AmbiguousPrefix]:
    suffix = f"_{direction}" if direction else ""
    return _ambiguous(f"border_color{suffix}", f"border_w{suffix}", numeric=True, bare_is_size=True)


AMBIGUOUS_PREFIXES: Dict[GroupId, AmbiguousPrefix] = dict([
    _ambiguous("text_color", "font_size", keywords=TSHIRT_SIZES),
    _border(),
    _border("x"),
    _border("y"),
    _border("t"),
    _border("r"),
    _border("b"),
    _border("l"),
    _border("s"),
    _border("e"),
    _ambiguous("ring_color", "ring_w", numeric=True, bare_is_size=True),
    _ambiguous("ring_offset_color", "ring_offset_w", numeric=True),
    _ambiguous("inset_ring_color", "inset_ring_w", numeric=True, bare_is_size=True),
    _ambiguous("stroke_color", "stroke_w", numeric=True),
    _ambiguous("outline_color", "outline_w", numeric=True),
    _ambiguous("decoration_color", "decoration_thickness", keywords=frozenset({"auto", "from-font"}), numeric=True),
    _ambiguous("shadow_color", "shadow_size", keywords=_SHADOW_KEYWORDS, bare_is_size=True, arbitrary_fallback="size"),
    _ambiguous("inset_shadow_color", "inset_shadow_size", keywords=_SHADOW_KEYWORDS, bare_is_size=True, arbitrary_fallback="size"),
    _ambiguous("text_shadow_color", "text_shadow_size", keywords=_SHADOW_KEYWORDS, bare_is_size=True, arbitrary_fallback="size"),
    _ambiguous("drop_shadow_color", "drop_shadow", keywords=_SHADOW_KEYWORDS, bare_is_size=True, arbitrary_fallback="size"),
])


# Arbitrary-value dispatch: `bg-[url(...)]` is an image, not a color.
# Checked in order against the start of the bracketed payload.
ARBITRARY_DISPATCH: Dict[GroupId, Tuple[Tuple[str, GroupId], ...]] = {
    GroupId("bg_color"): (
        ("url(", GroupId("bg_image")),
        ("image:", GroupId("bg_image")),
        ("linear-gradient(", GroupId("bg_image")),
        ("radial-gradient(", GroupId("bg_image")),
        ("conic-gradient(", GroupId("bg_image")),
        ("length:", GroupId("bg_size")),
        ("size:", GroupId("bg_size")),
        ("position:", GroupId("bg_position")),
    ),
}


__all__ = [
    "GroupId",
    "GroupDefinition",
    "AmbiguousPrefix",
    "ALL_GROUPS",
    "AMBIGUOUS_PREFIXES",
    "ARBITRARY_DISPATCH",
    "enum",
    "prefix",
]
