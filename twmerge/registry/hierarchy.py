"""
Shorthand → longhand hierarchy and override conflicts.

HIERARCHY lists, for each shorthand group, its direct longhand children with
the class prefix used to rebuild a child token (``p`` → ``px``/``py``).
A longhand overriding a shorthand drops the shorthand; with decomposition
enabled the shorthand is instead replaced by the children that are not
being overridden.

OVERRIDE_CONFLICTS lists groups that wipe out unrelated groups when they
arrive as an override (``size-*`` replaces both ``w-*`` and ``h-*``).
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from .groups import GroupId

Child = Tuple[GroupId, str]


def _children(*pairs: Tuple[str, str]) -> Tuple[Child, ...]:
    return tuple((GroupId(group), pfx) for group, pfx in pairs)


def _box(pfx: str) -> Dict[GroupId, Tuple[Child, ...]]:
    """
    Two-level box shorthand: ``p`` → ``px``/``py`` → ``pr``/``pl``, ``pt``/``pb``.
    Group ids are the prefixes with dashes replaced (``scroll-mx`` → ``scroll_mx``).
    """
    def child(name: str) -> Tuple[str, str]:
        return name.replace("-", "_"), name

    return {
        GroupId(child(pfx)[0]): _children(child(pfx + "x"), child(pfx + "y")),
        GroupId(child(pfx + "x")[0]): _children(child(pfx + "r"), child(pfx + "l")),
        GroupId(child(pfx + "y")[0]): _children(child(pfx + "t"), child(pfx + "b")),
    }


HIERARCHY: Dict[GroupId, Tuple[Child, ...]] = {
    **_box("p"),
    **_box("m"),
    **_box("scroll-m"),
    **_box("scroll-p"),

    GroupId("inset"): _children(("inset_x", "inset-x"), ("inset_y", "inset-y")),
    GroupId("inset_x"): _children(("right", "right"), ("left", "left")),
    GroupId("inset_y"): _children(("top", "top"), ("bottom", "bottom")),

    GroupId("gap"): _children(("gap_x", "gap-x"), ("gap_y", "gap-y")),

    GroupId("border_w"): _children(("border_w_x", "border-x"), ("border_w_y", "border-y")),
    GroupId("border_w_x"): _children(("border_w_r", "border-r"), ("border_w_l", "border-l")),
    GroupId("border_w_y"): _children(("border_w_t", "border-t"), ("border_w_b", "border-b")),

    GroupId("border_color"): _children(("border_color_x", "border-x"), ("border_color_y", "border-y")),
    GroupId("border_color_x"): _children(("border_color_r", "border-r"), ("border_color_l", "border-l")),
    GroupId("border_color_y"): _children(("border_color_t", "border-t"), ("border_color_b", "border-b")),

    # Corner groups have two parents each (rounded-tr is under -t and -r).
    GroupId("rounded"): _children(
        ("rounded_t", "rounded-t"), ("rounded_r", "rounded-r"),
        ("rounded_b", "rounded-b"), ("rounded_l", "rounded-l"),
    ),
    GroupId("rounded_t"): _children(("rounded_tl", "rounded-tl"), ("rounded_tr", "rounded-tr")),
    GroupId("rounded_r"): _children(("rounded_tr", "rounded-tr"), ("rounded_br", "rounded-br")),
    GroupId("rounded_b"): _children(("rounded_bl", "rounded-bl"), ("rounded_br", "rounded-br")),
    GroupId("rounded_l"): _children(("rounded_tl", "rounded-tl"), ("rounded_bl", "rounded-bl")),

    GroupId("overflow"): _children(("overflow_x", "overflow-x"), ("overflow_y", "overflow-y")),
    GroupId("overscroll"): _children(("overscroll_x", "overscroll-x"), ("overscroll_y", "overscroll-y")),
    GroupId("scale"): _children(("scale_x", "scale-x"), ("scale_y", "scale-y")),
    GroupId("translate"): _children(
        ("translate_x", "translate-x"), ("translate_y", "translate-y"), ("translate_z", "translate-z"),
    ),
    GroupId("border_spacing"): _children(
        ("border_spacing_x", "border-spacing-x"), ("border_spacing_y", "border-spacing-y"),
    ),
}


def _groups(names: str) -> FrozenSet[GroupId]:
    return frozenset(GroupId(n) for n in names.split())


OVERRIDE_CONFLICTS: Dict[GroupId, FrozenSet[GroupId]] = {
    GroupId("size"): _groups("w h"),
    GroupId("flex"): _groups("basis grow shrink"),
    GroupId("line_clamp"): _groups("display overflow overflow_x overflow_y"),
    GroupId("fvn_normal"): _groups("fvn_ordinal fvn_slashed_zero fvn_figure fvn_spacing fvn_fraction"),
    GroupId("fvn_ordinal"): _groups("fvn_normal"),
    GroupId("fvn_slashed_zero"): _groups("fvn_normal"),
    GroupId("fvn_figure"): _groups("fvn_normal"),
    GroupId("fvn_spacing"): _groups("fvn_normal"),
    GroupId("fvn_fraction"): _groups("fvn_normal"),
    GroupId("translate_none"): _groups("translate translate_x translate_y translate_z"),
}


def build_ancestors(hierarchy: Dict[GroupId, Tuple[Child, ...]]) -> Dict[GroupId, FrozenSet[GroupId]]:
    """
    Transitive closure of child → parent edges.

    Returns a map from every longhand group to all of its shorthand
    ancestors. The declared data has no cycles, so the walk terminates.
    """
    parents: Dict[GroupId, set[GroupId]] = {}
    for parent, children in hierarchy.items():
        for child, _ in children:
            parents.setdefault(child, set()).add(parent)

    memo: Dict[GroupId, FrozenSet[GroupId]] = {}

    def collect(group: GroupId) -> FrozenSet[GroupId]:
        if group in memo:
            return memo[group]
        out: set[GroupId] = set()
        for parent in parents.get(group, ()):
            out.add(parent)
            out |= collect(parent)
        memo[group] = frozenset(out)
        return memo[group]

    return {group: collect(group) for group in parents}


__all__ = ["HIERARCHY", "OVERRIDE_CONFLICTS", "build_ancestors", "Child"]
