"""
Tests for shorthand decomposition (MergeConfig.decompose).
"""

import pytest

from twmerge import merge


@pytest.mark.parametrize("base, overrides, expected", [
    ("p-4", "px-2", "py-4 px-2"),
    ("p-4", "pt-2", "px-4 pb-4 pt-2"),
    ("px-4", "pr-2", "pl-4 pr-2"),
    ("m-4", "mx-2", "my-4 mx-2"),
    ("gap-4", "gap-x-2", "gap-y-4 gap-x-2"),
    ("p-4 px-2", "py-1", "px-2 py-1"),
    ("tw:p-4", "tw:px-2", "tw:py-4 tw:px-2"),
    ("tw:p-4", "tw:pt-2", "tw:px-4 tw:pb-4 tw:pt-2"),
    ("inset-0", "top-2", "inset-x-0 bottom-0 top-2"),
    ("scroll-m-2", "scroll-mx-4", "scroll-my-2 scroll-mx-4"),
])
def test_shorthand_is_split(decompose_config, base, overrides, expected):
    assert merge(base, overrides, decompose_config) == expected


def test_negative_value(decompose_config):
    assert merge("-m-4", "mx-2", decompose_config) == "-my-4 mx-2"


def test_arbitrary_value(decompose_config):
    assert merge("p-[3px]", "px-2", decompose_config) == "py-[3px] px-2"


def test_flags_and_modifier_are_inherited(decompose_config):
    assert merge("hover:!p-4", "hover:px-2", decompose_config) == "hover:py-4! hover:px-2"


def test_bare_border_width(decompose_config):
    assert merge("border", "border-t-4", decompose_config) == "border-x border-b border-t-4"


def test_border_color(decompose_config):
    assert merge("border-red-500", "border-x-blue-500", decompose_config) == "border-y-red-500 border-x-blue-500"


def test_corner_radius(decompose_config):
    assert merge("rounded-lg", "rounded-t-none", decompose_config) == (
        "rounded-r-lg rounded-b-lg rounded-l-lg rounded-t-none"
    )


def test_child_suppressed_by_later_entry(decompose_config):
    """A longhand still waiting in the accumulator keeps the synthesized copy out"""
    assert merge("p-4 py-8", "px-2", decompose_config) == "py-8 px-2"


def test_child_suppressed_by_earlier_entry(decompose_config):
    assert merge("pb-1 p-4", "pt-2", decompose_config) == "pb-1 px-4 pt-2"


def test_other_scope_does_not_suppress(decompose_config):
    assert merge("hover:py-8 p-4", "px-2", decompose_config) == "hover:py-8 py-4 px-2"


def test_shorthand_override_still_drops_longhands(decompose_config):
    assert merge("px-2 py-4", "p-8", decompose_config) == "p-8"


def test_prefix_is_reapplied(decompose_config):
    from dataclasses import replace
    cfg = replace(decompose_config, class_prefix="tw-")
    assert merge("tw-p-4", "tw-px-2", cfg) == "tw-py-4 tw-px-2"
