"""
Tests for token classification, including value-shape disambiguation.
"""

import pytest

from twmerge import MergeConfig, classify
from twmerge.classify import Classifier
from twmerge.tokens import parse


@pytest.mark.parametrize("token, group", [
    ("text-sm", "font_size"),
    ("text-2xl", "font_size"),
    ("text-base", "font_size"),
    ("text-blue-500", "text_color"),
    ("text-white", "text_color"),
    ("text-[#333]", "text_color"),
    ("text-[14px]", "font_size"),
    ("text-[length:var(--size)]", "font_size"),
    ("text-[color:var(--fg)]", "text_color"),
    ("text-(--fg)", "text_color"),
    ("text-left", "text_align"),
    ("text-lg/7", "font_size"),
    ("border", "border_w"),
    ("border-2", "border_w"),
    ("border-red-500", "border_color"),
    ("border-x", "border_w_x"),
    ("border-t-4", "border_w_t"),
    ("border-t-red-500", "border_color_t"),
    ("border-solid", "border_style"),
    ("border-collapse", "border_collapse"),
    ("border-spacing-2", "border_spacing"),
    ("ring", "ring_w"),
    ("ring-2", "ring_w"),
    ("ring-blue-500", "ring_color"),
    ("ring-offset-2", "ring_offset_w"),
    ("ring-offset-white", "ring_offset_color"),
    ("stroke-2", "stroke_w"),
    ("stroke-blue-500", "stroke_color"),
    ("shadow", "shadow_size"),
    ("shadow-lg", "shadow_size"),
    ("shadow-none", "shadow_size"),
    ("shadow-inner", "shadow_size"),
    ("shadow-red-500", "shadow_color"),
    ("shadow-black/20", "shadow_color"),
    ("shadow-[0_0_10px_black]", "shadow_size"),
    ("shadow-[#000]", "shadow_color"),
    ("text-shadow-lg", "text_shadow_size"),
    ("text-shadow-red-500", "text_shadow_color"),
    ("outline", "outline_style"),
    ("outline-2", "outline_w"),
    ("outline-red-500", "outline_color"),
    ("outline-offset-2", "outline_offset"),
    ("decoration-2", "decoration_thickness"),
    ("decoration-from-font", "decoration_thickness"),
    ("decoration-red-500", "decoration_color"),
    ("decoration-wavy", "decoration_style"),
])
def test_ambiguous_prefixes(token, group):
    assert classify(token) == group


@pytest.mark.parametrize("token, group", [
    ("p-4", "p"),
    ("px-2", "px"),
    ("-mt-4", "mt"),
    ("hover:p-4", "p"),
    ("!p-4", "p"),
    ("flex", "display"),
    ("hidden", "display"),
    ("flex-1", "flex"),
    ("flex-row", "flex_direction"),
    ("flex-grow", "grow"),
    ("grow-0", "grow"),
    ("font-bold", "font_weight"),
    ("font-mono", "font_family"),
    ("font-display", "font_family"),
    ("bg-red-500", "bg_color"),
    ("bg-cover", "bg_size"),
    ("bg-none", "bg_image"),
    ("bg-linear-to-r", "gradient_direction"),
    ("bg-[url(/img/hero.png)]", "bg_image"),
    ("bg-[length:200px_100px]", "bg_size"),
    ("bg-[position:center_top]", "bg_position"),
    ("bg-[#fff]", "bg_color"),
    ("overflow-hidden", "overflow"),
    ("overflow-x-auto", "overflow_x"),
    ("size-8", "size"),
    ("line-clamp-2", "line_clamp"),
    ("rounded-tl-lg", "rounded_tl"),
    ("inset-x-0", "inset_x"),
    ("inset-ring-2", "inset_ring_w"),
    ("inset-shadow-sm", "inset_shadow_size"),
    ("scroll-mx-2", "scroll_mx"),
    ("snap-x", "snap_type"),
    ("snap-start", "snap_align"),
    ("translate-none", "translate_none"),
    ("tabular-nums", "fvn_spacing"),
])
def test_regular_groups(token, group):
    assert classify(token) == group


@pytest.mark.parametrize("token", ["foo", "btn-primary", "[mask-type:luminance]", ""])
def test_unknown_tokens(token):
    assert classify(token) is None


class TestClassifierConfig:

    def test_never_merge_names_are_unknown(self):
        cfg = MergeConfig(no_merge=frozenset({"hidden"}))
        assert classify("hidden", cfg) is None
        assert classify("block", cfg) == "display"

    def test_custom_palette_in_arbitrary_payload(self):
        cfg = MergeConfig(custom_colors=("brand",))
        assert classify("shadow-[brand]") == "shadow_size"
        assert classify("shadow-[brand]", cfg) == "shadow_color"

    def test_class_prefix_is_stripped_before_classification(self):
        cfg = MergeConfig(class_prefix="tw-")
        assert classify("tw-text-sm", cfg) == "font_size"
        assert classify("tw-bg-tw-blue", cfg) == "bg_color"


class TestValueOf:

    def setup_method(self):
        self.classifier = Classifier()

    @pytest.mark.parametrize("token, value", [
        ("p-4", "4"),
        ("border-x-red-500", "red-500"),
        ("border", ""),
        ("rounded-tl-lg", "lg"),
        ("bogus-1", ""),
    ])
    def test_value_after_prefix(self, token, value):
        assert self.classifier.value_of(parse(token)) == value
