"""
Tests for merging class lists.
"""

import pytest

from twmerge import MergeConfig, Merger, merge, parse_many


class TestSimpleConflicts:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("p-4", "p-2", "p-2"),
        ("p-4", "mt-2", "p-4 mt-2"),
        ("font-bold", "font-thin", "font-thin"),
        ("bg-blue-500", "bg-red-400", "bg-red-400"),
        ("text-red-500", "text-blue-200", "text-blue-200"),
        ("flex", "hidden", "hidden"),
        ("absolute", "relative", "relative"),
        ("font-bold text-black", "bg-white", "font-bold text-black bg-white"),
        ("p-4", "-p-2", "-p-2"),
        ("p-4", "!p-2", "!p-2"),
    ])
    def test_last_wins_within_group(self, base, overrides, expected):
        assert merge(base, overrides) == expected

    def test_unknown_tokens_are_appended_and_never_displace(self):
        assert merge("foo p-4", "bar p-2") == "foo bar p-2"
        assert merge("foo", "foo") == "foo foo"

    def test_overrides_conflict_with_each_other_through_the_accumulator(self):
        assert merge("", "p-1 p-2") == "p-2"
        assert merge("m-1", "p-1 m-2 p-2") == "m-2 p-2"


class TestShorthands:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("p-4", "px-2", "px-2"),
        ("p-4", "pt-2", "pt-2"),
        ("px-4", "pr-2", "pr-2"),
        ("m-4", "mx-2", "mx-2"),
        ("gap-4", "gap-x-2", "gap-x-2"),
        ("p-4 px-2", "py-1", "px-2 py-1"),
        ("rounded-lg", "rounded-tl-none", "rounded-tl-none"),
        ("overflow-hidden", "overflow-x-auto", "overflow-x-auto"),
    ])
    def test_longhand_drops_shorthand(self, base, overrides, expected):
        assert merge(base, overrides) == expected

    @pytest.mark.parametrize("base, overrides, expected", [
        ("px-2", "p-4", "p-4"),
        ("px-2 py-4", "p-8", "p-8"),
        ("pr-2 pl-2", "px-4", "px-4"),
        ("pt-1 mt-1", "p-4", "mt-1 p-4"),
        ("border-t-2 border-red-500", "border-4", "border-red-500 border-4"),
    ])
    def test_shorthand_drops_longhands(self, base, overrides, expected):
        assert merge(base, overrides) == expected


class TestOverrideConflicts:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("w-4 h-4", "size-8", "size-8"),
        ("w-4", "size-8", "size-8"),
        ("basis-1/2 grow", "flex-1", "flex-1"),
        ("block overflow-hidden", "line-clamp-2", "line-clamp-2"),
        ("tabular-nums ordinal", "normal-nums", "normal-nums"),
        ("normal-nums", "ordinal", "ordinal"),
        ("translate-x-2 translate-y-4", "translate-none", "translate-none"),
    ])
    def test_dominant_group_prunes(self, base, overrides, expected):
        assert merge(base, overrides) == expected

    def test_pruning_is_scoped_to_variants(self):
        assert merge("hover:w-4 h-4", "size-8") == "hover:w-4 size-8"


class TestRemoval:

    def test_remove_one(self):
        assert merge("font-bold text-black", "remove:font-bold grid") == "text-black grid"

    def test_remove_all(self):
        assert merge("font-bold text-black", "remove:* grid") == "grid"

    def test_remove_absent_is_noop(self):
        assert merge("font-bold text-black", "remove:italic") == "font-bold text-black"

    def test_remove_matches_variant_scope(self):
        assert merge("font-bold hover:font-bold", "remove:hover:font-bold") == "font-bold"
        assert merge("dark:hover:p-4", "remove:hover:dark:p-4") == ""

    def test_remove_all_then_more_overrides(self):
        assert merge("p-4 m-2", "px-2 remove:* mt-1") == "mt-1"

    def test_never_merge_tokens_survive_remove_all(self):
        cfg = MergeConfig(no_merge=frozenset({"btn"}))
        assert merge("btn p-4", "remove:* grid", cfg) == "btn grid"
        assert merge("btn p-4", "remove:btn", cfg) == "p-4"


class TestVariants:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("hover:bg-red-500", "hover:bg-blue-500", "hover:bg-blue-500"),
        ("hover:bg-red-500", "focus:bg-blue-500", "hover:bg-red-500 focus:bg-blue-500"),
        ("dark:hover:bg-red-500", "hover:dark:bg-blue-500", "hover:dark:bg-blue-500"),
        ("bg-red-500", "hover:bg-blue-500", "bg-red-500 hover:bg-blue-500"),
        ("hover:p-4", "focus:p-2", "hover:p-4 focus:p-2"),
        ("tw:bg-blue-400", "tw:bg-red-500", "tw:bg-red-500"),
        ("tw:bg-blue-400", "bg-red-500", "tw:bg-blue-400 bg-red-500"),
        ("tw:p-4", "tw:px-2", "tw:px-2"),
        ("tw:md:bg-blue-400", "md:tw:bg-red-500", "md:tw:bg-red-500"),
        ("tw:md:bg-blue-400", "tw:bg-red-500", "tw:md:bg-blue-400 tw:bg-red-500"),
        ("tw:md:p-4", "tw:md:pt-2", "tw:md:pt-2"),
        ("a|b:p-4", "a:b:p-2", "a|b:p-4 a:b:p-2"),
    ])
    def test_variant_scopes(self, base, overrides, expected):
        assert merge(base, overrides) == expected


class TestAmbiguousPrefixes:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("text-blue-500", "text-sm", "text-blue-500 text-sm"),
        ("text-sm", "text-blue-500", "text-sm text-blue-500"),
        ("text-red-500", "text-blue-500", "text-blue-500"),
        ("text-sm", "text-lg", "text-lg"),
        ("border-2", "border-red-500", "border-2 border-red-500"),
        ("border-red-500", "border-2", "border-red-500 border-2"),
        ("border-2", "border-4", "border-4"),
        ("border-red-500", "border-blue-300", "border-blue-300"),
        ("ring-2", "ring-blue-500", "ring-2 ring-blue-500"),
        ("ring-red-500", "ring-blue-500", "ring-blue-500"),
        ("shadow-lg", "shadow-red-500", "shadow-lg shadow-red-500"),
        ("shadow-sm", "shadow-lg", "shadow-lg"),
        ("stroke-2", "stroke-blue-500", "stroke-2 stroke-blue-500"),
        ("stroke-1", "stroke-2", "stroke-2"),
        ("text-left text-sm", "text-center", "text-sm text-center"),
        ("text-red-500", "text-(--fg)/50", "text-(--fg)/50"),
        ("text-sm", "text-(--fg)/50", "text-sm text-(--fg)/50"),
        ("bg-red-500/20", "bg-[#0af]/75", "bg-[#0af]/75"),
    ])
    def test_size_and_color_do_not_conflict(self, base, overrides, expected):
        assert merge(base, overrides) == expected


class TestClassPrefix:

    @pytest.mark.parametrize("base, overrides, expected", [
        ("tw-p-4", "tw-p-2", "tw-p-2"),
        ("tw-p-4 tw-flex", "tw-m-2", "tw-p-4 tw-flex tw-m-2"),
        ("tw-p-4", "tw-px-2", "tw-px-2"),
        ("tw-p-4", "tw-pt-2", "tw-pt-2"),
        ("p-4", "tw-p-2", "tw-p-2"),
        ("tw-hover:p-4", "tw-hover:p-2", "tw-hover:p-2"),
        ("tw-hover:p-4", "tw-focus:p-2", "tw-hover:p-4 tw-focus:p-2"),
        ("tw-bg-tw-blue", "tw-bg-red-500", "tw-bg-red-500"),
    ])
    def test_prefix_preserved(self, prefix_config, base, overrides, expected):
        assert merge(base, overrides, prefix_config) == expected


class TestProperties:

    @pytest.mark.parametrize("a, b", [
        ("p-4 text-red-500 hover:bg-white", "px-2 text-blue-500"),
        ("w-4 h-4 border-2", "size-8 border-red-500"),
        ("font-bold text-black", "remove:font-bold grid"),
    ])
    def test_idempotence(self, a, b):
        once = merge(a, b)
        assert merge(once, b) == once

    def test_identity(self):
        assert merge("  p-4   m-2 ", "") == "p-4 m-2"
        assert merge("", "p-4\tm-2") == "p-4 m-2"

    def test_mutual_exclusion(self):
        assert "p-1" not in merge("m-4 p-8", "p-1 p-3").split()


class TestMergerTokens:

    def setup_method(self):
        self.merger = Merger()

    def test_merge_returns_tokens(self):
        result = self.merger.merge(parse_many("p-4 m-2"), parse_many("px-2"))
        assert [t.raw for t in result] == ["m-2", "px-2"]

    def test_inputs_are_not_mutated(self):
        base = parse_many("p-4 m-2")
        self.merger.merge(base, parse_many("remove:* p-2"))
        assert [t.raw for t in base] == ["p-4", "m-2"]

    def test_merge_text(self):
        assert self.merger.merge_text("p-4", "p-2") == "p-2"


class TestNestedInputs:

    def test_list_inputs(self):
        assert merge(["p-4", "mt-2"], "p-2") == "mt-2 p-2"
        assert merge("p-4 mt-2", ["p-2"]) == "mt-2 p-2"

    def test_conditional_inputs(self):
        assert merge({"p-4": True, "m-2": False}, [("p-2", True)]) == "p-2"
