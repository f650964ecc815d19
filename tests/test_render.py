from twmerge.tokens import ParsedToken, parse, render, render_many


def test_untouched_token_keeps_raw_text():
    for text in ["p-4", "hover:md:!-mt-4", "bg-[url(https://a.b/c.png)]", "text-sm/6", "p-4!"]:
        assert render(parse(text)) == text


def test_synthesized_token_is_assembled_from_parts():
    tok = ParsedToken(
        raw=None,
        base="px",
        class_prefix="tw-",
        variants=("hover", "md"),
        important=True,
        negative=True,
        arbitrary_value="3px",
    )
    assert render(tok) == "tw-hover:md:-px-[3px]!"


def test_with_base_clears_raw_and_keeps_flags():
    tok = parse("hover:-m-4/50").with_base("mx-4")

    assert tok.raw is None
    assert render(tok) == "hover:-mx-4/50"


def test_arbitrary_variable_rendering():
    tok = parse("bg-(--brand)").with_base("bg")
    assert render(tok) == "bg-(--brand)"


def test_render_many_joins_with_single_spaces():
    assert render_many(parse(t) for t in ["p-4", "m-2"]) == "p-4 m-2"
    assert render_many([]) == ""
