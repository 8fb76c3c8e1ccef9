import pytest
from shadergraph import parse_template, Placeholder, Literal, ConfigurationError
from shadergraph.api.template import parse_placeholder

def test_parse_single_placeholder():
    tpl = parse_template("sin({amp,0,2,1,0.1,same}*input2)")
    assert len(tpl.segments) == 3
    lead, ph, tail = tpl.segments
    assert lead == Literal("sin(")
    assert tail == Literal("*input2)")
    assert isinstance(ph, Placeholder)
    assert (ph.name, ph.min_val, ph.max_val, ph.default, ph.step, ph.type_tag) == ("amp", 0.0, 2.0, 1.0, 0.1, "same")
    assert ph.infers_type
    assert tpl.skipped == ()

def test_placeholder_token_and_key():
    ph = parse_placeholder("amp,0,2,1,0.1,same")
    assert ph.token == "{amp,0,2,1,0.1,same}"
    assert ph.key == "{amp,0,2,1,0.1,same}/same"

def test_template_without_placeholders():
    tpl = parse_template("abs(input2)")
    assert tpl.segments == (Literal("abs(input2)"),)
    assert tpl.placeholders == ()

def test_malformed_fragment_is_kept_as_literal():
    tpl = parse_template("{bad,1,2}+input2")
    assert tpl.segments == (Literal("{bad,1,2}+input2"),)
    assert tpl.placeholders == ()
    assert len(tpl.skipped) == 1
    assert isinstance(tpl.skipped[0], ConfigurationError)
    assert tpl.skipped[0].fragment == "bad,1,2"

def test_non_numeric_bounds_are_malformed():
    with pytest.raises(ConfigurationError):
        parse_placeholder("amp,zero,2,1,0.1,f32")

def test_unterminated_brace_is_literal():
    tpl = parse_template("sin(input2){amp,0,2")
    assert tpl.segments == (Literal("sin(input2){amp,0,2"),)

def test_nested_opening_brace_uses_innermost():
    tpl = parse_template("{{a,0,1,0.5,0.1,f32}}")
    assert tpl.segments[0] == Literal("{")
    assert tpl.segments[1].name == "a"
    assert tpl.segments[2] == Literal("}")

def test_resolve_does_not_confuse_overlapping_names():
    tpl = parse_template("{a,0,1,0.5,0.1,f32}+{ab,0,1,0.25,0.1,f32}")
    values = {"a": "A", "ab": "AB"}
    assert tpl.resolve(lambda text: text, lambda ph: values[ph.name]) == "A+AB"

def test_placeholders_unique_by_name():
    tpl = parse_template("{k,0,1,0.5,0.1,f32}*{k,0,1,0.5,0.1,f32}+{j,0,1,0,0.1,f32}")
    assert [ph.name for ph in tpl.placeholders] == ["k", "j"]
