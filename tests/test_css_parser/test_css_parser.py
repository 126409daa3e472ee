"""Tests for the rule-level CSS parser."""

import pytest

from cssatom.config import AtomizerConfig
from cssatom.model.ast import (
    ClassAttribute,
    Declaration,
    Pseudo,
    Rule,
    Stylesheet,
    Tag,
)
from cssatom.parser import ParseError, parse_css

CONFIG = AtomizerConfig(verbose=False)


def _parse(source: str) -> Stylesheet:
    return parse_css(CONFIG, source)


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestSingleRule:
    def test_one_rule(self):
        ss = _parse(".test { color: #F00 }")
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selectors[0].original == ".test"
        assert rule.selectors[0].components == (ClassAttribute(value="test", original=".test"),)
        assert rule.declarations == (Declaration(property="color", value="#F00"),)

    def test_trailing_semicolon(self):
        ss = _parse(".a { color: red; }")
        assert ss.rules[0].declarations == (Declaration("color", "red"),)

    def test_no_whitespace(self):
        ss = _parse(".a{color:red;margin:0}")
        assert [d.property for d in ss.rules[0].declarations] == ["color", "margin"]

    def test_declaration_order_kept(self):
        ss = _parse(".a { display: block; display: none; }")
        assert [d.value for d in ss.rules[0].declarations] == ["block", "none"]

    def test_empty_block(self):
        ss = _parse(".a {}")
        assert ss.rules[0].declarations == ()

    def test_stray_semicolons(self):
        ss = _parse(".a { ; color: red;; }")
        assert ss.rules[0].declarations == (Declaration("color", "red"),)


class TestValues:
    def test_multi_word_value(self):
        ss = _parse(".a { margin: 0 auto; }")
        assert ss.rules[0].declarations[0].value == "0 auto"

    def test_important(self):
        ss = _parse(".a { color: red !important; }")
        assert ss.rules[0].declarations[0].value == "red !important"

    def test_quoted_semicolon(self):
        ss = _parse('.a { content: ";"; }')
        assert ss.rules[0].declarations[0].value == '";"'

    def test_url_with_colon_and_slash(self):
        ss = _parse(".a { background: url(http://example.com/x.png); }")
        assert ss.rules[0].declarations[0].value == "url(http://example.com/x.png)"

    def test_font_shorthand_slash(self):
        ss = _parse(".a { font: 12px/1.5 serif; }")
        assert ss.rules[0].declarations[0].value == "12px/1.5 serif"

    def test_custom_property(self):
        ss = _parse(":root { --main-color: #333; }")
        assert ss.rules[0].declarations[0].property == "--main-color"


class TestMultipleRules:
    def test_source_order(self):
        ss = _parse(".a { color: red; }\ndiv { margin: 0; }\n.b:hover { color: blue; }")
        assert [r.selectors[0].original for r in ss.rules] == [".a", "div", ".b:hover"]

    def test_comments_ignored(self):
        ss = _parse("/* header */ .a { /* inner */ color: red; }")
        assert len(ss.rules) == 1
        assert ss.rules[0].declarations == (Declaration("color", "red"),)

    def test_comment_only_stylesheet(self):
        assert _parse("/* nothing here */").rules == ()

    def test_selector_list(self):
        ss = _parse(".a, .b,\n.c { color: red; }")
        assert [s.original for s in ss.rules[0].selectors] == [".a", ".b", ".c"]


class TestComponents:
    def test_tag_rule(self):
        ss = _parse("div { color: red; }")
        assert ss.rules[0].selectors[0].primary == Tag(name="div", original="div")

    def test_pseudo_rule(self):
        ss = _parse(".a:hover { color: red; }")
        sel = ss.rules[0].selectors[0]
        assert sel.pseudo == Pseudo(name="hover", original=":hover")


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


class TestPositions:
    def test_rule_position(self):
        ss = _parse("\n.a { color: red; }")
        pos = ss.rules[0].position
        assert pos is not None
        assert pos.start_line == 2
        assert pos.start_column == 1

    def test_declaration_position(self):
        ss = _parse(".a { color: red; }")
        pos = ss.rules[0].declarations[0].position
        assert pos is not None
        assert pos.start_line == 1
        assert pos.start_column == 6

    def test_positions_ignored_by_equality(self):
        first = _parse(".a { color: red; }")
        second = _parse("\n\n.a {\n  color: red;\n}")
        assert first == second


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_empty_input(self):
        with pytest.raises(ParseError):
            _parse("")

    def test_whitespace_input(self):
        with pytest.raises(ParseError):
            _parse("  \n\t ")

    def test_missing_close_brace(self):
        with pytest.raises(ParseError):
            _parse(".a { color: red;")

    def test_missing_colon(self):
        with pytest.raises(ParseError):
            _parse(".a { color }")

    def test_at_rule_rejected(self):
        with pytest.raises(ParseError):
            _parse("@media print { .a { color: red; } }")

    def test_error_has_line(self):
        with pytest.raises(ParseError) as info:
            _parse(".a { color: red; }\n.b { color }")
        assert info.value.line == 2

    def test_bad_selector(self):
        with pytest.raises(ParseError):
            _parse(".a > { color: red; }")

    def test_empty_selector_in_list(self):
        with pytest.raises(ParseError):
            _parse(".a, { color: red; }")


class TestDataclasses:
    def test_rule_is_frozen(self):
        rule = _parse(".a { color: red; }").rules[0]
        with pytest.raises(AttributeError):
            rule.declarations = ()  # type: ignore[misc]

    def test_rule_type(self):
        assert isinstance(_parse(".a { color: red; }").rules[0], Rule)
