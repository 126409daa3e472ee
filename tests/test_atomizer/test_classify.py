"""Tests for rule classification."""

import pytest

from cssatom.engine.classify import RuleKind, classify, partition_selectors
from cssatom.model.ast import (
    ClassAttribute,
    Combinator,
    OtherAttribute,
    Pseudo,
    PseudoElement,
    Rule,
    Tag,
    Universal,
)
from cssatom.parser import parse_selector_list


class TestClassify:
    def test_class_targeted(self):
        assert classify(ClassAttribute(value="a")) is RuleKind.CLASS

    @pytest.mark.parametrize("action", ["=", "^=", "$=", "*=", "|=", "exists"])
    def test_class_attribute_any_operator(self, action):
        assert classify(ClassAttribute(value="a", action=action)) is RuleKind.CLASS

    @pytest.mark.parametrize(
        "component",
        [
            Tag(name="div"),
            OtherAttribute(name="id", action="=", value="main"),
            Universal(),
            Pseudo(name="root"),
            PseudoElement(name="selection"),
            Combinator(kind="child"),
        ],
    )
    def test_passthrough(self, component):
        assert classify(component) is RuleKind.PASSTHROUGH

    def test_unknown_component(self):
        with pytest.raises(TypeError):
            classify("div")  # type: ignore[arg-type]


class TestPartitionSelectors:
    def test_split(self):
        rule = Rule(selectors=parse_selector_list(".a, div, .b:hover, #x"))
        targeted, passthrough = partition_selectors(rule)
        assert [s.original for s in targeted] == [".a", ".b:hover"]
        assert [s.original for s in passthrough] == ["div", "#x"]

    def test_class_attribute_selectors_targeted(self):
        rule = Rule(selectors=parse_selector_list('[class="x"], [class^="y"], [class], [id="z"]'))
        targeted, passthrough = partition_selectors(rule)
        assert [s.original for s in targeted] == ['[class="x"]', '[class^="y"]', "[class]"]
        assert [s.original for s in passthrough] == ['[id="z"]']

    def test_class_in_second_position_is_passthrough(self):
        rule = Rule(selectors=parse_selector_list("div .a"))
        targeted, passthrough = partition_selectors(rule)
        assert targeted == ()
        assert len(passthrough) == 1
