"""Decide which rules are atomized and which pass through untouched."""

from __future__ import annotations

from enum import Enum

from cssatom.model.ast import (
    ClassAttribute,
    Combinator,
    OtherAttribute,
    Pseudo,
    PseudoElement,
    Rule,
    Selector,
    SelectorComponent,
    Tag,
    Universal,
)

__all__ = ["RuleKind", "classify", "partition_selectors"]


class RuleKind(Enum):
    """How the engine treats a selector."""

    CLASS = "class"
    PASSTHROUGH = "passthrough"


def classify(component: SelectorComponent) -> RuleKind:
    """Classify a selector by its first component."""
    if isinstance(component, ClassAttribute):
        return RuleKind.CLASS
    if isinstance(
        component, (Tag, OtherAttribute, Universal, Pseudo, PseudoElement, Combinator)
    ):
        return RuleKind.PASSTHROUGH
    raise TypeError(f"Unknown selector component: {component!r}")


def partition_selectors(rule: Rule) -> tuple[tuple[Selector, ...], tuple[Selector, ...]]:
    """Split a rule's selectors into (class-targeted, passthrough)."""
    targeted: list[Selector] = []
    passthrough: list[Selector] = []
    for selector in rule.selectors:
        if classify(selector.primary) is RuleKind.CLASS:
            targeted.append(selector)
        else:
            passthrough.append(selector)
    return tuple(targeted), tuple(passthrough)
