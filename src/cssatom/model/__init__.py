"""cssatom model layer -- public type re-exports."""

from cssatom.model.ast import (
    ClassAttribute,
    Combinator,
    Declaration,
    OtherAttribute,
    Position,
    Pseudo,
    PseudoElement,
    Rule,
    Selector,
    SelectorComponent,
    Stylesheet,
    Tag,
    Universal,
)

__all__ = [
    "Position",
    "Declaration",
    # selector components
    "Tag",
    "ClassAttribute",
    "OtherAttribute",
    "Pseudo",
    "PseudoElement",
    "Universal",
    "Combinator",
    "SelectorComponent",
    # structure
    "Selector",
    "Rule",
    "Stylesheet",
]
