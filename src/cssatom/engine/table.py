"""Construction of entries in the new-rules table."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from cssatom.encoding import escape
from cssatom.model.ast import (
    ClassAttribute,
    Declaration,
    Pseudo,
    PseudoElement,
    Rule,
    Selector,
    SelectorComponent,
)
from cssatom.parser.selectors import parse_selector

__all__ = ["add_passthrough", "atomic_rule", "atomic_selector", "pseudo_key", "strip_pseudo"]

PSEUDO_MARKER = "___-"


def _marker(component: Pseudo | PseudoElement) -> str:
    if isinstance(component, PseudoElement):
        return PSEUDO_MARKER + "-" + component.name.upper()
    marker = PSEUDO_MARKER + component.name.upper()
    if component.argument is not None:
        marker += escape("(" + component.argument + ")")
    return marker


def pseudo_key(encoded: str, chain: Sequence[Pseudo | PseudoElement]) -> str:
    """Append pseudo-classes and pseudo-elements to an encoded class name.

    ``.rp__color__--COLONred`` + ``:hover`` ->
    ``.rp__color__--COLONred___-HOVER:hover``;
    ``::before`` adds ``___--BEFORE`` and ``::before``.
    """
    markers = "".join(_marker(component) for component in chain)
    suffix = "".join(component.original for component in chain)
    return encoded + markers + suffix


def strip_pseudo(key: str) -> tuple[str, str]:
    """Split a table key into (base name, pseudo suffix starting at ``:``)."""
    base, sep, rest = key.partition(":")
    return base, sep + rest


def atomic_selector(key: str) -> Selector:
    base, suffix = strip_pseudo(key)
    components: list[SelectorComponent] = [ClassAttribute(value=base[1:], original=base)]
    if suffix:
        components.extend(parse_selector(suffix).components)
    return Selector(components=tuple(components), original=key)


def atomic_rule(key: str, declaration: Declaration) -> Rule:
    """A single-declaration rule selecting the class *key*."""
    return Rule(selectors=(atomic_selector(key),), declarations=(declaration,))


def add_passthrough(table: dict[str, Rule], rule: Rule) -> None:
    """Copy *rule* into *table* under its selector text.

    A second rule with the same selector text has its declarations appended to
    the first.
    """
    key = rule.selector_text
    existing = table.get(key)
    if existing is None:
        table[key] = rule
    else:
        table[key] = replace(existing, declarations=existing.declarations + rule.declarations)
