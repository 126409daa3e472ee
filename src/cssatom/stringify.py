"""Write a Stylesheet back to CSS text."""

from __future__ import annotations

from cssatom.errors import SerializationError
from cssatom.model.ast import Rule, Stylesheet

__all__ = ["stringify", "stringify_rule"]


def stringify_rule(rule: Rule, compress: bool = False) -> str:
    """Render one rule.

    ``.a, .b { color: red; margin: 0; }`` or, compressed,
    ``.a,.b{color:red;margin:0}``.
    """
    if not rule.selectors:
        raise SerializationError(f"Rule has no selectors: {rule!r}")
    if compress:
        selectors = ",".join(s.original for s in rule.selectors)
        body = ";".join(f"{d.property}:{d.value}" for d in rule.declarations)
        return f"{selectors}{{{body}}}"
    selectors = ", ".join(s.original for s in rule.selectors)
    if not rule.declarations:
        return f"{selectors} {{}}"
    body = " ".join(f"{d.property}: {d.value};" for d in rule.declarations)
    return f"{selectors} {{ {body} }}"


def stringify(stylesheet: Stylesheet, compress: bool = False) -> str:
    """Render every rule of *stylesheet*, one per line unless compressed."""
    separator = "" if compress else "\n"
    return separator.join(stringify_rule(rule, compress) for rule in stylesheet.rules)
