"""Decompose selector text into selector component variants.

Syntax handled:
    .card  #main  div  *  [type="text"]  :hover  :nth-child(2n+1)  ::before
    descendant (whitespace), child (>), adjacent (+) and sibling (~) combinators
"""

from __future__ import annotations

import re

from cssatom.errors import ParseError
from cssatom.model.ast import (
    ClassAttribute,
    Combinator,
    OtherAttribute,
    Pseudo,
    PseudoElement,
    Selector,
    SelectorComponent,
    Tag,
    Universal,
)

__all__ = ["parse_selector", "parse_selector_list", "split_selector_list"]

_IDENT = r"-?(?:[_a-zA-Z]|\\.|[^\x00-\x7f])(?:[\w-]|\\.|[^\x00-\x7f])*"

_TOKEN_RE = re.compile(
    rf"""
    (?P<ws>\s+)
    | (?P<combinator>[>+~])
    | ::(?P<pseudo_element>{_IDENT})
    | :(?P<pseudo>{_IDENT})
        (?:\((?P<argument>[^()]*(?:\([^()]*\)[^()]*)*)\))?
    | \.(?P<class_name>{_IDENT})
    | \#(?P<id_name>(?:[\w-]|\\.|[^\x00-\x7f])+)
    | \[\s*(?P<attr_name>{_IDENT})\s*
        (?:(?P<attr_op>[~|^$*]?=)\s*
           (?P<attr_value>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^\]\s]+)\s*
           (?:[iIsS]\s*)?)?
      \]
    | (?P<universal>\*)
    | (?P<tag>{_IDENT})
    """,
    re.VERBOSE,
)

_COMBINATORS = {">": "child", "+": "adjacent", "~": "sibling"}

_WS_RE = re.compile(r"\s+")


def split_selector_list(text: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside brackets, parentheses or quotes do not split.
    """
    parts: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if ch == "\\":
            current.append(ch)
            escaped = True
            continue
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "\"'":
        return raw[1:-1]
    return raw


def _attribute(name: str, op: str | None, raw_value: str | None, original: str) -> SelectorComponent:
    value = _unquote(raw_value) if raw_value is not None else ""
    if name == "class":
        return ClassAttribute(value=value, original=original, action=op or "exists")
    return OtherAttribute(name=name, action=op or "exists", value=value, original=original)


def _component(match: re.Match[str]) -> SelectorComponent:
    original = match.group(0)
    if match.group("pseudo_element") is not None:
        return PseudoElement(name=match.group("pseudo_element"), original=original)
    if match.group("pseudo") is not None:
        return Pseudo(
            name=match.group("pseudo"),
            argument=match.group("argument"),
            original=original,
        )
    if match.group("class_name") is not None:
        return ClassAttribute(value=match.group("class_name"), original=original)
    if match.group("id_name") is not None:
        return OtherAttribute(
            name="id", action="=", value=match.group("id_name"), original=original
        )
    if match.group("attr_name") is not None:
        return _attribute(
            match.group("attr_name"),
            match.group("attr_op"),
            match.group("attr_value"),
            original,
        )
    if match.group("universal") is not None:
        return Universal(original=original)
    return Tag(name=match.group("tag"), original=original)


def parse_selector(text: str) -> Selector:
    """Parse one top-level selector (no commas) into a Selector."""
    original = _WS_RE.sub(" ", text.strip())
    if not original:
        raise ParseError("Empty selector")

    components: list[SelectorComponent] = []
    pending_descendant = False
    pos = 0
    while pos < len(original):
        match = _TOKEN_RE.match(original, pos)
        if match is None:
            raise ParseError(
                f"Unexpected character {original[pos]!r} in selector {original!r}",
                column=pos + 1,
            )
        pos = match.end()

        if match.group("ws") is not None:
            pending_descendant = bool(components)
            continue

        if match.group("combinator") is not None:
            if not components or isinstance(components[-1], Combinator):
                raise ParseError(f"Dangling combinator in selector {original!r}")
            components.append(
                Combinator(
                    kind=_COMBINATORS[match.group("combinator")],
                    original=f" {match.group(0)} ",
                )
            )
            pending_descendant = False
            continue

        if pending_descendant and not isinstance(components[-1], Combinator):
            components.append(Combinator(kind="descendant"))
        pending_descendant = False
        components.append(_component(match))

    if isinstance(components[-1], Combinator):
        raise ParseError(f"Dangling combinator in selector {original!r}")
    # Combinators carry canonical spacing, so ".a>.b" and ".a > .b" read alike.
    return Selector(
        components=tuple(components),
        original="".join(c.original for c in components),
    )


def parse_selector_list(text: str) -> tuple[Selector, ...]:
    """Parse a comma separated selector list."""
    return tuple(parse_selector(part) for part in split_selector_list(text))
