"""Stylesheet AST: declarations, selector components, rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Position:
    """Source span of a parsed node (1-based lines and columns)."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    position: Position | None = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Selector components
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Tag:
    """Type selector: ``div``."""

    name: str
    original: str = ""


@dataclass(frozen=True)
class ClassAttribute:
    """Class selector: ``.card``, or any attribute selector on ``class``.

    ``action`` is the match operator; ``.card`` is ``~=``, ``[class]`` is
    ``exists``.
    """

    value: str
    original: str = ""
    action: str = "~="


@dataclass(frozen=True)
class OtherAttribute:
    """Any attribute selector other than class, including ``#id``.

    ``action`` is the match operator (``exists``, ``=``, ``~=``, ``|=``,
    ``^=``, ``$=``, ``*=``).
    """

    name: str
    action: str = "exists"
    value: str = ""
    original: str = ""


@dataclass(frozen=True)
class Pseudo:
    """Pseudo-class: ``:hover`` or ``:nth-child(2n)``."""

    name: str
    argument: str | None = None
    original: str = ""


@dataclass(frozen=True)
class PseudoElement:
    """Pseudo-element: ``::before``."""

    name: str
    original: str = ""


@dataclass(frozen=True)
class Universal:
    """Universal selector: ``*``."""

    original: str = "*"


@dataclass(frozen=True)
class Combinator:
    """Relationship between compound selectors.

    ``kind`` is one of ``descendant``, ``child``, ``adjacent``, ``sibling``.
    """

    kind: str
    original: str = " "


SelectorComponent = Union[
    Tag, ClassAttribute, OtherAttribute, Pseudo, PseudoElement, Universal, Combinator
]


@dataclass(frozen=True)
class Selector:
    """One top-level (comma separated) selector, decomposed into components."""

    components: tuple[SelectorComponent, ...]
    original: str

    @property
    def primary(self) -> SelectorComponent:
        return self.components[0]

    @property
    def pseudo(self) -> Pseudo | None:
        """The pseudo-class directly following the primary component, if any."""
        if len(self.components) > 1 and isinstance(self.components[1], Pseudo):
            return self.components[1]
        return None

    @property
    def pseudo_chain(self) -> tuple[Pseudo | PseudoElement, ...]:
        """Pseudo-classes and pseudo-elements directly following the primary.

        ``.a:hover::before`` -> ``(:hover, ::before)``
        """
        chain: list[Pseudo | PseudoElement] = []
        for component in self.components[1:]:
            if not isinstance(component, (Pseudo, PseudoElement)):
                break
            chain.append(component)
        return tuple(chain)

    @property
    def base_text(self) -> str:
        """Selector text without pseudos: ``.a:hover .b::after`` -> ``.a .b``."""
        return "".join(
            c.original for c in self.components if not isinstance(c, (Pseudo, PseudoElement))
        )


@dataclass(frozen=True)
class Rule:
    """Selectors paired with an ordered sequence of declarations."""

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()
    position: Position | None = field(default=None, compare=False)

    @property
    def selector_text(self) -> str:
        return ", ".join(s.original for s in self.selectors)


@dataclass(frozen=True)
class Stylesheet:
    """A parsed stylesheet: rules in source order."""

    rules: tuple[Rule, ...] = ()
