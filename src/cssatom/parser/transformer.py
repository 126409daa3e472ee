"""Lark Transformer that converts a CSS parse tree into the stylesheet AST."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from cssatom.config import AtomizerConfig
from cssatom.errors import ParseError
from cssatom.model.ast import Declaration, Position, Rule, Stylesheet
from cssatom.parser.selectors import parse_selector_list

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger("cssatom")


def _position(meta: object) -> Position | None:
    if getattr(meta, "empty", True):
        return None
    return Position(
        start_line=meta.line,  # type: ignore[attr-defined]
        start_column=meta.column,  # type: ignore[attr-defined]
        end_line=meta.end_line,  # type: ignore[attr-defined]
        end_column=meta.end_column,  # type: ignore[attr-defined]
    )


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Rule and Declaration objects."""

    @v_args(meta=True)
    def declaration(self, meta: object, items: list[Token]) -> Declaration:
        prop, value = items
        return Declaration(
            property=str(prop).strip(),
            value=str(value).strip(),
            position=_position(meta),
        )

    def declarations(self, items: list[Declaration]) -> tuple[Declaration, ...]:
        return tuple(items)

    @v_args(meta=True)
    def rule(self, meta: object, items: list[object]) -> Rule:
        selector_text = str(items[0])
        declarations = items[1] if len(items) > 1 else ()
        return Rule(
            selectors=parse_selector_list(selector_text),
            declarations=declarations,  # type: ignore[arg-type]
            position=_position(meta),
        )

    def start(self, items: list[Rule]) -> Stylesheet:
        return Stylesheet(rules=tuple(items))


@lru_cache(maxsize=None)
def _build_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_css(config: AtomizerConfig, source: str) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet.

    Raises ParseError for empty input, for text the grammar rejects and for
    selectors that cannot be decomposed.
    """
    if not source or not source.strip():
        raise ParseError("Invalid CSS input.")

    try:
        tree = _build_parser().parse(source)
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column, cause=e) from e

    try:
        stylesheet = CssTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise

    if config.verbose:
        logger.debug("Parsed %d rule(s)", len(stylesheet.rules))
    return stylesheet
