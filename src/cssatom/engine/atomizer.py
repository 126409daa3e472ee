"""Atomization engine: split class rules into single-declaration rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from cssatom.config import AtomizerConfig, resolve_config
from cssatom.encoding import encode
from cssatom.engine.classify import partition_selectors
from cssatom.engine.dedup import remove_identical_properties
from cssatom.engine.positions import strip_positions
from cssatom.engine.table import add_passthrough, atomic_rule, pseudo_key, strip_pseudo
from cssatom.engine.uglify import uglify_rules
from cssatom.errors import ParseError
from cssatom.model.ast import Rule, Selector, Stylesheet
from cssatom.parser import parse_css
from cssatom.reporting import report
from cssatom.stringify import stringify

__all__ = ["AtomizeResult", "atomize", "atomize_rules"]

logger = logging.getLogger("cssatom")


@dataclass(frozen=True)
class AtomizeResult:
    """Outcome of one atomize call.

    Attributes:
        class_map: Original selector -> atomic class names reproducing it.
        output: The rewritten stylesheet text.
    """

    class_map: dict[str, list[str]] = field(default_factory=dict)
    output: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"classMap": self.class_map, "output": self.output}


def _update_class_map(class_map: dict[str, list[str]], selector: Selector, key: str) -> None:
    base, _ = strip_pseudo(key)
    class_map.setdefault(selector.base_text, []).append(base)


def atomize_rules(
    config: AtomizerConfig, rules: Iterable[Rule]
) -> tuple[dict[str, Rule], dict[str, list[str]]]:
    """Build the new-rules table and the deduplicated class map for *rules*."""
    new_rules: dict[str, Rule] = {}
    class_map: dict[str, list[str]] = {}

    for rule in rules:
        rule = strip_positions(rule)
        targeted, passthrough = partition_selectors(rule)
        if passthrough:
            add_passthrough(new_rules, Rule(selectors=passthrough, declarations=rule.declarations))

        if not targeted:
            continue
        for declaration in rule.declarations:
            encoded = encode(config, declaration)
            for selector in targeted:
                chain = selector.pseudo_chain
                key = pseudo_key(encoded, chain) if chain else encoded
                _update_class_map(class_map, selector, key)
                new_rules[key] = atomic_rule(key, declaration)

    return strip_positions(new_rules), remove_identical_properties(class_map)


def atomize(
    config: AtomizerConfig | Mapping[str, Any] | None,
    text: str,
    uglify: bool = False,
) -> AtomizeResult:
    """Atomize stylesheet *text*.

    Parse failures are passed to the reporting hook and yield an empty
    result; encoding and serialization failures propagate.
    """
    config = resolve_config(config)
    try:
        stylesheet = parse_css(config, text or "")
    except ParseError as exc:
        report(config, "Error parsing CSS", exc)
        return AtomizeResult()

    new_rules, class_map = atomize_rules(config, stylesheet.rules)
    if uglify:
        new_rules, class_map = uglify_rules(new_rules, class_map, config.class_prefix)

    logger.debug(
        "Atomized %d rule(s) into %d rule(s) for %d selector(s)",
        len(stylesheet.rules),
        len(new_rules),
        len(class_map),
    )
    output = stringify(Stylesheet(rules=tuple(new_rules.values())), compress=config.compress)
    return AtomizeResult(class_map=class_map, output=output)
