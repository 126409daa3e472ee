"""Rename atomic class names to short generated tokens."""

from __future__ import annotations

import logging
from dataclasses import replace

from cssatom.engine.table import atomic_selector, strip_pseudo
from cssatom.model.ast import Rule
from cssatom.uglifier import next_token

__all__ = ["uglify_rules"]

logger = logging.getLogger("cssatom")


def uglify_rules(
    rules: dict[str, Rule],
    class_map: dict[str, list[str]],
    prefix: str = "rp__",
) -> tuple[dict[str, Rule], dict[str, list[str]]]:
    """Give every class-keyed rule a short name and remap the class map.

    Keys not starting with ``.`` (passthrough rules) keep their key and
    position in the table. Pseudo suffixes stay on the renamed key; the class
    map only ever holds base names.
    """
    counter = 0
    renamed: dict[str, str] = {}
    new_rules: dict[str, Rule] = {}

    for key, rule in rules.items():
        if not key.startswith("."):
            new_rules[key] = rule
            continue
        base, suffix = strip_pseudo(key)
        token = next_token(counter, prefix)
        counter = token.counter
        new_key = token.name + suffix
        new_rules[new_key] = replace(rule, selectors=(atomic_selector(new_key),))
        renamed[base] = token.name

    new_map = {
        selector: [renamed.get(name, name) for name in names]
        for selector, names in class_map.items()
    }
    logger.debug("Uglified %d class name(s)", len(renamed))
    return new_rules, new_map
