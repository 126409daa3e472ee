"""Collapse repeated class names in a class map."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["dedupe_last_occurrence", "remove_identical_properties"]


def dedupe_last_occurrence(values: Iterable[str]) -> list[str]:
    """Keep each distinct value once, at the position of its last occurrence.

    ``[a, b, a]`` -> ``[b, a]``
    """
    return list(reversed(dict.fromkeys(reversed(list(values)))))


def remove_identical_properties(class_map: dict[str, list[str]]) -> dict[str, list[str]]:
    """Return a copy of *class_map* with duplicate names removed per selector.

    ``display: none; display: none`` needs one class; ``display: block;
    display: none`` keeps both.
    """
    return {selector: dedupe_last_occurrence(names) for selector, names in class_map.items()}
