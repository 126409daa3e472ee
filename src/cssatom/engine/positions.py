"""Remove transient source positions from AST trees."""

from __future__ import annotations

from dataclasses import fields, is_dataclass, replace
from typing import Any

__all__ = ["strip_positions"]


def strip_positions(item: Any) -> Any:
    """Return *item* with every ``position`` attribute cleared, recursively.

    Walks dataclass instances, lists, tuples and dict values. Anything else is
    returned unchanged.
    """
    if isinstance(item, list):
        return [strip_positions(sub) for sub in item]
    if isinstance(item, tuple):
        return tuple(strip_positions(sub) for sub in item)
    if isinstance(item, dict):
        return {key: strip_positions(value) for key, value in item.items()}
    if is_dataclass(item) and not isinstance(item, type):
        changes: dict[str, Any] = {}
        for f in fields(item):
            if not f.init:
                continue
            value = getattr(item, f.name)
            if f.name == "position":
                if value is not None:
                    changes[f.name] = None
                continue
            stripped = strip_positions(value)
            if stripped is not value:
                changes[f.name] = stripped
        return replace(item, **changes) if changes else item
    return item
