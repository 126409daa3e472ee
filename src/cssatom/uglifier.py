"""Short class-name tokens for the uglification pass."""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = ["ALPHABET", "Token", "next_token", "short_name"]

ALPHABET = string.digits + string.ascii_lowercase

# Filter lists used by ad blockers hide elements whose class contains "ad".
_BLOCKED = ("ad",)


@dataclass(frozen=True)
class Token:
    """A generated class name and the counter to pass to the next call."""

    name: str
    counter: int


def short_name(index: int) -> str:
    """Return the *index*-th string over ALPHABET, shortest first.

    0 -> "0", 35 -> "z", 36 -> "00", 37 -> "01", ...
    """
    if index < 0:
        raise ValueError("index must be non-negative")
    base = len(ALPHABET)
    length = 1
    span = base
    while index >= span:
        index -= span
        length += 1
        span *= base
    chars: list[str] = []
    for _ in range(length):
        index, digit = divmod(index, base)
        chars.append(ALPHABET[digit])
    return "".join(reversed(chars))


def next_token(counter: int, prefix: str = "rp__") -> Token:
    """Draw the next class name at or after *counter*."""
    while True:
        candidate = short_name(counter)
        counter += 1
        if not any(blocked in candidate for blocked in _BLOCKED):
            return Token(name="." + prefix + candidate, counter=counter)
