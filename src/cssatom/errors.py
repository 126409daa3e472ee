"""Error hierarchy for the atomizer and its collaborators."""

from __future__ import annotations


class AtomizeError(Exception):
    """Base error for all cssatom errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ParseError(AtomizeError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)


class EncodingError(AtomizeError):
    """Raised when a declaration cannot be turned into a class name."""


class SerializationError(AtomizeError):
    """Raised when a rewritten stylesheet cannot be written back to text."""
