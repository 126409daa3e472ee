"""cssatom: split stylesheets into shared single-declaration class rules."""

from cssatom.config import AtomizerConfig
from cssatom.engine import AtomizeResult, atomize
from cssatom.errors import AtomizeError, EncodingError, ParseError, SerializationError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "atomize",
    "AtomizeResult",
    "AtomizerConfig",
    "AtomizeError",
    "ParseError",
    "EncodingError",
    "SerializationError",
]
