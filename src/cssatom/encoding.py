"""Canonical class names for single declarations.

``padding: 10px``      -> ``.rp__padding__--COLON10px``
``color: #F00``        -> ``.rp__color__--COLON--HASHF00``
``margin: 0 auto``     -> ``.rp__margin__--COLON0_auto``
"""

from __future__ import annotations

import re

from cssatom.config import AtomizerConfig
from cssatom.errors import EncodingError
from cssatom.model.ast import Declaration

__all__ = ["encode", "escape"]

_NAMED: dict[str, str] = {
    ":": "COLON",
    ";": "SEMICOLON",
    "#": "HASH",
    ".": "PERIOD",
    ",": "COMMA",
    "(": "OPENPAREN",
    ")": "CLOSEPAREN",
    "[": "OPENBRACKET",
    "]": "CLOSEBRACKET",
    "{": "OPENCURLY",
    "}": "CLOSECURLY",
    "%": "PERCENT",
    "!": "EXCLAMATION",
    "/": "SLASH",
    "\\": "BACKSLASH",
    '"': "DOUBLEQUOTE",
    "'": "SINGLEQUOTE",
    "+": "PLUS",
    "*": "ASTERISK",
    "=": "EQUALS",
    ">": "GREATERTHAN",
    "<": "LESSTHAN",
    "~": "TILDE",
    "@": "AT",
    "&": "AMPERSAND",
    "?": "QUESTION",
    "$": "DOLLAR",
    "^": "CARET",
    "|": "PIPE",
    "`": "BACKTICK",
    "_": "UNDERSCORE",
}

_SAFE_RE = re.compile(r"[A-Za-z0-9-]")
_WS_RE = re.compile(r"\s+")


def escape(text: str) -> str:
    """Rewrite *text* using only characters valid in a class name.

    A ``-`` that starts a ``--`` run is escaped, so ``a--COLONb`` and ``a:b``
    never share a name. Other code points take a fixed six hex digits.
    """
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch == "-" and text[i + 1 : i + 2] == "-":
            out.append("--HYPHEN")
        elif _SAFE_RE.match(ch):
            out.append(ch)
        elif ch == " ":
            out.append("_")
        elif ch in _NAMED:
            out.append("--" + _NAMED[ch])
        else:
            out.append(f"--U{ord(ch):06X}")
    return "".join(out)


def encode(config: AtomizerConfig, declaration: Declaration) -> str:
    """Return the class selector (leading ``.``) encoding *declaration*.

    Identical property/value pairs always produce the same name; whitespace
    runs in the value are collapsed first.
    """
    prop = declaration.property.strip()
    value = _WS_RE.sub(" ", declaration.value.strip())
    if not prop:
        raise EncodingError(f"Declaration has no property: {declaration!r}")
    if not value:
        raise EncodingError(f"Declaration {prop!r} has no value")
    return "." + config.class_prefix + escape(prop) + "__" + escape(":" + value)
