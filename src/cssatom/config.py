from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Callable

CustomLogger = Callable[[str, object], None]

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class AtomizerConfig:
    verbose: bool = True
    class_prefix: str = "rp__"
    compress: bool = False
    custom_logger: CustomLogger | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> AtomizerConfig:
        """Build a config from a plain mapping.

        Keys may be snake_case or camelCase (``classPrefix``); keys that do not
        name a config field are ignored.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _CAMEL_RE.sub("_", key).lower()
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


def resolve_config(options: AtomizerConfig | Mapping[str, Any] | None) -> AtomizerConfig:
    """Return *options* as an AtomizerConfig."""
    if isinstance(options, AtomizerConfig):
        return options
    return AtomizerConfig.from_mapping(options)
