"""Reporting hook used in place of raising for recoverable failures."""

from __future__ import annotations

import logging

from cssatom.config import AtomizerConfig

logger = logging.getLogger("cssatom")


def report(config: AtomizerConfig, message: str, detail: object = None) -> None:
    """Surface *message* to the host tooling.

    Silent unless ``config.verbose``.  A configured ``custom_logger`` receives
    ``(message, detail)``; otherwise the message goes to the ``cssatom`` logger.
    """
    if not config.verbose:
        return
    if config.custom_logger is not None:
        config.custom_logger(message, detail)
        return
    if detail is None:
        logger.error("%s", message)
    else:
        logger.error("%s: %s", message, detail)
