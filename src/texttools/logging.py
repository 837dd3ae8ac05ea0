"""Logging configuration for texttools.

Library modules import the ``logger`` instance from here and only emit
DEBUG records through it; nothing is attached at import time. The CLI
calls :func:`configure_logging` to send those records to stderr.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("texttools")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(*, verbose: bool = False) -> logging.Handler:
    """Attach a stderr handler to the logger and set its level.

    A handler added by an earlier call is replaced, so repeated CLI
    invocations in one process neither duplicate output nor write to a
    stale stream.

    Args:
        verbose: Log DEBUG records when true, otherwise WARNING and above.

    Returns:
        The :class:`logging.StreamHandler` attached to the logger.
    """
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)

    level = logging.DEBUG if verbose else logging.WARNING
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler


__all__ = ["configure_logging", "logger"]
