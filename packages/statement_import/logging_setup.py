"""Package logging for ``statement_import``.

Library modules call :func:`get_logger` and never install handlers. The CLI
calls :func:`configure_logging` once at startup; until then records sent to
the ``statement_import`` logger are dropped by a ``NullHandler``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "statement_import"
LOG_LEVEL_ENV = "STATEMENT_IMPORT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def resolve_level(level: int | str | None) -> int:
    """Map an int, a level name (any case), or ``None`` to a numeric level.

    ``None`` defers to ``STATEMENT_IMPORT_LOG_LEVEL``; unknown names fall back
    to ``INFO``.
    """

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send package records to ``stream`` (stderr by default). Idempotent."""

    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    _configured = True


def reset_logging() -> None:
    """Undo :func:`configure_logging`; used by the test suite."""

    global _configured
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _configured = False


def get_logger(name: str) -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not _configured and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger", "reset_logging", "resolve_level"]
