"""Logging for ``transaction_analysis``.

Every module logs through a child of the ``"transaction_analysis"`` logger.
Until the CLI (or an embedding application) calls :func:`configure_logging`,
that logger carries only a ``NullHandler``, so importing the package and
summarizing a batch prints nothing. :func:`reset_logging` undoes the setup,
which test suites use to start each case from the import-time state.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "transaction_analysis"
_LEVEL_ENV_VAR = "TRANSACTION_ANALYSIS_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _level_from_value(level: int | str | None) -> int | None:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = getattr(logging, name, None)
        if isinstance(numeric, int):
            return numeric
    return None


def _parse_level(level: int | str | None, default: int = logging.WARNING) -> int:
    resolved = _level_from_value(level)
    if resolved is None:
        resolved = _level_from_value(os.getenv(_LEVEL_ENV_VAR))
    return default if resolved is None else resolved


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send package log records to ``stream``; later calls change nothing.

    ``level`` takes a number or a name such as ``"debug"``. Without a usable
    one, ``TRANSACTION_ANALYSIS_LOG_LEVEL`` decides, and ``WARNING`` applies
    when that is unset too, so JSON on stdout stays free of chatter. Records
    go to ``sys.stderr`` unless ``stream`` is given, and stop at the package
    logger instead of reaching the root logger's handlers.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Return the package logger to its import-time state and allow reconfiguring."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    # Quiet by default: a NullHandler stands in until configure_logging runs.
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
