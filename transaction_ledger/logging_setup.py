"""Logging setup shared by the CLI and the library modules.

Modules log through ``get_logger``; only the CLI installs a handler.
"""

from __future__ import annotations

import logging
import os
from typing import IO

_PKG_LOGGER_NAME = "transaction_ledger"
_LEVEL_ENV_VAR = "TRANSACTION_LEDGER_LOG_LEVEL"
_CONFIGURED = False


def parse_level(level: int | str | None) -> int:
    """Resolve ``level`` to a numeric logging level.

    Accepts ints, numeric strings, and level names (case-insensitive). When
    ``level`` is ``None`` or unrecognized, falls back to the
    ``TRANSACTION_LEDGER_LOG_LEVEL`` environment variable, then ``INFO``.
    """

    resolved = _coerce_level(level)
    if resolved is None:
        resolved = _coerce_level(os.getenv(_LEVEL_ENV_VAR))
    return logging.INFO if resolved is None else resolved


def _coerce_level(level: int | str | None) -> int | None:
    if isinstance(level, bool):
        return None
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = getattr(logging, name, None) if name else None
        if isinstance(numeric, int):
            return numeric
    return None


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send package log records to ``stream`` (stderr by default).

    Only the first call has an effect until :func:`reset_logging` runs.
    ``level`` goes through :func:`parse_level`.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # Drop the library-mode NullHandler so records reach the real handler.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Undo :func:`configure_logging` so the next call configures afresh (e.g., between tests)."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, ensuring safe defaults for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
