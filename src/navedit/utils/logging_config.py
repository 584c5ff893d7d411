"""Logging setup shared by the library and the reference server."""

from __future__ import annotations

import logging

from navedit.config import NAVEDIT_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` context as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if not context:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{base} [{pairs}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stream handler on the root logger.

    Args:
        level: Log level name or number. Defaults to ``NAVEDIT_LOG_LEVEL``.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(ExtraFormatter(_FORMAT))
    root = logging.getLogger()
    root.handlers = [handler]
    level = level or NAVEDIT_LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger."""
    return logging.getLogger(name)
