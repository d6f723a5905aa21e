"""Package-local diagnostics.

This package is a library first. Its own diagnostics stay disabled unless the
host application opts in via :func:`configure_logging` or
``LOGENGINE_LOG_LEVEL``.
"""

from __future__ import annotations

import os
import sys

from loguru import logger

LOGGER_NAME = "logengine"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"

logger.disable(LOGGER_NAME)

_handler_id: int | None = None


def _write_stderr(message: str) -> None:
    # Looked up per write so a replaced sys.stderr is honored.
    sys.stderr.write(message)


def configure_logging(level: str | None = None) -> None:
    """Configure package diagnostics for CLI/runtime use.

    If neither ``level`` nor ``LOGENGINE_LOG_LEVEL`` is provided, diagnostics
    stay disabled.
    """
    global _handler_id

    env_level = os.getenv("LOGENGINE_LOG_LEVEL", "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip().upper()
    # Always drop the previous handler so repeated CLI calls do not stack output.
    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None

    if not resolved_level:
        logger.disable(LOGGER_NAME)
        return

    try:
        logger.level(resolved_level)
    except ValueError:
        resolved_level = "INFO"

    logger.enable(LOGGER_NAME)
    _handler_id = logger.add(
        _write_stderr,
        level=resolved_level,
        format=LOG_FORMAT,
        filter=LOGGER_NAME,
        colorize=False,
    )
