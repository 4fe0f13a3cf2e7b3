"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Rendered events are handed to stdlib logging; library callers attach their
own handlers, while the CLI routes events to stderr so stdout carries only
command output.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sys
from typing import Any, Iterator

import structlog

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    _configure_once()
    return structlog.get_logger(name)


@contextmanager
def stderr_logging(level: int = logging.INFO) -> Iterator[logging.Handler]:
    """Emit events at level and above to the current stderr while active.

    The root logger level is restored and the handler removed on exit.

    Args:
        level: Minimum stdlib level to emit.

    Yields:
        The installed stream handler.
    """
    _configure_once()
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    try:
        yield handler
    finally:
        root_logger.removeHandler(handler)
        root_logger.setLevel(previous_level)


def _configure_once() -> None:
    """Apply the shared processor chain on first use."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True
