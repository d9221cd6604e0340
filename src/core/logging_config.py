"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Rendered events are handed to a stdlib logger with a stderr handler,
so they never mix with replacement text printed on stdout.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output at INFO and above.
    """
    _configure_standard_logger(name)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def _configure_standard_logger(name: str) -> None:
    """Attach a stderr handler to the named stdlib logger once.

    Args:
        name: Logger name.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
