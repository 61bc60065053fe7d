"""Structured logging setup.

Console output for local use, JSON output when the host application ships
logs somewhere else. Engine modules only ever call ``get_logger``; wiring the
processors is left to whoever embeds the checker. Until then the stdlib
root logger's default WARNING level drops the engine's debug events.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(name: str) -> int:
    """Convert string log level to logging constant."""
    return _LEVELS.get(str(name or "").strip().upper(), logging.INFO)


def get_processors(fmt: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if str(fmt or "").strip().lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Configure stdlib logging and structlog once at host startup."""

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=get_log_level(level),
    )
    structlog.configure(
        processors=get_processors(fmt),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance backed by stdlib logging.

    Events go through ``logging.getLogger(name)``, so nothing is written
    until the host configures handlers and levels (``configure_logging`` or
    its own ``logging`` setup).

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("spam_risk_scored", platform="email", score=42)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
