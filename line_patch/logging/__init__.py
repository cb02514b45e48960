"""Structured logging for line_patch.

The patch engine logs every applied operation at DEBUG and the file tool logs
each read/patch/write cycle, all through structlog with a stdlib bridge so the
host application's handlers still see the records.

Quick Start:
    >>> from line_patch.logging import configure_logging, LogConfig, LogLevel
    >>> configure_logging(LogConfig(level=LogLevel.DEBUG))

Tracing a batch of edits:
    >>> from line_patch.logging import bind_context, clear_context
    >>> bind_context(session_id="edit-42")
    >>> # ... every patch log line now carries session_id
    >>> clear_context()
"""
import structlog

from .config import (
    LogConfig,
    LogFormat,
    LogLevel,
    configure_logging,
    ensure_configured,
    is_configured,
)
from .context import bind_context, clear_context, get_context, unbind_context


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Configures logging with default settings on first use if the host
    application has not called configure_logging() itself.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Applied diff", operations=3)
    """
    ensure_configured()
    return structlog.get_logger(name)


__all__ = [
    # Configuration
    "LogConfig",
    "LogFormat",
    "LogLevel",
    "configure_logging",
    "ensure_configured",
    "is_configured",
    # Logger
    "get_logger",
    # Context management
    "bind_context",
    "unbind_context",
    "clear_context",
    "get_context",
]
