"""Logging configuration for line_patch.

Records from the engine, the file tool and the backends all go through the
stdlib ``logging`` tree so host applications keep control of handlers. The
structlog chain below only shapes the event: it merges bound context,
aligns the engine's and the error's operation fields, then renders.
"""
import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import structlog

from .processors import add_logger_name, inject_context, normalize_operation_fields


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_int(self) -> int:
        return getattr(logging, self.value)


class LogFormat(str, Enum):
    PLAIN = "plain"
    JSON = "json"


@dataclass
class LogConfig:
    """Settings for ``configure_logging``.

    Attributes:
        level: Root level. Per-operation engine lines are emitted at DEBUG.
        format: PLAIN console output or one JSON object per line.
        log_file: Also append records to this file; parent dirs are created.
        module_levels: Per-logger overrides, e.g.
            ``{"line_patch.core.engine": LogLevel.DEBUG}`` to trace every
            applied operation while keeping the rest at INFO.
    """
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.PLAIN
    log_file: Optional[Path] = None
    module_levels: dict[str, LogLevel] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = "LINE_PATCH_") -> "LogConfig":
        """Build a config from ``{prefix}LOG_LEVEL``, ``LOG_FORMAT`` and ``LOG_FILE``.

        Unset variables fall back to the dataclass defaults. Unknown level or
        format names raise ValueError.
        """
        level = os.environ.get(f"{prefix}LOG_LEVEL")
        fmt = os.environ.get(f"{prefix}LOG_FORMAT")
        log_file = os.environ.get(f"{prefix}LOG_FILE")
        return cls(
            level=LogLevel(level.upper()) if level else LogLevel.INFO,
            format=LogFormat(fmt.lower()) if fmt else LogFormat.PLAIN,
            log_file=Path(log_file) if log_file else None,
        )


_configured: bool = False
_installed: list[logging.Handler] = []

# Shared by structlog loggers and foreign stdlib records.
_PRE_CHAIN = [
    structlog.contextvars.merge_contextvars,
    inject_context,
    add_logger_name,
    structlog.stdlib.add_log_level,
    normalize_operation_fields,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(fmt: LogFormat):
    if fmt == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _handlers(config: LogConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    return handlers


def configure_logging(config: Optional[LogConfig] = None) -> None:
    """Route line_patch logging through structlog and the stdlib root logger.

    Calling it again replaces the root handlers installed by a previous call.

    Example:
        >>> configure_logging(LogConfig(format=LogFormat.JSON, log_file=Path("logs/patch.log")))
    """
    global _configured, _installed
    config = config or LogConfig()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config.format),
        ],
    )

    root = logging.getLogger()
    root.setLevel(config.level.to_int())
    for old in root.handlers[:]:
        root.removeHandler(old)
        if old in _installed:
            old.close()
    _installed = _handlers(config)
    for handler in _installed:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for module_name, level in config.module_levels.items():
        logging.getLogger(module_name).setLevel(level.to_int())

    structlog.configure(
        processors=_PRE_CHAIN + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def is_configured() -> bool:
    return _configured


def ensure_configured() -> None:
    """Apply the default configuration unless configure_logging() already ran."""
    if not _configured:
        configure_logging()
