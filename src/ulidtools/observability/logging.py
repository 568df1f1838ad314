"""Structured logging configuration for ulidtools.

This module configures structlog on top of the standard library logging
module. Logs are written to stderr so that command output on stdout stays
clean for piping.

Two output formats are supported:
- Console renderer with colors (default)
- JSON renderer, one object per line

The CLI chooses the format and level from its global options; nothing is
read from the environment.

Example:
    >>> from ulidtools.observability.logging import configure_logging, get_logger
    >>>
    >>> configure_logging(log_format="json", log_level="DEBUG")
    >>> logger = get_logger("ulidtools.codec")
    >>> logger.debug("ulidtools.generate.created", tid7="018bcfe5-...")
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

# Default configuration
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "console"
LOG_FORMATS = ("console", "json")

# Module-level flag to track if logging has been configured
_logging_configured = False


def _get_shared_processors() -> list[Processor]:
    """Get shared processors for all log formats."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_console_renderer() -> Processor:
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def _get_json_renderer() -> Processor:
    return structlog.processors.JSONRenderer()


def is_logging_configured() -> bool:
    """Return True once configure_logging() has run in this process."""
    return _logging_configured


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    force: bool = False,
) -> None:
    """Configure structured logging for the process.

    Args:
        log_format: Output format - "json" or "console". Defaults to "console"
        log_level: Minimum log level name. Defaults to "WARNING"
        force: If True, reconfigure even if already configured

    Raises:
        ValueError: If log_format or log_level is not recognised.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_format = (log_format or DEFAULT_LOG_FORMAT).lower()
    log_level = (log_level or DEFAULT_LOG_LEVEL).upper()

    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    shared_processors = _get_shared_processors()

    if log_format == "json":
        renderer: Processor = _get_json_renderer()
    else:
        renderer = _get_console_renderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name.

    If logging has not been configured yet, defaults are applied first.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("ulidtools.cli.error", code="ulidtools:input/invalid_format")
    """
    if not _logging_configured:
        configure_logging()

    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log lines.

    The CLI binds the running command name here.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
