"""Observability helpers for ulidtools.

Structured logging through structlog, rendered to stderr either as colored
console lines or as JSON.
"""

from ulidtools.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    is_logging_configured,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "is_logging_configured",
]
