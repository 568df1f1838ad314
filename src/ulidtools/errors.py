"""ulidtools error taxonomy.

Every failure a command can report is one of a closed set of errors, each
carrying a stable code, a display message and structured details.
"""

from __future__ import annotations

from typing import Any

from ulidtools.models.constants import TID7_VERSION


class UlidToolsError(Exception):
    """Base exception for all ulidtools errors.

    Attributes:
        code: Error code following the ulidtools:<area>/<name> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidFormatError(UlidToolsError):
    """Raised when input matches neither the TID7 nor the LID grammar.

    Attributes:
        text: The rejected input string
    """

    def __init__(self, text: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulidtools:input/invalid_format",
            message="Invalid input format",
            details={"input": text, **(details or {})},
        )
        self.text = text


class VersionMismatchError(UlidToolsError):
    """Raised when a parsed TID7 carries a version tag other than 7.

    Attributes:
        found: The version nibble actually present
    """

    def __init__(self, found: int, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulidtools:codec/version_mismatch",
            message=f"Expected UUIDv{TID7_VERSION}, got UUIDv{found}",
            details={"found": found, "expected": TID7_VERSION, **(details or {})},
        )
        self.found = found


class UnrepresentableTimestampError(UlidToolsError):
    """Raised when the embedded timestamp falls outside the datetime range.

    Only hand-crafted identifiers reach this: the 48-bit field can express
    instants up to the year 10889, beyond ``datetime.max``.

    Attributes:
        timestamp_ms: The embedded millisecond value
    """

    def __init__(self, timestamp_ms: int, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="ulidtools:codec/unrepresentable_timestamp",
            message=(
                f"Timestamp {timestamp_ms} ms is outside the representable date range"
            ),
            details={"timestamp_ms": timestamp_ms, **(details or {})},
        )
        self.timestamp_ms = timestamp_ms


def render_error(error: UlidToolsError) -> str:
    """Return the single-line message shown to the user for an error."""
    return error.message
