"""Conversion between TID7 and LID encodings.

The two encodings share one 128-bit value, so converting is a relabelling
of the same 16 bytes. The only checks are the TID7 version tag (on the way
to LID) and the datetime range (when rendering the embedded timestamp).

Example:
    >>> from ulidtools.codec import format_timestamp, parse_identifier
    >>> pair = parse_identifier("01ARZ3NDEKTSV4RRFFQ69G5FAV")
    >>> pair.timestamp
    'Jul 30, 2016 23:54:10'
"""

import os
import time
from datetime import datetime, timedelta, timezone
from typing import Literal, TypeVar

from ulidtools.errors import InvalidFormatError, UnrepresentableTimestampError, VersionMismatchError
from ulidtools.models.constants import (
    ID_BYTE_LENGTH,
    MAX_TIMESTAMP_MS,
    MONTH_ABBREVIATIONS,
    RFC_VARIANT,
    TID7_VERSION,
    TIMESTAMP_BYTE_LENGTH,
    TIMESTAMP_DISPLAY_FORMAT,
    VARIANT_BYTE_INDEX,
    VERSION_BYTE_INDEX,
)
from ulidtools.models.ids import LID, TID7, IdentifierPair
from ulidtools.observability.logging import get_logger

logger = get_logger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ParsedT = TypeVar("_ParsedT", TID7, LID)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate(timestamp_ms: int | None = None) -> TID7:
    """Generate a new TID7 for the current wall-clock time.

    Layout: 48-bit unix_ts_ms | version 7 | 12-bit rand_a | variant 0b10
    | 62-bit rand_b. Random bits come from os.urandom; no ordering is
    guaranteed between two values created in the same millisecond.

    Args:
        timestamp_ms: Override for the embedded milliseconds (defaults to now).

    Raises:
        ValueError: If timestamp_ms does not fit in 48 bits.
    """
    ts = _now_ms() if timestamp_ms is None else timestamp_ms
    if ts < 0 or ts > MAX_TIMESTAMP_MS:
        raise ValueError(f"timestamp_ms out of 48-bit range: {ts}")

    raw = bytearray(ID_BYTE_LENGTH)
    raw[:TIMESTAMP_BYTE_LENGTH] = ts.to_bytes(TIMESTAMP_BYTE_LENGTH, byteorder="big")
    raw[TIMESTAMP_BYTE_LENGTH:] = os.urandom(ID_BYTE_LENGTH - TIMESTAMP_BYTE_LENGTH)

    raw[VERSION_BYTE_INDEX] = (raw[VERSION_BYTE_INDEX] & 0x0F) | (TID7_VERSION << 4)
    raw[VARIANT_BYTE_INDEX] = (raw[VARIANT_BYTE_INDEX] & 0x3F) | (RFC_VARIANT << 6)

    tid7 = TID7.from_bytes(raw)
    logger.debug("ulidtools.generate.created", tid7=str(tid7), timestamp_ms=ts)
    return tid7


def to_lid(tid7: TID7) -> LID:
    """Reinterpret a TID7 as an LID.

    Raises:
        VersionMismatchError: If the version tag is not 7.
    """
    if tid7.version != TID7_VERSION:
        logger.debug("ulidtools.codec.version_mismatch", tid7=str(tid7), found=tid7.version)
        raise VersionMismatchError(found=tid7.version)
    return LID.from_bytes(tid7.raw)


def to_tid7(lid: LID) -> TID7:
    """Reinterpret an LID as a TID7. Bits are kept as-is, version included."""
    return TID7.from_bytes(lid.raw)


def to_datetime(lid: LID) -> datetime:
    """Return the embedded creation time as an aware UTC datetime.

    Raises:
        UnrepresentableTimestampError: If the instant is past datetime.max.
    """
    ms = lid.timestamp_ms
    try:
        return UNIX_EPOCH + timedelta(milliseconds=ms)
    except OverflowError as exc:
        raise UnrepresentableTimestampError(timestamp_ms=ms) from exc


def format_timestamp(lid: LID) -> str:
    """Render the embedded creation time as ``Mon DD, YYYY HH:MM:SS`` (UTC).

    Month names are fixed English abbreviations regardless of locale.

    Example:
        >>> format_timestamp(LID.from_int(1700000000000 << 80))
        'Nov 14, 2023 22:13:20'

    Raises:
        UnrepresentableTimestampError: If the instant is past datetime.max.
    """
    moment = to_datetime(lid)
    return TIMESTAMP_DISPLAY_FORMAT.format(
        month=MONTH_ABBREVIATIONS[moment.month - 1],
        day=moment.day,
        year=moment.year,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
    )


def _pair(lid: LID, tid7: TID7, source: Literal["tid7", "lid", "generated"]) -> IdentifierPair:
    return IdentifierPair(lid=lid, tid7=tid7, timestamp=format_timestamp(lid), source=source)


def _try_parse(cls: type[_ParsedT], text: str) -> _ParsedT | None:
    try:
        return cls.parse(text)
    except ValueError:
        return None


def generate_pair() -> IdentifierPair:
    """Generate a fresh identifier and return both encodings with its timestamp."""
    tid7 = generate()
    return _pair(to_lid(tid7), tid7, "generated")


def parse_identifier(text: str) -> IdentifierPair:
    """Parse user input as a TID7 or, failing that, as an LID.

    The TID7 grammar is tried first. Once it matches, the LID grammar is
    never consulted, so a TID7 with the wrong version is reported as a
    version mismatch rather than an invalid format. Surrounding whitespace
    is ignored.

    Raises:
        VersionMismatchError: Input is a hyphenated UUID whose version is not 7.
        InvalidFormatError: Input matches neither grammar.
        UnrepresentableTimestampError: Embedded timestamp is past datetime.max.
    """
    candidate = text.strip()

    tid7 = _try_parse(TID7, candidate)
    if tid7 is not None:
        logger.debug("ulidtools.parse.matched", grammar="tid7", value=str(tid7))
        return _pair(to_lid(tid7), tid7, "tid7")

    lid = _try_parse(LID, candidate)
    if lid is not None:
        logger.debug("ulidtools.parse.matched", grammar="lid", value=str(lid))
        return _pair(lid, to_tid7(lid), "lid")

    logger.debug("ulidtools.parse.unmatched", input=text)
    raise InvalidFormatError(text)
