"""TID7 and LID identifier value types.

Both types wrap the same 16 raw bytes and differ only in their textual
encoding:

- TID7: RFC 9562 UUID version 7, rendered as hyphenated lowercase hex
  (``018bcfe5-6800-7a3c-9d0e-5f4a3b2c1d0e``)
- LID: ULID-style Crockford base32, 26 uppercase characters
  (``01HF7YAT00F8Y9T3JZ98XJR78E``)

Converting between them is a relabelling of bytes; see ``ulidtools.codec``.
"""

import re
import uuid
from typing import Annotated, Literal, TypeVar

from pydantic import Field
from ulid import ULID

from ulidtools.models.base import IdentifierBaseModel
from ulidtools.models.constants import (
    ID_BYTE_LENGTH,
    LID_TIMESTAMP_LENGTH,
    MAX_ID_INT,
    TID7_TEXT_PATTERN,
    TIMESTAMP_BYTE_LENGTH,
    VARIANT_BYTE_INDEX,
    VERSION_BYTE_INDEX,
)

IdentifierBytes = Annotated[
    bytes,
    Field(strict=True, min_length=ID_BYTE_LENGTH, max_length=ID_BYTE_LENGTH),
]
"""Exactly 16 raw bytes, big-endian."""

_TID7_TEXT_RE = re.compile(TID7_TEXT_PATTERN)

_IdentifierT = TypeVar("_IdentifierT", bound="_Identifier128")


class _Identifier128(IdentifierBaseModel):
    """Shared behaviour for 128-bit identifiers held as raw bytes."""

    raw: IdentifierBytes

    @classmethod
    def from_bytes(cls: type[_IdentifierT], value: bytes) -> _IdentifierT:
        """Build from 16 raw bytes (bytearray and memoryview are copied)."""
        return cls(raw=bytes(value))

    @classmethod
    def from_int(cls: type[_IdentifierT], value: int) -> _IdentifierT:
        """Build from an unsigned 128-bit integer."""
        if value < 0 or value > MAX_ID_INT:
            raise ValueError(f"Value does not fit in 128 bits: {value}")
        return cls(raw=value.to_bytes(ID_BYTE_LENGTH, byteorder="big"))

    @property
    def timestamp_ms(self) -> int:
        """Leading 48 bits as unsigned milliseconds since the unix epoch."""
        return int.from_bytes(self.raw[:TIMESTAMP_BYTE_LENGTH], byteorder="big")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # Defined last: the name shadows the builtin inside this class body.
    @property
    def int(self) -> "int":
        """The 128 bits as an unsigned integer, like ``uuid.UUID.int``."""
        return int.from_bytes(self.raw, byteorder="big")


class TID7(_Identifier128):
    """Time-ordered UUID (version 7 layout).

    Example:
        >>> tid = TID7.parse("018BCFE5-6800-7A3C-9D0E-5F4A3B2C1D0E")
        >>> str(tid)
        '018bcfe5-6800-7a3c-9d0e-5f4a3b2c1d0e'
        >>> tid.version
        7
    """

    @classmethod
    def parse(cls, text: str) -> "TID7":
        """Parse the hyphenated ``8-4-4-4-12`` hex form (case-insensitive).

        Raises:
            ValueError: If text does not follow the grouping exactly.
        """
        if _TID7_TEXT_RE.fullmatch(text) is None:
            raise ValueError(f"Not a hyphenated UUID: {text!r}")
        return cls(raw=uuid.UUID(text).bytes)

    @property
    def version(self) -> int:
        """4-bit version tag."""
        return self.raw[VERSION_BYTE_INDEX] >> 4

    @property
    def variant(self) -> int:
        """2-bit variant tag (0b10 for RFC 9562 values)."""
        return self.raw[VARIANT_BYTE_INDEX] >> 6

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self.raw)

    def __str__(self) -> str:
        return str(self.to_uuid())


class LID(_Identifier128):
    """Lexicographically sortable identifier in Crockford base32.

    The first 10 characters encode the 48-bit timestamp and the last 16
    characters encode the remaining 80 bits.

    Example:
        >>> lid = LID.parse("01arz3ndektsv4rrffq69g5fav")
        >>> str(lid)
        '01ARZ3NDEKTSV4RRFFQ69G5FAV'
        >>> lid.timestamp_ms
        1469922850259
    """

    @classmethod
    def parse(cls, text: str) -> "LID":
        """Parse 26 Crockford base32 characters (case-insensitive).

        Raises:
            ValueError: If text is not a valid 128-bit LID.
        """
        if not text.isascii():
            raise ValueError(f"Invalid LID characters: {text!r}")
        return cls(raw=ULID.from_str(text.upper()).bytes)

    @property
    def timestamp_part(self) -> str:
        return str(self)[:LID_TIMESTAMP_LENGTH]

    @property
    def randomness_part(self) -> str:
        return str(self)[LID_TIMESTAMP_LENGTH:]

    def __str__(self) -> str:
        return str(ULID.from_bytes(self.raw))


class IdentifierPair(IdentifierBaseModel):
    """Both encodings of one identifier plus its rendered creation time."""

    lid: LID
    tid7: TID7
    timestamp: str = Field(..., description="Creation time, e.g. 'Nov 14, 2023 22:13:20'")
    source: Literal["tid7", "lid", "generated"] = Field(
        ..., description="Which grammar matched the input, or 'generated'."
    )
