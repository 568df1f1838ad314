"""ulidtools: convert between UUIDv7 and ULID encodings of one identifier.

Example:
    >>> from ulidtools import parse_identifier
    >>> str(parse_identifier("01ARZ3NDEKTSV4RRFFQ69G5FAV").lid)
    '01ARZ3NDEKTSV4RRFFQ69G5FAV'
"""

__version__ = "0.1.0"

from ulidtools.codec import (
    format_timestamp,
    generate,
    generate_pair,
    parse_identifier,
    to_lid,
    to_tid7,
)
from ulidtools.errors import (
    InvalidFormatError,
    UlidToolsError,
    UnrepresentableTimestampError,
    VersionMismatchError,
    render_error,
)
from ulidtools.models import LID, TID7, IdentifierPair

__all__ = [
    "IdentifierPair",
    "InvalidFormatError",
    "LID",
    "TID7",
    "UlidToolsError",
    "UnrepresentableTimestampError",
    "VersionMismatchError",
    "__version__",
    "format_timestamp",
    "generate",
    "generate_pair",
    "parse_identifier",
    "render_error",
    "to_lid",
    "to_tid7",
]
