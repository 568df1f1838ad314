"""ulidtools identifier models.

Value types for the two textual encodings of a 128-bit time-ordered
identifier, plus the layout constants they share.
"""

# Base model
from ulidtools.models.base import IdentifierBaseModel

# Constants
from ulidtools.models.constants import (
    CROCKFORD_ALPHABET,
    LID_LENGTH,
    MAX_TIMESTAMP_MS,
    TID7_VERSION,
)

# Value types
from ulidtools.models.ids import (
    LID,
    TID7,
    IdentifierPair,
)

__all__ = [
    "CROCKFORD_ALPHABET",
    "IdentifierBaseModel",
    "IdentifierPair",
    "LID",
    "LID_LENGTH",
    "MAX_TIMESTAMP_MS",
    "TID7",
    "TID7_VERSION",
]
