"""Constants for ulidtools identifiers.

Bit layout of the 128-bit value shared by both encodings:

    0                   48    52          64 66                  128
    | unix_ts_ms (48)   | ver | rand_a (12) |var| rand_b (62)      |
"""

# Shared 128-bit value
ID_BYTE_LENGTH = 16
ID_BIT_LENGTH = ID_BYTE_LENGTH * 8
MAX_ID_INT = (1 << ID_BIT_LENGTH) - 1

# Timestamp prefix
TIMESTAMP_BIT_LENGTH = 48
TIMESTAMP_BYTE_LENGTH = TIMESTAMP_BIT_LENGTH // 8
MAX_TIMESTAMP_MS = (1 << TIMESTAMP_BIT_LENGTH) - 1

# Version / variant tags (RFC 9562)
TID7_VERSION = 7
VERSION_BYTE_INDEX = 6  # high nibble of byte 6
VARIANT_BYTE_INDEX = 8  # top two bits of byte 8
RFC_VARIANT = 0b10

# Crockford base32
CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
LID_LENGTH = 26
LID_TIMESTAMP_LENGTH = 10

# Textual TID7 form
TID7_TEXT_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Timestamp display pattern, e.g. "Nov 14, 2023 22:13:20"
TIMESTAMP_DISPLAY_FORMAT = "{month} {day:02d}, {year:04d} {hour:02d}:{minute:02d}:{second:02d}"
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
