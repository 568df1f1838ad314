"""Base Pydantic model configuration for ulidtools value types.

Identifier values are immutable and reject unknown fields, so every model
inherits from IdentifierBaseModel.
"""

from pydantic import BaseModel, ConfigDict


class IdentifierBaseModel(BaseModel):
    """Base model for identifier value types.

    - **Immutability**: instances are frozen (and therefore hashable)
    - **Strict validation**: extra fields are forbidden

    Example:
        >>> class Sample(IdentifierBaseModel):
        ...     raw: bytes
        >>> Sample(raw=b"x").raw
        b'x'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
