"""Size limits for chunked twin document fields.

Field Layout:
=============
| Sequence | Field name          | Payload                        |
|----------|---------------------|--------------------------------|
| 0        | <base>              | first segment (always present) |
| 1        | <base>01            | second segment                 |
| ...      | ...                 | ...                            |
| 7        | <base>07            | eighth segment                 |
=============

Each field holds at most 512 bytes of UTF-8 payload, so a single logical
value is limited to 8 * 512 = 4096 bytes.
"""

from dataclasses import dataclass


# Maximum payload bytes per twin field
MAX_FIELD_BYTES = 512

# Continuation fields after the base field (<base>01 .. <base>07)
MAX_CONTINUATION_CHUNKS = 7

# Total fields per logical value, base field included
MAX_CHUNKS = MAX_CONTINUATION_CHUNKS + 1

# Width of the zero-padded continuation suffix
SUFFIX_DIGITS = 2

# Largest sequence number a two-digit suffix can name
_MAX_SUFFIX_VALUE = 10 ** SUFFIX_DIGITS - 1


@dataclass(frozen=True)
class ChunkLimit:
    """
    Limits applied when splitting and joining a chunked value.

    Attributes:
        max_field_bytes: Maximum payload bytes per field
        max_continuations: Maximum number of continuation fields
    """

    max_field_bytes: int = MAX_FIELD_BYTES
    max_continuations: int = MAX_CONTINUATION_CHUNKS

    def __post_init__(self):
        """Validate limit parameters."""
        if self.max_field_bytes < 1:
            raise ValueError(
                f"max_field_bytes must be at least 1, got {self.max_field_bytes}"
            )
        if self.max_continuations < 0 or self.max_continuations > _MAX_SUFFIX_VALUE:
            raise ValueError(
                f"max_continuations must be 0-{_MAX_SUFFIX_VALUE}, "
                f"got {self.max_continuations}"
            )

    @property
    def max_chunks(self) -> int:
        """Total number of fields allowed for one value."""
        return self.max_continuations + 1

    @property
    def max_value_bytes(self) -> int:
        """Largest value, in bytes, that fits within the limit."""
        return self.max_chunks * self.max_field_bytes


DEFAULT_LIMIT = ChunkLimit()
