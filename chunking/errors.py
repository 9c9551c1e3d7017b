"""Exceptions raised by the chunking codec."""

from typing import Iterable, Tuple


class ChunkCodecError(Exception):
    """Base class for chunk encode/decode failures."""
    pass


class CapacityExceeded(ChunkCodecError):
    """Raised when a value needs more fields than the limit allows."""

    def __init__(self, byte_length: int, max_bytes: int):
        self.byte_length = byte_length
        self.max_bytes = max_bytes
        super().__init__(
            f"Value too large: {byte_length} bytes, maximum {max_bytes}"
        )


class ChunkDecodeError(ChunkCodecError):
    """Raised when a chunk set cannot be reassembled."""
    pass


class MissingBaseField(ChunkDecodeError):
    """Raised when continuation fields exist without the base field."""

    def __init__(self, base_name: str, present: Iterable[int]):
        self.base_name = base_name
        self.present: Tuple[int, ...] = tuple(sorted(present))
        super().__init__(
            f"Base field '{base_name}' missing, "
            f"found continuation chunks {list(self.present)}"
        )


class NonContiguousChunks(ChunkDecodeError):
    """Raised when chunk sequence numbers have gaps or duplicates."""

    def __init__(
        self,
        base_name: str,
        missing: Iterable[int] = (),
        duplicates: Iterable[int] = (),
    ):
        self.base_name = base_name
        self.missing: Tuple[int, ...] = tuple(sorted(missing))
        self.duplicates: Tuple[int, ...] = tuple(sorted(duplicates))

        problems = []
        if self.missing:
            problems.append(f"missing sequence {list(self.missing)}")
        if self.duplicates:
            problems.append(f"duplicate sequence {list(self.duplicates)}")
        super().__init__(
            f"Chunks of '{base_name}' are not contiguous: {', '.join(problems)}"
        )


class InvalidBaseName(ValueError):
    """Raised when a base field name is not a valid identifier."""
    pass


class UnencodableValue(ChunkCodecError, ValueError):
    """Raised when a value holds code points UTF-8 cannot store."""

    def __init__(self, base_name: str, position: int):
        self.base_name = base_name
        self.position = position
        super().__init__(
            f"Value for '{base_name}' has a surrogate code point at "
            f"position {position}; twin fields hold UTF-8 text"
        )
