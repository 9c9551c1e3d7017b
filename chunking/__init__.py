"""Chunking codec for size-limited twin document fields."""

from chunking.limits import (
    ChunkLimit,
    DEFAULT_LIMIT,
    MAX_CHUNKS,
    MAX_CONTINUATION_CHUNKS,
    MAX_FIELD_BYTES,
)
from chunking.errors import (
    CapacityExceeded,
    ChunkCodecError,
    ChunkDecodeError,
    InvalidBaseName,
    MissingBaseField,
    NonContiguousChunks,
    UnencodableValue,
)
from chunking.naming import chunk_field_name, parse_sequence, validate_base_name
from chunking.chunk_set import ChunkSet, select_chunks
from chunking.codec import encode_value, decode_value
from chunking.patch import apply_patch, build_patch, strip_chunk_fields

__all__ = [
    "ChunkLimit",
    "DEFAULT_LIMIT",
    "MAX_CHUNKS",
    "MAX_CONTINUATION_CHUNKS",
    "MAX_FIELD_BYTES",
    "CapacityExceeded",
    "ChunkCodecError",
    "ChunkDecodeError",
    "InvalidBaseName",
    "MissingBaseField",
    "NonContiguousChunks",
    "UnencodableValue",
    "chunk_field_name",
    "parse_sequence",
    "validate_base_name",
    "ChunkSet",
    "select_chunks",
    "encode_value",
    "decode_value",
    "apply_patch",
    "build_patch",
    "strip_chunk_fields",
]
