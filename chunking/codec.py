"""Encode and decode functions for chunked twin fields.

This module splits a string value that is too large for one twin document
field into several fields, and joins such fields back into the original
string.
"""

from typing import Dict, Mapping, Optional

from chunking.chunk_set import select_chunks
from chunking.errors import CapacityExceeded, UnencodableValue
from chunking.limits import ChunkLimit, DEFAULT_LIMIT
from chunking.naming import chunk_field_name, validate_base_name
from chunking.segments import (
    byte_length,
    bytes_to_text,
    find_surrogate,
    iter_segments,
    text_to_bytes,
)
from common.logging_setup import get_logger

logger = get_logger(__name__)


def encode_value(
    base_name: str,
    value: str,
    limit: ChunkLimit = DEFAULT_LIMIT,
) -> Dict[str, str]:
    """
    Split a value into twin fields of at most ``limit.max_field_bytes`` each.

    Field format:
    - chunk 0: ``<base_name>``
    - chunk n: ``<base_name>`` + two-digit ``n`` (``01`` .. ``07``)

    Segments are filled greedily, so the fewest fields are used. A segment
    may end inside a multi-byte character. The partial bytes are kept as
    ``surrogateescape`` code points (U+DC80-U+DCFF), which must be stored as
    JSON ``\\udcXX`` escapes; only the joined value is meaningful.

    Args:
        base_name: Base field name, e.g. ``createOptions``
        value: Value to split (may be empty); must not contain surrogate
            code points, which UTF-8 cannot store
        limit: Chunk limits

    Returns:
        Field name to chunk mapping, in sequence order

    Raises:
        InvalidBaseName: If ``base_name`` is not an identifier
        UnencodableValue: If ``value`` contains a surrogate code point
        CapacityExceeded: If the value needs more than ``limit.max_chunks`` fields
    """
    validate_base_name(base_name)
    if not isinstance(value, str):
        raise TypeError(f"value must be a string, got {type(value).__name__}")

    position = find_surrogate(value)
    if position >= 0:
        raise UnencodableValue(base_name, position)

    data = text_to_bytes(value)
    if len(data) > limit.max_value_bytes:
        raise CapacityExceeded(len(data), limit.max_value_bytes)

    segments = list(iter_segments(data, limit.max_field_bytes)) or [b""]

    fields: Dict[str, str] = {}
    for seq, segment in enumerate(segments):
        fields[chunk_field_name(base_name, seq, limit)] = bytes_to_text(segment)

    logger.debug(
        f"Encoded '{base_name}': {len(data)} bytes into {len(fields)} field(s)"
    )
    return fields


def decode_value(
    fields: Mapping[str, str],
    base_name: str,
    limit: ChunkLimit = DEFAULT_LIMIT,
    case_insensitive: bool = False,
) -> Optional[str]:
    """
    Reassemble a chunked value from twin fields.

    Fields may arrive in any order and may be mixed with unrelated fields.
    Chunks are joined in sequence order, never in mapping order.

    Args:
        fields: Field name to value mapping
        base_name: Base field name to reassemble
        limit: Chunk limits
        case_insensitive: Match field names ignoring case

    Returns:
        The reassembled value, or None if no field of ``base_name`` exists

    Raises:
        InvalidBaseName: If ``base_name`` is not an identifier
        MissingBaseField: If continuation fields exist without the base field
        NonContiguousChunks: If a chunk is missing or duplicated
    """
    chunk_set = select_chunks(fields, base_name, limit, case_insensitive)
    if chunk_set.is_empty:
        logger.debug(f"No value configured for '{base_name}'")
        return None

    chunk_set.validate()

    for seq in chunk_set.sequence_numbers:
        size = byte_length(chunk_set.chunks[seq])
        if size > limit.max_field_bytes:
            logger.warning(
                f"Chunk {seq} of '{base_name}' is {size} bytes, "
                f"over the {limit.max_field_bytes} byte field limit"
            )

    value = chunk_set.join()
    logger.debug(
        f"Decoded '{base_name}' from {len(chunk_set)} field(s)"
    )
    return value
