"""Document patches for chunked values.

When a value shrinks, its trailing continuation fields from the previous
version stay in the document unless they are removed. A patch removes a
field by setting it to ``None`` (``null`` on the wire).
"""

from typing import Dict, Mapping, Optional

from chunking.codec import encode_value
from chunking.limits import ChunkLimit, DEFAULT_LIMIT
from chunking.naming import parse_sequence, validate_base_name
from common.logging_setup import get_logger

logger = get_logger(__name__)


def strip_chunk_fields(
    fields: Mapping[str, Optional[str]],
    base_name: str,
    limit: ChunkLimit = DEFAULT_LIMIT,
    case_insensitive: bool = False,
) -> Dict[str, Optional[str]]:
    """Return a copy of ``fields`` without any chunk field of ``base_name``."""
    validate_base_name(base_name)
    return {
        name: value
        for name, value in fields.items()
        if parse_sequence(name, base_name, limit, case_insensitive) is None
    }


def build_patch(
    current_fields: Mapping[str, Optional[str]],
    base_name: str,
    value: Optional[str],
    limit: ChunkLimit = DEFAULT_LIMIT,
    case_insensitive: bool = False,
) -> Dict[str, Optional[str]]:
    """
    Build the patch that replaces the value stored under ``base_name``.

    Args:
        current_fields: Fields currently in the document
        base_name: Base field name being written
        value: New value, or None to remove the value entirely
        limit: Chunk limits
        case_insensitive: Match existing field names ignoring case

    Returns:
        Field updates; ``None`` marks a field for removal

    Raises:
        InvalidBaseName: If ``base_name`` is not an identifier
        CapacityExceeded: If the new value does not fit
    """
    validate_base_name(base_name)
    new_fields = encode_value(base_name, value, limit) if value is not None else {}

    patch: Dict[str, Optional[str]] = dict(new_fields)
    for name in current_fields:
        if name in new_fields:
            continue
        if parse_sequence(name, base_name, limit, case_insensitive) is not None:
            patch[name] = None

    stale = sum(1 for v in patch.values() if v is None)
    if stale:
        logger.debug(f"Patch for '{base_name}' removes {stale} stale field(s)")
    return patch


def apply_patch(
    fields: Mapping[str, Optional[str]],
    patch: Mapping[str, Optional[str]],
) -> Dict[str, Optional[str]]:
    """Return a copy of ``fields`` with ``patch`` applied."""
    result = dict(fields)
    for name, value in patch.items():
        if value is None:
            result.pop(name, None)
        else:
            result[name] = value
    return result
