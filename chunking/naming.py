"""Field naming for chunked values.

Sequence 0 is stored under the base name itself, which keeps documents
written before chunking existed readable. Continuation ``n`` is stored under
the base name followed by ``n`` as two zero-padded digits, so sorting field
names alphabetically also sorts them by sequence number.
"""

import re
from typing import Optional

from chunking.errors import InvalidBaseName
from chunking.limits import ChunkLimit, DEFAULT_LIMIT, SUFFIX_DIGITS

_BASE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SUFFIX_RE = re.compile(r"[0-9]{%d}" % SUFFIX_DIGITS)


def validate_base_name(name: str) -> str:
    """
    Check that a base field name is a non-empty identifier.

    Args:
        name: Base field name, e.g. ``createOptions``

    Returns:
        The name, unchanged

    Raises:
        InvalidBaseName: If the name is empty or not an identifier
    """
    if not isinstance(name, str) or not _BASE_NAME_RE.fullmatch(name):
        raise InvalidBaseName(f"Invalid base field name: {name!r}")
    return name


def chunk_field_name(base_name: str, seq: int, limit: ChunkLimit = DEFAULT_LIMIT) -> str:
    """Return the field name holding chunk ``seq`` of ``base_name``."""
    validate_base_name(base_name)
    if seq < 0 or seq > limit.max_continuations:
        raise ValueError(f"seq must be 0-{limit.max_continuations}, got {seq}")
    if seq == 0:
        return base_name
    return f"{base_name}{seq:0{SUFFIX_DIGITS}d}"


def parse_sequence(
    field_name: str,
    base_name: str,
    limit: ChunkLimit = DEFAULT_LIMIT,
    case_insensitive: bool = False,
) -> Optional[int]:
    """
    Work out which chunk of ``base_name`` a field holds.

    Args:
        field_name: Field name from the document
        base_name: Base field name being reassembled
        limit: Chunk limits (bounds the accepted suffixes)
        case_insensitive: Match the base name ignoring case

    Returns:
        Sequence number, or None if the field is not a chunk of ``base_name``
    """
    if not isinstance(field_name, str):
        return None

    if case_insensitive:
        candidate, base = field_name.casefold(), base_name.casefold()
    else:
        candidate, base = field_name, base_name

    if not candidate.startswith(base):
        return None

    suffix = candidate[len(base):]
    if not suffix:
        return 0

    # ASCII digits only
    if not _SUFFIX_RE.fullmatch(suffix):
        return None

    seq = int(suffix)
    if seq < 1 or seq > limit.max_continuations:
        return None
    return seq
