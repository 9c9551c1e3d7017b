"""Text and byte helpers shared by the encoder and decoder.

The encoder splits values on UTF-8 byte offsets. When a split lands inside a
multi-byte character, the partial bytes stay in the chunk as
``surrogateescape`` code points (U+DC80-U+DCFF, one per byte). The decoder
joins chunks as strings and only puts such a character back together where
it was cut at a chunk boundary.
"""

import re
from typing import Iterable, List, Sequence

_ERRORS = "surrogateescape"

_ESCAPE_BASE = 0xDC00
_ESCAPE_MIN = 0xDC80
_ESCAPE_MAX = 0xDCFF

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def text_to_bytes(text: str) -> bytes:
    """Encode a value or chunk to the bytes it occupies in a field."""
    return text.encode("utf-8", _ERRORS)


def bytes_to_text(data: bytes) -> str:
    """Decode field bytes back to a string, keeping partial characters."""
    return data.decode("utf-8", _ERRORS)


def find_surrogate(text: str) -> int:
    """Return the index of the first surrogate code point, or -1."""
    match = _SURROGATE_RE.search(text)
    return match.start() if match else -1


def _is_escaped_byte(char: str) -> bool:
    return _ESCAPE_MIN <= ord(char) <= _ESCAPE_MAX


def _escaped_value(char: str) -> int:
    return ord(char) - _ESCAPE_BASE


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def _sequence_length(lead: int) -> int:
    """Length of the UTF-8 sequence started by ``lead`` (0 if not a lead byte)."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def byte_length(text: str) -> int:
    """
    Return the UTF-8 size of ``text`` in bytes.

    An escaped byte counts as one byte. Any other surrogate counts as the
    three bytes it would take if stored unpaired.
    """
    escaped = sum(1 for char in text if _is_escaped_byte(char))
    return len(text.encode("utf-8", "surrogatepass")) - 2 * escaped


def iter_segments(data: bytes, segment_size: int) -> Iterable[bytes]:
    """Yield data segments of at most segment_size bytes."""
    for i in range(0, len(data), segment_size):
        yield data[i:i + segment_size]


def _split_tail(chunk: str) -> int:
    """Index where a chunk ends in an incomplete escaped character, or -1."""
    for present in range(1, 4):
        pos = len(chunk) - present
        if pos < 0 or not _is_escaped_byte(chunk[pos]):
            return -1
        byte = _escaped_value(chunk[pos])
        if _is_continuation(byte):
            continue
        return pos if _sequence_length(byte) > present else -1
    return -1


def _pair(high: str, low: str) -> str:
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_chunks(chunks: Sequence[str]) -> str:
    """
    Concatenate chunk strings in order.

    Only two things are repaired, and only across a chunk boundary:
    - a UTF-8 character the encoder cut into escaped bytes
    - a UTF-16 surrogate pair cut between two chunks

    Everything else, including escaped bytes inside a chunk, is kept as-is.
    """
    out: List[str] = []
    carry = b""

    for chunk in chunks:
        if carry:
            needed = _sequence_length(carry[0])
            taken = 0
            while (
                taken < len(chunk)
                and len(carry) < needed
                and _is_escaped_byte(chunk[taken])
                and _is_continuation(_escaped_value(chunk[taken]))
            ):
                carry += bytes([_escaped_value(chunk[taken])])
                taken += 1
            chunk = chunk[taken:]
            if len(carry) < needed and not chunk:
                # Character continues past this chunk too
                continue
            out.append(bytes_to_text(carry))
            carry = b""
        elif (
            out
            and chunk
            and 0xD800 <= ord(out[-1][-1]) <= 0xDBFF
            and 0xDC00 <= ord(chunk[0]) <= 0xDFFF
        ):
            chunk = _pair(out[-1][-1], chunk[0]) + chunk[1:]
            out[-1] = out[-1][:-1]
            if not out[-1]:
                out.pop()

        start = _split_tail(chunk)
        if start >= 0:
            carry = bytes(_escaped_value(char) for char in chunk[start:])
            chunk = chunk[:start]
        if chunk:
            out.append(chunk)

    if carry:
        out.append(bytes_to_text(carry))
    return "".join(out)
