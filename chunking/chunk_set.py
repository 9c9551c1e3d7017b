"""Chunk set: the fields of one chunked value, keyed by sequence number."""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from chunking.errors import MissingBaseField, NonContiguousChunks
from chunking.limits import ChunkLimit, DEFAULT_LIMIT
from chunking.naming import parse_sequence, validate_base_name
from chunking.segments import join_chunks


@dataclass(frozen=True)
class ChunkSet:
    """
    Read-only view of the chunks belonging to one base field name.

    Built fresh from a field mapping on every decode and never stored.

    Attributes:
        base_name: Base field name the chunks belong to
        chunks: Chunk strings keyed by sequence number
        duplicates: Sequence numbers claimed by more than one field
    """

    base_name: str
    chunks: Mapping[int, str] = field(default_factory=dict)
    duplicates: Tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no field of the base name was present."""
        return not self.chunks and not self.duplicates

    @property
    def sequence_numbers(self) -> List[int]:
        """Sequence numbers present, in ascending order."""
        return sorted(self.chunks)

    @property
    def missing(self) -> List[int]:
        """Sequence numbers absent from the range 0..highest present."""
        if not self.chunks:
            return []
        highest = max(self.chunks)
        return [seq for seq in range(highest + 1) if seq not in self.chunks]

    def validate(self) -> None:
        """
        Check that the chunks form the contiguous range 0..k.

        Raises:
            MissingBaseField: If continuation chunks exist without chunk 0
            NonContiguousChunks: If a sequence number is missing or duplicated
        """
        if self.is_empty:
            return
        if 0 not in self.chunks:
            raise MissingBaseField(self.base_name, self.chunks)

        missing = self.missing
        if missing or self.duplicates:
            raise NonContiguousChunks(
                self.base_name, missing=missing, duplicates=self.duplicates
            )

    def join(self) -> str:
        """
        Concatenate the chunks in sequence order.

        A character cut in two at a chunk boundary is put back together;
        see ``join_chunks``.
        """
        self.validate()
        return join_chunks([self.chunks[seq] for seq in self.sequence_numbers])

    def __len__(self) -> int:
        return len(self.chunks)

    def __repr__(self) -> str:
        return (
            f"ChunkSet(base={self.base_name!r}, seqs={self.sequence_numbers}, "
            f"duplicates={list(self.duplicates)})"
        )


def select_chunks(
    fields: Mapping[str, str],
    base_name: str,
    limit: ChunkLimit = DEFAULT_LIMIT,
    case_insensitive: bool = False,
) -> ChunkSet:
    """
    Collect the chunk fields of ``base_name`` from a field mapping.

    Unrelated fields, including names that only start with the base name
    (``createOptionsFoo``, ``createOptions123``), are ignored.

    Args:
        fields: Field name to value mapping, in any order
        base_name: Base field name to collect
        limit: Chunk limits (bounds the accepted suffixes)
        case_insensitive: Match field names ignoring case

    Returns:
        ChunkSet for ``base_name``; empty when nothing matched

    Raises:
        InvalidBaseName: If ``base_name`` is not an identifier
        TypeError: If a matching field holds a non-string value
    """
    validate_base_name(base_name)

    chunks: Dict[int, str] = {}
    duplicates = set()
    for name, value in fields.items():
        seq = parse_sequence(name, base_name, limit, case_insensitive)
        if seq is None:
            continue
        if not isinstance(value, str):
            raise TypeError(
                f"Chunk field {name!r} must hold a string, got {type(value).__name__}"
            )
        if seq in chunks:
            duplicates.add(seq)
            continue
        chunks[seq] = value

    return ChunkSet(
        base_name=base_name,
        chunks=chunks,
        duplicates=tuple(sorted(duplicates)),
    )
