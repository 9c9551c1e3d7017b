"""Configuration management for the twin chunking tools."""

from dataclasses import dataclass
from typing import Optional

from chunking.limits import ChunkLimit, MAX_CONTINUATION_CHUNKS, MAX_FIELD_BYTES


@dataclass
class Config:
    """Configuration settings for the twin chunking tools."""

    # Base field holding the container runtime settings
    base_name: str = "createOptions"

    # Twin field limits (the defaults are the wire contract)
    max_field_bytes: int = MAX_FIELD_BYTES
    max_continuations: int = MAX_CONTINUATION_CHUNKS

    # Treat createOptions01 and CreateOptions01 as the same chunk
    case_insensitive_names: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def limit(self) -> ChunkLimit:
        """Build the chunk limit described by this configuration."""
        return ChunkLimit(
            max_field_bytes=self.max_field_bytes,
            max_continuations=self.max_continuations,
        )


# Default configuration instance
default_config = Config()
