"""Data contracts for docchunk.

Frozen dataclasses that flow through the chunking engine:
  text → list[Fragment] → list[DocumentChunk] → DocumentProcessingResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from docchunk.exceptions import ConfigError

__all__ = [
    "ChunkingOptions",
    "ChunkingStrategy",
    "DocumentChunk",
    "DocumentProcessingResult",
    "Fragment",
]

logger = logging.getLogger(__name__)


class ChunkingStrategy(str, Enum):
    """Splitting strategy selected by the dispatcher."""

    RECURSIVE = "recursive"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"

    @classmethod
    def parse(cls, value: str | ChunkingStrategy) -> ChunkingStrategy:
        """Resolve a strategy name case-insensitively.

        Unknown names fall back to :attr:`RECURSIVE`; this never raises.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        logger.warning("Unknown chunking strategy %r, falling back to recursive", value)
        return cls.RECURSIVE


@dataclass(frozen=True)
class ChunkingOptions:
    """Immutable chunking configuration passed into every call.

    ``overlap_size`` is advisory: only the sentence strategy overlaps, and it
    does so with a fixed two-sentence lookback.
    """

    max_chunk_size: int = 1000
    overlap_size: int = 200
    strategy: ChunkingStrategy = ChunkingStrategy.RECURSIVE

    def __post_init__(self) -> None:
        if isinstance(self.max_chunk_size, bool) or not isinstance(self.max_chunk_size, int):
            raise ConfigError(f"max_chunk_size must be an integer, got {self.max_chunk_size!r}")
        if self.max_chunk_size <= 0:
            raise ConfigError(f"max_chunk_size must be positive, got {self.max_chunk_size}")
        if isinstance(self.overlap_size, bool) or not isinstance(self.overlap_size, int):
            raise ConfigError(f"overlap_size must be an integer, got {self.overlap_size!r}")
        if self.overlap_size < 0:
            raise ConfigError(f"overlap_size must not be negative, got {self.overlap_size}")
        # Accept plain strings from config files and callers
        object.__setattr__(self, "strategy", ChunkingStrategy.parse(self.strategy))


@dataclass(frozen=True)
class Fragment:
    """Raw splitter output, before trimming and assembly.

    ``start``/``end`` are set when the splitter knows the exact span in the
    original text; otherwise the assembler locates the fragment.
    """

    text: str
    start: int | None = None
    end: int | None = None

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class DocumentChunk:
    """A bounded fragment of a source document, ready for embedding."""

    chunk_id: str
    content: str
    chunk_index: int
    start_position: int
    end_position: int
    original_document_id: str
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping of this chunk."""
        return {
            "chunk_id": self.chunk_id,
            "content": self.content,
            "chunk_index": self.chunk_index,
            "start_position": self.start_position,
            "end_position": self.end_position,
            "original_document_id": self.original_document_id,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class DocumentProcessingResult:
    """Summary of one processed document."""

    document_id: str
    file_name: str
    total_chunks: int
    chunk_ids: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)
    chunks: tuple[DocumentChunk, ...] = ()
