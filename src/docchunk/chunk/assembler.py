"""Chunk assembly: ids, offsets and metadata for raw fragments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docchunk.types import DocumentChunk

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from docchunk.types import ChunkingStrategy, Fragment

__all__ = ["assemble_chunk", "assemble_chunks", "locate_fragment", "make_chunk_id"]

logger = logging.getLogger(__name__)


def make_chunk_id(document_id: str, index: int) -> str:
    """Generate a deterministic chunk ID: ``{document_id}-chunk-{index:04d}``."""
    return f"{document_id}-chunk-{index:04d}"


def locate_fragment(text: str, content: str, cursor: int = 0) -> tuple[int, int]:
    """Find the span of *content* in *text*, searching forward from *cursor*.

    Searching from the end of the previous fragment keeps repeated passages
    from resolving to an earlier duplicate. Falls back to the first
    occurrence, then to an empty span at the cursor, so the result always
    satisfies ``0 <= start <= end <= len(text)``.
    """
    start = text.find(content, cursor)
    if start < 0:
        start = text.find(content)
    if start < 0:
        logger.debug("Fragment not found verbatim in source text, anchoring at %d", cursor)
        start = min(cursor, len(text))
        return start, start
    return start, start + len(content)


def assemble_chunk(
    content: str,
    index: int,
    start: int,
    end: int,
    document_id: str,
    metadata: Mapping[str, str],
    strategy: ChunkingStrategy,
) -> DocumentChunk:
    """Build one ``DocumentChunk`` with its own copy of *metadata*."""
    chunk_id = make_chunk_id(document_id, index)

    chunk_metadata = dict(metadata)
    chunk_metadata["chunk_index"] = str(index)
    chunk_metadata["chunk_id"] = chunk_id
    chunk_metadata["chunking_strategy"] = strategy.value

    return DocumentChunk(
        chunk_id=chunk_id,
        content=content.strip(),
        chunk_index=index,
        start_position=start,
        end_position=end,
        original_document_id=document_id,
        metadata=chunk_metadata,
    )


def assemble_chunks(
    text: str,
    fragments: Iterable[Fragment],
    document_id: str,
    metadata: Mapping[str, str],
    strategy: ChunkingStrategy,
) -> list[DocumentChunk]:
    """Convert fragments into chunks with contiguous indices.

    Blank fragments are dropped before indexing. Fragments without a known
    span are located in *text* with an advancing search cursor.
    """
    chunks: list[DocumentChunk] = []
    cursor = 0

    for fragment in fragments:
        if fragment.is_blank:
            continue
        content = fragment.text.strip()

        if fragment.start is not None and fragment.end is not None:
            start, end = fragment.start, fragment.end
        else:
            start, end = locate_fragment(text, content, cursor)
            cursor = end

        chunks.append(
            assemble_chunk(content, len(chunks), start, end, document_id, metadata, strategy)
        )

    return chunks
