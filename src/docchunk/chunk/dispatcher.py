"""Strategy dispatcher, the public chunking entry point.

Picks a splitter from ``ChunkingOptions.strategy``, runs it over the text
and assembles the resulting fragments into ``DocumentChunk`` records.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docchunk.chunk.assembler import assemble_chunks
from docchunk.chunk.paragraph import ParagraphSplitter
from docchunk.chunk.recursive import RecursiveSplitter
from docchunk.chunk.sentence import SentenceSplitter
from docchunk.exceptions import ChunkError
from docchunk.types import ChunkingOptions, ChunkingStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docchunk.chunk.base import BaseSplitter
    from docchunk.types import DocumentChunk

__all__ = ["DocumentChunker", "chunk_text", "get_splitter"]

logger = logging.getLogger(__name__)

_SPLITTER_MAP: dict[ChunkingStrategy, type[BaseSplitter]] = {
    ChunkingStrategy.RECURSIVE: RecursiveSplitter,
    ChunkingStrategy.SENTENCE: SentenceSplitter,
    ChunkingStrategy.PARAGRAPH: ParagraphSplitter,
}


def get_splitter(strategy: ChunkingStrategy | str) -> BaseSplitter:
    """Return a splitter instance for the given strategy.

    Strategy names are matched case-insensitively; unknown names fall back
    to the recursive splitter.
    """
    return _SPLITTER_MAP[ChunkingStrategy.parse(strategy)]()


def chunk_text(
    text: str,
    document_id: str,
    metadata: Mapping[str, str] | None = None,
    options: ChunkingOptions | None = None,
) -> list[DocumentChunk]:
    """Split text into ordered, position-tracked chunks.

    Args:
        text: Decoded document text.
        document_id: Identifier used for chunk ids and back-references.
        metadata: Caller metadata copied onto every chunk. Never mutated.
        options: Chunking configuration; defaults to ``ChunkingOptions()``.

    Returns:
        Chunks indexed ``0..N-1``. Empty for blank text.

    Raises:
        ChunkError: If a splitter fails unexpectedly.
    """
    if not text or not text.strip():
        return []

    options = options or ChunkingOptions()
    metadata = metadata if metadata is not None else {}
    splitter = get_splitter(options.strategy)

    try:
        fragments = splitter.split(text, options)
        chunks = assemble_chunks(text, fragments, document_id, metadata, options.strategy)
    except ChunkError:
        raise
    except Exception as e:
        logger.error("Failed to chunk document %s: %s", document_id, e)
        raise ChunkError(f"Failed to chunk document {document_id}: {e}") from e

    logger.info(
        "Chunked %s into %d chunks (strategy=%s, max_chunk_size=%d)",
        document_id,
        len(chunks),
        options.strategy.value,
        options.max_chunk_size,
    )
    return chunks


class DocumentChunker:
    """Binds one ``ChunkingOptions`` to :func:`chunk_text`.

    Holds no per-call state, so a single instance can be shared across
    threads.

    Usage::

        chunker = DocumentChunker(ChunkingOptions(max_chunk_size=500))
        chunks = chunker.chunk(text, "doc-1", {"source": "upload"})
    """

    def __init__(self, options: ChunkingOptions | None = None) -> None:
        self.options = options or ChunkingOptions()

    def chunk(
        self,
        text: str,
        document_id: str,
        metadata: Mapping[str, str] | None = None,
    ) -> list[DocumentChunk]:
        return chunk_text(text, document_id, metadata, self.options)
