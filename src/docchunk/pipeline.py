"""Document processing for docchunk.

Composes extract → annotate → chunk and summarises the result. Embedding
and storage of the chunks are left to the caller.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from docchunk.chunk import chunk_text
from docchunk.exceptions import DocchunkError
from docchunk.ingest import MAX_FILE_SIZE, extract_text
from docchunk.types import ChunkingOptions, DocumentProcessingResult

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import BinaryIO

__all__ = ["DocumentProcessor"]

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Turns uploaded documents into chunk summaries.

    Usage::

        processor = DocumentProcessor(ChunkingOptions(strategy="paragraph"))
        with open("notes.md", "rb") as f:
            result = processor.process_stream(f, "notes.md")
        print(result.total_chunks, result.chunk_ids)
    """

    def __init__(
        self,
        options: ChunkingOptions | None = None,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        self.options = options or ChunkingOptions()
        self.max_file_size = max_file_size

    def process_document(
        self,
        content: str,
        file_name: str,
        document_id: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> DocumentProcessingResult:
        """Annotate and chunk already-decoded content.

        Args:
            content: Decoded document text.
            file_name: Original file name, recorded in metadata.
            document_id: Document identifier; a UUID4 is generated when absent.
            metadata: Caller metadata. Copied, never mutated.

        Returns:
            A result holding the chunks and their ids.

        Raises:
            ChunkError: If chunking fails.
        """
        if document_id is None:
            document_id = str(uuid.uuid4())

        doc_metadata = dict(metadata or {})
        doc_metadata["filename"] = file_name
        doc_metadata["processed_at"] = datetime.now(timezone.utc).isoformat()
        doc_metadata["content_length"] = str(len(content))

        logger.info("Processing document %s with ID %s", file_name, document_id)

        try:
            chunks = chunk_text(content, document_id, doc_metadata, self.options)
        except DocchunkError:
            logger.error("Error processing document %s", file_name)
            raise

        if not chunks:
            logger.warning("No chunks produced for %s", file_name)

        return DocumentProcessingResult(
            document_id=document_id,
            file_name=file_name,
            total_chunks=len(chunks),
            chunk_ids=tuple(c.chunk_id for c in chunks),
            metadata=doc_metadata,
            chunks=tuple(chunks),
        )

    def process_stream(
        self,
        stream: BinaryIO,
        file_name: str,
        document_id: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> DocumentProcessingResult:
        """Extract text from a byte stream, then process it.

        Raises:
            UnsupportedFormatError: If the file extension is not supported.
            ExtractError: If the stream cannot be read.
            ChunkError: If chunking fails.
        """
        try:
            content = extract_text(stream, file_name, self.max_file_size)
        except DocchunkError:
            logger.error("Error extracting text from stream %s", file_name)
            raise

        return self.process_document(content, file_name, document_id, metadata)
