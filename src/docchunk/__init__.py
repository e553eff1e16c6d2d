"""docchunk: split documents into bounded, position-tracked chunks."""

from docchunk.chunk import DocumentChunker, chunk_text
from docchunk.exceptions import (
    ChunkError,
    ConfigError,
    DocchunkError,
    ExtractError,
    UnsupportedFormatError,
)
from docchunk.ingest import extract_text
from docchunk.pipeline import DocumentProcessor
from docchunk.types import (
    ChunkingOptions,
    ChunkingStrategy,
    DocumentChunk,
    DocumentProcessingResult,
)

__version__ = "0.1.0"

__all__ = [
    "ChunkError",
    "ChunkingOptions",
    "ChunkingStrategy",
    "ConfigError",
    "DocchunkError",
    "DocumentChunk",
    "DocumentChunker",
    "DocumentProcessingResult",
    "DocumentProcessor",
    "ExtractError",
    "UnsupportedFormatError",
    "__version__",
    "chunk_text",
    "extract_text",
]
