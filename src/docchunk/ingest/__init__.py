"""Text extraction: turns uploaded files into decoded text for chunking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docchunk.exceptions import ExtractError, UnsupportedFormatError
from docchunk.ingest.base import BaseExtractor, file_extension
from docchunk.ingest.json_text import JsonExtractor
from docchunk.ingest.text import TextExtractor

if TYPE_CHECKING:
    from pathlib import Path
    from typing import BinaryIO

__all__ = [
    "MAX_FILE_SIZE",
    "BaseExtractor",
    "JsonExtractor",
    "TextExtractor",
    "extract_file",
    "extract_text",
    "get_extractor",
    "get_supported_extensions",
]

logger = logging.getLogger(__name__)

MAX_FILE_SIZE: int = 50 * 1024 * 1024  # 50 MB

_EXTRACTOR_MAP: dict[str, type[BaseExtractor]] = {
    ".txt": TextExtractor,
    ".md": TextExtractor,
    ".json": JsonExtractor,
}


def get_supported_extensions() -> frozenset[str]:
    """Return all file extensions an extractor is registered for."""
    return frozenset(_EXTRACTOR_MAP)


def get_extractor(extension: str) -> BaseExtractor:
    """Return an extractor instance for the given extension.

    Args:
        extension: File extension including the dot (case-insensitive).

    Returns:
        A new extractor instance.

    Raises:
        UnsupportedFormatError: If no extractor handles the extension.
    """
    ext = extension.lower()
    cls = _EXTRACTOR_MAP.get(ext)
    if cls is None:
        raise UnsupportedFormatError(ext, get_supported_extensions())
    return cls()


def extract_text(stream: BinaryIO, file_name: str, max_size: int = MAX_FILE_SIZE) -> str:
    """Extract plain text from a byte stream, dispatching on the file extension.

    Args:
        stream: Readable binary stream positioned at the start of the file.
        file_name: Original file name; its extension selects the extractor.
        max_size: Maximum number of bytes accepted.

    Returns:
        Decoded text.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
        ExtractError: If the stream cannot be read or exceeds ``max_size``.
    """
    extractor = get_extractor(file_extension(file_name))

    try:
        data = stream.read(max_size + 1)
    except OSError as e:
        raise ExtractError(f"Cannot read {file_name}: {e}") from e

    if len(data) > max_size:
        msg = f"File {file_name} exceeds maximum size ({max_size} bytes)"
        raise ExtractError(msg)

    logger.debug("Extracting %s with %s", file_name, type(extractor).__name__)
    return extractor.extract(data, file_name)


def extract_file(path: Path, max_size: int = MAX_FILE_SIZE) -> str:
    """Open *path* and extract its text.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
        ExtractError: If the file is missing, unreadable or too large.
    """
    if not path.exists():
        raise ExtractError(f"File not found: {path}")

    if not path.is_file():
        raise ExtractError(f"Not a file: {path}")

    try:
        with path.open("rb") as f:
            return extract_text(f, path.name, max_size)
    except OSError as e:
        raise ExtractError(f"Cannot read {path.name}: {e}") from e
