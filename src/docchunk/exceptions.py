"""Custom exception hierarchy for docchunk."""

from __future__ import annotations

__all__ = [
    "ChunkError",
    "ConfigError",
    "DocchunkError",
    "ExtractError",
    "UnsupportedFormatError",
]


class DocchunkError(Exception):
    """Base exception for all docchunk errors."""


class ConfigError(DocchunkError):
    """Raised when configuration loading or validation fails."""


class ChunkError(DocchunkError):
    """Raised when chunking operations fail."""


class ExtractError(DocchunkError):
    """Raised when text extraction from a file fails."""


class UnsupportedFormatError(ExtractError):
    """Raised when no extractor handles a file extension."""

    def __init__(self, extension: str, supported: frozenset[str]) -> None:
        self.extension = extension
        self.supported = supported
        super().__init__(
            f"File type {extension or '<none>'} is not supported. "
            f"Supported types: {', '.join(sorted(supported))}"
        )
