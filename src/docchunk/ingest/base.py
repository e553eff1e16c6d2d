"""Abstract base class for plain-text extractors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import PurePath

__all__ = ["BaseExtractor", "decode_utf8", "file_extension"]

logger = logging.getLogger(__name__)


def file_extension(file_name: str) -> str:
    """Return the lower-cased extension of *file_name*, including the dot."""
    return PurePath(file_name).suffix.lower()


def decode_utf8(data: bytes, file_name: str) -> str:
    """Decode UTF-8 bytes, stripping a leading BOM.

    Undecodable bytes are replaced rather than rejected.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("UTF-8 decode failed for %s, retrying with replacement", file_name)
        text = data.decode("utf-8", errors="replace")

    # Strip BOM if present
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


class BaseExtractor(ABC):
    """Base class for all text extractors.

    Subclasses must implement ``extract`` and ``supported_extensions``.
    The ``can_extract`` helper checks file extension membership.
    """

    @abstractmethod
    def extract(self, data: bytes, file_name: str) -> str:
        """Turn raw file bytes into decoded text.

        Args:
            data: The complete file contents.
            file_name: Original file name, used for logging.

        Returns:
            The decoded text, ready for chunking.

        Raises:
            ExtractError: If the content cannot be extracted.
        """

    @abstractmethod
    def supported_extensions(self) -> frozenset[str]:
        """Return the set of lower-case file extensions this extractor handles.

        Extensions include the leading dot, e.g. ``{".txt"}``.
        """

    def can_extract(self, file_name: str) -> bool:
        """Check whether this extractor can handle the given file."""
        return file_extension(file_name) in self.supported_extensions()
