"""Plain text and markdown extractor: UTF-8 passthrough.

Content is returned exactly as decoded (minus a BOM): whitespace is not
normalized, so chunk offsets line up with the uploaded file.
"""

from __future__ import annotations

import logging

from docchunk.ingest.base import BaseExtractor, decode_utf8

__all__ = ["TextExtractor"]

logger = logging.getLogger(__name__)


class TextExtractor(BaseExtractor):
    """Extractor for ``.txt`` and ``.md`` files."""

    def extract(self, data: bytes, file_name: str) -> str:
        text = decode_utf8(data, file_name)
        logger.info("Extracted %s: %d chars", file_name, len(text))
        return text

    def supported_extensions(self) -> frozenset[str]:
        """Return supported file extensions."""
        return frozenset({".txt", ".md"})
