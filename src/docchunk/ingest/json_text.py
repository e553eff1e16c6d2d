"""JSON extractor: raw text, no structural parsing."""

from __future__ import annotations

import logging

from docchunk.ingest.base import BaseExtractor, decode_utf8

__all__ = ["JsonExtractor"]

logger = logging.getLogger(__name__)


class JsonExtractor(BaseExtractor):
    """Extractor for ``.json`` files.

    The document is chunked as text; it is not validated or flattened.
    """

    def extract(self, data: bytes, file_name: str) -> str:
        text = decode_utf8(data, file_name)
        logger.info("Extracted %s as raw JSON text: %d chars", file_name, len(text))
        return text

    def supported_extensions(self) -> frozenset[str]:
        """Return supported file extensions."""
        return frozenset({".json"})
