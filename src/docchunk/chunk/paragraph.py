"""Paragraph splitter: blank-line boundaries, no overlap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from docchunk.chunk.base import BaseSplitter
from docchunk.chunk.buffer import FragmentBuffer
from docchunk.types import ChunkingStrategy, Fragment

if TYPE_CHECKING:
    from docchunk.types import ChunkingOptions

__all__ = ["PARAGRAPH_SEPARATOR", "ParagraphSplitter"]

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


class ParagraphSplitter(BaseSplitter):
    """Accumulates whole paragraphs up to ``max_chunk_size``.

    A running position counter tracks where each paragraph sits in the
    original text, so offsets are exact without re-searching the text.
    A single paragraph longer than the limit becomes its own chunk.
    """

    strategy: ClassVar[ChunkingStrategy] = ChunkingStrategy.PARAGRAPH

    def split(self, text: str, options: ChunkingOptions) -> list[Fragment]:
        fragments: list[Fragment] = []
        buffer = FragmentBuffer()
        position = 0

        for part in text.split(PARAGRAPH_SEPARATOR):
            part_start = position
            # Empty parts still consumed a separator in the original
            position += len(part) + len(PARAGRAPH_SEPARATOR)
            if not part:
                continue

            if len(buffer) > 0 and not buffer.fits(part, options.max_chunk_size):
                flushed = buffer.flush()
                if flushed is not None:
                    fragments.append(flushed)

            if part.strip():
                start = part_start + len(part) - len(part.lstrip())
                end = part_start + len(part.rstrip())
                buffer.append(part + PARAGRAPH_SEPARATOR, start, end)
            else:
                buffer.append(part + PARAGRAPH_SEPARATOR)

        flushed = buffer.flush()
        if flushed is not None:
            fragments.append(flushed)

        return fragments
