"""Separator-cascade splitter.

Recursively partitions text on an ordered list of separators, coarse to
fine, until every fragment fits within ``max_chunk_size``:
- Paragraph breaks, then line breaks, then sentence ends, then spaces
- Fixed-width slicing once every separator is exhausted
- A single whitespace-free token longer than the limit is passed through
  whole instead of being cut mid-token
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from docchunk.chunk.base import BaseSplitter
from docchunk.chunk.buffer import FragmentBuffer
from docchunk.types import ChunkingStrategy, Fragment

if TYPE_CHECKING:
    from docchunk.types import ChunkingOptions

__all__ = ["SEPARATORS", "RecursiveSplitter", "split_recursively"]

logger = logging.getLogger(__name__)

# Separators in priority order (try first separator first)
SEPARATORS: tuple[str, ...] = (
    "\n\n",  # Paragraph boundaries
    "\n",  # Line breaks
    ". ",  # Sentence ends
    " ",  # Word boundaries
)


def _split_keeping_separator(text: str, separator: str) -> list[str]:
    """Split on *separator*, re-suffixing each part the separator followed.

    Empty parts are discarded but their separators are not: leading
    separators prefix the first piece, later ones stay on the preceding
    piece. Joined pieces always equal *text*.
    The final part keeps no suffix unless the text ended with the separator.
    """
    parts = text.split(separator)
    last = len(parts) - 1
    pieces: list[str] = []
    pending = ""
    for i, part in enumerate(parts):
        suffix = separator if i < last else ""
        if part:
            pieces.append(pending + part + suffix)
            pending = ""
        elif pieces:
            pieces[-1] += suffix
        else:
            pending += suffix
    if pending:
        pieces.append(pending)
    return pieces


def _is_atomic(text: str) -> bool:
    """True when the text is a single token that no separator can divide."""
    return len(text.split()) <= 1


def _hard_split(text: str, max_chunk_size: int) -> list[str]:
    """Slice text into fixed-width pieces when all separators are exhausted."""
    return [text[i : i + max_chunk_size] for i in range(0, len(text), max_chunk_size)]


def split_recursively(
    text: str,
    max_chunk_size: int,
    separators: tuple[str, ...] = SEPARATORS,
    index: int = 0,
) -> list[str]:
    """Recursively split text so each piece fits within max_chunk_size.

    Args:
        text: The span to split.
        max_chunk_size: Maximum piece length in characters.
        separators: Separators ordered from coarse to fine.
        index: Position in ``separators`` to split on next.

    Returns:
        Ordered pieces. A piece is only longer than ``max_chunk_size`` when
        it is a single atomic token.
    """
    if len(text) <= max_chunk_size:
        return [text]

    if index >= len(separators):
        if _is_atomic(text):
            logger.debug("Passing through oversized atomic unit (%d chars)", len(text))
            return [text]
        return _hard_split(text, max_chunk_size)

    separator = separators[index]
    result: list[str] = []
    buffer = FragmentBuffer()

    for piece in _split_keeping_separator(text, separator):
        if buffer.fits(piece, max_chunk_size):
            buffer.append(piece)
            continue

        flushed = buffer.flush()
        if flushed is not None:
            result.append(flushed.text)

        # Check if this single piece needs further splitting
        if len(piece) > max_chunk_size:
            logger.debug(
                "Piece of %d chars exceeds %d at separator %r, descending",
                len(piece),
                max_chunk_size,
                separator,
            )
            result.extend(split_recursively(piece, max_chunk_size, separators, index + 1))
        else:
            buffer.append(piece)

    flushed = buffer.flush()
    if flushed is not None:
        result.append(flushed.text)

    return result


class RecursiveSplitter(BaseSplitter):
    """Separator-cascade splitter.

    Fragments carry no offsets; the assembler locates each one in the
    original text with an advancing search cursor.
    """

    strategy: ClassVar[ChunkingStrategy] = ChunkingStrategy.RECURSIVE

    SEPARATORS: ClassVar[tuple[str, ...]] = SEPARATORS

    def split(self, text: str, options: ChunkingOptions) -> list[Fragment]:
        pieces = split_recursively(text, options.max_chunk_size, self.SEPARATORS)
        return [Fragment(text=piece) for piece in pieces]
