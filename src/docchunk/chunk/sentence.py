"""Sentence splitter with a fixed two-sentence overlap.

Sentences are delimited by runs of ``.``, ``!`` or ``?`` followed by
whitespace. Every sentence except a trailing remainder is normalised to end
with a single period, so chunk text is only an approximate reconstruction
of the original; offsets still point at the original sentences.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, ClassVar, NamedTuple

from docchunk.chunk.base import BaseSplitter
from docchunk.chunk.buffer import FragmentBuffer
from docchunk.types import ChunkingStrategy, Fragment

if TYPE_CHECKING:
    from docchunk.types import ChunkingOptions

__all__ = ["SENTENCE_OVERLAP", "Sentence", "SentenceSplitter", "split_sentences"]

logger = logging.getLogger(__name__)

# Sentences carried from the end of one chunk into the start of the next
SENTENCE_OVERLAP = 2

# Terminator run followed by whitespace; group 1 is the punctuation alone
_SENTENCE_END_RE = re.compile(r"([.!?]+)\s+", re.IGNORECASE)


class Sentence(NamedTuple):
    """A sentence and its span in the original text."""

    text: str
    start: int
    end: int


def split_sentences(text: str) -> list[Sentence]:
    """Split text into sentences.

    Non-final pieces get a trailing period; the final remainder is kept
    without one. Blank pieces are skipped. Spans cover the stripped piece
    plus its terminator run, excluding the whitespace that follows.
    """
    sentences: list[Sentence] = []
    cursor = 0

    for match in _SENTENCE_END_RE.finditer(text):
        piece = text[cursor : match.start()]
        if piece.strip():
            start = cursor + len(piece) - len(piece.lstrip())
            sentences.append(Sentence(piece.strip() + ".", start, match.end(1)))
        cursor = match.end()

    remainder = text[cursor:]
    if remainder.strip():
        start = cursor + len(remainder) - len(remainder.lstrip())
        end = cursor + len(remainder.rstrip())
        sentences.append(Sentence(remainder.strip(), start, end))

    return sentences


class SentenceSplitter(BaseSplitter):
    """Accumulates sentences up to ``max_chunk_size``.

    After each flush the next chunk is seeded with the previous
    ``SENTENCE_OVERLAP`` sentences, regardless of ``overlap_size``.
    """

    strategy: ClassVar[ChunkingStrategy] = ChunkingStrategy.SENTENCE

    def split(self, text: str, options: ChunkingOptions) -> list[Fragment]:
        sentences = split_sentences(text)
        fragments: list[Fragment] = []
        buffer = FragmentBuffer()

        for i, sentence in enumerate(sentences):
            if len(buffer) > 0 and not buffer.fits(sentence.text, options.max_chunk_size):
                flushed = buffer.flush()
                if flushed is not None:
                    fragments.append(flushed)

                for prior in sentences[max(0, i - SENTENCE_OVERLAP) : i]:
                    buffer.append(prior.text + " ", prior.start, prior.end)

            buffer.append(sentence.text + " ", sentence.start, sentence.end)

        flushed = buffer.flush()
        if flushed is not None:
            fragments.append(flushed)

        logger.debug("Split %d sentences into %d fragments", len(sentences), len(fragments))
        return fragments
