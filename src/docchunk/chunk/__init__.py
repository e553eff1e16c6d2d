"""Chunking engine: recursive, sentence and paragraph splitting strategies."""

from docchunk.chunk.assembler import assemble_chunk, locate_fragment, make_chunk_id
from docchunk.chunk.base import BaseSplitter
from docchunk.chunk.dispatcher import DocumentChunker, chunk_text, get_splitter
from docchunk.chunk.paragraph import ParagraphSplitter
from docchunk.chunk.recursive import RecursiveSplitter, split_recursively
from docchunk.chunk.sentence import SentenceSplitter, split_sentences

__all__ = [
    "BaseSplitter",
    "DocumentChunker",
    "ParagraphSplitter",
    "RecursiveSplitter",
    "SentenceSplitter",
    "assemble_chunk",
    "chunk_text",
    "get_splitter",
    "locate_fragment",
    "make_chunk_id",
    "split_recursively",
    "split_sentences",
]
