"""Tests for chunk assembly and the fragment buffer."""

from __future__ import annotations

from docchunk.chunk.assembler import (
    assemble_chunk,
    assemble_chunks,
    locate_fragment,
    make_chunk_id,
)
from docchunk.chunk.buffer import FragmentBuffer
from docchunk.types import ChunkingStrategy, Fragment

# ---------------------------------------------------------------------------
# Chunk ids
# ---------------------------------------------------------------------------


class TestMakeChunkId:
    def test_zero_padded(self):
        assert make_chunk_id("doc", 0) == "doc-chunk-0000"
        assert make_chunk_id("doc", 42) == "doc-chunk-0042"

    def test_wider_than_four_digits(self):
        assert make_chunk_id("doc", 12345) == "doc-chunk-12345"

    def test_document_id_verbatim(self):
        assert make_chunk_id("a-b_c", 7) == "a-b_c-chunk-0007"


# ---------------------------------------------------------------------------
# Offset location
# ---------------------------------------------------------------------------


class TestLocateFragment:
    def test_first_occurrence_from_start(self):
        assert locate_fragment("xx abc yy abc", "abc") == (3, 6)

    def test_cursor_skips_earlier_duplicate(self):
        assert locate_fragment("xx abc yy abc", "abc", cursor=6) == (10, 13)

    def test_falls_back_to_first_occurrence(self):
        assert locate_fragment("abc then more", "abc", cursor=8) == (0, 3)

    def test_missing_content_anchors_at_cursor(self):
        assert locate_fragment("hello", "absent", cursor=3) == (3, 3)

    def test_missing_content_cursor_clamped(self):
        assert locate_fragment("hello", "absent", cursor=99) == (5, 5)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestAssembleChunk:
    def test_fields(self):
        chunk = assemble_chunk(
            "  body text \n", 3, 10, 19, "doc", {"source": "upload"}, ChunkingStrategy.SENTENCE
        )
        assert chunk.chunk_id == "doc-chunk-0003"
        assert chunk.content == "body text"
        assert chunk.chunk_index == 3
        assert (chunk.start_position, chunk.end_position) == (10, 19)
        assert chunk.original_document_id == "doc"

    def test_metadata_injected_after_caller_keys(self):
        chunk = assemble_chunk("x", 0, 0, 1, "doc", {"source": "upload"}, ChunkingStrategy.RECURSIVE)
        assert list(chunk.metadata) == ["source", "chunk_index", "chunk_id", "chunking_strategy"]
        assert chunk.metadata["chunk_index"] == "0"
        assert chunk.metadata["chunk_id"] == "doc-chunk-0000"
        assert chunk.metadata["chunking_strategy"] == "recursive"

    def test_caller_mapping_untouched(self):
        metadata = {"source": "upload"}
        assemble_chunk("x", 0, 0, 1, "doc", metadata, ChunkingStrategy.RECURSIVE)
        assert metadata == {"source": "upload"}

    def test_injected_keys_override_caller_values(self):
        chunk = assemble_chunk("x", 5, 0, 1, "doc", {"chunk_index": "99"}, ChunkingStrategy.PARAGRAPH)
        assert chunk.metadata["chunk_index"] == "5"


class TestAssembleChunks:
    def test_blank_fragments_dropped_and_indices_contiguous(self):
        text = "alpha beta"
        fragments = [Fragment("alpha "), Fragment("   "), Fragment("beta")]
        chunks = assemble_chunks(text, fragments, "doc", {}, ChunkingStrategy.RECURSIVE)
        assert [c.chunk_index for c in chunks] == [0, 1]
        assert [c.content for c in chunks] == ["alpha", "beta"]

    def test_known_spans_used_verbatim(self):
        chunks = assemble_chunks(
            "A. B.", [Fragment("A. B. ", 0, 5)], "doc", {}, ChunkingStrategy.SENTENCE
        )
        assert (chunks[0].start_position, chunks[0].end_position) == (0, 5)

    def test_unknown_spans_located_with_cursor(self):
        text = "repeat\n\nrepeat"
        fragments = [Fragment("repeat\n\n"), Fragment("repeat")]
        chunks = assemble_chunks(text, fragments, "doc", {}, ChunkingStrategy.RECURSIVE)
        assert [c.start_position for c in chunks] == [0, 8]

    def test_metadata_not_shared(self):
        fragments = [Fragment("a "), Fragment("b")]
        chunks = assemble_chunks("a b", fragments, "doc", {"k": "v"}, ChunkingStrategy.RECURSIVE)
        chunks[0].metadata["k"] = "changed"
        assert chunks[1].metadata["k"] == "v"


# ---------------------------------------------------------------------------
# Buffer
# ---------------------------------------------------------------------------


class TestFragmentBuffer:
    def test_empty_flush_returns_none(self):
        assert FragmentBuffer().flush() is None

    def test_append_and_flush(self):
        buffer = FragmentBuffer()
        buffer.append("ab", 0, 2)
        buffer.append("cd", 3, 5)
        assert len(buffer) == 4
        assert buffer.flush() == Fragment("abcd", 0, 5)
        assert len(buffer) == 0

    def test_fits(self):
        buffer = FragmentBuffer()
        buffer.append("abc")
        assert buffer.fits("de", 5)
        assert not buffer.fits("def", 5)

    def test_first_start_wins(self):
        buffer = FragmentBuffer()
        buffer.append("  ")
        buffer.append("x", 4, 5)
        buffer.append("y", 6, 7)
        assert buffer.flush() == Fragment("  xy", 4, 7)

    def test_reset(self):
        buffer = FragmentBuffer()
        buffer.append("abc", 0, 3)
        buffer.reset()
        assert len(buffer) == 0
        assert buffer.flush() is None
