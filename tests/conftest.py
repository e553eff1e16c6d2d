"""Shared fixtures for docchunk tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from docchunk.types import ChunkingOptions, ChunkingStrategy

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_TXT = FIXTURE_DIR / "sample.txt"


@pytest.fixture
def sample_text() -> str:
    """The sample document, decoded exactly as the extractor would."""
    return SAMPLE_TXT.read_text(encoding="utf-8")


@pytest.fixture
def long_text() -> str:
    """Multi-paragraph prose long enough to split under every strategy."""
    paragraphs = []
    for p in range(6):
        sentences = [f"Paragraph {p} sentence {s} talks about topic {p * 10 + s}." for s in range(5)]
        paragraphs.append(" ".join(sentences))
    return "\n\n".join(paragraphs)


@pytest.fixture(params=list(ChunkingStrategy), ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> ChunkingStrategy:
    return request.param


@pytest.fixture
def small_options(strategy: ChunkingStrategy) -> ChunkingOptions:
    """Options small enough to force several chunks, for each strategy."""
    return ChunkingOptions(max_chunk_size=120, overlap_size=20, strategy=strategy)
