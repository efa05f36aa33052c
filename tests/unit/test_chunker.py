"""Unit tests for the recursive text splitter."""

import pytest

from askdoc.core.domain import Chunk
from askdoc.core.domain.exceptions import InvalidConfigurationError
from askdoc.core.services.chunker import RecursiveTextSplitter, split_text

pytestmark = pytest.mark.unit


def reconstruct(chunks: list[Chunk]) -> str:
    """Join chunks, skipping the part of each that repeats its predecessor."""
    if not chunks:
        return ""
    parts = [chunks[0].text]
    for previous, current in zip(chunks, chunks[1:]):
        parts.append(current.text[previous.end - current.start :])
    return "".join(parts)


def assert_chunk_invariants(text: str, chunks: list[Chunk], chunk_size: int, overlap: int):
    assert [c.index for c in chunks] == list(range(len(chunks)))
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)
    for chunk in chunks:
        assert chunk.text
        assert len(chunk.text) <= chunk_size
        assert text[chunk.start : chunk.end] == chunk.text
    for previous, current in zip(chunks, chunks[1:]):
        assert current.start > previous.start
        # No gap, bounded overlap
        assert current.start <= previous.end
        assert previous.end - current.start <= overlap
    assert reconstruct(chunks) == text


class TestSplitBasics:
    """Edge cases for short and empty input."""

    def test_empty_text_returns_empty_list(self):
        assert split_text("", chunk_size=50, chunk_overlap=10) == []

    def test_short_text_returns_single_chunk(self):
        text = "Short text"
        assert split_text(text, chunk_size=50, chunk_overlap=10) == [Chunk(0, text, 0)]

    def test_text_exactly_chunk_size_is_one_chunk(self):
        text = "x" * 20
        chunks = split_text(text, chunk_size=20, chunk_overlap=5)
        assert len(chunks) == 1

    @pytest.mark.parametrize("text", [" ", "   \n\n   ", "\t\n" * 50])
    def test_whitespace_only_text_returns_empty_list(self, text):
        assert split_text(text, chunk_size=4, chunk_overlap=0) == []

    def test_inner_whitespace_runs_are_kept(self):
        text = "alpha" + " " * 12 + "omega"
        chunks = split_text(text, chunk_size=6, chunk_overlap=0)
        assert_chunk_invariants(text, chunks, 6, 0)


class TestSeparatorPreference:
    """Boundaries follow paragraph, line, sentence, word, character order."""

    def test_splits_on_sentences(self, sky_and_grass):
        chunks = split_text(sky_and_grass, chunk_size=20, chunk_overlap=0)
        assert [c.text for c in chunks] == ["The sky is blue. ", "The grass is green."]
        assert chunks[1].start == 17

    def test_prefers_paragraph_breaks(self):
        text = "alpha beta gamma\n\ndelta epsilon zeta"
        chunks = split_text(text, chunk_size=20, chunk_overlap=0)
        assert [c.text for c in chunks] == ["alpha beta gamma\n\n", "delta epsilon zeta"]

    def test_falls_back_to_words_then_characters(self):
        text = "tiny words then averyveryverylongword"
        chunks = split_text(text, chunk_size=10, chunk_overlap=0)
        assert [c.text for c in chunks] == [
            "tiny ",
            "words ",
            "then avery",
            "veryverylo",
            "ngword",
        ]
        assert_chunk_invariants(text, chunks, 10, 0)


class TestCoverageInvariants:
    """Chunks cover the document in order with bounded overlap."""

    @pytest.mark.parametrize(
        ("chunk_size", "chunk_overlap"),
        [(1000, 200), (120, 30), (60, 0), (25, 24), (7, 3)],
    )
    def test_reconstructs_document(self, long_document, chunk_size, chunk_overlap):
        chunks = split_text(long_document, chunk_size, chunk_overlap)
        assert_chunk_invariants(long_document, chunks, chunk_size, chunk_overlap)

    def test_consecutive_chunks_share_overlap(self):
        text = " ".join(f"word{i}" for i in range(60))
        chunks = split_text(text, chunk_size=50, chunk_overlap=20)
        assert len(chunks) > 1
        for previous, current in zip(chunks, chunks[1:]):
            shared = previous.end - current.start
            assert 0 < shared <= 20
            assert previous.text.endswith(current.text[:shared])

    def test_deterministic(self, long_document):
        first = split_text(long_document, 80, 20)
        second = RecursiveTextSplitter(80, 20).split(long_document)
        assert first == second


class TestConfigurationValidation:
    """Invalid sizes are rejected before any splitting happens."""

    def test_overlap_equal_or_exceeds_chunk_size_raises(self):
        with pytest.raises(InvalidConfigurationError):
            split_text("content", chunk_size=100, chunk_overlap=100)

        with pytest.raises(InvalidConfigurationError):
            split_text("content", chunk_size=50, chunk_overlap=75)

    def test_negative_or_zero_chunk_size_raises(self):
        with pytest.raises(InvalidConfigurationError):
            split_text("content", chunk_size=0, chunk_overlap=0)

    def test_negative_overlap_raises(self):
        with pytest.raises(InvalidConfigurationError):
            split_text("content", chunk_size=10, chunk_overlap=-1)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RecursiveTextSplitter(chunk_size=10, chunk_overlap=10)
