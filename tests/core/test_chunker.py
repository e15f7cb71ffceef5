"""
Test suite for the fixed-size chunker.

System role: Verification of chunk partitioning
"""

import pytest

from helpdesk.core.analysis.chunker import DEFAULT_CHUNK_SIZE, split_into_chunks


class TestSplitIntoChunks:
    """Test suite for split_into_chunks."""

    @pytest.mark.parametrize(
        "content, chunk_size",
        [
            ("", 10),
            ("short", 10),
            ("x" * 10, 10),
            ("abcdefghijk", 10),
            ("0123456789" * 50 + "tail", 7),
            ("ünïcödé text with émojis 🎫🎫🎫", 4),
        ],
    )
    def test_chunks_should_reconstruct_input(self, content: str, chunk_size: int) -> None:
        """Joining chunks in order reproduces the original text."""
        chunks = split_into_chunks(content, chunk_size)

        assert "".join(chunks) == content

    @pytest.mark.parametrize("content", ["", "a", "x" * 2000])
    def test_short_input_should_return_single_chunk(self, content: str) -> None:
        """Input no longer than the chunk size comes back whole."""
        assert split_into_chunks(content, 2000) == [content]

    def test_chunks_should_respect_size_limit(self) -> None:
        """Every chunk is at most chunk_size, only the last may be shorter."""
        chunks = split_into_chunks("a" * 5000, 2000)

        assert [len(c) for c in chunks] == [2000, 2000, 1000]

    def test_default_chunk_size_should_be_2000(self) -> None:
        assert DEFAULT_CHUNK_SIZE == 2000
        assert len(split_into_chunks("b" * 4001)) == 3

    def test_non_positive_chunk_size_should_raise(self) -> None:
        with pytest.raises(ValueError, match="chunk_size must be positive"):
            split_into_chunks("text", 0)
