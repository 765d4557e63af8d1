"""Tests for splitnote.chunking.merge module."""

import pytest

from splitnote.chunking.merge import merge_segments
from conftest import word_count


class TestMergeSegments:
    """Tests for greedy segment merging."""

    def test_empty_input_returns_no_chunks(self):
        """Test that no segments produce no chunks."""
        assert merge_segments([], 10, count=word_count) == []

    def test_everything_fits_in_one_chunk(self):
        """Test that input under the limit is returned as a single chunk."""
        segments = ["a b\n", "c\n", "d e f\n"]

        result = merge_segments(segments, 7, count=word_count)

        assert result == ["a b\nc\nd e f\n"]

    def test_flushes_before_reaching_limit(self):
        """Test that a segment reaching the limit starts a new chunk."""
        segments = ["a ", "b ", "c "]

        result = merge_segments(segments, 3, count=word_count)

        assert result == ["a b ", "c "]

    def test_limit_is_exclusive(self):
        """Test that a chunk may hold at most max_tokens - 1 tokens."""
        segments = ["a b ", "c d "]

        assert merge_segments(segments, 4, count=word_count) == ["a b ", "c d "]
        assert merge_segments(segments, 5, count=word_count) == ["a b c d "]

    def test_oversized_segment_is_emitted_alone(self):
        """Test that a segment over the limit becomes its own chunk."""
        segments = ["x ", "a b c d ", "e "]

        result = merge_segments(segments, 3, count=word_count)

        assert result == ["x ", "a b c d ", "e "]

    def test_oversized_first_segment(self):
        """Test an oversized segment at the start does not produce an empty chunk."""
        result = merge_segments(["a b c d ", "e "], 3, count=word_count)

        assert result == ["a b c d ", "e "]

    def test_preserves_content_and_order(self):
        """Test that joined chunks reconstruct the input exactly."""
        segments = [f"seg{i} " * (i % 4 + 1) for i in range(20)]

        result = merge_segments(segments, 6, count=word_count)

        assert "".join(result) == "".join(segments)

    def test_multi_segment_chunks_stay_under_limit(self):
        """Test that only single-segment chunks can reach the limit."""
        segments = ["w " * n for n in (1, 5, 2, 2, 7, 1, 1, 3)]

        result = merge_segments(segments, 5, count=word_count)

        for chunk in result:
            if chunk not in segments:
                assert word_count(chunk) < 5

    def test_uses_custom_counter(self):
        """Test that the given counter decides chunk boundaries."""
        result = merge_segments(["aaaa", "bbbb", "cc"], 9, count=len)

        assert result == ["aaaabbbb", "cc"]

    def test_rejects_non_positive_limit(self):
        """Test that a zero limit raises ValueError."""
        with pytest.raises(ValueError):
            merge_segments(["a"], 0, count=word_count)
