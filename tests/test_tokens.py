"""Tests for splitnote.tokens module."""

from splitnote.tokens import (
    MESSAGE_OVERHEAD_TOKENS,
    count_message_tokens,
    count_tokens,
)


class TestCountTokens:
    """Tests for count_tokens function."""

    def test_empty_string_is_zero(self):
        """Test that the empty string has no tokens."""
        assert count_tokens("") == 0

    def test_counts_with_encoding(self):
        """Test that the count is the length of the encoding."""
        assert count_tokens("fix the parser bug") == 4

    def test_is_deterministic(self):
        """Test that the same text always gives the same count."""
        text = "diff --git a/x b/x\n+added line\n"
        assert count_tokens(text) == count_tokens(text)

    def test_special_tokens_are_plain_text(self, mocker):
        """Test that special-token strings in a diff do not raise."""
        encoding = mocker.MagicMock()
        encoding.encode.return_value = [1, 2, 3]
        mocker.patch("splitnote.tokens._get_encoding", return_value=encoding)

        assert count_tokens("+<|endoftext|>") == 3
        encoding.encode.assert_called_once_with("+<|endoftext|>", disallowed_special=())


class TestCountMessageTokens:
    """Tests for count_message_tokens function."""

    def test_adds_overhead_per_message(self):
        """Test that each message costs its content plus framing."""
        messages = [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "one two three"},
        ]

        assert count_message_tokens(messages) == 5 + 2 * MESSAGE_OVERHEAD_TOKENS

    def test_empty_list(self):
        """Test that no messages cost nothing."""
        assert count_message_tokens([]) == 0
