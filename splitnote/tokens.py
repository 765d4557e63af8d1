"""Token counting for prompt budgeting.

Counts are estimates used only to compare a prompt against the request
ceiling; they need to be consistent, not exact for every model.
"""

from functools import lru_cache
from typing import Iterable, Mapping

import tiktoken

# Encoding used by the gpt-3.5/gpt-4 family, close enough for other vendors
ENCODING_NAME = "cl100k_base"

# Chat framing overhead per message (role, separators)
MESSAGE_OVERHEAD_TOKENS = 4


@lru_cache(maxsize=1)
def _get_encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding(ENCODING_NAME)


def count_tokens(text: str) -> int:
    """Count the tokens in a piece of text.

    Special-token strings that may appear inside a diff are encoded as
    plain text instead of raising.

    Args:
        text: The text to measure.

    Returns:
        Non-negative token count (0 for the empty string).
    """
    if not text:
        return 0
    return len(_get_encoding().encode(text, disallowed_special=()))


def count_message_tokens(messages: Iterable[Mapping[str, str]]) -> int:
    """Count the tokens of a chat message list, including per-message framing."""
    return sum(
        count_tokens(message["content"]) + MESSAGE_OVERHEAD_TOKENS
        for message in messages
    )
