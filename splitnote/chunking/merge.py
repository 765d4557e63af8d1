"""Greedy merging of ordered diff segments into token-bounded chunks."""

from typing import Callable, Sequence

from splitnote.tokens import count_tokens


def merge_segments(
    segments: Sequence[str],
    max_tokens: int,
    count: Callable[[str], int] = count_tokens,
) -> list[str]:
    """Pack consecutive segments into as few chunks as the greedy pass allows.

    Each segment is appended to the current chunk while the result stays
    strictly below ``max_tokens``. When appending would reach the limit, the
    current chunk is closed and the segment starts a new one. A segment that
    alone reaches the limit still becomes its own chunk; shrinking it is up
    to the caller.

    Segments are joined as-is, so ``"".join(result) == "".join(segments)``.

    Args:
        segments: Ordered text segments (markers already included).
        max_tokens: Exclusive token limit for a merged chunk.
        count: Token counter applied to candidate chunks.

    Returns:
        Ordered list of chunks.

    Raises:
        ValueError: If max_tokens is not positive.
    """
    if max_tokens <= 0:
        raise ValueError(f"max_tokens must be positive, got {max_tokens}")

    chunks: list[str] = []
    current = ""

    for segment in segments:
        candidate = current + segment
        if count(candidate) < max_tokens:
            current = candidate
            continue

        if current:
            chunks.append(current)
        current = segment

    if current:
        chunks.append(current)

    return chunks
