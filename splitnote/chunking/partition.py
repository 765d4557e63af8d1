"""Partition a unified diff into chunks that fit a token budget.

The diff is first split per file and the files are merged greedily. A file
that is still too large on its own is split per hunk, and every resulting
hunk group gets the file header back so it reads as a standalone diff.
Hunks are the finest granularity: an oversized hunk is sent as it is.
"""

import logging
import re
from enum import Enum
from typing import Callable, Optional

from splitnote.chunking.merge import merge_segments
from splitnote.tokens import count_tokens

logger = logging.getLogger(__name__)

FILE_MARKER = "diff --git "
HUNK_MARKER = "@@ "


class SplitLevel(Enum):
    """Granularity at which a diff is split."""

    FILE = "file"
    HUNK = "hunk"

    @property
    def marker(self) -> str:
        return FILE_MARKER if self is SplitLevel.FILE else HUNK_MARKER

    @property
    def finer(self) -> Optional["SplitLevel"]:
        """The next level to escalate to, or None when this level is terminal."""
        return SplitLevel.HUNK if self is SplitLevel.FILE else None


def split_on_marker(text: str, marker: str) -> tuple[str, list[str]]:
    """Split text at every line that starts with ``marker``.

    The marker stays at the front of its segment, so
    ``prefix + "".join(segments) == text``.

    Args:
        text: Diff text to split.
        marker: Line prefix that opens a new segment.

    Returns:
        A tuple of (text before the first marker, list of segments).
    """
    parts = re.split(rf"(?m)^(?={re.escape(marker)})", text)
    return parts[0], [part for part in parts[1:] if part]


def _partition(
    text: str,
    max_tokens: int,
    level: SplitLevel,
    count: Callable[[str], int],
    context: str = "",
) -> list[str]:
    """Split ``text`` at ``level`` and escalate oversized pieces once.

    ``context`` is text every emitted chunk must start with (the shared diff
    prefix at file level, plus the file header at hunk level).
    """
    prefix, segments = split_on_marker(text, level.marker)
    header = context + prefix

    if not segments:
        # Nothing to split on (binary file, rename only, or not a diff)
        return [context + text]

    def count_with_header(chunk: str) -> int:
        return count(header + chunk)

    merged = merge_segments(segments, max_tokens, count=count_with_header)
    logger.debug(
        "%s level: %d segment(s) merged into %d chunk(s)",
        level.value, len(segments), len(merged),
    )

    chunks: list[str] = []
    for chunk in merged:
        if count_with_header(chunk) < max_tokens or level.finer is None:
            chunks.append(header + chunk)
            continue

        # Only a single segment can be over budget after merging
        logger.debug(
            "Chunk of %d tokens exceeds budget %d, splitting at %s level",
            count_with_header(chunk), max_tokens, level.finer.value,
        )
        chunks.extend(_partition(chunk, max_tokens, level.finer, count, context=header))

    return chunks


def partition_diff(
    diff: str,
    max_tokens: int,
    count: Callable[[str], int] = count_tokens,
) -> list[str]:
    """Partition a unified diff into ordered chunks under ``max_tokens``.

    Files keep their original order; the hunk groups of a split file replace
    that file in place. Any text before the first file is repeated at the
    front of every chunk.

    Args:
        diff: Full unified diff (e.g. ``git diff --staged`` output).
        max_tokens: Exclusive token limit per chunk.
        count: Token counter.

    Returns:
        Ordered list of chunks. Empty for an empty diff. A chunk can only
        exceed the limit when it holds a single hunk (or an unsplittable file).

    Raises:
        ValueError: If max_tokens is not positive.
    """
    if max_tokens <= 0:
        raise ValueError(f"max_tokens must be positive, got {max_tokens}")
    if not diff:
        return []

    chunks = _partition(diff, max_tokens, SplitLevel.FILE, count)
    logger.debug("Partitioned diff into %d chunk(s)", len(chunks))
    return chunks
