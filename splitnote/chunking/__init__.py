"""Split a diff into chunks that each fit one generation request.

Contains:
- merge_segments: Greedy packing of ordered text segments under a token limit
- partition_diff: File-level then hunk-level partition of a unified diff
"""

from splitnote.chunking.merge import merge_segments
from splitnote.chunking.partition import (
    FILE_MARKER,
    HUNK_MARKER,
    SplitLevel,
    partition_diff,
    split_on_marker,
)

__all__ = [
    "FILE_MARKER",
    "HUNK_MARKER",
    "SplitLevel",
    "merge_segments",
    "partition_diff",
    "split_on_marker",
]
