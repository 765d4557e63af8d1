"""Git plumbing used to collect the staged diff and commit the result."""

from splitnote.git.diff import (
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
    get_staged_diff,
    get_staged_files,
)
from splitnote.git.exceptions import GitError, NoStagedChangesError
from splitnote.git.runner import commit_with_message

__all__ = [
    "DEFAULT_DIFF_EXCLUDE_PATTERNS",
    "GitError",
    "NoStagedChangesError",
    "commit_with_message",
    "get_staged_diff",
    "get_staged_files",
]
