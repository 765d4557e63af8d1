"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff, excluding generated files
- get_staged_files: List the staged file paths
- _should_exclude_file: Check if a file should be excluded based on patterns
- DEFAULT_DIFF_EXCLUDE_PATTERNS: Default patterns for files to exclude from diff
"""

import fnmatch
from pathlib import Path
from typing import Optional

from splitnote.git.exceptions import NoStagedChangesError
from splitnote.git.runner import _run_git_command


# Auto-generated files that inflate the diff without helping the message
DEFAULT_DIFF_EXCLUDE_PATTERNS = [
    "poetry.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
    "*.min.js",
    "*.min.css",
    "*.map",
]


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports glob patterns like *.lock, build/*, etc.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    for pattern in patterns:
        if filename == pattern:
            return True
        if fnmatch.fnmatch(filename, pattern):
            return True
        # Patterns may target the basename only
        if fnmatch.fnmatch(Path(filename).name, pattern):
            return True
    return False


def get_staged_files() -> list[str]:
    """Get list of staged file paths."""
    output = _run_git_command(["diff", "--staged", "--name-only"])
    return [line for line in output.split("\n") if line]


def get_staged_diff(exclude_patterns: Optional[list[str]] = None) -> str:
    """Get the staged diff, excluding generated files.

    The diff is not truncated; oversized diffs are split later to fit the
    request budget.

    Args:
        exclude_patterns: Glob patterns of files to leave out. Defaults to
            DEFAULT_DIFF_EXCLUDE_PATTERNS.

    Returns:
        The staged diff, or an empty string if only excluded files are staged.

    Raises:
        NoStagedChangesError: If there are no staged changes.
    """
    if exclude_patterns is None:
        exclude_patterns = DEFAULT_DIFF_EXCLUDE_PATTERNS

    staged_files = get_staged_files()
    if not staged_files:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    files_to_include = [
        f for f in staged_files
        if not _should_exclude_file(f, exclude_patterns)
    ]

    if not files_to_include:
        return ""

    return _run_git_command(["diff", "--staged", "--"] + files_to_include)
