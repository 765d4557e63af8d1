"""Shared utility functions for CLI commands."""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

import typer

from splitnote import global_config
from splitnote.git import get_staged_diff

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)


def read_diff(diff_file: Optional[Path]) -> str:
    """Read the diff to describe.

    Args:
        diff_file: Path to a diff file, "-" for stdin, or None for the
            staged diff of the current repository.

    Returns:
        The diff text.

    Raises:
        GitError: If the staged diff cannot be read.
        NoStagedChangesError: If nothing is staged.
    """
    if diff_file is None:
        return get_staged_diff(global_config.get_exclude_patterns())
    if str(diff_file) == "-":
        return sys.stdin.read()
    return diff_file.read_text()


def get_current_branch_safe() -> str:
    """Safely get the current branch name without raising errors.

    Returns:
        The branch name, or 'unknown' if it cannot be determined.
    """
    try:
        result = subprocess.run(
            ["git", "branch", "--show-current"],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
        return "unknown"
    except OSError:
        return "unknown"


def echo_no_staged_changes() -> None:
    """Display a git-style message for no staged changes."""
    typer.echo("On branch " + get_current_branch_safe(), err=True)
    typer.echo("", err=True)
    typer.echo("nothing to commit (no changes staged for commit)", err=True)
    typer.echo("", err=True)
    typer.echo("Stage your changes first with:", err=True)
    typer.echo("  git add <file>...", err=True)
    typer.echo("", err=True)
    typer.echo("Then run splitnote again.", err=True)
