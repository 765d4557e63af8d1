"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- commit_with_message: Create a commit from a message on stdin
"""

import subprocess

from splitnote.git.exceptions import GitError


def _run_git_command(args: list[str], input_text: str | None = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        input_text: Text passed to the command on stdin.

    Returns:
        The stdout of the git command. Trailing newlines are removed,
        leading whitespace is kept.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            input=input_text,
        )
        return result.stdout.rstrip("\n")
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def commit_with_message(message: str) -> str:
    """Commit the staged changes with the given message.

    Returns:
        The output of git commit.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-F", "-"], input_text=message)
