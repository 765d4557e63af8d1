"""Tests for splitnote.git package."""

import subprocess

import pytest

from splitnote.git import (
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
    GitError,
    NoStagedChangesError,
    commit_with_message,
    get_staged_diff,
    get_staged_files,
)
from splitnote.git.diff import _should_exclude_file
from splitnote.git.runner import _run_git_command


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_returns_stdout(self, mock_git_commands):
        """Test that stdout is returned without the trailing newline."""
        mock_git_commands.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout=" M file\n", stderr=""
        )

        assert _run_git_command(["status"]) == " M file"

    def test_passes_input(self, mock_git_commands):
        """Test that stdin text is forwarded."""
        mock_git_commands.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="", stderr=""
        )

        _run_git_command(["commit", "-F", "-"], input_text="msg")

        assert mock_git_commands.call_args.kwargs["input"] == "msg"
        assert mock_git_commands.call_args.args[0] == ["git", "commit", "-F", "-"]

    def test_failure_raises_git_error(self, mock_git_commands):
        """Test that a failing command raises GitError."""
        mock_git_commands.side_effect = subprocess.CalledProcessError(
            128, ["git", "status"], stderr="fatal: not a git repository\n"
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not a git repository" in str(exc_info.value)

    def test_missing_git(self, mock_git_commands):
        """Test the error when git is not installed."""
        mock_git_commands.side_effect = FileNotFoundError()

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestCommitWithMessage:
    """Tests for commit_with_message."""

    def test_commit_with_message(self, mocker):
        """Test that the message is passed to git commit on stdin."""
        mock_run = mocker.patch("splitnote.git.runner._run_git_command", return_value="[main 1a2b3c] fix")

        assert commit_with_message("fix: it") == "[main 1a2b3c] fix"
        mock_run.assert_called_once_with(["commit", "-F", "-"], input_text="fix: it")


class TestShouldExcludeFile:
    """Tests for _should_exclude_file function."""

    def test_exact_match(self):
        """Test exact filename match."""
        assert _should_exclude_file("poetry.lock", DEFAULT_DIFF_EXCLUDE_PATTERNS)

    def test_basename_match(self):
        """Test matching a nested lock file by basename."""
        assert _should_exclude_file("web/package-lock.json", DEFAULT_DIFF_EXCLUDE_PATTERNS)

    def test_glob_match(self):
        """Test glob patterns."""
        assert _should_exclude_file("static/app.min.js", DEFAULT_DIFF_EXCLUDE_PATTERNS)

    def test_source_file_is_kept(self):
        """Test that regular files are not excluded."""
        assert not _should_exclude_file("src/app.py", DEFAULT_DIFF_EXCLUDE_PATTERNS)


class TestGetStagedDiff:
    """Tests for get_staged_diff function."""

    def _fake_git(self, staged, diff="diff --git a/x b/x\n"):
        def run(args, input_text=None):
            if args == ["diff", "--staged", "--name-only"]:
                return "\n".join(staged)
            return diff

        return run

    def test_get_staged_files(self, mocker):
        """Test listing staged files."""
        mocker.patch("splitnote.git.diff._run_git_command", side_effect=self._fake_git(["a.py", "b.py"]))

        assert get_staged_files() == ["a.py", "b.py"]

    def test_no_staged_changes(self, mocker):
        """Test that nothing staged raises NoStagedChangesError."""
        mocker.patch("splitnote.git.diff._run_git_command", side_effect=self._fake_git([]))

        with pytest.raises(NoStagedChangesError):
            get_staged_diff()

    def test_excludes_lock_files(self, mocker):
        """Test that excluded files are left out of the diff command."""
        mock_run = mocker.patch(
            "splitnote.git.diff._run_git_command",
            side_effect=self._fake_git(["a.py", "poetry.lock", "b.py"]),
        )

        diff = get_staged_diff()

        assert diff == "diff --git a/x b/x\n"
        mock_run.assert_called_with(["diff", "--staged", "--", "a.py", "b.py"])

    def test_custom_patterns(self, mocker):
        """Test that given patterns replace the defaults."""
        mock_run = mocker.patch(
            "splitnote.git.diff._run_git_command",
            side_effect=self._fake_git(["a.py", "poetry.lock", "docs/x.md"]),
        )

        get_staged_diff(["docs/*"])

        mock_run.assert_called_with(["diff", "--staged", "--", "a.py", "poetry.lock"])

    def test_only_excluded_files(self, mocker):
        """Test that only excluded files give an empty diff."""
        mocker.patch(
            "splitnote.git.diff._run_git_command",
            side_effect=self._fake_git(["yarn.lock"]),
        )

        assert get_staged_diff() == ""


class TestPublicApi:
    """Tests for the splitnote.git exports."""

    def test_exports(self):
        """Test that the package exports only what the CLI uses."""
        import splitnote.git as git

        assert sorted(git.__all__) == [
            "DEFAULT_DIFF_EXCLUDE_PATTERNS",
            "GitError",
            "NoStagedChangesError",
            "commit_with_message",
            "get_staged_diff",
            "get_staged_files",
        ]
        for name in git.__all__:
            assert hasattr(git, name)
