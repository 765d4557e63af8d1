"""Shared test fixtures and configuration."""

import tempfile
import threading
from pathlib import Path

import pytest

import splitnote.config as _config
from splitnote.llm.base import BaseLLMProvider
from splitnote.prompts import ChatMessage, PromptPreamble


def word_count(text: str) -> int:
    """Token counter used in tests: one token per whitespace-separated word."""
    return len(text.split())


class WordEncoding:
    """Stand-in for a tiktoken encoding that splits on whitespace."""

    def encode(self, text, disallowed_special=()):
        return text.split()


class FakeProvider(BaseLLMProvider):
    """Provider that records every prompt and answers with a fixed reply."""

    def __init__(self, reply="OK", model="fake-model"):
        self.model = model
        self.reply = reply
        self.calls = []
        self._lock = threading.Lock()

    def get_api_key(self) -> str:
        return "test-key"

    def generate_commit_message(self, messages: list[dict]) -> str:
        with self._lock:
            self.calls.append(messages)
        if callable(self.reply):
            return self.reply(messages)
        return self.reply


def make_file_diff(name: str, hunks: int) -> str:
    """Build a file diff with an 11-word header and 11-word hunks."""
    header = (
        f"diff --git a/{name} b/{name}\n"
        f"index 1111111..2222222 100644\n"
        f"--- a/{name}\n"
        f"+++ b/{name}\n"
    )
    body = "".join(
        f"@@ -{i},3 +{i},3 @@\n"
        f"-old {name} {i}\n"
        f"+new {name} {i}\n"
        f" context\n"
        for i in range(1, hunks + 1)
    )
    return header + body


@pytest.fixture(autouse=True)
def word_tokens(mocker):
    """Count tokens by words so tests never load a tiktoken vocabulary."""
    mocker.patch("splitnote.tokens._get_encoding", return_value=WordEncoding())


@pytest.fixture(autouse=True)
def isolated_config(mocker, monkeypatch, tmp_path):
    """Point ~/.splitnote at a temp dir and restore active settings after each test."""
    mocker.patch("splitnote.global_config._CONFIG_DIR", tmp_path / ".splitnote")
    for name in (
        "ACTIVE_PROVIDER",
        "ACTIVE_MODEL",
        "MAX_TOKENS",
        "TEMPERATURE",
        "MAX_REQUEST_TOKENS",
        "LANGUAGE",
        "EMOJI",
        "DESCRIPTION",
        "MAX_WORKERS",
        "REQUEST_TIMEOUT",
    ):
        monkeypatch.setattr(_config, name, getattr(_config, name))
    for env_var in _config.API_KEY_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def preamble():
    """A small preamble costing 7 tokens under the word counter."""
    return PromptPreamble(
        messages=(ChatMessage(role="system", content="Write commit messages."),)
    )


@pytest.fixture
def fake_provider():
    """Provider that answers every request with OK."""
    return FakeProvider()


@pytest.fixture
def sample_diff():
    """Two-file diff: a.py with one hunk and b.py with two hunks."""
    return make_file_diff("a.py", 1) + make_file_diff("b.py", 2)


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    return mocker.patch("subprocess.run")
