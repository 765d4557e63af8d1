"""Commit message generation for diffs of any size.

A diff that fits the token budget is sent in a single request. A larger
diff is partitioned into chunks, the chunks are sent concurrently, and the
messages are joined in diff order.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Optional

import splitnote.config as _config
from splitnote.chunking import partition_diff
from splitnote.llm.base import BaseLLMProvider
from splitnote.llm.exceptions import EmptyResultError
from splitnote.prompts import PromptPreamble, get_default_preamble
from splitnote.tokens import count_tokens

logger = logging.getLogger(__name__)

# Separator between the messages generated for each chunk
RESULT_SEPARATOR = "\n\n"


class CommitMessageGenerator:
    """Generate one commit message for a diff, splitting it when needed.

    The budget is fixed at construction from the preamble cost and stays the
    same for every diff this generator handles.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        preamble: PromptPreamble,
        max_request_tokens: Optional[int] = None,
        max_workers: Optional[int] = None,
        count: Callable[[str], int] = count_tokens,
    ):
        """Initialize the generator.

        Args:
            provider: Backend used for every request.
            preamble: Fixed messages sent ahead of each diff chunk.
            max_request_tokens: Prompt token ceiling. Defaults to config.
            max_workers: Concurrent requests for a split diff. Defaults to config.
            count: Token counter used for budgeting.

        Raises:
            PreambleTooLargeError: If the preamble leaves no room for a diff.
        """
        self.provider = provider
        self.preamble = preamble
        self.max_request_tokens = (
            max_request_tokens if max_request_tokens is not None else _config.MAX_REQUEST_TOKENS
        )
        self.max_workers = max(1, max_workers or _config.MAX_WORKERS)
        self.count = count
        self.budget = preamble.budget(self.max_request_tokens)

    def split(self, diff: str) -> list[str]:
        """Return the diff pieces that generate() would send, one per request."""
        if self.count(diff) < self.budget:
            return [diff]
        return partition_diff(diff, self.budget, count=self.count)

    def generate(self, diff: str) -> str:
        """Generate the commit message for a diff.

        Args:
            diff: Unified diff text.

        Returns:
            The commit message. For a split diff, the per-chunk messages
            joined by a blank line in diff order.

        Raises:
            EmptyResultError: If a single-request diff produced no text.
            BackendError: If any request fails. No partial output is returned.
        """
        diff_tokens = self.count(diff)
        logger.debug("Diff has %d tokens, budget is %d", diff_tokens, self.budget)

        if diff_tokens < self.budget:
            message = self._request(diff)
            if not message.strip():
                raise EmptyResultError("The LLM returned an empty commit message.")
            return message

        chunks = partition_diff(diff, self.budget, count=self.count)
        logger.debug("Diff exceeds budget, sending %d chunk(s)", len(chunks))
        return RESULT_SEPARATOR.join(self._request_all(chunks))

    def _request(self, diff: str) -> str:
        return self.provider.generate_commit_message(self.preamble.build_messages(diff))

    def _request_all(self, chunks: list[str]) -> list[str]:
        """Send every chunk concurrently and return the results in chunk order.

        On the first failure the pending requests are cancelled and the error
        of the earliest failed chunk is raised.
        """
        workers = min(self.max_workers, len(chunks))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="splitnote")
        try:
            futures = [executor.submit(self._request, chunk) for chunk in chunks]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)

            for index, future in enumerate(futures):
                if future in done and future.exception() is not None:
                    logger.debug("Chunk %d of %d failed, aborting", index + 1, len(chunks))
                    raise future.exception()

            return [future.result() for future in futures]
        finally:
            # Running requests cannot be interrupted; they end within the client
            # request timeout and their results are dropped
            executor.shutdown(wait=False, cancel_futures=True)


def generate_commit_message(
    diff: str,
    provider: Optional[BaseLLMProvider] = None,
    preamble: Optional[PromptPreamble] = None,
) -> str:
    """Generate a commit message using the configured provider and preamble.

    This is the main entry point for generating commit messages.

    Args:
        diff: Unified diff text (e.g. the staged diff).
        provider: Backend to use. Defaults to the configured provider.
        preamble: Preamble to use. Defaults to the configured preamble.

    Returns:
        The commit message.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        BackendError: If a request fails.
        EmptyResultError: If the LLM returned an empty message.
        PreambleTooLargeError: If the preamble exceeds the request limit.
    """
    if provider is None:
        from splitnote.llm import get_provider

        provider = get_provider()

    generator = CommitMessageGenerator(provider, preamble or get_default_preamble())
    return generator.generate(diff)
