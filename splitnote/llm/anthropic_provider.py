"""Anthropic Claude provider implementation."""

import logging

from anthropic import Anthropic

import splitnote.config as _config
from splitnote.config import API_KEY_ENV_VARS, LLMProvider
from splitnote.llm.base import BaseLLMProvider, split_system_message
from splitnote.llm.exceptions import BackendError

logger = logging.getLogger(__name__)


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to claude-sonnet-4-20250514.
        """
        self.model = model or "claude-sonnet-4-20250514"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Anthropic")

    def generate_commit_message(self, messages: list[dict]) -> str:
        """Generate a commit message using Anthropic Claude.

        The system message goes into the ``system`` argument; the example
        exchange and the diff stay in ``messages``.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            BackendError: If the API call fails.
        """
        api_key = self.get_api_key()
        client = Anthropic(api_key=api_key, timeout=_config.REQUEST_TIMEOUT, max_retries=0)

        system, conversation = split_system_message(messages)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                system=system,
                messages=conversation,
            )
        except Exception as e:
            raise BackendError(f"Anthropic API call failed: {e}")

        logger.debug(
            "%s usage: %d input / %d output tokens",
            self.model, message.usage.input_tokens, message.usage.output_tokens,
        )

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        return text.strip()
