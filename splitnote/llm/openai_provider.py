"""OpenAI GPT provider implementation."""

import logging

from openai import OpenAI

import splitnote.config as _config
from splitnote.config import API_KEY_ENV_VARS, LLMProvider
from splitnote.llm.base import BaseLLMProvider
from splitnote.llm.exceptions import BackendError

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    base_url: str | None = None

    def __init__(self, model: str | None = None):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to gpt-4o-mini.
        """
        self.model = model or "gpt-4o-mini"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "OpenAI")

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=_config.REQUEST_TIMEOUT,
            max_retries=0,
        )

    def _extra_request_kwargs(self) -> dict:
        return {}

    def generate_commit_message(self, messages: list[dict]) -> str:
        """Generate a commit message with the chat completions API.

        Args:
            messages: Ordered chat messages.

        Returns:
            The generated text, stripped.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            BackendError: If the API call fails.
        """
        api_key = self.get_api_key()
        client = self._create_client(api_key)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                messages=messages,
                **self._extra_request_kwargs(),
            )
        except Exception as e:
            raise BackendError(f"{type(self).__name__} API call failed: {e}")

        if response.usage:
            logger.debug(
                "%s usage: %d prompt / %d completion tokens",
                self.model, response.usage.prompt_tokens, response.usage.completion_tokens,
            )

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
