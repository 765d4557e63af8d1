"""OpenRouter provider implementation.

OpenRouter provides unified access to many models through a single API.
It uses an OpenAI-compatible API format.
"""

from splitnote.config import API_KEY_ENV_VARS, LLMProvider
from splitnote.llm.openai_provider import OpenAIProvider

# OpenRouter API base URL
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter LLM provider (OpenAI-compatible endpoint)."""

    base_url = OPENROUTER_BASE_URL

    def __init__(self, model: str | None = None):
        """Initialize the OpenRouter provider.

        Args:
            model: Model in provider/model-name form (e.g., openai/gpt-4o).
                Defaults to anthropic/claude-sonnet-4.
        """
        self.model = model or "anthropic/claude-sonnet-4"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENROUTER]

    def get_api_key(self) -> str:
        """Get the OpenRouter API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If OPENROUTER_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "OpenRouter")

    def _extra_request_kwargs(self) -> dict:
        return {
            "extra_headers": {
                "HTTP-Referer": "https://github.com/splitnote",
                "X-Title": "splitnote",
            }
        }
