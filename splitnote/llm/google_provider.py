"""Google Gemini provider implementation."""

import logging

from google import genai
from google.genai import types

import splitnote.config as _config
from splitnote.config import API_KEY_ENV_VARS, LLMProvider
from splitnote.llm.base import BaseLLMProvider, split_system_message
from splitnote.llm.exceptions import BackendError

logger = logging.getLogger(__name__)

# Models that have built-in "thinking" which consumes output tokens
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

# Multiplier for max_output_tokens on thinking models
THINKING_TOKEN_MULTIPLIER = 3


def to_gemini_contents(messages: list[dict]) -> list[types.Content]:
    """Convert chat messages to Gemini contents ("assistant" becomes "model")."""
    return [
        types.Content(
            role="model" if m["role"] == "assistant" else "user",
            parts=[types.Part(text=m["content"])],
        )
        for m in messages
    ]


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Google provider.

        Args:
            model: The model to use. Defaults to gemini-2.0-flash.
        """
        self.model = model or "gemini-2.0-flash"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Google API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If GOOGLE_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Google")

    def _is_thinking_model(self) -> bool:
        return any(thinking_model in self.model.lower() for thinking_model in THINKING_MODELS)

    def generate_commit_message(self, messages: list[dict]) -> str:
        """Generate a commit message using Google Gemini.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            BackendError: If the API call fails or the response is blocked.
        """
        api_key = self.get_api_key()
        # HttpOptions takes the timeout in milliseconds
        client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(_config.REQUEST_TIMEOUT * 1000)),
        )

        system, conversation = split_system_message(messages)

        # Thinking tokens are drawn from max_output_tokens
        max_output_tokens = _config.MAX_TOKENS
        if self._is_thinking_model():
            max_output_tokens = _config.MAX_TOKENS * THINKING_TOKEN_MULTIPLIER

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=to_gemini_contents(conversation),
                config=types.GenerateContentConfig(
                    system_instruction=system or None,
                    max_output_tokens=max_output_tokens,
                    temperature=_config.TEMPERATURE,
                ),
            )
        except Exception as e:
            raise BackendError(f"Google Gemini API call failed: {e}")

        if not response.candidates:
            raise BackendError("Google Gemini returned no candidates in response")

        finish_reason = str(getattr(response.candidates[0], "finish_reason", ""))
        if "SAFETY" in finish_reason:
            raise BackendError(f"Google Gemini blocked response due to safety filters: {finish_reason}")
        if "MAX_TOKENS" in finish_reason:
            raise BackendError("Google Gemini response was truncated due to max tokens limit.")

        usage = getattr(response, "usage_metadata", None)
        if usage:
            logger.debug(
                "%s usage: %s prompt / %s candidate tokens",
                self.model, usage.prompt_token_count, usage.candidates_token_count,
            )

        return (response.text or "").strip()
