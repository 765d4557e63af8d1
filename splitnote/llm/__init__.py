"""LLM provider module for splitnote.

This module provides a unified interface to multiple LLM providers.
The active provider is configured in ~/.splitnote/config.yaml.
"""

from dotenv import load_dotenv

import splitnote.config as _config
from splitnote.config import LLMProvider
from splitnote.llm.base import BaseLLMProvider
from splitnote.llm.exceptions import (
    BackendError,
    EmptyResultError,
    LLMError,
    MissingAPIKeyError,
)

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to ACTIVE_PROVIDER from config.
        model: The model to use. Defaults to ACTIVE_MODEL from config when no
            provider is given, otherwise to the provider's own default.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if provider is None:
        provider = _config.ACTIVE_PROVIDER
        model = model or _config.ACTIVE_MODEL

    if provider == LLMProvider.OPENAI:
        from splitnote.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model)

    elif provider == LLMProvider.ANTHROPIC:
        from splitnote.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    elif provider == LLMProvider.GOOGLE:
        from splitnote.llm.google_provider import GoogleProvider

        return GoogleProvider(model=model)

    elif provider == LLMProvider.OPENROUTER:
        from splitnote.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "BackendError",
    "MissingAPIKeyError",
    "EmptyResultError",
    "get_provider",
]
