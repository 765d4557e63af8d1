"""Base class and shared helpers for LLM providers."""

import os
from abc import ABC, abstractmethod

from splitnote.llm.exceptions import MissingAPIKeyError


def split_system_message(messages: list[dict]) -> tuple[str, list[dict]]:
    """Separate system messages from the conversation.

    Some vendors take the system prompt as a separate argument instead of
    a message with the "system" role.

    Args:
        messages: Chat messages in order.

    Returns:
        A tuple of (joined system text, remaining messages in order).
    """
    system_parts = [m["content"] for m in messages if m["role"] == "system"]
    conversation = [m for m in messages if m["role"] != "system"]
    return "\n\n".join(system_parts), conversation


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def generate_commit_message(self, messages: list[dict]) -> str:
        """Send a chat prompt and return the commit message text.

        Args:
            messages: Ordered chat messages, each a {"role", "content"} dict.

        Returns:
            The generated text, stripped. May be empty.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            BackendError: If the API call fails.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from environment or credentials file.

        Checks in order:
        1. Environment variable
        2. ~/.splitnote/credentials file
        3. Repo-level .env file (if loaded)

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Helper to get API key with fallback to credentials file.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        from splitnote.global_config import GlobalConfigError, get_credential

        try:
            api_key = get_credential(env_var_name)
        except GlobalConfigError:
            api_key = None
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Run: splitnote config set-key {provider_name.lower()}\n"
            f"  3. Manually add to ~/.splitnote/credentials"
        )
