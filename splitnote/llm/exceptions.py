"""LLM-related exception classes.

Contains all exception classes for commit message generation:
- LLMError: Base exception for LLM-related errors
- BackendError: Raised when a call to the LLM backend fails
- MissingAPIKeyError: Raised when the API key is not set
- EmptyResultError: Raised when the LLM returns an empty message
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class BackendError(LLMError):
    """Raised when a call to the LLM backend fails."""

    pass


class MissingAPIKeyError(BackendError):
    """Raised when the required API key is not set."""

    pass


class EmptyResultError(LLMError):
    """Raised when the LLM returns an empty commit message."""

    pass
