"""Configuration for splitnote.

Configuration is loaded from ~/.splitnote/config.yaml
Use 'splitnote config' commands to modify settings.
"""

from enum import Enum


class LLMProvider(Enum):
    """Supported LLM providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    OPENROUTER = "openrouter"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.splitnote/config.yaml doesn't exist

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.3

# Ceiling for one prompt: preamble + diff chunk must stay below it
DEFAULT_MAX_REQUEST_TOKENS = 3000
DEFAULT_LANGUAGE = "en"
DEFAULT_EMOJI = False
DEFAULT_DESCRIPTION = False
DEFAULT_MAX_WORKERS = 4

# Seconds before a single backend call is abandoned
DEFAULT_REQUEST_TIMEOUT = 60.0


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_PROVIDER = DEFAULT_PROVIDER
ACTIVE_MODEL = DEFAULT_MODEL
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE
MAX_REQUEST_TOKENS = DEFAULT_MAX_REQUEST_TOKENS
LANGUAGE = DEFAULT_LANGUAGE
EMOJI = DEFAULT_EMOJI
DESCRIPTION = DEFAULT_DESCRIPTION
MAX_WORKERS = DEFAULT_MAX_WORKERS
REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT


def load_config() -> None:
    """Load configuration from global config file.

    This should be called by the CLI before building the preamble or
    talking to the LLM.
    """
    global ACTIVE_PROVIDER, ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE
    global MAX_REQUEST_TOKENS, LANGUAGE, EMOJI, DESCRIPTION, MAX_WORKERS, REQUEST_TIMEOUT

    # Import here to avoid circular dependency
    from splitnote import global_config

    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError:
        # Unreadable config file: keep defaults
        return

    provider = global_config.get_active_provider(config)
    if provider:
        ACTIVE_PROVIDER = provider
    if config.get("model"):
        ACTIVE_MODEL = config["model"]
    if config.get("language"):
        LANGUAGE = str(config["language"])
    if config.get("emoji") is not None:
        EMOJI = bool(config["emoji"])
    if config.get("description") is not None:
        DESCRIPTION = bool(config["description"])

    try:
        if config.get("max_tokens") is not None:
            MAX_TOKENS = int(config["max_tokens"])
        if config.get("temperature") is not None:
            TEMPERATURE = float(config["temperature"])
        if config.get("max_request_tokens") is not None:
            MAX_REQUEST_TOKENS = int(config["max_request_tokens"])
        if config.get("max_workers") is not None:
            MAX_WORKERS = max(1, int(config["max_workers"]))
        if config.get("request_timeout") is not None:
            REQUEST_TIMEOUT = float(config["request_timeout"])
    except (TypeError, ValueError):
        # Malformed numbers: keep whatever was already valid
        pass


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
    LLMProvider.OPENAI: [
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-3.5-turbo",
    ],
    LLMProvider.GOOGLE: [
        "gemini-2.5-pro",
        "gemini-2.5-flash",
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
    ],
    LLMProvider.OPENROUTER: [
        "anthropic/claude-sonnet-4",
        "openai/gpt-4o",
        "google/gemini-2.0-flash-exp",
        "meta-llama/llama-3.3-70b-instruct",
        "deepseek/deepseek-chat",
    ],
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


def apply_overrides(**values) -> None:
    """Override active settings for this process (e.g. from CLI flags).

    Keyword names are the lowercase setting names (language, emoji,
    description, max_request_tokens, max_workers). None values are ignored.
    """
    module_globals = globals()
    for name, value in values.items():
        key = name.upper()
        if key not in _OVERRIDABLE:
            raise KeyError(f"Unknown setting: {name}")
        if value is not None:
            module_globals[key] = value


_OVERRIDABLE = ("LANGUAGE", "EMOJI", "DESCRIPTION", "MAX_REQUEST_TOKENS", "MAX_WORKERS")
