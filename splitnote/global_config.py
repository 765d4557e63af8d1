"""Global configuration management for splitnote.

Handles user-level configuration stored in ~/.splitnote/:
- config.yaml: Provider, model, budget and message preferences
- credentials: API keys for LLM providers
"""

import os
import stat
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from splitnote.config import LLMProvider


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".splitnote"

# Keys that 'splitnote config set' may write, with the type they are coerced to
SETTABLE_OPTIONS = {
    "max_tokens": int,
    "temperature": float,
    "max_request_tokens": int,
    "max_workers": int,
    "request_timeout": float,
    "language": str,
    "emoji": bool,
    "description": bool,
}


def get_global_config_dir() -> Path:
    """Get the global splitnote configuration directory.

    Returns:
        Path to ~/.splitnote/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.splitnote/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.splitnote/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.splitnote/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(lines) -> Dict[str, str]:
    credentials = {}
    for line in lines:
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue
        # Parse KEY=value format
        if "=" in line:
            key, value = line.split("=", 1)
            credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.splitnote/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        with open(credentials_file, "r") as f:
            return _parse_credentials(f)
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[provider_key] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# splitnote API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")

            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(provider_key: str) -> Optional[str]:
    """Get an API key from credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(provider_key)


def get_active_provider(config: Optional[Dict[str, Any]] = None) -> Optional[LLMProvider]:
    """Get the active LLM provider from global config.

    Args:
        config: Already loaded config; read from disk when omitted.

    Returns:
        LLMProvider enum value, or None if not configured or unknown.
    """
    if config is None:
        config = load_global_config()
    provider_str = config.get("provider")

    if not provider_str:
        return None

    try:
        return LLMProvider(provider_str)
    except ValueError:
        return None


def set_provider_and_model(provider: LLMProvider, model: str) -> None:
    """Set the active provider and model in global config.

    Args:
        provider: The LLM provider to use.
        model: The model name to use.
    """
    config = load_global_config()
    config["provider"] = provider.value
    config["model"] = model
    save_global_config(config)


def set_language(language: str) -> None:
    """Set the commit message language code in global config."""
    set_option("language", language)


def _coerce(value: Any, target: type) -> Any:
    if target is bool and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise GlobalConfigError(f"Expected a boolean, got: {value}")
    try:
        return target(value)
    except (TypeError, ValueError):
        raise GlobalConfigError(f"Expected {target.__name__}, got: {value}")


def set_option(key: str, value: Any) -> None:
    """Set a single option in global config.

    Args:
        key: One of SETTABLE_OPTIONS.
        value: The new value; strings are coerced to the option's type.

    Raises:
        GlobalConfigError: If the key is unknown or the value has the wrong type.
    """
    if key not in SETTABLE_OPTIONS:
        valid = ", ".join(SETTABLE_OPTIONS)
        raise GlobalConfigError(f"Unknown option: {key}. Valid options: {valid}")

    config = load_global_config()
    config[key] = _coerce(value, SETTABLE_OPTIONS[key])
    save_global_config(config)


def initialize_default_config() -> None:
    """Initialize config.yaml with default values if it doesn't exist."""
    config_file = get_config_file_path()

    if config_file.exists():
        return

    ensure_global_config_dir()

    default_config = {
        "provider": "openai",
        "model": "gpt-4o-mini",
        "max_tokens": 500,
        "temperature": 0.3,
        "max_request_tokens": 3000,
        "max_workers": 4,
        "request_timeout": 60.0,
        "language": "en",
        "emoji": False,
        "description": False,
    }

    save_global_config(default_config)


def is_configured() -> bool:
    """Check if splitnote has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()


def get_exclude_patterns() -> Optional[list]:
    """Get the diff exclude patterns from global config.

    Returns:
        List of glob patterns, or None to use the built-in defaults.
    """
    return load_global_config().get("exclude")
