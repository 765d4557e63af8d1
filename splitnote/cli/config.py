"""CLI commands for global configuration management."""

import typer

from splitnote import global_config
from splitnote.config import LLMProvider, AVAILABLE_MODELS, API_KEY_ENV_VARS
from splitnote.i18n import available_languages

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global splitnote configuration in ~/.splitnote/",
    add_completion=False,
)

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


def _parse_provider(provider: str) -> LLMProvider:
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found. Run 'splitnote config init' to set up.")
            return

        config = global_config.load_global_config()

        typer.echo("Current splitnote configuration (~/.splitnote/config.yaml):")
        typer.echo()
        typer.echo(f"  Provider: {config.get('provider', 'not set')}")
        typer.echo(f"  Model: {config.get('model', 'not set')}")
        typer.echo(f"  Max Tokens: {config.get('max_tokens', 500)}")
        typer.echo(f"  Temperature: {config.get('temperature', 0.3)}")
        typer.echo(f"  Max Request Tokens: {config.get('max_request_tokens', 3000)}")
        typer.echo(f"  Max Workers: {config.get('max_workers', 4)}")
        typer.echo(f"  Request Timeout: {config.get('request_timeout', 60.0)}s")
        typer.echo(f"  Language: {config.get('language', 'en')}")
        typer.echo(f"  Emoji: {config.get('emoji', False)}")
        typer.echo(f"  Description: {config.get('description', False)}")

        exclude = config.get("exclude", [])
        if exclude:
            typer.echo()
            typer.echo("  Exclude Patterns:")
            for pattern in exclude:
                typer.echo(f"    - {pattern}")

        typer.echo()

        provider = global_config.get_active_provider(config)
        if provider:
            env_var = API_KEY_ENV_VARS[provider]
            api_key = global_config.get_credential(env_var)

            if api_key:
                masked_key = api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"
                typer.echo(f"  API Key ({env_var}): {masked_key}")
            else:
                typer.echo(f"  API Key ({env_var}): not set")

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("init")
def config_init() -> None:
    """Create ~/.splitnote/config.yaml with default values."""
    try:
        if global_config.is_configured():
            typer.echo(f"Configuration already exists: {global_config.get_config_file_path()}")
            return
        global_config.initialize_default_config()
        typer.echo(f"✓ Created {global_config.get_config_file_path()}")
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (optional, will prompt if not provided)",
    ),
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = _parse_provider(provider)

    if not model:
        models = AVAILABLE_MODELS[llm_provider]
        typer.echo(f"Available models for {llm_provider.value}:")
        for i, m in enumerate(models, 1):
            typer.echo(f"  {i}. {m}")

        model_choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=1)
        if model_choice < 1 or model_choice > len(models):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)

        model = models[model_choice - 1]
    elif model not in AVAILABLE_MODELS[llm_provider]:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")
        if not typer.confirm("Continue anyway?", default=False):
            raise typer.Exit(0)

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")
    typer.echo(f"✓ Model set to: {model}")


@config_app.command("set-language")
def config_set_language(
    language: str = typer.Argument(..., help="Language code (e.g. en, de, fr, zh_CN)"),
) -> None:
    """Set the language of generated commit messages."""
    if language not in available_languages():
        typer.echo(f"Unknown language: {language}", err=True)
        typer.echo(f"Available languages: {', '.join(available_languages())}")
        raise typer.Exit(1)

    try:
        global_config.set_language(language)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Language set to: {language}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ..., help=f"Option name ({', '.join(global_config.SETTABLE_OPTIONS)})"
    ),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a single configuration option."""
    try:
        global_config.set_option(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to: {value}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List all available LLM providers."""
    typer.echo("Available LLM providers:")
    typer.echo()
    for provider in LLMProvider:
        typer.echo(f"  • {provider.value}")
    typer.echo()
    typer.echo("Use 'splitnote config list-models <provider>' to see available models.")


@config_app.command("list-models")
def config_list_models(
    provider: str = typer.Argument(
        None,
        help="Provider name (optional, shows all if not provided)",
    ),
) -> None:
    """List available models for a provider (or all providers)."""
    if provider:
        llm_provider = _parse_provider(provider)
        typer.echo(f"Available models for {llm_provider.value}:")
        typer.echo()
        for model in AVAILABLE_MODELS[llm_provider]:
            typer.echo(f"  • {model}")
        typer.echo()
    else:
        for llm_provider in LLMProvider:
            typer.echo(f"{llm_provider.value}:")
            for model in AVAILABLE_MODELS[llm_provider]:
                typer.echo(f"  • {model}")
            typer.echo()
