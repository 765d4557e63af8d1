"""Main CLI command for generating commit messages."""

from pathlib import Path
from typing import Optional

import typer

from splitnote import __version__
from splitnote import config as _config
from splitnote.generator import CommitMessageGenerator
from splitnote.git import GitError, NoStagedChangesError, commit_with_message
from splitnote.llm import LLMError, MissingAPIKeyError, get_provider
from splitnote.prompts import PreambleTooLargeError, get_default_preamble
from splitnote.cli.utils import configure_logging, echo_no_staged_changes, read_diff


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"splitnote {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    diff_file: Optional[Path] = typer.Option(
        None,
        "--diff-file",
        "-f",
        help="Read the diff from a file ('-' for stdin) instead of the staged changes",
    ),
    commit: bool = typer.Option(
        False,
        "--commit",
        "-c",
        help="Commit the staged changes with the generated message",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt when committing",
    ),
    emoji: Optional[bool] = typer.Option(
        None,
        "--emoji/--no-emoji",
        help="Preface the message with GitMoji",
    ),
    description: Optional[bool] = typer.Option(
        None,
        "--description/--no-description",
        help="Add a paragraph explaining why the changes were made",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language of the commit message (e.g. en, de, fr)",
    ),
    max_request_tokens: Optional[int] = typer.Option(
        None,
        "--max-request-tokens",
        min=1,
        help="Token ceiling for a single LLM request (preamble + diff)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log budgeting and chunking details to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate an AI-powered git commit message from staged changes."""
    configure_logging(verbose)

    # Settings apply to subcommands as well
    _config.load_config()
    _config.apply_overrides(
        emoji=emoji,
        description=description,
        language=language,
        max_request_tokens=max_request_tokens,
    )

    if ctx.invoked_subcommand is not None:
        return

    try:
        diff = read_diff(diff_file)
        if not diff.strip() and diff_file is None:
            typer.echo("Only excluded files are staged - no code changes to describe.", err=True)
            raise typer.Exit(1)

        generator = CommitMessageGenerator(get_provider(), get_default_preamble())
        chunks = generator.split(diff)
        if len(chunks) > 1:
            typer.echo(
                f"Diff exceeds {generator.budget} tokens, generating from {len(chunks)} chunks...",
                err=True,
            )
        else:
            typer.echo("Generating commit message...", err=True)

        message = generator.generate(diff)

        typer.echo("")
        typer.echo("=" * 60)
        typer.echo(message)
        typer.echo("=" * 60)
        typer.echo("")

        if not commit:
            return

        if not yes:
            confirm = typer.prompt(
                "Commit with this message? [Y/n]",
                default="y",
                show_default=False,
            )
            if confirm.lower() not in ("y", "yes", ""):
                typer.echo("Commit cancelled.", err=True)
                raise typer.Exit(0)

        typer.echo("Committing...", err=True)
        output = commit_with_message(message)
        typer.echo("Commit successful!", err=True)
        if output:
            typer.echo(output)

    except NoStagedChangesError:
        echo_no_staged_changes()
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except PreambleTooLargeError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error reading diff: {e}", err=True)
        raise typer.Exit(1)
