"""CLI command that previews how a diff would be split."""

from pathlib import Path
from typing import Optional

import typer

from splitnote.generator import CommitMessageGenerator
from splitnote.git import GitError, NoStagedChangesError
from splitnote.llm import get_provider
from splitnote.prompts import PreambleTooLargeError, get_default_preamble
from splitnote.cli.utils import echo_no_staged_changes, read_diff


def _first_line(chunk: str) -> str:
    for line in chunk.splitlines():
        if line.strip():
            return line
    return ""


def chunks_command(
    diff_file: Optional[Path] = typer.Option(
        None,
        "--diff-file",
        "-f",
        help="Read the diff from a file ('-' for stdin) instead of the staged changes",
    ),
) -> None:
    """Show how the diff would be split into requests, without calling the LLM."""
    try:
        diff = read_diff(diff_file)
        generator = CommitMessageGenerator(get_provider(), get_default_preamble())
        chunks = generator.split(diff)
    except NoStagedChangesError:
        echo_no_staged_changes()
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except PreambleTooLargeError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error reading diff: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Preamble: {generator.preamble.token_cost} tokens")
    typer.echo(f"Budget per chunk: {generator.budget} tokens")
    typer.echo(f"Diff: {generator.count(diff)} tokens")
    typer.echo(f"{len(chunks)} chunk(s):")
    typer.echo()
    for index, chunk in enumerate(chunks, 1):
        tokens = generator.count(chunk)
        marker = "  (over budget)" if tokens >= generator.budget else ""
        typer.echo(f"  {index}. {tokens} tokens{marker}  {_first_line(chunk)}")
