"""Terminal output helpers for the CLI."""

from __future__ import annotations

from typing import NoReturn

import click


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    click.echo(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str, verbose: bool = True) -> None:
    """Print an indented detail line when ``verbose`` is set."""
    if verbose:
        click.echo(f"  {msg}")


def fatal(msg: str) -> NoReturn:
    """Abort the current command with exit code 1.

    Raises:
        click.ClickException: Always.
    """
    raise click.ClickException(msg)
