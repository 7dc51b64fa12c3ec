"""Helpers shared by the app-setup and nginx-sites commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from appdeploy import __version__
from appdeploy.errors import AppdeployError

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def fail(exc: AppdeployError | OSError) -> NoReturn:
    """Print a fatal error and exit with the error's exit code."""
    err_console.print(f"[red]An error occurred:[/red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(getattr(exc, "exit_code", 1))
