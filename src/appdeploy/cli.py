"""Root Typer applications for app-setup and nginx-sites."""

from __future__ import annotations

from typing import Optional

import typer

from appdeploy.commands import setup, sites
from appdeploy.commands._common import version_callback

setup_app = typer.Typer(
    name="app-setup",
    help="CLI tool for setting up Docker and generating app metadata.",
    add_completion=False,
)
setup_app.command(name="setup")(setup.setup)

sites_app = typer.Typer(
    name="nginx-sites",
    help="CLI tool for managing Nginx configurations and SSL certificates.",
    no_args_is_help=True,
    add_completion=False,
)


@sites_app.callback()
def _sites_main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """CLI tool for managing Nginx configurations and SSL certificates."""


sites_app.command(name="add-site")(sites.add_site)
sites_app.command(name="remove-site")(sites.remove_site)
sites_app.command(name="list-sites")(sites.list_sites)
