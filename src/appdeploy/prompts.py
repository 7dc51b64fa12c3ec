"""Interactive prompts for values not supplied on the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from appdeploy_common import (
    DEFAULT_BACKEND_PORT,
    DEFAULT_FRONTEND_PORT,
    DEFAULT_PROJECT_PATH,
    ProjectSettings,
)


def collect_project_settings(
    *,
    project_path: Optional[str] = None,
    domain: Optional[str] = None,
    frontend_port: Optional[str] = None,
    backend_port: Optional[str] = None,
    install_pm2: Optional[bool] = None,
) -> ProjectSettings:
    """Merge flag values with prompted answers into one ProjectSettings.

    Empty or missing flags are asked for, one prompt per field, before
    anything touches the filesystem.
    """
    if not project_path:
        project_path = typer.prompt(
            "Enter the path to the project directory", default=DEFAULT_PROJECT_PATH
        )
    if not domain:
        domain = typer.prompt(
            "Enter the domain name for the application", default="", show_default=False
        )
    if not frontend_port:
        frontend_port = typer.prompt(
            "Enter the port for the frontend application", default=DEFAULT_FRONTEND_PORT
        )
    if not backend_port:
        backend_port = typer.prompt(
            "Enter the port for the backend application", default=DEFAULT_BACKEND_PORT
        )
    if install_pm2 is None:
        install_pm2 = typer.confirm(
            "Do you want to install PM2 for process management?", default=False
        )

    return ProjectSettings(
        project_path=Path(project_path),
        domain=domain,
        frontend_port=frontend_port,
        backend_port=backend_port,
        install_pm2=install_pm2,
    )


def prompt_metadata_path() -> Path:
    return Path(typer.prompt("Enter the path to the metadata.json file"))


def prompt_site_name() -> str:
    return typer.prompt("Enter the domain name to remove")
