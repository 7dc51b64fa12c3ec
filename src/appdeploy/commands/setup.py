"""app-setup: scaffold Docker artifacts and metadata, then start the containers."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from appdeploy.audit import audit
from appdeploy.commands._common import fail, version_callback
from appdeploy.errors import AppdeployError
from appdeploy.prompts import collect_project_settings
from appdeploy.services import docker, npm, scaffold

console = Console()


def setup(
    project_path: Optional[str] = typer.Option(
        None, "--project-path", "-p", help="Path to the project directory"
    ),
    domain: Optional[str] = typer.Option(None, "--domain", "-d", help="Domain name for the application"),
    frontend_port: Optional[str] = typer.Option(
        None, "--frontend-port", "-f", help="Port for the frontend application"
    ),
    backend_port: Optional[str] = typer.Option(
        None, "--backend-port", "-b", help="Port for the backend application"
    ),
    pm2: Optional[bool] = typer.Option(
        None, "--pm2/--no-pm2", help="Install PM2 for process management"
    ),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Set up Docker and generate app metadata."""
    settings = collect_project_settings(
        project_path=project_path,
        domain=domain,
        frontend_port=frontend_port,
        backend_port=backend_port,
        install_pm2=pm2,
    )
    project = settings.project_path

    try:
        with audit(
            "setup",
            target=str(project),
            domain=settings.domain,
            frontend_port=settings.frontend_port,
            backend_port=settings.backend_port,
            pm2=settings.install_pm2,
        ) as event:
            scaffold.write_dockerfiles(project)
            console.print("[green]Dockerfiles generated successfully.[/green]")

            scaffold.write_compose(project, settings.frontend_port, settings.backend_port)
            console.print("[green]docker-compose.yml generated successfully.[/green]")

            scaffold.write_metadata(project, settings.metadata())
            console.print("[green]metadata.json generated successfully.[/green]")

            console.print("Starting Docker containers...")
            if docker.compose_up(project):
                console.print("[green]Docker containers started successfully.[/green]")
            else:
                event.params["containers_started"] = False

            if settings.install_pm2:
                console.print("Installing PM2...")
                if npm.install_pm2(project):
                    console.print("[green]PM2 installed successfully.[/green]")
                else:
                    event.params["pm2_installed"] = False
    except (AppdeployError, OSError) as exc:
        fail(exc)

    console.print("\n[green bold]App setup completed successfully![/green bold]")
