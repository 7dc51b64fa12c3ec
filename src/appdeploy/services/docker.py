"""Docker Compose invocation for app-setup."""

from __future__ import annotations

from pathlib import Path

from appdeploy.services import shell


def compose_up(project_path: Path) -> bool:
    """Start the project's services detached. Failure is reported, not raised."""
    return shell.run_and_log(
        ["docker-compose", "up", "-d"],
        cwd=project_path,
        message="Error starting Docker containers",
    )
