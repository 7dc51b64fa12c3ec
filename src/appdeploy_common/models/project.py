"""Resolved app-setup settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from appdeploy_common.constants import (
    DEFAULT_BACKEND_PORT,
    DEFAULT_FRONTEND_PORT,
    DEFAULT_PROJECT_PATH,
)
from appdeploy_common.models.metadata import ProjectMetadata


class ProjectSettings(BaseModel):
    """Fully populated configuration for one app-setup run.

    Nothing is validated here: bad ports or paths surface when docker-compose
    or the filesystem rejects them.
    """

    project_path: Path = Path(DEFAULT_PROJECT_PATH)
    domain: str = ""
    frontend_port: str = DEFAULT_FRONTEND_PORT
    backend_port: str = DEFAULT_BACKEND_PORT
    install_pm2: bool = False

    def metadata(self) -> ProjectMetadata:
        return ProjectMetadata(
            domain=self.domain,
            frontend_port=self.frontend_port,
            backend_port=self.backend_port,
        )
