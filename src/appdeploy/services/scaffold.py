"""Dockerfile, compose file, and metadata.json generation."""

from __future__ import annotations

from pathlib import Path

from appdeploy_common import (
    BACKEND_CONTAINER_PORT,
    COMPOSE_FILENAME,
    FRONTEND_CONTAINER_PORT,
    METADATA_FILENAME,
    NODE_IMAGE,
    ProjectMetadata,
)

from appdeploy.errors import ScaffoldError
from appdeploy.services.templating import render


def render_frontend_dockerfile() -> str:
    return render(
        "frontend.Dockerfile.j2",
        image=NODE_IMAGE,
        container_port=FRONTEND_CONTAINER_PORT,
    )


def render_backend_dockerfile() -> str:
    return render(
        "backend.Dockerfile.j2",
        image=NODE_IMAGE,
        container_port=BACKEND_CONTAINER_PORT,
    )


def render_compose(frontend_port: str, backend_port: str) -> str:
    """Render docker-compose.yml.

    Only the host side of each mapping follows the configured ports; the
    container side matches the EXPOSE of the Dockerfiles.
    """
    return render(
        "docker-compose.yml.j2",
        frontend_port=frontend_port,
        backend_port=backend_port,
        frontend_container_port=FRONTEND_CONTAINER_PORT,
        backend_container_port=BACKEND_CONTAINER_PORT,
    )


def _write(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    except OSError as exc:
        raise ScaffoldError(f"Failed to write {path}: {exc}") from exc
    return path


def write_dockerfiles(project_path: Path) -> tuple[Path, Path]:
    """Write frontend/Dockerfile and backend/Dockerfile, overwriting any existing ones."""
    frontend = _write(project_path / "frontend" / "Dockerfile", render_frontend_dockerfile())
    backend = _write(project_path / "backend" / "Dockerfile", render_backend_dockerfile())
    return frontend, backend


def write_compose(project_path: Path, frontend_port: str, backend_port: str) -> Path:
    return _write(project_path / COMPOSE_FILENAME, render_compose(frontend_port, backend_port))


def write_metadata(project_path: Path, metadata: ProjectMetadata) -> Path:
    """Write metadata.json (2-space indent), replacing any previous file."""
    path = project_path / METADATA_FILENAME
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(metadata.to_json())
    except OSError as exc:
        raise ScaffoldError(f"Failed to write {path}: {exc}") from exc
    return path
