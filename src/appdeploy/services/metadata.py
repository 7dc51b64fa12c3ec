"""metadata.json loading for nginx-sites."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from appdeploy_common import ProjectMetadata

from appdeploy.errors import MetadataError


def read_metadata(path: Path) -> ProjectMetadata:
    """Load and validate a metadata.json file. Raises MetadataError."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MetadataError(f"Cannot read metadata file {path}: {exc}") from exc
    try:
        return ProjectMetadata.model_validate_json(raw)
    except (ValidationError, UnicodeDecodeError) as exc:
        raise MetadataError(f"Invalid metadata file {path}:\n{exc}") from exc
