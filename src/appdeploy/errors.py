"""Custom exceptions for the appdeploy CLIs."""

from __future__ import annotations


class AppdeployError(Exception):
    """Base exception for all appdeploy operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class CommandError(AppdeployError):
    """An external command could not be run or exited non-zero."""


class ScaffoldError(AppdeployError):
    """Writing a Dockerfile or compose file failed."""


class MetadataError(AppdeployError):
    """metadata.json could not be read, parsed, or written."""


class NginxInstallError(AppdeployError):
    """NGINX is missing and could not be installed."""


class SiteConfigError(AppdeployError):
    """A site config could not be written or linked."""
