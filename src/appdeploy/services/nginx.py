"""NGINX install check, site files, and reload."""

from __future__ import annotations

import os
from pathlib import Path

from appdeploy.errors import NginxInstallError, SiteConfigError
from appdeploy.services import shell


def is_installed() -> bool:
    return shell.succeeds(["which", "nginx"])


def install() -> None:
    """Install NGINX with apt-get. Raises NginxInstallError on failure."""
    for cmd in (
        ["sudo", "apt-get", "update"],
        ["sudo", "apt-get", "install", "-y", "nginx"],
    ):
        shell.run_or_abort(cmd, error=NginxInstallError, message="Failed to install Nginx")


def reload() -> bool:
    """Send the reload signal. Failure is reported, not raised."""
    return shell.run_and_log(["nginx", "-s", "reload"], message="Error reloading Nginx")


def write_site(available_dir: Path, name: str, content: str) -> Path:
    """Write a site config into sites-available, replacing any previous one."""
    path = available_dir / name
    try:
        available_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    except OSError as exc:
        raise SiteConfigError(f"Failed to write {path}: {exc}") from exc
    return path


def enable_site(available_dir: Path, enabled_dir: Path, name: str) -> Path:
    """Point sites-enabled/<name> at sites-available/<name>, replacing any existing link."""
    link = enabled_dir / name
    try:
        enabled_dir.mkdir(parents=True, exist_ok=True)
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to((available_dir / name).resolve())
    except OSError as exc:
        raise SiteConfigError(f"Failed to enable {name}: {exc}") from exc
    return link


def remove_site(available_dir: Path, enabled_dir: Path, name: str) -> list[Path]:
    """Delete the site from both directories. Missing files are skipped.

    Returns the paths that were actually removed.
    """
    removed: list[Path] = []
    for path in (available_dir / name, enabled_dir / name):
        if path.is_symlink() or path.is_file():
            try:
                path.unlink()
            except OSError as exc:
                raise SiteConfigError(f"Failed to remove {path}: {exc}") from exc
            removed.append(path)
    return removed


def _entries(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    return sorted(os.listdir(directory))


def list_sites(available_dir: Path, enabled_dir: Path) -> tuple[list[str], list[str]]:
    """Return (enabled, disabled) site names.

    Disabled means present in sites-available without a sites-enabled entry.
    """
    enabled = _entries(enabled_dir)
    enabled_set = set(enabled)
    disabled = [name for name in _entries(available_dir) if name not in enabled_set]
    return enabled, disabled
