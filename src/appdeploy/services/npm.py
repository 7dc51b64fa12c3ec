"""npm invocations for app-setup."""

from __future__ import annotations

from pathlib import Path

from appdeploy.services import shell


def install_pm2(project_path: Path) -> bool:
    """Install PM2 globally. Failure is reported, not raised."""
    return shell.run_and_log(
        ["npm", "install", "-g", "pm2"],
        cwd=project_path,
        message="Error installing PM2",
    )
