"""Shared test fixtures."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from appdeploy_common import AppdeployConfig
from appdeploy.config import get_config
from appdeploy.services import shell


class FakeShell:
    """Stands in for the process executor; records every command."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[Path | None] = []
        self._results: list[tuple[tuple[str, ...], int]] = []
        self._missing: set[str] = set()

    def fail(self, *prefix: str, returncode: int = 1) -> None:
        """Make commands starting with ``prefix`` exit with ``returncode``."""
        self._results.append((prefix, returncode))

    def missing(self, program: str) -> None:
        """Make ``program`` behave as if it is not on PATH."""
        self._missing.add(program)

    @property
    def commands(self) -> list[str]:
        return [" ".join(c) for c in self.calls]

    def __call__(
        self, cmd: list[str], *, cwd: Path | None = None, capture: bool = False
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        self.cwds.append(cwd)
        if cmd[0] in self._missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        for prefix, returncode in self._results:
            if tuple(cmd[: len(prefix)]) == prefix:
                return subprocess.CompletedProcess(cmd, returncode, "", "simulated failure")
        return subprocess.CompletedProcess(cmd, 0, "", "")


@pytest.fixture
def fake_shell(monkeypatch: pytest.MonkeyPatch) -> FakeShell:
    fake = FakeShell()
    monkeypatch.setattr(shell, "_execute", fake)
    return fake


@pytest.fixture
def tmp_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Return an AppdeployConfig pointing at temp directories."""
    nginx_dir = tmp_path / "nginx"
    (nginx_dir / "sites-available").mkdir(parents=True)
    (nginx_dir / "sites-enabled").mkdir(parents=True)
    monkeypatch.setenv("APPDEPLOY_NGINX_DIR", str(nginx_dir))
    monkeypatch.setenv("APPDEPLOY_LETSENCRYPT_DIR", "/etc/letsencrypt/live")
    monkeypatch.setenv("APPDEPLOY_LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setenv("APPDEPLOY_ACTOR", "tester")
    monkeypatch.delenv("APPDEPLOY_CERTBOT_EMAIL", raising=False)
    get_config.cache_clear()
    cfg: AppdeployConfig = get_config()
    yield cfg
    get_config.cache_clear()
