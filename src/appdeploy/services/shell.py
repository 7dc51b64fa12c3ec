"""External command execution and the two failure policies built on it.

Every tool invocation goes through :func:`run`, which delegates to
``_execute``. Tests swap ``_execute`` for a recorder so the real binaries are
never needed.

``run_or_abort`` turns a failure into a typed :class:`AppdeployError` that
ends the command; ``run_and_log`` prints the failure to stderr and lets the
command carry on.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from appdeploy.errors import AppdeployError, CommandError

err_console = Console(stderr=True)


def _execute(
    cmd: list[str], *, cwd: Path | None = None, capture: bool = False
) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=capture,
        text=True,
        check=False,
    )


def run(
    cmd: list[str], *, cwd: Path | None = None, capture: bool = False, check: bool = True
) -> subprocess.CompletedProcess[str]:
    """Run ``cmd``, inheriting the terminal unless ``capture`` is set.

    Raises CommandError when the program cannot be started, or when it exits
    non-zero and ``check`` is set.
    """
    try:
        result = _execute(cmd, cwd=cwd, capture=capture)
    except OSError as exc:
        raise CommandError(f"Could not run {' '.join(cmd)}: {exc}") from exc
    if check and result.returncode != 0:
        message = f"Command failed with exit status {result.returncode}: {' '.join(cmd)}"
        if result.stderr:
            message += f"\nstderr: {result.stderr.strip()}"
        raise CommandError(message)
    return result


def succeeds(cmd: list[str]) -> bool:
    """Run ``cmd`` silently and report whether it exited 0."""
    try:
        return run(cmd, capture=True, check=False).returncode == 0
    except CommandError:
        return False


def run_or_abort(
    cmd: list[str],
    *,
    error: type[AppdeployError],
    message: str,
    cwd: Path | None = None,
) -> None:
    """Run ``cmd``; on failure raise ``error`` so the command stops."""
    try:
        run(cmd, cwd=cwd)
    except CommandError as exc:
        raise error(f"{message}: {exc}") from exc


def run_and_log(cmd: list[str], *, message: str, cwd: Path | None = None) -> bool:
    """Run ``cmd``; on failure print ``message`` with the cause and return False."""
    try:
        run(cmd, cwd=cwd)
    except CommandError as exc:
        err_console.print(f"[red]{escape(message)}:[/red] {escape(str(exc))}", highlight=False)
        return False
    return True
