"""JSONL audit trail for mutating commands."""

from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from rich.console import Console
from rich.markup import escape

from appdeploy_common import AuditEvent

from appdeploy.config import get_config

err_console = Console(stderr=True)


def _write_jsonl(path: Path, event: AuditEvent) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(event.to_jsonl() + "\n")


def log_event(event: AuditEvent) -> None:
    """Append an audit event to the JSONL log.

    A log that cannot be written is reported and skipped; it never changes the
    outcome of the audited command.
    """
    path = get_config().audit_jsonl_path
    try:
        _write_jsonl(path, event)
    except OSError as exc:
        err_console.print(
            f"[yellow]Warning: could not write audit log {escape(str(path))}:[/yellow] {escape(str(exc))}",
            highlight=False,
        )


@contextmanager
def audit(action: str, target: str = "", **params: Any) -> Generator[AuditEvent, None, None]:
    """Context manager that records timing and success/failure."""
    cfg = get_config()
    event = AuditEvent(actor=cfg.actor, action=action, target=target, params=params)
    start = time.monotonic()
    try:
        yield event
        event.result = "success"
    except Exception as exc:
        event.result = "failure"
        event.error = str(exc)
        raise
    finally:
        event.duration_ms = int((time.monotonic() - start) * 1000)
        log_event(event)
