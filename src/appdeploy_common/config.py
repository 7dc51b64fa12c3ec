"""Central configuration for the appdeploy tools."""

from __future__ import annotations

import getpass
import os
from pathlib import Path

from pydantic import BaseModel, Field

from appdeploy_common.constants import (
    AUDIT_JSONL_NAME,
    LETSENCRYPT_LIVE_DIR,
    LOG_DIR,
    NGINX_DIR,
    SITES_AVAILABLE,
    SITES_ENABLED,
)


def _env_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    return Path(value) if value else default


def _default_actor() -> str:
    return os.environ.get("APPDEPLOY_ACTOR") or getpass.getuser()


class AppdeployConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    nginx_dir: Path = Field(default_factory=lambda: _env_path("APPDEPLOY_NGINX_DIR", NGINX_DIR))
    letsencrypt_live_dir: Path = Field(
        default_factory=lambda: _env_path("APPDEPLOY_LETSENCRYPT_DIR", LETSENCRYPT_LIVE_DIR)
    )
    certbot_email: str | None = Field(default_factory=lambda: os.environ.get("APPDEPLOY_CERTBOT_EMAIL") or None)
    log_dir: Path = Field(default_factory=lambda: _env_path("APPDEPLOY_LOG_DIR", LOG_DIR))
    actor: str = Field(default_factory=_default_actor)

    @property
    def sites_available_dir(self) -> Path:
        return self.nginx_dir / SITES_AVAILABLE

    @property
    def sites_enabled_dir(self) -> Path:
        return self.nginx_dir / SITES_ENABLED

    @property
    def audit_jsonl_path(self) -> Path:
        return self.log_dir / AUDIT_JSONL_NAME

    def email_for(self, domain: str) -> str:
        """Contact address registered with Let's Encrypt for ``domain``."""
        return self.certbot_email or f"admin@{domain}"
