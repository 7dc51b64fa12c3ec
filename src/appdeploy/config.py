"""CLI configuration — singleton AppdeployConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from appdeploy_common import AppdeployConfig


@lru_cache(maxsize=1)
def get_config() -> AppdeployConfig:
    """Return the global AppdeployConfig (resolved once, cached)."""
    return AppdeployConfig()
