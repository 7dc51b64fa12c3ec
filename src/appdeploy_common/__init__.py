"""appdeploy common — shared models and constants for app-setup and nginx-sites."""

from appdeploy_common.constants import (
    BACKEND_CONTAINER_PORT,
    COMPOSE_FILENAME,
    DEFAULT_BACKEND_PORT,
    DEFAULT_FRONTEND_PORT,
    DEFAULT_PROJECT_PATH,
    FRONTEND_CONTAINER_PORT,
    LETSENCRYPT_LIVE_DIR,
    LOG_DIR,
    METADATA_FILENAME,
    NGINX_DIR,
    NODE_IMAGE,
)
from appdeploy_common.config import AppdeployConfig
from appdeploy_common.models.audit_event import AuditEvent
from appdeploy_common.models.metadata import ProjectMetadata
from appdeploy_common.models.project import ProjectSettings
from appdeploy_common.models.site import SiteConfig

__all__ = [
    "AppdeployConfig",
    "AuditEvent",
    "BACKEND_CONTAINER_PORT",
    "COMPOSE_FILENAME",
    "DEFAULT_BACKEND_PORT",
    "DEFAULT_FRONTEND_PORT",
    "DEFAULT_PROJECT_PATH",
    "FRONTEND_CONTAINER_PORT",
    "LETSENCRYPT_LIVE_DIR",
    "LOG_DIR",
    "METADATA_FILENAME",
    "NGINX_DIR",
    "NODE_IMAGE",
    "ProjectMetadata",
    "ProjectSettings",
    "SiteConfig",
]
