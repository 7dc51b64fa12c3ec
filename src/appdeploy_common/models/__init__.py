"""Shared Pydantic models."""

from appdeploy_common.models.audit_event import AuditEvent
from appdeploy_common.models.metadata import ProjectMetadata
from appdeploy_common.models.project import ProjectSettings
from appdeploy_common.models.site import SiteConfig

__all__ = ["AuditEvent", "ProjectMetadata", "ProjectSettings", "SiteConfig"]
