"""Shared constants for the appdeploy tools."""

from pathlib import Path

# NGINX layout (Debian/Ubuntu convention)
NGINX_DIR = Path("/etc/nginx")
SITES_AVAILABLE = "sites-available"
SITES_ENABLED = "sites-enabled"

# Let's Encrypt
LETSENCRYPT_LIVE_DIR = Path("/etc/letsencrypt/live")

# Audit / logging
LOG_DIR = Path.home() / ".local" / "state" / "appdeploy"
AUDIT_JSONL_NAME = "audit.jsonl"

# Scaffolding
NODE_IMAGE = "node:14"
FRONTEND_CONTAINER_PORT = 3000
BACKEND_CONTAINER_PORT = 5000
DEFAULT_PROJECT_PATH = "."
DEFAULT_FRONTEND_PORT = "3000"
DEFAULT_BACKEND_PORT = "5000"
METADATA_FILENAME = "metadata.json"
COMPOSE_FILENAME = "docker-compose.yml"
