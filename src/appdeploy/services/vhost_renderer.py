"""Jinja2-based NGINX site config renderer."""

from __future__ import annotations

from pathlib import Path

from appdeploy_common import LETSENCRYPT_LIVE_DIR, SiteConfig

from appdeploy.services.templating import render


def render_site_vhost(site: SiteConfig, *, letsencrypt_live_dir: Path = LETSENCRYPT_LIVE_DIR) -> str:
    """Render the reverse-proxy config for ``site``.

    ``/`` goes to the frontend port and ``/api`` to the backend port. With SSL
    the server listens on 443; with SSL and a domain an extra port 80 block
    redirects to HTTPS.
    """
    return render(
        "vhost.conf.j2",
        site=site,
        letsencrypt_live_dir=str(letsencrypt_live_dir).rstrip("/"),
    )
