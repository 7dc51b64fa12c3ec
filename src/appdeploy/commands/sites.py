"""nginx-sites: add, remove, and list NGINX reverse-proxy sites."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from appdeploy_common import SiteConfig

from appdeploy.audit import audit
from appdeploy.commands._common import fail
from appdeploy.config import get_config
from appdeploy.errors import AppdeployError, MetadataError
from appdeploy.prompts import prompt_metadata_path, prompt_site_name
from appdeploy.services import certbot, nginx, vhost_renderer
from appdeploy.services.metadata import read_metadata

console = Console()


def _ensure_nginx() -> None:
    """Install NGINX when missing. Raises NginxInstallError if that fails."""
    if nginx.is_installed():
        console.print("Nginx is already installed.")
        return
    console.print("Nginx is not installed. Installing Nginx...")
    nginx.install()
    console.print("[green]Nginx installed successfully.[/green]")


def add_site(
    metadata: Optional[Path] = typer.Option(None, "--metadata", "-m", help="Path to the metadata.json file"),
    no_ssl: bool = typer.Option(False, "--no-ssl", help="Skip SSL configuration"),
    no_domain: bool = typer.Option(False, "--no-domain", help="Skip domain configuration (use IP address)"),
) -> None:
    """Add a new site to Nginx with SSL."""
    cfg = get_config()

    try:
        _ensure_nginx()
        if metadata is None:
            metadata = prompt_metadata_path()
        project = read_metadata(metadata)
        site = SiteConfig.from_metadata(project, use_domain=not no_domain, use_ssl=not no_ssl)
        if site.use_domain and not site.domain:
            raise MetadataError(
                f"{metadata} has no domain; set one or run add-site with --no-domain"
            )

        with audit(
            "site.add",
            target=site.name,
            frontend_port=site.frontend_port,
            backend_port=site.backend_port,
            ssl=site.use_ssl,
            domain=site.use_domain,
        ) as event:
            content = vhost_renderer.render_site_vhost(
                site, letsencrypt_live_dir=cfg.letsencrypt_live_dir
            )
            path = nginx.write_site(cfg.sites_available_dir, site.name, content)
            console.print(f"[bold][1/3][/bold] Wrote {path}")

            link = nginx.enable_site(cfg.sites_available_dir, cfg.sites_enabled_dir, site.name)
            console.print(f"[bold][2/3][/bold] Enabled {link}")

            if site.needs_certificate:
                console.print(f"Obtaining SSL certificate for {site.domain}...")
                if certbot.obtain_cert(site.domain, email=cfg.email_for(site.domain)):
                    console.print("[green]SSL certificate obtained successfully.[/green]")
                else:
                    event.params["certificate"] = "failed"

            console.print("[bold][3/3][/bold] Reloading Nginx...")
            if nginx.reload():
                console.print("[green]Nginx reloaded successfully.[/green]")
    except (AppdeployError, OSError) as exc:
        fail(exc)

    console.print(f"\n[green bold]Site {site.name} added successfully![/green bold]", highlight=False)


def remove_site(
    domain: Optional[str] = typer.Option(None, "--domain", "-d", help="Domain name to remove"),
) -> None:
    """Remove a site from Nginx."""
    cfg = get_config()

    try:
        _ensure_nginx()
        if not domain:
            domain = prompt_site_name()

        with audit("site.remove", target=domain):
            for path in nginx.remove_site(cfg.sites_available_dir, cfg.sites_enabled_dir, domain):
                console.print(f"  Removed: {path}")

            console.print("Reloading Nginx...")
            if nginx.reload():
                console.print("[green]Nginx reloaded successfully.[/green]")
    except (AppdeployError, OSError) as exc:
        fail(exc)

    console.print(f"\n[green bold]Site {domain} removed successfully![/green bold]", highlight=False)


def list_sites() -> None:
    """Display all active sites and their configurations."""
    cfg = get_config()

    try:
        _ensure_nginx()
    except (AppdeployError, OSError) as exc:
        fail(exc)

    enabled, disabled = nginx.list_sites(cfg.sites_available_dir, cfg.sites_enabled_dir)

    console.print("Active sites:")
    for name in enabled:
        console.print(f"- {name} (enabled)", markup=False, highlight=False)

    console.print("\nAvailable sites:")
    for name in disabled:
        console.print(f"- {name} (disabled)", markup=False, highlight=False)
