"""Certbot certificate issuance through the nginx plugin."""

from __future__ import annotations

from appdeploy.services import shell


def obtain_cert(domain: str, *, email: str) -> bool:
    """Obtain and install a Let's Encrypt certificate for ``domain``.

    Best effort: on failure the site stays configured and False is returned.
    """
    return shell.run_and_log(
        [
            "certbot", "--nginx",
            "-d", domain,
            "--non-interactive", "--agree-tos",
            "--email", email,
        ],
        message="Error obtaining SSL certificate",
    )
