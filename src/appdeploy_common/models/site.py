"""Site configuration model."""

from __future__ import annotations

from pydantic import BaseModel

from appdeploy_common.models.metadata import ProjectMetadata


class SiteConfig(BaseModel):
    """A reverse-proxy site fronting a frontend and a backend port."""

    domain: str = ""
    frontend_port: str
    backend_port: str
    use_domain: bool = True
    use_ssl: bool = True

    @classmethod
    def from_metadata(
        cls, metadata: ProjectMetadata, *, use_domain: bool = True, use_ssl: bool = True
    ) -> SiteConfig:
        return cls(
            domain=metadata.domain,
            frontend_port=metadata.frontend_port,
            backend_port=metadata.backend_port,
            use_domain=use_domain,
            use_ssl=use_ssl,
        )

    @property
    def name(self) -> str:
        """File name under sites-available / sites-enabled."""
        if self.use_domain:
            return self.domain
        # IP-only sites are told apart by their port pair
        return f"site_{self.frontend_port}_{self.backend_port}"

    @property
    def redirect_http(self) -> bool:
        return self.use_domain and self.use_ssl

    @property
    def needs_certificate(self) -> bool:
        return self.use_domain and self.use_ssl
