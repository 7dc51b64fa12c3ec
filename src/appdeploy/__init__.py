"""appdeploy — scaffold Dockerized apps and manage the NGINX sites in front of them."""

__version__ = "1.0.0"
