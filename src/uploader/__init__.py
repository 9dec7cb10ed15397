"""Self-hosted file upload and listing web application."""

__version__ = "0.1.0"
