"""Configuration module with YAML and environment variable support."""

from .settings import CatalogBackend, Settings, get_settings


__all__ = [
    "CatalogBackend",
    "Settings",
    "get_settings",
]
