"""Configuration module: client settings."""

from goldrush.config.settings import DEFAULT_BASE_URL, ClientSettings

__all__ = [
    "ClientSettings",
    "DEFAULT_BASE_URL",
]
