"""Configuration for the TikTok Business API client."""

from .settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_AUTH_URL,
    Settings,
    configure,
    get_settings,
)

__all__ = [
    "Settings",
    "configure",
    "get_settings",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_AUTH_URL",
]
