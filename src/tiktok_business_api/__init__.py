"""TikTok Business API client package.

This package provides a synchronous client for the TikTok Business
(Marketing) API. It includes OAuth token handling, typed errors and
resource objects for campaigns, ad groups, ads, creatives, identities,
advertiser accounts and reports.

:var __version__: Current package version
:type __version__: str
"""

from typing import Any

from .auth import Auth
from .client import Client
from .config import Settings, configure, get_settings
from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ErrorFactory,
    InvalidRequestError,
    RateLimitError,
    TiktokBusinessApiError,
)

__version__ = "0.1.0"


def client(**options: Any) -> Client:
    """Create a client from the package-wide settings plus ``options``.

    :param options: Setting overrides (``app_id``, ``access_token``, ...)
    :return: New client
    :rtype: Client
    """
    return Client(**options)


__all__ = [
    "ApiError",
    "Auth",
    "AuthenticationError",
    "AuthorizationError",
    "Client",
    "ConfigurationError",
    "ErrorFactory",
    "InvalidRequestError",
    "RateLimitError",
    "Settings",
    "TiktokBusinessApiError",
    "client",
    "configure",
    "get_settings",
    "__version__",
]
