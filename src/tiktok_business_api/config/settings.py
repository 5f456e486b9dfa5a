"""Configuration settings for the TikTok Business API client.

This module defines the settings holder used by every client instance:
application credentials, the access token, API endpoints, timeouts and
logging toggles. Values are loaded from ``TIKTOK_``-prefixed environment
variables and ``.env`` files, and can be overridden per client.
"""

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://business-api.tiktok.com/open_api/"
DEFAULT_AUTH_URL = "https://ads.tiktok.com/marketing_api/auth"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    One copy is owned by each :class:`~tiktok_business_api.client.Client`.
    The ``access_token`` field is updated in place when the client is told
    to persist a token issued by the authentication flow.

    :param app_id: TikTok developer application ID
    :type app_id: Optional[str]
    :param secret: TikTok developer application secret
    :type secret: Optional[str]
    :param access_token: Access token sent as the ``Access-Token`` header
    :type access_token: Optional[str]
    :param api_base_url: Base URL of the Marketing API
    :type api_base_url: str
    :param auth_url: Authorization page advertisers are redirected to
    :type auth_url: str
    :param api_version: API version prefix used in resource paths
    :type api_version: str
    :param debug: Log every request and response at DEBUG level
    :type debug: bool
    :param logger: Custom logger for request tracing (never read from env)
    :type logger: Optional[logging.Logger]
    :param log_level: Level used by :func:`~tiktok_business_api.utils.security.setup_secure_logging`
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param timeout: Total request timeout in seconds
    :type timeout: float
    :param open_timeout: Connection timeout in seconds
    :type open_timeout: float
    :param max_retries: Transport-level retries on connection failures
    :type max_retries: int
    """

    model_config = SettingsConfigDict(
        env_prefix="TIKTOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    # Credentials
    app_id: Optional[str] = Field(None, description="TikTok application ID")
    secret: Optional[str] = Field(None, description="TikTok application secret")
    access_token: Optional[str] = Field(None, description="Advertiser access token")

    # API Configuration
    api_base_url: str = Field(
        DEFAULT_API_BASE_URL, description="TikTok Business API base URL"
    )
    auth_url: str = Field(
        DEFAULT_AUTH_URL, description="Advertiser authorization page URL"
    )
    api_version: str = Field("v1.3", description="API version path prefix")

    # Logging
    debug: bool = Field(False, description="Trace requests and responses")
    logger: Optional[logging.Logger] = Field(
        None, exclude=True, description="Custom logger for request tracing"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    # Transport
    timeout: float = Field(60, gt=0, description="Request timeout in seconds")
    open_timeout: float = Field(30, gt=0, description="Connect timeout in seconds")
    max_retries: int = Field(3, ge=0, description="Transport retry count")

    @field_validator("api_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended to it.

        :param v: The configured base URL
        :type v: str
        :return: Base URL ending with a single slash
        :rtype: str
        """
        return v.rstrip("/") + "/"

    def copy_with(self, **overrides: Any) -> "Settings":
        """Return an independent copy with the given fields replaced.

        Unknown keys are ignored with a warning so option hashes coming
        from callers cannot add arbitrary attributes.

        :param overrides: Field values to replace
        :return: New settings instance
        :rtype: Settings
        """
        known: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key in type(self).model_fields:
                known[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration option: {key}")

        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(known)
        return type(self)(**data)


settings = Settings()
"""Package-wide default settings.

Clients copy this instance when they are created; use :func:`configure`
to change it.
"""


def get_settings() -> Settings:
    """Return the current package-wide default settings.

    :return: Default settings instance
    :rtype: Settings
    """
    return settings


def configure(**overrides: Any) -> Settings:
    """Update the package-wide default settings.

    Clients created afterwards start from the updated values; existing
    clients keep their own copies.

    :param overrides: Field values to replace
    :return: The new default settings
    :rtype: Settings
    """
    global settings
    settings = settings.copy_with(**overrides)
    return settings
