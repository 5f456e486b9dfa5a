"""HTTP engine construction for the API client.

The request pipeline never talks to sockets itself. It drives an
``httpx.Client`` built here from the client settings: timeouts, redirect
following, a fixed number of transport-level connection retries and
connection limits.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ...config.settings import Settings

logger = logging.getLogger(__name__)


def create_timeout(timeout: float = 60.0, open_timeout: float = 30.0) -> httpx.Timeout:
    """Create a timeout configuration object.

    :param timeout: Read, write and pool timeout in seconds
    :type timeout: float
    :param open_timeout: Connection timeout in seconds
    :type open_timeout: float
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(timeout, connect=open_timeout)


def create_limits(
    max_keepalive_connections: int = 10,
    max_connections: int = 20,
    keepalive_expiry: float = 30.0,
) -> httpx.Limits:
    """Create a connection limits configuration object.

    :param max_keepalive_connections: Maximum number of keepalive connections
    :type max_keepalive_connections: int
    :param max_connections: Maximum total number of connections
    :type max_connections: int
    :param keepalive_expiry: Keepalive connection expiry time in seconds
    :type keepalive_expiry: float
    :return: Configured limits object
    :rtype: httpx.Limits
    """
    return httpx.Limits(
        max_keepalive_connections=max_keepalive_connections,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )


def create_http_client(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
    **kwargs: Any,
) -> httpx.Client:
    """Build the synchronous HTTP engine for a client.

    When no transport is given, an ``httpx.HTTPTransport`` retrying
    connection failures ``settings.max_retries`` times is used. A custom
    transport (for example ``httpx.MockTransport`` in tests) replaces it
    entirely.

    :param settings: Client settings providing timeouts and retry count
    :type settings: Settings
    :param transport: Optional transport overriding the network layer
    :type transport: Optional[httpx.BaseTransport]
    :param kwargs: Extra ``httpx.Client`` options
    :return: Configured HTTP client
    :rtype: httpx.Client
    """
    limits = kwargs.pop("limits", None) or create_limits()
    if transport is None:
        transport = httpx.HTTPTransport(retries=settings.max_retries, limits=limits)

    client_config: Dict[str, Any] = {
        "timeout": create_timeout(settings.timeout, settings.open_timeout),
        "follow_redirects": True,
        "transport": transport,
        **kwargs,
    }
    logger.debug(
        "Created HTTP client (timeout=%s, open_timeout=%s, retries=%s)",
        settings.timeout,
        settings.open_timeout,
        settings.max_retries,
    )
    return httpx.Client(**client_config)
