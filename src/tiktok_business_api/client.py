"""HTTP client for the TikTok Business API.

This module provides :class:`Client`, the single entry point for talking to
the Marketing API. Each client owns a copy of the settings, an ``httpx``
engine and lazily created resource objects. All requests go through
:meth:`Client.request`, which:

1. Builds the URL from the configured base URL and a relative path
2. Injects the ``Access-Token`` header when a token is configured
3. Encodes parameters as a query string, a JSON body or a multipart form
4. Decodes the response envelope and raises a typed error on failure

Examples:
    >>> with Client(app_id="123", secret="s", access_token="t") as client:
    ...     campaigns = client.campaigns.list(advertiser_id="42")
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .auth import Auth
from .config.settings import Settings, get_settings
from .exceptions import ErrorFactory, parse_body
from .resources import (
    Account,
    Ad,
    Adgroup,
    BaseResource,
    Campaign,
    Identity,
    Image,
    Reporting,
    ResourceRegistry,
    ResourceType,
    Spc,
    Video,
)
from .utils.http import (
    create_http_client,
    encode_query_params,
    is_multipart,
    join_url,
    split_multipart,
)
from .utils.security import safe_log_dict, sanitize_headers, sanitize_string

logger = logging.getLogger(__name__)

QUERY_METHODS = ("GET", "DELETE")


class Client:
    """Client for the TikTok Business API.

    :param settings: Settings to copy; defaults to the package-wide settings
    :type settings: Optional[Settings]
    :param transport: Optional ``httpx`` transport replacing the network layer
    :type transport: Optional[httpx.BaseTransport]
    :param options: Individual setting overrides (``app_id``, ``access_token``, ...)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **options: Any,
    ):
        self.config: Settings = (settings or get_settings()).copy_with(**options)
        self.auth = Auth(self)
        self._transport = transport
        self._http: Optional[httpx.Client] = None
        self._resources: Dict[ResourceType, BaseResource] = {}

    @property
    def http(self) -> httpx.Client:
        """The underlying ``httpx`` engine, created on first use."""
        if self._http is None:
            self._http = create_http_client(self.config, transport=self._transport)
        return self._http

    def close(self) -> None:
        """Close the underlying HTTP engine."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def set_access_token(self, token: Optional[str]) -> None:
        """Store or clear the access token used for subsequent requests.

        :param token: New access token, or None to clear it
        :type token: Optional[str]
        """
        self.config.access_token = token
        logger.info("Access token %s", "updated" if token else "cleared")

    def resource(self, resource_type: Union[ResourceType, str]) -> BaseResource:
        """Get or create a resource instance.

        :param resource_type: Resource tag, e.g. ``ResourceType.CAMPAIGN`` or ``"campaign"``
        :return: Resource instance, cached per client
        :rtype: BaseResource
        :raises ValueError: If no resource is registered under the tag
        """
        tag = ResourceType.parse(resource_type)
        if tag not in self._resources:
            self._resources[tag] = ResourceRegistry.create_resource(tag, self)
        return self._resources[tag]

    @property
    def campaigns(self) -> Campaign:
        """Campaign resource."""
        return self.resource(ResourceType.CAMPAIGN)

    @property
    def adgroups(self) -> Adgroup:
        """Ad group resource."""
        return self.resource(ResourceType.ADGROUP)

    @property
    def ads(self) -> Ad:
        """Ad resource."""
        return self.resource(ResourceType.AD)

    @property
    def spc(self) -> Spc:
        """Smart+ campaign resource."""
        return self.resource(ResourceType.SPC)

    @property
    def images(self) -> Image:
        """Image material resource."""
        return self.resource(ResourceType.IMAGE)

    @property
    def videos(self) -> Video:
        """Video material resource."""
        return self.resource(ResourceType.VIDEO)

    @property
    def identities(self) -> Identity:
        """Identity resource."""
        return self.resource(ResourceType.IDENTITY)

    @property
    def accounts(self) -> Account:
        """Advertiser account resource."""
        return self.resource(ResourceType.ACCOUNT)

    @property
    def reports(self) -> Reporting:
        """Reporting resource."""
        return self.resource(ResourceType.REPORTING)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make an HTTP request to the TikTok Business API.

        :param method: HTTP method (GET, POST, PUT, DELETE)
        :type method: str
        :param path: API endpoint path relative to the base URL
        :type path: str
        :param params: Query parameters for GET/DELETE, body parameters otherwise
        :type params: Optional[Mapping[str, Any]]
        :param headers: Extra headers; they override the defaults key by key
        :type headers: Optional[Mapping[str, str]]
        :return: Parsed response envelope
        :rtype: Dict[str, Any]
        :raises TiktokBusinessApiError: If the response status or envelope code signals failure
        :raises httpx.HTTPError: On network failures
        """
        method = method.upper()
        params = dict(params or {})
        url = join_url(self.config.api_base_url, path)

        request_headers = httpx.Headers({"Content-Type": "application/json"})
        if self.config.access_token:
            request_headers["Access-Token"] = self.config.access_token
        caller_headers = dict(headers or {})
        request_headers.update(caller_headers)

        send_kwargs: Dict[str, Any] = {}
        if method in QUERY_METHODS:
            send_kwargs["params"] = encode_query_params(params)
        elif is_multipart(caller_headers):
            # httpx sets the multipart Content-Type together with its boundary
            del request_headers["Content-Type"]
            data, files = split_multipart(params)
            send_kwargs["data"] = data
            send_kwargs["files"] = files
        elif params:
            send_kwargs["content"] = json.dumps(params)

        request_info = {
            "method": method,
            "url": url,
            "params": safe_log_dict(params),
            "headers": sanitize_headers(dict(request_headers)),
        }
        self._log_request(request_info)

        response = self.http.request(method, url, headers=request_headers, **send_kwargs)
        return self._handle_response(response, request_info)

    def _handle_response(
        self, response: httpx.Response, request_info: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Parse and validate the response envelope.

        :param response: HTTP response
        :param request_info: Sanitized description of the request
        :return: Parsed response body
        :raises TiktokBusinessApiError: If the response indicates an error
        """
        self._log_response(response)

        body = parse_body(response.text)
        failed_code = isinstance(body, dict) and "code" in body and body["code"] != 0
        if not response.is_success or failed_code:
            error = ErrorFactory.classify(response.status_code, body, request_info)
            logger.debug(
                f"{type(error).__name__} for {request_info['method']} "
                f"{request_info['url']}: {error.message}"
            )
            raise error

        return body

    @property
    def _trace_logger(self) -> logging.Logger:
        return self.config.logger or logger

    def _log_request(self, request_info: Dict[str, Any]) -> None:
        if not self.config.debug:
            return
        trace = self._trace_logger
        trace.debug(f"Request: {request_info['method']} {request_info['url']}")
        trace.debug(f"Parameters: {request_info['params']!r}")
        trace.debug(f"Headers: {request_info['headers']!r}")

    def _log_response(self, response: httpx.Response) -> None:
        if not self.config.debug:
            return
        trace = self._trace_logger
        trace.debug(f"Response Status: {response.status_code}")
        trace.debug(f"Response Body: {sanitize_string(response.text)}")
