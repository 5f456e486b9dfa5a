"""Structured exception classes for the TikTok Business API client.

Every failure reported by the remote API is raised as a subclass of
:class:`TiktokBusinessApiError`. The concrete class is chosen by
:class:`ErrorFactory` from the HTTP status of the response. Local argument
validation failures are raised as :class:`ConfigurationError` before any
request is sent and are not part of the API taxonomy.
"""

import json
from typing import Any, Dict, Optional, Type

import httpx


class TiktokBusinessApiError(Exception):
    """Base exception for all TikTok Business API errors.

    Raised directly for application-level failures, i.e. responses that
    carry a 2xx status but a non-zero envelope ``code``.

    :param message: Human-readable error message
    :param status_code: HTTP status code of the failed response
    :param body: Parsed (or synthetic) response body
    :param request: Description of the request that caused the error
    """

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Any = None,
        request: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, status, body and request."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.request = request

    @property
    def api_code(self) -> Optional[int]:
        """Envelope ``code`` of the failed response, if the body had one."""
        if isinstance(self.body, dict):
            return self.body.get("code")
        return None

    @property
    def request_id(self) -> Optional[str]:
        """Server-side request id, useful when contacting TikTok support."""
        if isinstance(self.body, dict):
            return self.body.get("request_id")
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error type, message, status and body
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "api_code": self.api_code,
            "body": self.body,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


class AuthenticationError(TiktokBusinessApiError):
    """Raised when the API rejects the credentials (HTTP 401)."""


class AuthorizationError(TiktokBusinessApiError):
    """Raised when the token lacks permission for the resource (HTTP 403)."""


class InvalidRequestError(TiktokBusinessApiError):
    """Raised for malformed or rejected requests (HTTP 4xx)."""


class RateLimitError(TiktokBusinessApiError):
    """Raised when API rate limits are exceeded (HTTP 429)."""


class ApiError(TiktokBusinessApiError):
    """Raised for server-side failures (HTTP 5xx)."""


class ConfigurationError(ValueError):
    """Raised when arguments are invalid before any request is made.

    Covers missing upload fields, unknown ``upload_type`` values and
    similar local validation failures.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic argument
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        super().__init__(message)
        self.message = message
        self.setting = setting


def parse_body(text: Optional[str]) -> Any:
    """Decode a response body the way the API client expects it.

    An empty body becomes an empty mapping. A body that is not valid JSON
    is wrapped into ``{"error": "Invalid JSON response: <text>"}`` instead
    of raising, so the status code alone decides the outcome.

    :param text: Raw response text
    :return: Decoded JSON value or the synthetic error mapping
    """
    if not text:
        return {}
    try:
        return json.loads(text)
    except ValueError:
        return {"error": f"Invalid JSON response: {text}"}


class ErrorFactory:
    """Factory for creating the appropriate error object."""

    @staticmethod
    def error_class_for(status: Optional[int]) -> Type[TiktokBusinessApiError]:
        """Return the error class for an HTTP status code.

        :param status: HTTP status code
        :return: Exception class matching the status
        """
        if status == 401:
            return AuthenticationError
        if status == 403:
            return AuthorizationError
        if status == 429:
            return RateLimitError
        if status is not None and 400 <= status <= 499:
            return InvalidRequestError
        if status is not None and 500 <= status <= 599:
            return ApiError
        return TiktokBusinessApiError

    @classmethod
    def classify(
        cls,
        status: Optional[int],
        body: Any,
        request: Optional[Dict[str, Any]] = None,
    ) -> TiktokBusinessApiError:
        """Build a typed error from a status code and a parsed body.

        :param status: HTTP status code
        :param body: Parsed response body
        :param request: Optional description of the originating request
        :return: The appropriate error object
        """
        message = body.get("message") if isinstance(body, dict) else None
        klass = cls.error_class_for(status)
        return klass(message or f"HTTP {status}", status, body, request)

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        request: Optional[Dict[str, Any]] = None,
    ) -> TiktokBusinessApiError:
        """Create an error object based on the response.

        :param response: The HTTP response
        :param request: The request that caused the error
        :return: The appropriate error object
        """
        return cls.classify(response.status_code, parse_body(response.text), request)
