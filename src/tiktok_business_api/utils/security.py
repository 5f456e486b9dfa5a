"""Log sanitization and secure logging setup.

Request tracing logs headers and parameters verbatim, which would leak
access tokens and application secrets. The helpers here redact those
values before they reach a handler.
"""

import copy
import logging
import re
import sys
from typing import Any, Dict, Iterable, Optional

# Headers that should never be logged
SENSITIVE_HEADERS = {
    "access-token",
    "authorization",
    "cookie",
    "set-cookie",
}

# Parameter names whose values are redacted in logged payloads
SENSITIVE_KEYS = {"secret", "access_token", "refresh_token", "auth_code", "token"}

SENSITIVE_PATTERNS = {
    "access_token": re.compile(r"((?:access[_-]token|refresh[_-]token|secret)['\"]?\s*[:=]\s*['\"]?)[^'\"&,\s}]+", re.IGNORECASE),
}


def sanitize_string(value: str) -> str:
    """Redact token-looking fragments inside a free-form string.

    :param value: String to sanitize
    :type value: str
    :return: String with sensitive values replaced by ``<REDACTED>``
    :rtype: str
    """
    if not value:
        return value
    for pattern in SENSITIVE_PATTERNS.values():
        value = pattern.sub(r"\1<REDACTED>", value)
    return value


def sanitize_headers(headers: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Sanitize HTTP headers for logging.

    :param headers: Dictionary of HTTP headers
    :type headers: Optional[Dict[str, Any]]
    :return: Copy of the headers with credentials redacted
    :rtype: Optional[Dict[str, Any]]
    """
    if not headers:
        return headers
    sanitized = dict(headers)
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            if isinstance(value, str) and value:
                sanitized[key] = f"<REDACTED:length={len(value)}>"
            else:
                sanitized[key] = "<REDACTED>"
    return sanitized


def safe_log_dict(
    data: Optional[Dict[str, Any]], sanitize_keys: Optional[Iterable[str]] = None
) -> Optional[Dict[str, Any]]:
    """Create a safe version of a parameter mapping for logging.

    :param data: Mapping to sanitize
    :type data: Optional[Dict[str, Any]]
    :param sanitize_keys: Additional keys to redact beyond the defaults
    :type sanitize_keys: Optional[Iterable[str]]
    :return: Deep copy with sensitive values redacted
    :rtype: Optional[Dict[str, Any]]
    """
    if not data:
        return data
    keys = set(SENSITIVE_KEYS)
    if sanitize_keys:
        keys.update(sanitize_keys)

    def _sanitize(obj: Any) -> Any:
        if isinstance(obj, dict):
            return {
                k: "<REDACTED>" if str(k).lower() in keys else _sanitize(v)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [_sanitize(item) for item in obj]
        return obj

    try:
        return _sanitize(copy.deepcopy(data))
    except TypeError:
        # File handles in multipart payloads cannot be deep-copied
        return _sanitize(dict(data))


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts tokens and secrets from rendered messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and scrub the result.

        :param record: Log record to format
        :type record: logging.LogRecord
        :return: Sanitized log line
        :rtype: str
        """
        return sanitize_string(super().format(record))


_LOGGING_CONFIGURED = False


def setup_secure_logging(level: str = "INFO") -> None:
    """Attach a sanitizing stream handler to the package logger.

    Only the ``tiktok_business_api`` logger is touched so that host
    applications keep control over the root logger. Repeated calls only
    adjust the level.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    package_logger = logging.getLogger("tiktok_business_api")
    package_logger.setLevel(getattr(logging, level.upper()))

    if _LOGGING_CONFIGURED:
        package_logger.debug("Logging already configured, skipping duplicate setup")
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    package_logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
