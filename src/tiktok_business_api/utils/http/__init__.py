"""HTTP utilities public API (barrel module).

This package provides:
- Construction of the ``httpx`` engine used by the client
- Request shaping helpers (URL joining, query encoding, multipart)

Recommended import pattern for consumers:
    from tiktok_business_api.utils.http import create_http_client, join_url
"""

from .client_manager import create_http_client, create_limits, create_timeout
from .request import (
    MULTIPART_FORM_DATA,
    encode_query_params,
    encode_query_value,
    is_multipart,
    join_path,
    join_url,
    split_multipart,
)

__all__ = [
    "create_http_client",
    "create_limits",
    "create_timeout",
    "MULTIPART_FORM_DATA",
    "encode_query_params",
    "encode_query_value",
    "is_multipart",
    "join_path",
    "join_url",
    "split_multipart",
]
