"""Helpers for shaping outgoing requests.

The Marketing API has a few wire conventions that differ from what an
HTTP library does by default: array and object query values must be
embedded JSON strings, and uploads are flat multipart forms with one
file field.
"""

import json
from typing import Any, Dict, Mapping, Optional, Tuple

from ..files import FilePart

MULTIPART_FORM_DATA = "multipart/form-data"


def join_path(*parts: str) -> str:
    """Join URL path segments with exactly one slash between them.

    A trailing slash on the last segment is preserved, since most
    Marketing API endpoints end with one.

    :param parts: Path segments
    :return: Joined path
    :rtype: str

    .. example::
       >>> join_path("v1.3/campaign/", "/get/")
       'v1.3/campaign/get/'
    """
    segments = [p.strip("/") for p in parts if p and p.strip("/")]
    joined = "/".join(segments)
    if parts and parts[-1].endswith("/") and joined:
        joined += "/"
    return joined


def join_url(base_url: str, path: str) -> str:
    """Append a path to the API base URL.

    :param base_url: Base URL, e.g. ``https://business-api.tiktok.com/open_api/``
    :param path: Relative path, leading slashes are ignored
    :return: Absolute URL
    :rtype: str
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def encode_query_value(value: Any) -> Any:
    """Encode a single query parameter value.

    Lists, tuples and mappings become JSON text. Booleans become
    ``true``/``false`` so they match the API's JSON vocabulary.
    """
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def encode_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Encode a parameter mapping for a GET/DELETE query string.

    ``None`` values are dropped.

    :param params: Raw parameters
    :return: Parameters ready for ``httpx``
    :rtype: Dict[str, Any]
    """
    if not params:
        return {}
    return {
        str(key): encode_query_value(value)
        for key, value in params.items()
        if value is not None
    }


def is_multipart(headers: Mapping[str, str]) -> bool:
    """Return whether the caller asked for a multipart body."""
    for key, value in headers.items():
        if key.lower() == "content-type" and value.lower().startswith(MULTIPART_FORM_DATA):
            return True
    return False


def split_multipart(
    params: Mapping[str, Any],
) -> Tuple[Dict[str, str], Dict[str, Tuple[str, Any, str]]]:
    """Split parameters into form fields and file fields.

    Every :class:`~tiktok_business_api.utils.files.FilePart` value becomes
    a file field. Other values are sent as form fields, with non-string
    scalars stringified and containers JSON-encoded.

    :param params: Flat upload parameters
    :return: ``(data, files)`` suitable for ``httpx``
    """
    data: Dict[str, str] = {}
    files: Dict[str, Tuple[str, Any, str]] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, FilePart):
            files[key] = value.to_httpx()
        else:
            encoded = encode_query_value(value)
            data[key] = encoded if isinstance(encoded, str) else str(encoded)
    return data, files
