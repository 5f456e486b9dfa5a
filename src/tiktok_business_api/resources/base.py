"""Base class for API resources.

A resource groups the endpoints under one path prefix, e.g.
``v1.3/campaign/``. :class:`BaseResource` provides request helpers
relative to that prefix and the page-walking loop shared by all list
endpoints.
"""

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
)

from ..models.base_models import PageInfo, unwrap_data
from ..utils.http import join_path

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)

ItemCallback = Callable[[Dict[str, Any]], Any]

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class BaseResource:
    """Base class for all API resources.

    Subclasses set ``RESOURCE_NAME`` to the path segment(s) of their
    endpoints.

    :param client: Client instance used to send requests
    :type client: Client
    """

    RESOURCE_NAME: str = ""

    def __init__(self, client: "Client"):
        self.client = client

    @property
    def resource_name(self) -> str:
        """Resource name used in endpoint paths."""
        return self.RESOURCE_NAME or type(self).__name__.lower()

    @property
    def api_version(self) -> str:
        """API version prefix, taken from the client settings."""
        return self.client.config.api_version

    @property
    def base_path(self) -> str:
        """Base path for this resource, e.g. ``v1.3/campaign/``."""
        return join_path(self.api_version, self.resource_name) + "/"

    def _api_path(self, path: str) -> str:
        """Path of an endpoint outside this resource's prefix."""
        return join_path(self.api_version, path)

    def _http_get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make a GET request relative to the resource base path.

        :param path: Path relative to the resource base path
        :param params: Query parameters
        :param headers: Custom headers
        :return: Response envelope
        """
        return self.client.request("GET", join_path(self.base_path, path), params, headers)

    def _http_post(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make a POST request relative to the resource base path.

        :param path: Path relative to the resource base path
        :param params: Body parameters
        :param headers: Custom headers
        :return: Response envelope
        """
        return self.client.request("POST", join_path(self.base_path, path), params, headers)

    def iter_pages(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        data_key: str = "list",
        page_size: Optional[int] = None,
        start_page: int = 1,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Iterator[List[Dict[str, Any]]]:
        """Yield the items of each page of a list endpoint, in order.

        Pages are requested one at a time. The walk stops after a page
        with no items, or when :meth:`PageInfo.has_next_page` says the
        last page has been reached.

        :param path: List endpoint path relative to the resource base path
        :param params: Query parameters sent with every page
        :param data_key: Key of the item list inside ``data``
        :param page_size: Page size; defaults to 10
        :param start_page: First page to request
        :param headers: Custom headers
        :return: Iterator over per-page item lists
        """
        request_params = dict(params or {})
        page_size = page_size or request_params.get("page_size") or DEFAULT_PAGE_SIZE
        page = start_page

        while True:
            request_params["page"] = page
            request_params["page_size"] = page_size

            response = self._http_get(path, request_params, headers)
            data = unwrap_data(response) or {}
            items = data.get(data_key) or []

            if not items:
                return
            yield items

            page_info = PageInfo.from_data(data)
            if not page_info.has_next_page(page, page_size):
                return
            logger.debug(f"Fetching page {page + 1} of {self.resource_name}")
            page += 1

    def paginate(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        data_key: str = "list",
        callback: Optional[ItemCallback] = None,
        page_size: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """Collect the items of every page of a list endpoint.

        :param path: List endpoint path relative to the resource base path
        :param params: Query parameters
        :param data_key: Key of the item list inside ``data``
        :param callback: Called with each item instead of collecting them
        :param page_size: Page size; defaults to 10
        :param headers: Custom headers
        :return: All items, or None when a callback was given
        """
        items: List[Dict[str, Any]] = []
        for page_items in self.iter_pages(path, params, data_key, page_size, headers=headers):
            if callback is not None:
                for item in page_items:
                    callback(item)
            else:
                items.extend(page_items)

        return None if callback is not None else items
