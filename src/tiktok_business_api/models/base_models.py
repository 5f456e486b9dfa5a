"""Shared Pydantic models for the TikTok Business API client.

The client passes API payloads around as plain dictionaries; these models
only describe the pieces of the wire format the client itself reasons
about, such as pagination metadata.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class PageInfo(BaseModel):
    """Pagination block returned as ``data.page_info`` by list endpoints.

    Not every endpoint reports every field; ``has_more`` in particular is
    omitted by most of them.

    :param page: Current page number (1-based)
    :type page: Optional[int]
    :param page_size: Page size used by the server
    :type page_size: Optional[int]
    :param total_number: Total number of items across all pages
    :type total_number: Optional[int]
    :param total_page: Total number of pages
    :type total_page: Optional[int]
    :param has_more: Whether another page exists
    :type has_more: Optional[bool]
    """

    model_config = ConfigDict(extra="allow")

    page: Optional[int] = None
    page_size: Optional[int] = None
    total_number: Optional[int] = None
    total_page: Optional[int] = None
    has_more: Optional[bool] = None

    @classmethod
    def from_data(cls, data: Any) -> "PageInfo":
        """Extract the page info from a response ``data`` mapping.

        A malformed block is treated like a missing one, which ends
        pagination after the current page.

        :param data: The ``data`` member of a response envelope
        :return: Parsed page info, empty when absent or malformed
        :rtype: PageInfo
        """
        if not isinstance(data, dict) or not isinstance(data.get("page_info"), dict):
            return cls()
        try:
            return cls.model_validate(data["page_info"])
        except ValidationError as e:
            logger.warning(f"Ignoring malformed page_info: {e.error_count()} invalid field(s)")
            return cls()

    def has_next_page(self, page: int, page_size: int) -> bool:
        """Decide whether another page should be requested.

        Precedence: an explicit ``has_more`` flag wins, then
        ``total_page``, then ``total_number`` arithmetic. Without any of
        them the current page is assumed to be the last one. An empty page
        is handled by the caller before this is consulted.

        :param page: Page number just fetched
        :param page_size: Page size used for the request
        :return: True if the next page should be fetched
        :rtype: bool
        """
        if self.has_more is not None:
            return self.has_more
        if self.total_page is not None:
            return page < self.total_page
        if self.total_number is not None:
            return page * page_size < self.total_number
        return False


def unwrap_data(response: Dict[str, Any]) -> Any:
    """Return the ``data`` member of a response envelope, or None."""
    if isinstance(response, dict):
        return response.get("data")
    return None
