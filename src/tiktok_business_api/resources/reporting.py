"""Reporting resource.

Synchronous reports are returned page by page from
``report/integrated/get/``. Typical parameters are ``advertiser_id``,
``report_type`` (e.g. ``BASIC``), ``data_level``, ``dimensions``,
``metrics``, ``start_date`` and ``end_date``.
"""

from typing import Any, Dict, Iterator, List

from ..models.base_models import unwrap_data
from .base import BaseResource
from .registry import ResourceType, register_resource


@register_resource(ResourceType.REPORTING)
class Reporting(BaseResource):
    """Synchronous integrated reports."""

    RESOURCE_NAME = "report/integrated"

    def get_sync_report(self, **params: Any) -> List[Dict[str, Any]]:
        """Run a synchronous report and return one page of rows.

        :param params: Report parameters, including ``page`` and ``page_size``
        :return: Report rows
        """
        response = self._http_get("get/", params)
        return (unwrap_data(response) or {}).get("list") or []

    def iter_sync_report(self, **params: Any) -> Iterator[Dict[str, Any]]:
        """Run a synchronous report and yield the rows of every page.

        Pages are fetched lazily as the iterator is consumed.

        :param params: Report parameters; ``page_size`` defaults to 10
        :return: Iterator over report rows
        """
        page_size = params.pop("page_size", None)
        start_page = params.pop("page", None) or 1
        for rows in self.iter_pages("get/", params, page_size=page_size, start_page=start_page):
            yield from rows
