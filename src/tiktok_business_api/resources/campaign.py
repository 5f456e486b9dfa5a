"""Campaign resource."""

from typing import Any, Dict, Mapping, Optional

from .base import ItemCallback
from .crud import CrudResource
from .registry import ResourceType, register_resource


@register_resource(ResourceType.CAMPAIGN)
class Campaign(CrudResource):
    """Campaigns under an advertiser account."""

    RESOURCE_NAME = "campaign"

    def list(
        self,
        advertiser_id: str,
        filtering: Optional[Mapping[str, Any]] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
        **other_params: Any,
    ):
        """Fetch one page of campaigns of an advertiser.

        :param advertiser_id: Advertiser ID
        :param filtering: Filter conditions, e.g. ``{"campaign_ids": [...]}``
        :param page_size: Page size, maximum 100
        :param page: Page number
        :param callback: Called with each campaign
        :return: Campaign list, or the response envelope when a callback is given
        """
        return super().list(
            filtering=filtering,
            page_size=page_size,
            page=page,
            callback=callback,
            advertiser_id=advertiser_id,
            **other_params,
        )

    def get(self, advertiser_id: str, campaign_id: str) -> Optional[Dict[str, Any]]:
        """Get a campaign by ID.

        :param advertiser_id: Advertiser ID
        :param campaign_id: Campaign ID
        :return: Campaign data, or None if not found
        """
        return super().get(advertiser_id, campaign_id)
