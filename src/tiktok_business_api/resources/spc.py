"""Smart+ campaign resource."""

from typing import Any, Dict, Mapping, Optional

from .base import ItemCallback
from .crud import CrudResource
from .registry import ResourceType, register_resource


@register_resource(ResourceType.SPC)
class Spc(CrudResource):
    """Smart+ campaigns, served under ``campaign/spc/``.

    Their id parameters use the campaign vocabulary.
    """

    RESOURCE_NAME = "campaign/spc"
    ID_FIELD = "campaign_id"
    IDS_FIELD = "campaign_ids"

    def list(
        self,
        advertiser_id: str,
        filtering: Optional[Mapping[str, Any]] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
        **other_params: Any,
    ):
        """Fetch one page of Smart+ campaigns."""
        return super().list(
            filtering=filtering,
            page_size=page_size,
            page=page,
            callback=callback,
            advertiser_id=advertiser_id,
            **other_params,
        )

    def get(self, advertiser_id: str, campaign_id: str) -> Optional[Dict[str, Any]]:
        """Get a Smart+ campaign by ID.

        This endpoint takes ``campaign_ids`` as a top-level parameter
        instead of a filter.
        """
        items = self.list(advertiser_id, campaign_ids=[campaign_id])
        return items[0] if items else None

    def update(self, advertiser_id: str, campaign_id: str, **params: Any) -> Dict[str, Any]:
        """Update a Smart+ campaign.

        :param advertiser_id: Advertiser ID
        :param campaign_id: Campaign ID
        :param params: Fields to update
        :return: ``data`` of the response
        """
        return super().update(advertiser_id, campaign_id, params)
