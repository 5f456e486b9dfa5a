"""Ad group resource."""

from typing import Any, Dict, Mapping, Optional

from ..models.base_models import unwrap_data
from .base import ItemCallback
from .crud import CrudResource
from .registry import ResourceType, register_resource


@register_resource(ResourceType.ADGROUP)
class Adgroup(CrudResource):
    """Ad groups, the targeting and budget layer below campaigns."""

    RESOURCE_NAME = "adgroup"
    ID_FIELD = "adgroup_id"
    IDS_FIELD = "adgroup_ids"

    def list(
        self,
        advertiser_id: str,
        campaign_id: Optional[str] = None,
        filtering: Optional[Mapping[str, Any]] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
        **other_params: Any,
    ):
        """Fetch one page of ad groups, optionally within one campaign.

        :param advertiser_id: Advertiser ID
        :param campaign_id: Restrict the list to this campaign
        :param filtering: Additional filter conditions
        :param page_size: Page size, maximum 100
        :param page: Page number
        :param callback: Called with each ad group
        :return: Ad group list, or the response envelope when a callback is given
        """
        filtering = dict(filtering or {})
        if campaign_id:
            filtering["campaign_ids"] = [campaign_id]
        return super().list(
            filtering=filtering,
            page_size=page_size,
            page=page,
            callback=callback,
            advertiser_id=advertiser_id,
            **other_params,
        )

    def estimate_audience_size(
        self, advertiser_id: str, params: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Estimate the audience size reached by a targeting setup.

        :param advertiser_id: Advertiser ID
        :param params: Targeting parameters (placements, locations, ...)
        :return: Audience size estimation
        """
        request_params = {**(params or {}), "advertiser_id": advertiser_id}
        response = self._http_post("audience_size/estimate/", request_params)
        return unwrap_data(response)
