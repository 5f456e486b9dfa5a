"""Ad resource."""

from typing import Any, Dict, List, Mapping, Optional

from ..models.base_models import unwrap_data
from .base import ItemCallback
from .crud import CrudResource
from .registry import ResourceType, register_resource


@register_resource(ResourceType.AD)
class Ad(CrudResource):
    """Ads within an ad group.

    Ads are created in batches of creatives rather than from a flat
    parameter mapping, so :meth:`create` takes the ad group and a list of
    creative objects.
    """

    RESOURCE_NAME = "ad"

    def create(
        self,
        advertiser_id: str,
        adgroup_id: str,
        creatives: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Create ads from a list of creatives.

        :param advertiser_id: Advertiser ID
        :param adgroup_id: Ad group the ads belong to
        :param creatives: Creative objects, one per ad
        :return: ``data`` of the response, with the created ad IDs
        """
        params = {
            "advertiser_id": advertiser_id,
            "adgroup_id": adgroup_id,
            "creatives": creatives,
        }
        response = self._http_post(self.CREATE_PATH, params)
        return unwrap_data(response)

    def create_single(
        self, advertiser_id: str, adgroup_id: str, creative: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Create a single ad."""
        return self.create(advertiser_id, adgroup_id, [creative])

    def create_aco(
        self,
        advertiser_id: str,
        adgroup_id: str,
        creatives: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Create Smart Creative (ACO) ads.

        :param advertiser_id: Advertiser ID
        :param adgroup_id: Ad group ID
        :param creatives: Creative material objects
        :return: ``data`` of the response
        """
        params = {
            "advertiser_id": advertiser_id,
            "adgroup_id": adgroup_id,
            "creatives": creatives,
        }
        response = self._http_post("aco/create/", params)
        return unwrap_data(response)

    def list(
        self,
        advertiser_id: str,
        campaign_id: Optional[str] = None,
        adgroup_id: Optional[str] = None,
        filtering: Optional[Mapping[str, Any]] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
        **other_params: Any,
    ):
        """Fetch one page of ads, optionally within a campaign or ad group.

        :param advertiser_id: Advertiser ID
        :param campaign_id: Restrict the list to this campaign
        :param adgroup_id: Restrict the list to this ad group
        :param filtering: Additional filter conditions
        :param page_size: Page size, maximum 100
        :param page: Page number
        :param callback: Called with each ad
        :return: Ad list, or the response envelope when a callback is given
        """
        filtering = dict(filtering or {})
        if campaign_id:
            filtering["campaign_ids"] = [campaign_id]
        if adgroup_id:
            filtering["adgroup_ids"] = [adgroup_id]
        return super().list(
            filtering=filtering,
            page_size=page_size,
            page=page,
            callback=callback,
            advertiser_id=advertiser_id,
            **other_params,
        )
