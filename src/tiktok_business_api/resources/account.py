"""Advertiser account resource."""

from typing import Any, Dict, List, Optional

from ..models.base_models import unwrap_data
from .base import BaseResource, ItemCallback
from .registry import ResourceType, register_resource


@register_resource(ResourceType.ACCOUNT)
class Account(BaseResource):
    """Advertiser accounts reachable with the current access token."""

    RESOURCE_NAME = "advertiser"

    def list(
        self,
        app_id: Optional[str] = None,
        secret: Optional[str] = None,
        callback: Optional[ItemCallback] = None,
    ):
        """List the advertiser accounts authorized for the access token.

        :param app_id: App ID; defaults to the configured one
        :param secret: App secret; defaults to the configured one
        :param callback: Called with each account; the envelope is then returned
        :return: Account list, or the response envelope when a callback is given
        """
        params = {
            "app_id": app_id or self.client.config.app_id,
            "secret": secret or self.client.config.secret,
        }
        response = self.client.request("GET", self._api_path("oauth2/advertiser/get/"), params)
        accounts = (unwrap_data(response) or {}).get("list") or []

        if callback is not None:
            for account in accounts:
                callback(account)
            return response
        return accounts

    def details(
        self, advertiser_ids: List[str], fields: Optional[List[str]] = None
    ) -> List[Dict[str, Any]]:
        """Get details of advertiser accounts.

        :param advertiser_ids: Advertiser IDs
        :param fields: Fields to return; the API default set when omitted
        :return: Account details
        """
        params: Dict[str, Any] = {"advertiser_ids": list(advertiser_ids)}
        if fields:
            params["fields"] = list(fields)

        response = self._http_get("info/", params)
        return (unwrap_data(response) or {}).get("list") or []
