"""Identity resource.

Identities are the display personas (name and avatar) ads are published
under: custom users created through the API, or TikTok accounts
authorized by the advertiser or a Business Center.
"""

from typing import Any, Dict, List, Optional

from ..exceptions import ConfigurationError
from ..models.base_models import unwrap_data
from .base import BaseResource, ItemCallback
from .registry import ResourceType, register_resource

IDENTITY_TYPES = ("CUSTOMIZED_USER", "AUTH_CODE", "TT_USER", "BC_AUTH_TT")


def check_identity_type(
    identity_type: Optional[str], identity_authorized_bc_id: Optional[str]
) -> None:
    """Validate an identity type and its Business Center requirement.

    :raises ConfigurationError: On an unknown type, or ``BC_AUTH_TT`` without a BC ID
    """
    if identity_type is None:
        return
    if identity_type not in IDENTITY_TYPES:
        raise ConfigurationError(
            f"Invalid identity_type: {identity_type}", setting="identity_type"
        )
    if identity_type == "BC_AUTH_TT" and not identity_authorized_bc_id:
        raise ConfigurationError(
            "identity_authorized_bc_id is required for BC_AUTH_TT",
            setting="identity_authorized_bc_id",
        )


@register_resource(ResourceType.IDENTITY)
class Identity(BaseResource):
    """Identities available to an advertiser."""

    RESOURCE_NAME = "identity"
    LIST_KEY = "identity_list"

    def _list_params(
        self,
        advertiser_id: str,
        identity_type: Optional[str],
        identity_authorized_bc_id: Optional[str],
        filtering: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        check_identity_type(identity_type, identity_authorized_bc_id)
        params: Dict[str, Any] = {"advertiser_id": advertiser_id}
        if identity_type:
            params["identity_type"] = identity_type
        if identity_authorized_bc_id:
            params["identity_authorized_bc_id"] = identity_authorized_bc_id
        if filtering:
            params["filtering"] = filtering
        return params

    def list(
        self,
        advertiser_id: str,
        identity_type: Optional[str] = None,
        identity_authorized_bc_id: Optional[str] = None,
        filtering: Optional[Dict[str, Any]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
    ) -> Dict[str, Any]:
        """Get one page of identities.

        :param advertiser_id: Advertiser ID
        :param identity_type: One of ``CUSTOMIZED_USER``, ``AUTH_CODE``, ``TT_USER``, ``BC_AUTH_TT``
        :param identity_authorized_bc_id: Business Center ID, required for ``BC_AUTH_TT``
        :param filtering: Filter conditions (only for ``CUSTOMIZED_USER`` or no type)
        :param page: Page number
        :param page_size: Page size
        :param callback: Called with each identity
        :return: Response ``data`` with ``identity_list`` and ``page_info``
        """
        params = self._list_params(
            advertiser_id, identity_type, identity_authorized_bc_id, filtering
        )
        if page:
            params["page"] = page
        if page_size:
            params["page_size"] = page_size

        response = self._http_get("get/", params)
        data = unwrap_data(response) or {}

        if callback is not None:
            for identity in data.get(self.LIST_KEY) or []:
                callback(identity)
        return data

    def list_all(
        self,
        advertiser_id: str,
        identity_type: Optional[str] = None,
        identity_authorized_bc_id: Optional[str] = None,
        filtering: Optional[Dict[str, Any]] = None,
        page_size: int = 100,
        callback: Optional[ItemCallback] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """List all identities with automatic pagination.

        :param advertiser_id: Advertiser ID
        :param identity_type: Identity type filter
        :param identity_authorized_bc_id: Business Center ID for ``BC_AUTH_TT``
        :param filtering: Filter conditions
        :param page_size: Page size, default 100
        :param callback: Called with each identity instead of collecting them
        :return: All identities, or None when a callback was given
        """
        params = self._list_params(
            advertiser_id, identity_type, identity_authorized_bc_id, filtering
        )
        return self.paginate(
            "get/", params, data_key=self.LIST_KEY, callback=callback, page_size=page_size
        )

    def get_info(
        self,
        advertiser_id: str,
        identity_id: str,
        identity_type: str,
        identity_authorized_bc_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Get information about a specific identity.

        :param advertiser_id: Advertiser ID
        :param identity_id: Identity ID
        :param identity_type: Identity type
        :param identity_authorized_bc_id: Business Center ID, required for ``BC_AUTH_TT``
        :return: Identity information
        """
        check_identity_type(identity_type, identity_authorized_bc_id)
        params = {
            "advertiser_id": advertiser_id,
            "identity_id": identity_id,
            "identity_type": identity_type,
        }
        if identity_authorized_bc_id:
            params["identity_authorized_bc_id"] = identity_authorized_bc_id

        response = self._http_get("info/", params)
        return (unwrap_data(response) or {}).get("identity_info")

    def create(
        self,
        advertiser_id: str,
        display_name: str,
        image_uri: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a custom user identity.

        :param advertiser_id: Advertiser ID
        :param display_name: Display name, at most 100 characters
        :param image_uri: ID of the avatar image
        :return: ``data`` of the response, including ``identity_id``
        """
        params = {"advertiser_id": advertiser_id, "display_name": display_name}
        if image_uri:
            params["image_uri"] = image_uri

        response = self._http_post("create/", params)
        return unwrap_data(response)
