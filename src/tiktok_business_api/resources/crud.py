"""Generic CRUD operations shared by entity resources.

Campaigns, ad groups, ads and similar entities expose the same endpoint
family under their base path (``create/``, ``get/``, ``update/``,
``delete/``, ``status/update/``) and name their id parameters after the
resource. :class:`CrudResource` implements those operations once;
subclasses only declare their name and, where the API differs, their
id fields and paths.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..models.base_models import unwrap_data
from .base import MAX_PAGE_SIZE, BaseResource, ItemCallback

logger = logging.getLogger(__name__)

DEFAULT_OWNER_FIELD = "advertiser_id"


class CrudResource(BaseResource):
    """Base class for resources with the standard CRUD endpoints.

    Class attributes:

    - ``RESOURCE_NAME``: path segment and id-field stem
    - ``ID_FIELD`` / ``IDS_FIELD``: override ``<name>_id`` / ``<name>_ids``
    - ``CREATE_PATH``, ``LIST_PATH``, ``UPDATE_PATH``, ``DELETE_PATH``,
      ``STATUS_UPDATE_PATH``: endpoint paths relative to the base path
    """

    ID_FIELD: Optional[str] = None
    IDS_FIELD: Optional[str] = None

    CREATE_PATH = "create/"
    LIST_PATH = "get/"
    UPDATE_PATH = "update/"
    DELETE_PATH = "delete/"
    STATUS_UPDATE_PATH = "status/update/"

    @property
    def id_field(self) -> str:
        """Name of the single-id parameter, e.g. ``campaign_id``."""
        return self.ID_FIELD or f"{self.resource_name}_id"

    @property
    def ids_field(self) -> str:
        """Name of the id-list parameter, e.g. ``campaign_ids``."""
        return self.IDS_FIELD or f"{self.resource_name}_ids"

    def create(
        self,
        owner_id: str,
        params: Optional[Mapping[str, Any]] = None,
        owner_field: str = DEFAULT_OWNER_FIELD,
    ) -> Dict[str, Any]:
        """Create a new entity.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param params: Entity parameters
        :param owner_field: Parameter name for the owner ID
        :return: ``data`` of the response, typically holding the new ID
        """
        request_params = {**(params or {}), owner_field: owner_id}
        response = self._http_post(self.CREATE_PATH, request_params)
        return unwrap_data(response)

    def _list_request(
        self,
        filtering: Optional[Mapping[str, Any]],
        page_size: Optional[int],
        page: Optional[int],
        other_params: Mapping[str, Any],
    ) -> Dict[str, Any]:
        request_params = dict(other_params)
        request_params["filtering"] = json.dumps(dict(filtering or {}))
        request_params["page_size"] = min(page_size or MAX_PAGE_SIZE, MAX_PAGE_SIZE)
        request_params["page"] = page or 1
        return self._http_get(self.LIST_PATH, request_params)

    def list(
        self,
        filtering: Optional[Mapping[str, Any]] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
        callback: Optional[ItemCallback] = None,
        **other_params: Any,
    ):
        """Fetch one page of entities.

        ``filtering`` is sent as an embedded JSON string. ``page_size`` is
        capped at the server maximum of 100.

        :param filtering: Filter conditions
        :param page_size: Page size, default and maximum 100
        :param page: Page number, default 1
        :param callback: Called with each item; the full envelope is then returned
        :param other_params: Additional query parameters (e.g. ``advertiser_id``)
        :return: Item list, or the response envelope when a callback is given
        """
        response = self._list_request(filtering, page_size, page, other_params)
        data = unwrap_data(response) or {}

        if callback is not None:
            for item in data.get("list") or []:
                callback(item)
            return response

        return data.get("list") or []

    def list_all(
        self,
        owner_id: str,
        params: Optional[Mapping[str, Any]] = None,
        owner_field: str = DEFAULT_OWNER_FIELD,
        list_key: str = "list",
        filtering: Optional[Mapping[str, Any]] = None,
        callback: Optional[ItemCallback] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """List all entities, following pagination to the last page.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param params: Additional query parameters; ``page_size`` defaults to 10
        :param owner_field: Parameter name for the owner ID
        :param list_key: Key of the item list inside ``data``
        :param filtering: Filter conditions
        :param callback: Called with each item instead of collecting them
        :return: All entities, or None when a callback was given
        """
        request_params = {**(params or {}), owner_field: owner_id}
        page_size = request_params.pop("page_size", None)
        if filtering:
            request_params["filtering"] = json.dumps(dict(filtering))

        return self.paginate(
            self.LIST_PATH,
            request_params,
            data_key=list_key,
            callback=callback,
            page_size=page_size,
        )

    def get(
        self,
        owner_id: str,
        resource_id: str,
        owner_field: str = DEFAULT_OWNER_FIELD,
    ) -> Optional[Dict[str, Any]]:
        """Get a single entity by ID.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param resource_id: Entity ID
        :param owner_field: Parameter name for the owner ID
        :return: The entity, or None if it does not exist
        """
        response = self._list_request(
            {self.ids_field: [resource_id]}, None, None, {owner_field: owner_id}
        )
        items = (unwrap_data(response) or {}).get("list") or []
        return items[0] if items else None

    def update(
        self,
        owner_id: str,
        resource_id: str,
        params: Optional[Mapping[str, Any]] = None,
        owner_field: str = DEFAULT_OWNER_FIELD,
    ) -> Dict[str, Any]:
        """Update an entity.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param resource_id: Entity ID
        :param params: Fields to update
        :param owner_field: Parameter name for the owner ID
        :return: ``data`` of the response
        """
        request_params = {
            **(params or {}),
            owner_field: owner_id,
            self.id_field: resource_id,
        }
        response = self._http_post(self.UPDATE_PATH, request_params)
        return unwrap_data(response)

    def update_status(
        self,
        owner_id: str,
        resource_id: str,
        status: str,
        owner_field: str = DEFAULT_OWNER_FIELD,
    ) -> Dict[str, Any]:
        """Change the operation status of an entity.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param resource_id: Entity ID
        :param status: New status, e.g. ``ENABLE``, ``DISABLE`` or ``DELETE``
        :param owner_field: Parameter name for the owner ID
        :return: ``data`` of the response
        """
        params = {
            owner_field: owner_id,
            self.ids_field: [resource_id],
            "operation_status": status,
        }
        response = self._http_post(self.STATUS_UPDATE_PATH, params)
        return unwrap_data(response)

    def delete(
        self,
        owner_id: str,
        resource_id: str,
        owner_field: str = DEFAULT_OWNER_FIELD,
    ) -> Dict[str, Any]:
        """Delete an entity.

        :param owner_id: ID of the owner, usually the advertiser ID
        :param resource_id: Entity ID
        :param owner_field: Parameter name for the owner ID
        :return: ``data`` of the response
        """
        params = {owner_field: owner_id, self.ids_field: [resource_id]}
        response = self._http_post(self.DELETE_PATH, params)
        return unwrap_data(response)
