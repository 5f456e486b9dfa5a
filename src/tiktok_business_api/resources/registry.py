"""Registry mapping resource tags to resource classes.

Resources register themselves with :func:`register_resource`, and the
client instantiates them through :class:`ResourceRegistry`.

Examples
--------
.. code-block:: python

   from tiktok_business_api.resources.registry import ResourceType, register_resource
   from tiktok_business_api.resources.crud import CrudResource

   @register_resource(ResourceType.CAMPAIGN)
   class Campaign(CrudResource):
       RESOURCE_NAME = "campaign"
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Type, Union

if TYPE_CHECKING:
    from ..client import Client
    from .base import BaseResource

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    """Resources exposed by the client."""

    CAMPAIGN = "campaign"
    ADGROUP = "adgroup"
    AD = "ad"
    SPC = "spc"
    IMAGE = "image"
    VIDEO = "video"
    IDENTITY = "identity"
    ACCOUNT = "account"
    REPORTING = "reporting"

    @classmethod
    def parse(cls, value: Union["ResourceType", str]) -> "ResourceType":
        """Resolve a tag from an enum member or its string value.

        :param value: Enum member or string such as ``"campaign"``
        :return: Matching resource type
        :raises ValueError: If the value names no resource
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown resource: '{value}'. Available resources: {available}"
            ) from None


class ResourceRegistry:
    """Registry for resource classes.

    Manage registration, lookup, and instantiation of resources.
    """

    _resources: Dict[ResourceType, Type["BaseResource"]] = {}

    @classmethod
    def register(
        cls, resource_type: ResourceType, resource_class: Type["BaseResource"]
    ) -> None:
        """Register a resource class.

        :param resource_type: Tag the class is registered under.
        :param resource_class: Resource class to register.
        :raises ValueError: If the tag is already registered.
        """
        existing = cls._resources.get(resource_type)
        if existing is not None and existing is not resource_class:
            raise ValueError(f"Resource '{resource_type.value}' is already registered")

        cls._resources[resource_type] = resource_class
        logger.debug(
            f"Registered resource: {resource_type.value} -> {resource_class.__name__}"
        )

    @classmethod
    def get_resource_class(
        cls, resource_type: Union[ResourceType, str]
    ) -> Optional[Type["BaseResource"]]:
        """Return a registered resource class.

        :param resource_type: Tag to look up.
        :return: Resource class if registered, otherwise None.
        """
        return cls._resources.get(ResourceType.parse(resource_type))

    @classmethod
    def create_resource(
        cls, resource_type: Union[ResourceType, str], client: "Client"
    ) -> "BaseResource":
        """Create a resource instance bound to ``client``.

        :param resource_type: Tag of the resource to create.
        :param client: Client the resource sends requests through.
        :return: Resource instance.
        :raises ValueError: If the tag is unknown or not registered.
        """
        resource_class = cls.get_resource_class(resource_type)
        if not resource_class:
            available = ", ".join(t.value for t in cls._resources)
            raise ValueError(
                f"Resource '{resource_type}' is not registered. "
                f"Registered resources: {available or 'none'}"
            )
        return resource_class(client)

    @classmethod
    def list_resources(cls) -> Dict[ResourceType, Type["BaseResource"]]:
        """List all registered resources.

        :return: Mapping of tags to classes.
        """
        return cls._resources.copy()


def register_resource(resource_type: ResourceType):
    """Return a decorator to auto-register a resource class.

    :param resource_type: Tag for the resource.
    :return: Decorator function.
    """

    def decorator(resource_class):
        ResourceRegistry.register(resource_type, resource_class)
        return resource_class

    return decorator
