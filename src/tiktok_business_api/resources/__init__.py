"""API resources exposed by the client.

Importing this package registers every resource class with
:class:`ResourceRegistry`.
"""

from .account import Account
from .ad import Ad
from .adgroup import Adgroup
from .base import BaseResource
from .campaign import Campaign
from .crud import CrudResource
from .identity import Identity
from .image import Image
from .registry import ResourceRegistry, ResourceType, register_resource
from .reporting import Reporting
from .spc import Spc
from .video import Video

__all__ = [
    "Account",
    "Ad",
    "Adgroup",
    "BaseResource",
    "Campaign",
    "CrudResource",
    "Identity",
    "Image",
    "Reporting",
    "ResourceRegistry",
    "ResourceType",
    "Spc",
    "Video",
    "register_resource",
]
