"""Image material resource."""

import logging
from typing import Any, Dict, List, Optional

from ..models.base_models import unwrap_data
from ..models.upload import (
    ImageSearchOptions,
    ImageUploadOptions,
    UploadType,
    build_options,
)
from ..utils.files import FilePart, file_signature
from ..utils.http import MULTIPART_FORM_DATA
from .base import BaseResource, ItemCallback
from .registry import ResourceType, register_resource

logger = logging.getLogger(__name__)


@register_resource(ResourceType.IMAGE)
class Image(BaseResource):
    """Ad images in the advertiser's asset library."""

    RESOURCE_NAME = "file/image/ad"

    def upload(
        self,
        advertiser_id: str,
        options: Optional[ImageUploadOptions] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Upload an image.

        Options can be passed as an :class:`ImageUploadOptions` instance,
        as keyword arguments, or both. For ``UPLOAD_BY_FILE`` the MD5
        signature is computed when not supplied and the MIME type is
        derived from the file name.

        :param advertiser_id: Advertiser ID
        :param options: Upload options
        :param kwargs: Upload options as keywords (``upload_type``, ``image_file``, ...)
        :return: ``data`` of the response, including ``image_id``
        :raises ConfigurationError: If the options are invalid; nothing is sent
        """
        opts = build_options(ImageUploadOptions, options, kwargs)

        params: Dict[str, Any] = {
            "advertiser_id": advertiser_id,
            "upload_type": opts.upload_type.value,
        }
        if opts.file_name:
            params["file_name"] = opts.file_name

        headers = None
        if opts.upload_type == UploadType.UPLOAD_BY_FILE:
            params["image_signature"] = file_signature(
                opts.image_file, opts.image_signature, "image_file"
            )
            params["image_file"] = FilePart.from_file(opts.image_file, filename=opts.file_name)
            headers = {"Content-Type": MULTIPART_FORM_DATA}
        elif opts.upload_type == UploadType.UPLOAD_BY_URL:
            params["image_url"] = opts.image_url
        else:
            params["file_id"] = opts.file_id

        logger.debug(f"Uploading image for advertiser {advertiser_id} ({opts.upload_type.value})")
        response = self._http_post("upload/", params, headers)
        return unwrap_data(response)

    def get_info(self, advertiser_id: str, image_id: str) -> Optional[Dict[str, Any]]:
        """Get image info by image ID.

        :param advertiser_id: Advertiser ID
        :param image_id: Image ID
        :return: Image info, or None if not found
        """
        params = {"advertiser_id": advertiser_id, "image_ids": [image_id]}
        response = self._http_get("info/", params)
        images = (unwrap_data(response) or {}).get("list") or []
        return images[0] if images else None

    def search(
        self,
        advertiser_id: str,
        options: Optional[ImageSearchOptions] = None,
        callback: Optional[ItemCallback] = None,
        **kwargs: Any,
    ):
        """Search images in the asset library.

        :param advertiser_id: Advertiser ID
        :param options: Search options (page, page_size and filters)
        :param callback: Called with each image; ``data`` is then returned
        :param kwargs: Search options as keywords
        :return: Image list, or the response ``data`` when a callback is given
        :raises ConfigurationError: If the options are invalid
        """
        opts = build_options(ImageSearchOptions, options, kwargs)
        params: Dict[str, Any] = {
            "advertiser_id": advertiser_id,
            "page": opts.page,
            "page_size": opts.page_size,
        }
        filtering = opts.to_filtering()
        if filtering:
            params["filtering"] = filtering

        response = self._http_get("search/", params)
        data = unwrap_data(response) or {}
        image_list = data.get("list") or []

        if callback is not None:
            for image in image_list:
                callback(image)
            return data
        return image_list

    def check_name(self, advertiser_id: str, file_names: List[str]) -> Dict[str, Any]:
        """Check whether image file names are already in use.

        :param advertiser_id: Advertiser ID
        :param file_names: File names to check
        :return: Result with the availability of each name
        """
        params = {"advertiser_id": advertiser_id, "file_names": file_names}
        response = self.client.request("POST", self._api_path("file/name/check/"), params)
        return unwrap_data(response)
