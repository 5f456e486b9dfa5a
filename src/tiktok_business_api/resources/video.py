"""Video material resource."""

import logging
from typing import Any, Dict, List, Optional

from ..models.base_models import unwrap_data
from ..models.upload import (
    UploadType,
    VideoSearchOptions,
    VideoUploadOptions,
    build_options,
)
from ..utils.files import FilePart, file_signature
from ..utils.http import MULTIPART_FORM_DATA
from .base import BaseResource, ItemCallback
from .registry import ResourceType, register_resource

logger = logging.getLogger(__name__)


@register_resource(ResourceType.VIDEO)
class Video(BaseResource):
    """Ad videos in the advertiser's asset library."""

    RESOURCE_NAME = "file/video/ad"

    def upload(
        self,
        advertiser_id: str,
        options: Optional[VideoUploadOptions] = None,
        **kwargs: Any,
    ) -> Any:
        """Upload a video.

        Supports every :class:`UploadType`, including ``UPLOAD_BY_VIDEO_ID``
        which copies an existing video.

        :param advertiser_id: Advertiser ID
        :param options: Upload options
        :param kwargs: Upload options as keywords (``upload_type``, ``video_file``, ...)
        :return: ``data`` of the response, describing the uploaded video(s)
        :raises ConfigurationError: If the options are invalid; nothing is sent
        """
        opts = build_options(VideoUploadOptions, options, kwargs)

        params: Dict[str, Any] = {
            "advertiser_id": advertiser_id,
            "upload_type": opts.upload_type.value,
            **opts.extra_flags(),
        }
        if opts.file_name:
            params["file_name"] = opts.file_name

        headers = None
        if opts.upload_type == UploadType.UPLOAD_BY_FILE:
            params["video_signature"] = file_signature(
                opts.video_file, opts.video_signature, "video_file"
            )
            params["video_file"] = FilePart.from_file(opts.video_file, filename=opts.file_name)
            headers = {"Content-Type": MULTIPART_FORM_DATA}
        elif opts.upload_type == UploadType.UPLOAD_BY_URL:
            params["video_url"] = opts.video_url
        elif opts.upload_type == UploadType.UPLOAD_BY_FILE_ID:
            params["file_id"] = opts.file_id
        else:
            params["video_id"] = opts.video_id

        logger.debug(f"Uploading video for advertiser {advertiser_id} ({opts.upload_type.value})")
        response = self._http_post("upload/", params, headers)
        return unwrap_data(response)

    def get_info(self, advertiser_id: str, video_ids: List[str]) -> List[Dict[str, Any]]:
        """Get info about videos.

        :param advertiser_id: Advertiser ID
        :param video_ids: Video IDs
        :return: Video info list
        """
        params = {"advertiser_id": advertiser_id, "video_ids": list(video_ids)}
        response = self._http_get("info/", params)
        return (unwrap_data(response) or {}).get("list") or []

    def search(
        self,
        advertiser_id: str,
        options: Optional[VideoSearchOptions] = None,
        callback: Optional[ItemCallback] = None,
        **kwargs: Any,
    ):
        """Search videos in the asset library.

        :param advertiser_id: Advertiser ID
        :param options: Search options (page, page_size and filters)
        :param callback: Called with each video; ``data`` is then returned
        :param kwargs: Search options as keywords
        :return: Video list, or the response ``data`` when a callback is given
        :raises ConfigurationError: If the options are invalid
        """
        opts = build_options(VideoSearchOptions, options, kwargs)
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
        video_list = data.get("list") or []

        if callback is not None:
            for video in video_list:
                callback(video)
            return data
        return video_list
