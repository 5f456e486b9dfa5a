"""Pydantic models used by the TikTok Business API client."""

from .base_models import PageInfo, unwrap_data
from .upload import (
    ImageSearchOptions,
    ImageUploadOptions,
    UploadType,
    VideoSearchOptions,
    VideoUploadOptions,
    build_options,
)

__all__ = [
    "PageInfo",
    "unwrap_data",
    "UploadType",
    "ImageUploadOptions",
    "VideoUploadOptions",
    "ImageSearchOptions",
    "VideoSearchOptions",
    "build_options",
]
