"""Option models for material upload and search endpoints.

Upload endpoints accept different required fields depending on the
``upload_type``. The models below validate a combination before any
request is built; :func:`build_options` turns validation failures into
:class:`~tiktok_business_api.exceptions.ConfigurationError`.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..exceptions import ConfigurationError

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class UploadType(str, Enum):
    """How a material is supplied to an upload endpoint."""

    UPLOAD_BY_FILE = "UPLOAD_BY_FILE"
    UPLOAD_BY_URL = "UPLOAD_BY_URL"
    UPLOAD_BY_FILE_ID = "UPLOAD_BY_FILE_ID"
    UPLOAD_BY_VIDEO_ID = "UPLOAD_BY_VIDEO_ID"


class ImageUploadOptions(BaseModel):
    """Options for ``file/image/ad/upload/``.

    :param upload_type: Upload method; ``UPLOAD_BY_VIDEO_ID`` is not accepted
    :param file_name: Image file name shown in the asset library
    :param image_file: Path, binary file object or bytes (``UPLOAD_BY_FILE``)
    :param image_signature: MD5 of the file; computed when omitted
    :param image_url: Public image URL (``UPLOAD_BY_URL``)
    :param file_id: ID of a previously uploaded file (``UPLOAD_BY_FILE_ID``)
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    upload_type: UploadType = UploadType.UPLOAD_BY_FILE
    file_name: Optional[str] = None
    image_file: Optional[Any] = None
    image_signature: Optional[str] = None
    image_url: Optional[str] = None
    file_id: Optional[str] = None

    @model_validator(mode="after")
    def check_required_fields(self) -> "ImageUploadOptions":
        """Ensure the field required by the upload type is present."""
        if self.upload_type == UploadType.UPLOAD_BY_FILE and self.image_file is None:
            raise ValueError("image_file is required for UPLOAD_BY_FILE")
        if self.upload_type == UploadType.UPLOAD_BY_URL and not self.image_url:
            raise ValueError("image_url is required for UPLOAD_BY_URL")
        if self.upload_type == UploadType.UPLOAD_BY_FILE_ID and not self.file_id:
            raise ValueError("file_id is required for UPLOAD_BY_FILE_ID")
        if self.upload_type == UploadType.UPLOAD_BY_VIDEO_ID:
            raise ValueError("Invalid upload_type for images: UPLOAD_BY_VIDEO_ID")
        return self


class VideoUploadOptions(BaseModel):
    """Options for ``file/video/ad/upload/``.

    :param upload_type: Upload method
    :param file_name: Video file name shown in the asset library
    :param video_file: Path, binary file object or bytes (``UPLOAD_BY_FILE``)
    :param video_signature: MD5 of the file; computed when omitted
    :param video_url: Public video URL (``UPLOAD_BY_URL``)
    :param file_id: ID of a previously uploaded file (``UPLOAD_BY_FILE_ID``)
    :param video_id: ID of an existing video to copy (``UPLOAD_BY_VIDEO_ID``)
    :param is_third_party: Whether the video is third-party content
    :param flaw_detect: Ask the server to detect quality flaws
    :param auto_fix_enabled: Let the server fix detected flaws
    :param auto_bind_enabled: Bind the fixed video to the ads using it
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    upload_type: UploadType = UploadType.UPLOAD_BY_FILE
    file_name: Optional[str] = None
    video_file: Optional[Any] = None
    video_signature: Optional[str] = None
    video_url: Optional[str] = None
    file_id: Optional[str] = None
    video_id: Optional[str] = None
    is_third_party: Optional[bool] = None
    flaw_detect: Optional[bool] = None
    auto_fix_enabled: Optional[bool] = None
    auto_bind_enabled: Optional[bool] = None

    @model_validator(mode="after")
    def check_required_fields(self) -> "VideoUploadOptions":
        """Ensure the field required by the upload type is present."""
        required = {
            UploadType.UPLOAD_BY_FILE: ("video_file", self.video_file),
            UploadType.UPLOAD_BY_URL: ("video_url", self.video_url),
            UploadType.UPLOAD_BY_FILE_ID: ("file_id", self.file_id),
            UploadType.UPLOAD_BY_VIDEO_ID: ("video_id", self.video_id),
        }
        field, value = required[self.upload_type]
        if value is None or value == "":
            raise ValueError(f"{field} is required for {self.upload_type.value}")
        return self

    def extra_flags(self) -> Dict[str, Any]:
        """Return the optional boolean flags that were set."""
        flags = ("is_third_party", "flaw_detect", "auto_fix_enabled", "auto_bind_enabled")
        return {name: getattr(self, name) for name in flags if getattr(self, name) is not None}


class ImageSearchOptions(BaseModel):
    """Query options for ``file/image/ad/search/``."""

    model_config = ConfigDict(extra="forbid")

    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=100)
    image_ids: Optional[List[str]] = None
    material_ids: Optional[List[str]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    signature: Optional[str] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    displayable: Optional[bool] = None

    def to_filtering(self) -> Dict[str, Any]:
        """Return the set filter fields as a ``filtering`` mapping."""
        return self.model_dump(exclude={"page", "page_size"}, exclude_none=True)


class VideoSearchOptions(BaseModel):
    """Query options for ``file/video/ad/search/``."""

    model_config = ConfigDict(extra="forbid")

    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=100)
    video_ids: Optional[List[str]] = None
    material_ids: Optional[List[str]] = None
    video_name: Optional[str] = None
    video_material_sources: Optional[List[str]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    def to_filtering(self) -> Dict[str, Any]:
        """Return the set filter fields as a ``filtering`` mapping."""
        return self.model_dump(exclude={"page", "page_size"}, exclude_none=True)


def build_options(
    model: Type[OptionsT],
    options: Optional[OptionsT] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> OptionsT:
    """Validate caller options into ``model``.

    Accepts either a ready model instance, keyword overrides, or both (the
    overrides win).

    :param model: Options model class
    :param options: Optional pre-built options instance
    :param overrides: Keyword options supplied by the caller
    :return: Validated options
    :raises ConfigurationError: If the combination is invalid
    """
    values: Dict[str, Any] = {}
    if options is not None:
        # copied unserialized so file objects stay usable
        values.update({name: getattr(options, name) for name in options.model_fields_set})
    if overrides:
        values.update(overrides)
    try:
        return model.model_validate(values)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or None
        message = first.get("msg", str(e))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        raise ConfigurationError(message, setting=location) from e
