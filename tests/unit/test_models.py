"""Unit tests for pagination and option models."""

import pytest

from tiktok_business_api.exceptions import ConfigurationError
from tiktok_business_api.models import (
    ImageSearchOptions,
    ImageUploadOptions,
    PageInfo,
    UploadType,
    VideoUploadOptions,
    build_options,
    unwrap_data,
)


class TestPageInfo:
    """Test the pagination termination rule."""

    def test_from_data(self):
        info = PageInfo.from_data({"page_info": {"page": 2, "total_page": 5, "extra": "x"}})

        assert info.page == 2
        assert info.total_page == 5

    def test_missing_page_info(self):
        assert PageInfo.from_data({"list": []}) == PageInfo()
        assert PageInfo.from_data(None) == PageInfo()

    def test_has_more_wins(self):
        assert PageInfo(has_more=False, total_page=10).has_next_page(1, 10) is False
        assert PageInfo(has_more=True, total_page=1).has_next_page(1, 10) is True

    def test_total_page(self):
        assert PageInfo(total_page=3).has_next_page(2, 10) is True
        assert PageInfo(total_page=3).has_next_page(3, 10) is False

    def test_total_number(self):
        assert PageInfo(total_number=25).has_next_page(2, 10) is True
        assert PageInfo(total_number=20).has_next_page(2, 10) is False

    def test_nothing_known(self):
        assert PageInfo().has_next_page(1, 10) is False


def test_unwrap_data():
    assert unwrap_data({"code": 0, "data": {"a": 1}}) == {"a": 1}
    assert unwrap_data("text") is None


class TestBuildOptions:
    """Test validation of upload and search options."""

    def test_overrides_win(self):
        base = ImageUploadOptions(upload_type=UploadType.UPLOAD_BY_URL, image_url="a")

        opts = build_options(ImageUploadOptions, base, {"image_url": "b"})

        assert opts.upload_type == UploadType.UPLOAD_BY_URL
        assert opts.image_url == "b"

    def test_error_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options(VideoUploadOptions, None, {"upload_type": "UPLOAD_BY_URL"})

        assert str(exc_info.value) == "video_url is required for UPLOAD_BY_URL"
        assert exc_info.value.setting is None

    def test_video_flags(self):
        opts = build_options(
            VideoUploadOptions,
            None,
            {"video_url": "u", "upload_type": "UPLOAD_BY_URL", "is_third_party": False},
        )

        assert opts.extra_flags() == {"is_third_party": False}

    def test_search_page_size_bounds(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options(ImageSearchOptions, None, {"page_size": 101})

        assert exc_info.value.setting == "page_size"

    def test_search_filtering(self):
        opts = ImageSearchOptions(image_ids=["1"], page=3)

        assert opts.to_filtering() == {"image_ids": ["1"]}


def test_malformed_page_info_is_ignored(caplog):
    info = PageInfo.from_data({"page_info": {"has_more": "unknown", "total_page": "many"}})

    assert info == PageInfo()
    assert info.has_next_page(1, 10) is False
    assert "Ignoring malformed page_info" in caplog.text
