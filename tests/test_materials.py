"""Tests for creative materials, identities, accounts and reports."""

import hashlib
import io
import json

import pytest

from tiktok_business_api.exceptions import ConfigurationError
from tiktok_business_api.models import (
    ImageUploadOptions,
    UploadType,
    VideoSearchOptions,
    VideoUploadOptions,
)


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "banner.png"
    path.write_bytes(b"\x89PNG fake image bytes")
    return path


class TestImageUpload:
    """Test uploading images."""

    def test_upload_by_file_sends_signature_and_file(self, client, stub_api, image_path):
        stub_api.queue_data({"image_id": "img-1", "width": 100, "height": 100})

        result = client.images.upload("123", image_file=str(image_path))

        assert result["image_id"] == "img-1"
        request = stub_api.last
        assert request.url.path == "/open_api/v1.3/file/image/ad/upload/"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        expected_md5 = hashlib.md5(image_path.read_bytes()).hexdigest()
        content = request.content
        assert expected_md5.encode() in content
        assert b'name="image_signature"' in content
        assert b'name="upload_type"' in content
        assert b"UPLOAD_BY_FILE" in content
        assert b'name="image_file"; filename="banner.png"' in content
        assert b"Content-Type: image/png" in content

    def test_upload_file_object_with_options_model(self, client, stub_api):
        options = ImageUploadOptions(
            image_file=io.BytesIO(b"jpeg bytes"),
            file_name="photo.jpg",
            image_signature="given-signature",
        )

        client.images.upload("123", options)

        content = stub_api.last.content
        assert b"given-signature" in content
        assert b'filename="photo.jpg"' in content
        assert b"Content-Type: image/jpeg" in content
        assert b"jpeg bytes" in content

    def test_upload_bytes_uses_file_name_for_mime_type(self, client, stub_api):
        client.images.upload("123", image_file=b"\x89PNG raw", file_name="logo.png")

        content = stub_api.last.content
        assert b'name="image_file"; filename="logo.png"' in content
        assert b"Content-Type: image/png" in content
        assert hashlib.md5(b"\x89PNG raw").hexdigest().encode() in content

    def test_upload_missing_path(self, client, stub_api, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            client.images.upload("123", image_file=str(tmp_path / "missing.png"))

        assert exc_info.value.setting == "image_file"
        assert stub_api.requests == []

    def test_upload_missing_path_with_signature(self, client, stub_api, tmp_path):
        with pytest.raises(ConfigurationError):
            client.images.upload(
                "123", image_file=str(tmp_path / "missing.png"), image_signature="abc"
            )

        assert stub_api.requests == []

    def test_upload_unreadable_object(self, client, stub_api):
        with pytest.raises(ConfigurationError) as exc_info:
            client.images.upload("123", image_file=12345)

        assert exc_info.value.setting == "image_file"
        assert stub_api.requests == []

    def test_upload_by_url_is_json(self, client, stub_api):
        client.images.upload(
            "123", upload_type="UPLOAD_BY_URL", image_url="https://cdn.example/a.png"
        )

        assert stub_api.last.headers["Content-Type"] == "application/json"
        assert stub_api.json_body(stub_api.last) == {
            "advertiser_id": "123",
            "upload_type": "UPLOAD_BY_URL",
            "image_url": "https://cdn.example/a.png",
        }

    def test_upload_by_file_id(self, client, stub_api):
        client.images.upload("123", upload_type=UploadType.UPLOAD_BY_FILE_ID, file_id="f-1")

        assert stub_api.json_body(stub_api.last)["file_id"] == "f-1"

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({}, "image_file is required"),
            ({"upload_type": "UPLOAD_BY_URL"}, "image_url is required"),
            ({"upload_type": "UPLOAD_BY_FILE_ID"}, "file_id is required"),
            ({"upload_type": "UPLOAD_BY_VIDEO_ID", "file_id": "x"}, "Invalid upload_type"),
        ],
    )
    def test_invalid_options_make_no_request(self, client, stub_api, kwargs, message):
        with pytest.raises(ConfigurationError, match=message):
            client.images.upload("123", **kwargs)

        assert stub_api.requests == []

    def test_unknown_upload_type(self, client, stub_api):
        with pytest.raises(ConfigurationError) as exc_info:
            client.images.upload("123", upload_type="UPLOAD_BY_CARRIER_PIGEON")

        assert exc_info.value.setting == "upload_type"
        assert stub_api.requests == []

    def test_unknown_option(self, client, stub_api):
        with pytest.raises(ConfigurationError) as exc_info:
            client.images.upload("123", image_url="u", upload_type="UPLOAD_BY_URL", colour="red")

        assert exc_info.value.setting == "colour"
        assert stub_api.requests == []


class TestImageQueries:
    """Test reading images."""

    def test_get_info(self, client, stub_api):
        stub_api.queue_data({"list": [{"image_id": "img-1"}]})

        assert client.images.get_info("123", "img-1") == {"image_id": "img-1"}
        query = stub_api.query(stub_api.last)
        assert stub_api.last.url.path == "/open_api/v1.3/file/image/ad/info/"
        assert json.loads(query["image_ids"]) == ["img-1"]

    def test_get_info_missing(self, client, stub_api):
        stub_api.queue_data({"list": []})

        assert client.images.get_info("123", "nope") is None

    def test_search_sends_filtering(self, client, stub_api):
        stub_api.queue_data({"list": [{"image_id": "a"}], "page_info": {"page": 1}})

        images = client.images.search("123", width=100, displayable=True, page_size=50)

        assert images == [{"image_id": "a"}]
        query = stub_api.query(stub_api.last)
        assert query["page"] == "1"
        assert query["page_size"] == "50"
        assert json.loads(query["filtering"]) == {"width": 100, "displayable": True}

    def test_search_callback(self, client, stub_api):
        stub_api.queue_data({"list": [{"image_id": "a"}, {"image_id": "b"}]})
        seen = []

        data = client.images.search("123", callback=seen.append)

        assert [image["image_id"] for image in seen] == ["a", "b"]
        assert data["list"] == seen
        assert "filtering" not in stub_api.query(stub_api.last)

    def test_check_name(self, client, stub_api):
        client.images.check_name("123", ["banner.png"])

        assert stub_api.last.method == "POST"
        assert stub_api.last.url.path == "/open_api/v1.3/file/name/check/"
        assert stub_api.json_body(stub_api.last) == {
            "advertiser_id": "123",
            "file_names": ["banner.png"],
        }


class TestVideo:
    """Test uploading and reading videos."""

    def test_upload_by_file(self, client, stub_api, tmp_path):
        path = tmp_path / "clip.mp4"
        path.write_bytes(b"video bytes")

        client.videos.upload("123", video_file=str(path), flaw_detect=True)

        content = stub_api.last.content
        assert stub_api.last.url.path == "/open_api/v1.3/file/video/ad/upload/"
        assert hashlib.md5(b"video bytes").hexdigest().encode() in content
        assert b'name="video_file"; filename="clip.mp4"' in content
        assert b"Content-Type: video/mp4" in content
        assert b'name="flaw_detect"' in content

    def test_upload_open_file_with_options_model(self, client, stub_api, tmp_path):
        path = tmp_path / "teaser.mp4"
        path.write_bytes(b"teaser video bytes")

        with open(path, "rb") as fh:
            client.videos.upload("123", VideoUploadOptions(video_file=fh))

        content = stub_api.last.content
        assert hashlib.md5(b"teaser video bytes").hexdigest().encode() in content
        assert b'name="video_file"; filename="teaser.mp4"' in content
        assert b"Content-Type: video/mp4" in content
        assert b"teaser video bytes" in content

    def test_upload_missing_path(self, client, stub_api, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            client.videos.upload("123", video_file=str(tmp_path / "missing.mp4"))

        assert exc_info.value.setting == "video_file"
        assert stub_api.requests == []

    def test_upload_by_video_id(self, client, stub_api):
        client.videos.upload(
            "123",
            upload_type="UPLOAD_BY_VIDEO_ID",
            video_id="v-1",
            auto_fix_enabled=False,
        )

        assert stub_api.json_body(stub_api.last) == {
            "advertiser_id": "123",
            "upload_type": "UPLOAD_BY_VIDEO_ID",
            "auto_fix_enabled": False,
            "video_id": "v-1",
        }

    def test_upload_missing_video_id(self, client, stub_api):
        with pytest.raises(ConfigurationError, match="video_id is required"):
            client.videos.upload("123", upload_type="UPLOAD_BY_VIDEO_ID")

        assert stub_api.requests == []

    def test_get_info(self, client, stub_api):
        stub_api.queue_data({"list": [{"video_id": "v-1"}, {"video_id": "v-2"}]})

        videos = client.videos.get_info("123", ["v-1", "v-2"])

        assert len(videos) == 2
        assert json.loads(stub_api.query(stub_api.last)["video_ids"]) == ["v-1", "v-2"]

    def test_search_with_options(self, client, stub_api):
        stub_api.queue_data({"list": [{"video_id": "v-1"}]})

        client.videos.search("123", VideoSearchOptions(video_name="launch", page=2))

        query = stub_api.query(stub_api.last)
        assert stub_api.last.url.path == "/open_api/v1.3/file/video/ad/search/"
        assert query["page"] == "2"
        assert json.loads(query["filtering"]) == {"video_name": "launch"}


class TestIdentity:
    """Test identity operations."""

    def test_list(self, client, stub_api):
        stub_api.queue_data({"identity_list": [{"identity_id": "i-1"}], "page_info": {}})

        data = client.identities.list("123", identity_type="CUSTOMIZED_USER")

        assert data["identity_list"] == [{"identity_id": "i-1"}]
        query = stub_api.query(stub_api.last)
        assert stub_api.last.url.path == "/open_api/v1.3/identity/get/"
        assert query["identity_type"] == "CUSTOMIZED_USER"

    def test_list_all_uses_identity_list(self, client, stub_api):
        stub_api.queue_data({"identity_list": [{"identity_id": "i-1"}], "page_info": {"total_page": 2}})
        stub_api.queue_data({"identity_list": [{"identity_id": "i-2"}], "page_info": {"total_page": 2}})

        identities = client.identities.list_all("123")

        assert [i["identity_id"] for i in identities] == ["i-1", "i-2"]
        assert stub_api.query(stub_api.requests[0])["page_size"] == "100"

    def test_bc_identity_requires_bc_id(self, client, stub_api):
        with pytest.raises(ConfigurationError) as exc_info:
            client.identities.list("123", identity_type="BC_AUTH_TT")

        assert exc_info.value.setting == "identity_authorized_bc_id"
        assert stub_api.requests == []

    def test_unknown_identity_type(self, client, stub_api):
        with pytest.raises(ConfigurationError):
            client.identities.get_info("123", "i-1", "PAGE")
        assert stub_api.requests == []

    def test_get_info(self, client, stub_api):
        stub_api.queue_data({"identity_info": {"display_name": "Shop"}})

        info = client.identities.get_info("123", "i-1", "TT_USER")

        assert info == {"display_name": "Shop"}
        assert stub_api.last.url.path == "/open_api/v1.3/identity/info/"

    def test_create(self, client, stub_api):
        stub_api.queue_data({"identity_id": "i-9"})

        result = client.identities.create("123", "Shop", image_uri="img-1")

        assert result == {"identity_id": "i-9"}
        assert stub_api.json_body(stub_api.last) == {
            "advertiser_id": "123",
            "display_name": "Shop",
            "image_uri": "img-1",
        }


class TestAccount:
    """Test advertiser account operations."""

    def test_list(self, client, stub_api):
        stub_api.queue_data({"list": [{"advertiser_id": "123"}]})

        accounts = client.accounts.list()

        assert accounts == [{"advertiser_id": "123"}]
        assert stub_api.last.url.path == "/open_api/v1.3/oauth2/advertiser/get/"
        assert stub_api.query(stub_api.last) == {"app_id": "test-app-id", "secret": "test-secret"}

    def test_list_callback(self, client, stub_api):
        stub_api.queue_data({"list": [{"advertiser_id": "123"}]})
        seen = []

        response = client.accounts.list(callback=seen.append)

        assert seen == [{"advertiser_id": "123"}]
        assert response["code"] == 0

    def test_details(self, client, stub_api):
        stub_api.queue_data({"list": [{"advertiser_id": "123", "currency": "USD"}]})

        details = client.accounts.details(["123"], fields=["currency"])

        assert details[0]["currency"] == "USD"
        query = stub_api.query(stub_api.last)
        assert stub_api.last.url.path == "/open_api/v1.3/advertiser/info/"
        assert json.loads(query["advertiser_ids"]) == ["123"]
        assert json.loads(query["fields"]) == ["currency"]


class TestReporting:
    """Test synchronous reports."""

    def test_get_sync_report(self, client, stub_api):
        stub_api.queue_data({"list": [{"metrics": {"spend": "1.0"}}]})

        rows = client.reports.get_sync_report(
            advertiser_id="123",
            report_type="BASIC",
            dimensions=["campaign_id"],
            metrics=["spend"],
        )

        assert rows == [{"metrics": {"spend": "1.0"}}]
        query = stub_api.query(stub_api.last)
        assert stub_api.last.url.path == "/open_api/v1.3/report/integrated/get/"
        assert json.loads(query["dimensions"]) == ["campaign_id"]

    def test_iter_sync_report_walks_pages_lazily(self, client, stub_api):
        stub_api.queue_data({"list": [{"row": 1}], "page_info": {"total_page": 2}})
        stub_api.queue_data({"list": [{"row": 2}], "page_info": {"total_page": 2}})

        rows = client.reports.iter_sync_report(advertiser_id="123", page_size=1)
        assert stub_api.requests == []

        assert [row["row"] for row in rows] == [1, 2]
        assert [stub_api.query(r)["page"] for r in stub_api.requests] == ["1", "2"]
