"""Unit tests for client settings and package-wide configuration."""

import logging

import pytest
from pydantic import ValidationError

from tiktok_business_api import Client, configure, get_settings
from tiktok_business_api.config import DEFAULT_API_BASE_URL, DEFAULT_AUTH_URL, Settings


def test_settings_load_from_env():
    settings = Settings()

    assert settings.app_id == "test-app-id"
    assert settings.secret == "test-secret"
    assert settings.access_token == "test-access-token"
    assert settings.log_level == "INFO"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TIKTOK_ACCESS_TOKEN")
    settings = Settings()

    assert settings.access_token is None
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.auth_url == DEFAULT_AUTH_URL
    assert settings.api_version == "v1.3"
    assert settings.debug is False
    assert settings.logger is None
    assert settings.timeout == 60
    assert settings.open_timeout == 30
    assert settings.max_retries == 3


def test_env_values_are_coerced(monkeypatch):
    monkeypatch.setenv("TIKTOK_DEBUG", "true")
    monkeypatch.setenv("TIKTOK_TIMEOUT", "12.5")
    monkeypatch.setenv("TIKTOK_MAX_RETRIES", "0")

    settings = Settings()

    assert settings.debug is True
    assert settings.timeout == 12.5
    assert settings.max_retries == 0


def test_base_url_gets_trailing_slash():
    settings = Settings(api_base_url="https://sandbox-ads.tiktok.com/open_api")

    assert settings.api_base_url == "https://sandbox-ads.tiktok.com/open_api/"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Settings(timeout=0)
    with pytest.raises(ValidationError):
        Settings(log_level="VERBOSE")


class TestCopyWith:
    """Test per-client copies of the settings."""

    def test_overrides_and_keeps_rest(self):
        base = Settings()
        copy = base.copy_with(app_id="other")

        assert copy.app_id == "other"
        assert copy.secret == base.secret
        assert base.app_id == "test-app-id"

    def test_unknown_option_ignored(self, caplog):
        caplog.set_level(logging.WARNING, logger="tiktok_business_api")

        copy = Settings().copy_with(colour="red")

        assert not hasattr(copy, "colour")
        assert "Ignoring unknown configuration option: colour" in caplog.text

    def test_custom_logger_is_kept(self):
        custom = logging.getLogger("custom.tracer")

        assert Settings().copy_with(logger=custom).logger is custom


class TestConfigure:
    """Test the package-wide default settings."""

    def test_configure_affects_new_clients(self):
        configure(app_id="configured-app", debug=True)

        assert get_settings().app_id == "configured-app"
        api_client = Client()
        assert api_client.config.app_id == "configured-app"
        assert api_client.config.debug is True

    def test_existing_clients_keep_their_copy(self):
        api_client = Client()

        configure(app_id="later-app")

        assert api_client.config.app_id == "test-app-id"

    def test_clients_are_independent(self):
        first = Client()
        second = Client()

        first.set_access_token("first-token")

        assert first.config.access_token == "first-token"
        assert second.config.access_token == "test-access-token"
        assert get_settings().access_token == "test-access-token"
