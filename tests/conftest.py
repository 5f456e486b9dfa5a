import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tiktok_business_api import Client  # noqa: E402
import tiktok_business_api.config.settings as settings_module  # noqa: E402


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "auth: mark test as testing authentication"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set required environment variables for tests.

    Also resets the package-wide default settings, so every test starts
    from the values below regardless of what earlier tests configured.
    """
    monkeypatch.setenv("TIKTOK_APP_ID", "test-app-id")
    monkeypatch.setenv("TIKTOK_SECRET", "test-secret")
    monkeypatch.setenv("TIKTOK_ACCESS_TOKEN", "test-access-token")
    monkeypatch.delenv("TIKTOK_API_BASE_URL", raising=False)
    monkeypatch.delenv("TIKTOK_DEBUG", raising=False)

    # Logging
    monkeypatch.setenv("TIKTOK_LOG_LEVEL", "INFO")

    monkeypatch.setattr(settings_module, "settings", settings_module.Settings())
    yield


class StubApi:
    """In-memory stand-in for the Marketing API.

    Queued responses are returned in order; once the queue is empty a
    plain success envelope is returned. Assign ``handler`` to compute
    responses from the request instead.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def queue(
        self,
        body: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
    ) -> "StubApi":
        if text is not None:
            self.responses.append(httpx.Response(status_code, text=text))
        else:
            if body is None:
                body = {"code": 0, "message": "OK", "data": {}}
            self.responses.append(httpx.Response(status_code, json=body))
        return self

    def queue_data(self, data: Any) -> "StubApi":
        return self.queue({"code": 0, "message": "OK", "request_id": "req-1", "data": data})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={"code": 0, "message": "OK", "data": {}})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def json_body(request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content) if request.content else {}

    @staticmethod
    def query(request: httpx.Request) -> Dict[str, str]:
        return dict(request.url.params)


@pytest.fixture
def stub_api():
    """Recording stub backend for the HTTP engine."""
    return StubApi()


@pytest.fixture
def client(stub_api):
    """Client wired to the stub backend."""
    api_client = Client(transport=httpx.MockTransport(stub_api))
    yield api_client
    api_client.close()


@pytest.fixture
def sample_token_response():
    """Sample OAuth token response."""
    return {
        "code": 0,
        "message": "OK",
        "request_id": "req-token",
        "data": {
            "access_token": "new-access-token",
            "advertiser_ids": ["123", "456"],
            "scope": [4, 5, 6],
        },
    }
