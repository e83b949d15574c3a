"""
Pytest configuration and fixtures.

Provides:
- A fake Superpowered service built on httpx.MockTransport
- A client wired to the fake service
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

# Load environment variables from .env file before importing the client
from dotenv import load_dotenv

_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

import httpx
import pytest

from superpowered import SuperpoweredClient

from helpers import API_KEY_ID, API_KEY_SECRET, BASE_URL


# =============================================================================
# Fake Service
# =============================================================================


class MockService:
    """
    Records requests and answers them from registered routes.

    Routes are keyed by method and URL without the query string. A route
    answers with a status and JSON body, raw content, or an exception, and
    may carry extra headers such as a redirect Location.
    Unregistered routes answer 404.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Any] = {}

    def add(
        self,
        method: str,
        url: str,
        status: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        exc: Optional[Exception] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self._routes[(method, url)] = (status, json, content, exc, headers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        route = self._routes.get((request.method, url))
        if route is None:
            return httpx.Response(404, json={"error": f"No route for {request.method} {url}"})

        status, body, content, exc, headers = route
        if exc is not None:
            raise exc
        if content is not None:
            return httpx.Response(status, content=content, headers=headers)
        if body is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    def requests_to(self, url_prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url_prefix)]

    @staticmethod
    def json_body(request: httpx.Request) -> Union[dict, list]:
        return json.loads(request.content)


@pytest.fixture
def mock_service() -> MockService:
    return MockService()


@pytest.fixture
def transport(mock_service: MockService) -> httpx.MockTransport:
    return httpx.MockTransport(mock_service.handler)


@pytest.fixture
def client(transport: httpx.MockTransport) -> SuperpoweredClient:
    """Client pointed at the fake service."""
    return SuperpoweredClient(
        api_key_id=API_KEY_ID,
        api_key_secret=API_KEY_SECRET,
        base_url=BASE_URL,
        transport=transport,
    )


# =============================================================================
# Marker Registration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live: mark test as calling the real API (requires credentials)"
    )
