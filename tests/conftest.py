"""Shared pytest fixtures for gcollab-mcp tests.

This module provides reusable fixtures for settings, OAuth mocks, and a fake
Google REST API served through httpx.MockTransport.
"""

import json
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from gcollab_mcp.auth.models import OAuthToken
from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.config import Settings

TEST_ACCESS_TOKEN = "test_access_token_abc123"

RouteHandler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Create settings with all three OAuth secrets."""
    return Settings.load(
        client_id="test_client_id.apps.googleusercontent.com",
        client_secret="test_client_secret",  # pragma: allowlist secret
        refresh_token="test_refresh_token_xyz789",
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every gcollab-mcp environment variable."""
    for name in (
        "GOOGLE_CLIENT_ID",
        "GOOGLE_CLIENT_SECRET",
        "GOOGLE_REFRESH_TOKEN",
        "GCOLLAB_LOG_LEVEL",
        "GCOLLAB_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Token Fixtures
# =============================================================================


@pytest.fixture
def valid_token() -> OAuthToken:
    """Create a valid, non-expired access token."""
    return OAuthToken(
        access_token=TEST_ACCESS_TOKEN,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        scopes=["https://www.googleapis.com/auth/documents"],
    )


@pytest.fixture
def expired_token() -> OAuthToken:
    """Create an expired access token."""
    return OAuthToken(
        access_token="expired_access_token",
        expires_at=datetime.now(timezone.utc) - timedelta(hours=1),
        scopes=["https://www.googleapis.com/auth/documents"],
    )


@pytest.fixture
def mock_google_credentials() -> MagicMock:
    """Create a mock Google OAuth2 Credentials object after a refresh."""
    mock_creds = MagicMock()
    mock_creds.token = "refreshed_access_token"
    mock_creds.refresh_token = "test_refresh_token_xyz789"
    mock_creds.expiry = datetime.now(timezone.utc) + timedelta(hours=1)
    return mock_creds


# =============================================================================
# Fake Google API
# =============================================================================


class FakeGoogleApi:
    """Route table standing in for the Google REST endpoints.

    Routes are keyed by HTTP method and decoded URL path. Each route is
    either a JSON body (served with the given status) or a callable taking
    the request. Unrouted requests get a Google-style 404. Every request
    is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any] | RouteHandler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        body: Any = None,
        status_code: int = 200,
    ) -> None:
        self.routes[(method, path)] = (status_code, body)

    def add_error(self, method: str, path: str, status_code: int, message: str) -> None:
        self.routes[(method, path)] = lambda request: error_response(status_code, message)

    def add_handler(self, method: str, path: str, handler: RouteHandler) -> None:
        self.routes[(method, path)] = handler

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return error_response(404, "Requested entity was not found.")
        if callable(route):
            response = route(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response
        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def last_request(self, method: str | None = None) -> httpx.Request:
        matching = [r for r in self.requests if method is None or r.method == method]
        assert matching, f"no {method or ''} request recorded"
        return matching[-1]

    def last_json(self, method: str | None = None) -> Any:
        """Decode the JSON body of the most recent request."""
        return json.loads(self.last_request(method).content)


def error_response(status_code: int, message: str) -> httpx.Response:
    """Build a Google JSON error response."""
    return httpx.Response(
        status_code,
        json={"error": {"code": status_code, "message": message}},
    )


@pytest.fixture
def fake_auth() -> MagicMock:
    """Token provider that always hands out the same bearer token."""
    auth = MagicMock()
    auth.get_access_token = AsyncMock(return_value=TEST_ACCESS_TOKEN)
    return auth


@pytest.fixture
def google_api() -> FakeGoogleApi:
    """Create an empty fake Google API."""
    return FakeGoogleApi()


@pytest.fixture
def workspace_client(fake_auth: MagicMock, google_api: FakeGoogleApi) -> WorkspaceClient:
    """Create a WorkspaceClient whose HTTP traffic goes to the fake API."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(google_api.handle))
    return WorkspaceClient(fake_auth, http_client=http_client)


# =============================================================================
# CLI Test Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
