"""Unit tests for WorkspaceClient."""

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import DOCS_API_BASE, DRIVE_API_BASE


@pytest.mark.unit
class TestWorkspaceClientRequest:
    """Tests for authenticated requests."""

    @pytest.mark.asyncio
    async def test_should_send_bearer_token(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify every request carries the current access token."""
        google_api.add("GET", "/v1/documents/doc1", {"documentId": "doc1"})

        result = await workspace_client.request("GET", f"{DOCS_API_BASE}/documents/doc1")

        request = google_api.last_request()
        assert result == {"documentId": "doc1"}
        assert request.headers["Authorization"] == "Bearer test_access_token_abc123"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_should_repeat_list_query_params(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify list parameter values repeat the key."""
        google_api.add("GET", "/drive/v3/files", {"files": []})

        await workspace_client.request(
            "GET", f"{DRIVE_API_BASE}/files", params={"fields": ["a", "b"], "pageSize": 5}
        )

        params = google_api.last_request().url.params
        assert params.get_list("fields") == ["a", "b"]
        assert params["pageSize"] == "5"

    @pytest.mark.asyncio
    async def test_should_decode_empty_body_as_empty_dict(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify 204 responses decode to {}."""
        google_api.add("PATCH", "/drive/v3/files/f1", status_code=204)

        result = await workspace_client.request("PATCH", f"{DRIVE_API_BASE}/files/f1")

        assert result == {}

    @pytest.mark.asyncio
    async def test_should_raise_on_error_status(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify error statuses raise HTTPStatusError."""
        google_api.add_error("GET", "/v1/documents/missing", 404, "Not found")

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await workspace_client.request("GET", f"{DOCS_API_BASE}/documents/missing")

        assert exc_info.value.response.status_code == 404

    @pytest.mark.asyncio
    async def test_should_delete(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify delete issues a DELETE request."""
        google_api.add("DELETE", "/drive/v3/files/f1/comments/c1", status_code=204)

        await workspace_client.delete(f"{DRIVE_API_BASE}/files/f1/comments/c1")

        assert google_api.last_request().method == "DELETE"


@pytest.mark.unit
class TestWorkspaceClientLifecycle:
    """Tests for client construction and cleanup."""

    @pytest.mark.asyncio
    async def test_should_close_http_client_on_exit(self, fake_auth: MagicMock) -> None:
        """Verify the async context manager closes the pool."""
        async with WorkspaceClient(fake_auth) as client:
            assert not client.http.is_closed

        assert client.http.is_closed

    @pytest.mark.asyncio
    async def test_should_use_configured_timeout(self, fake_auth: MagicMock) -> None:
        """Verify the default client honours the timeout setting."""
        client = WorkspaceClient(fake_auth, timeout=12.0)

        assert client.http.timeout.read == 12.0
        assert client.http.timeout.connect == 10.0
        await client.close()
