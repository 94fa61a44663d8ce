"""Authenticated HTTP client shared by every tool handler.

A single WorkspaceClient is built at startup and passed to each handler.
Handlers only issue requests through it; nothing on it changes per call
apart from the access token cached by the OAuth manager.
"""

import logging
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


class AccessTokenProvider(Protocol):
    """Anything that can hand out a current bearer token."""

    async def get_access_token(self) -> str: ...


class WorkspaceClient:
    """HTTP access to the Google REST APIs.

    Attributes:
        auth: Source of bearer tokens.
        http: Pooled httpx client used for all requests.

    Example:
        ```python
        async with WorkspaceClient(OAuthManager(settings)) as client:
            doc = await client.request("GET", f"{DOCS_API_BASE}/documents/{doc_id}")
        ```
    """

    def __init__(
        self,
        auth: AccessTokenProvider,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            auth: Token provider, normally an OAuthManager.
            http_client: Preconfigured httpx client (tests inject one backed
                by httpx.MockTransport). Created with pooling if omitted.
            timeout: Request timeout in seconds for the default client.
        """
        self.auth = auth
        self.http = http_client or httpx.AsyncClient(
            http2=True,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            timeout=httpx.Timeout(timeout, connect=10.0),
        )

    async def __aenter__(self) -> "WorkspaceClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the shared HTTP client and release resources."""
        await self.http.aclose()

    async def _auth_headers(self) -> dict[str, str]:
        access_token = await self.auth.get_access_token()
        return {"Authorization": f"Bearer {access_token}"}

    async def request_raw(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an authenticated request and return the raw response.

        Args:
            method: HTTP method (GET, POST, etc.).
            url: Full URL to request.
            params: Optional query parameters. List values repeat the key.
            json_data: Optional JSON body.
            headers: Optional additional headers.

        Returns:
            The httpx.Response.

        Raises:
            httpx.HTTPStatusError: If Google returns an error status.
        """
        request_headers = await self._auth_headers()
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        response = await self.http.request(
            method=method,
            url=url,
            params=params,
            json=json_data,
            headers=request_headers,
        )
        response.raise_for_status()
        return response

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request and decode the JSON response.

        Empty bodies (for example a 204 from a delete) decode to ``{}``.

        Raises:
            httpx.HTTPStatusError: If Google returns an error status.
        """
        response = await self.request_raw(
            method,
            url,
            params=params,
            json_data=json_data,
            headers={"Accept": "application/json"},
        )
        if not response.content:
            return {}
        result: dict[str, Any] = response.json()
        return result

    async def delete(self, url: str) -> None:
        """Make an authenticated DELETE request.

        Raises:
            httpx.HTTPStatusError: If the request fails.
        """
        await self.request_raw("DELETE", url)
