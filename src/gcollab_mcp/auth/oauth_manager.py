"""Refresh-token based OAuth manager.

Wraps google-auth ``Credentials`` built from the configured client ID,
client secret and refresh token. Access tokens are kept in memory only and
refreshed through google-auth's blocking transport in the default executor.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from gcollab_mcp.auth.models import OAuthToken, TokenStatus
from gcollab_mcp.config import Settings
from gcollab_mcp.constants import SCOPES, TOKEN_URI

logger = logging.getLogger(__name__)


class OAuthManager:
    """Supplies valid access tokens for Google API requests.

    Attributes:
        credentials: google-auth credentials holding the refresh token.
        scopes: Scopes recorded on issued tokens.

    Example:
        ```python
        manager = OAuthManager(settings)
        token = await manager.get_access_token()
        ```
    """

    def __init__(self, settings: Settings, scopes: list[str] | None = None) -> None:
        """Initialize OAuth manager.

        Args:
            settings: Loaded startup settings with the three OAuth secrets.
            scopes: Scopes to record on tokens. Defaults to SCOPES.
        """
        self.scopes = scopes or list(SCOPES)
        self.credentials = Credentials(  # nosec B106 - token_uri is public Google OAuth endpoint
            token=None,
            refresh_token=settings.refresh_token.get_secret_value(),
            token_uri=TOKEN_URI,
            client_id=settings.client_id,
            client_secret=settings.client_secret.get_secret_value(),
            scopes=self.scopes,
        )
        self._token: OAuthToken | None = None
        self._refresh_lock = asyncio.Lock()

    def _credentials_to_token(self, credentials: Credentials) -> OAuthToken:
        """Convert refreshed google-auth credentials to an OAuthToken."""
        if credentials.expiry:
            expires_at = credentials.expiry
            # google-auth reports naive UTC datetimes
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=timezone.utc)
        else:
            expires_at = datetime.now(timezone.utc) + timedelta(hours=1)

        return OAuthToken(
            access_token=credentials.token,
            expires_at=expires_at,
            scopes=self.scopes,
        )

    def get_status(self) -> TokenStatus:
        """Report the state of the cached access token."""
        if self._token is None:
            return TokenStatus.MISSING
        if self._token.is_expired():
            return TokenStatus.EXPIRED
        return TokenStatus.VALID

    async def refresh(self) -> OAuthToken:
        """Exchange the refresh token for a new access token.

        Raises:
            google.auth.exceptions.RefreshError: If Google rejects the refresh
                token (for example ``invalid_grant``).
        """
        logger.info("Refreshing Google access token")
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self.credentials.refresh, Request())
        self._token = self._credentials_to_token(self.credentials)
        return self._token

    async def get_access_token(self) -> str:
        """Return a valid access token, refreshing when missing or expired.

        Concurrent callers share one refresh.
        """
        if self.get_status() != TokenStatus.VALID:
            async with self._refresh_lock:
                if self.get_status() != TokenStatus.VALID:
                    await self.refresh()
        if self._token is None:
            raise RuntimeError("Unexpected error: token refresh returned no token")
        return self._token.access_token
