"""OAuth credentials for the Google collaboration APIs.

The server never runs an interactive consent flow. It is given a client ID,
client secret and long-lived refresh token at startup and exchanges the
refresh token for access tokens as needed.

Quick Start:
    ```python
    from gcollab_mcp.auth import OAuthManager
    from gcollab_mcp.config import Settings

    manager = OAuthManager(Settings.from_env())
    access_token = await manager.get_access_token()
    ```
"""

from gcollab_mcp.auth.models import OAuthToken, TokenStatus
from gcollab_mcp.auth.oauth_manager import OAuthManager

__all__ = [
    "OAuthManager",
    "OAuthToken",
    "TokenStatus",
]
