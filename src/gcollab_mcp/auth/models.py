"""Data models for OAuth access tokens."""

from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, Field


class TokenStatus(str, Enum):
    """State of the in-memory access token."""

    VALID = "valid"
    EXPIRED = "expired"
    MISSING = "missing"


class OAuthToken(BaseModel):
    """Short-lived access token obtained from the refresh token.

    Attributes:
        access_token: Bearer token sent with every API request.
        expires_at: UTC expiry time.
        scopes: Scopes the token was requested with.
        token_type: Always "Bearer" for Google.
    """

    access_token: str = Field(..., description="OAuth access token")
    expires_at: datetime = Field(..., description="Token expiry (UTC)")
    scopes: list[str] = Field(default_factory=list, description="Granted scopes")
    token_type: str = Field(default="Bearer", description="Token type")

    def is_expired(self, buffer_seconds: int = 60) -> bool:
        """Check whether the token expires within ``buffer_seconds``."""
        return datetime.now(timezone.utc) + timedelta(seconds=buffer_seconds) >= self.expires_at
