"""Unit tests for OAuth token models."""

from datetime import datetime, timedelta, timezone

import pytest

from gcollab_mcp.auth.models import OAuthToken, TokenStatus


@pytest.mark.unit
class TestOAuthToken:
    """Tests for OAuthToken model."""

    def test_should_create_valid_token(self, valid_token: OAuthToken) -> None:
        """Verify token creation with valid data."""
        assert valid_token.access_token == "test_access_token_abc123"
        assert valid_token.token_type == "Bearer"
        assert len(valid_token.scopes) == 1

    def test_should_detect_non_expired_token(self, valid_token: OAuthToken) -> None:
        """Verify is_expired returns False for valid token."""
        assert valid_token.is_expired() is False

    def test_should_detect_expired_token(self, expired_token: OAuthToken) -> None:
        """Verify is_expired returns True for expired token."""
        assert expired_token.is_expired() is True

    def test_should_respect_buffer_seconds(self) -> None:
        """Verify is_expired respects buffer_seconds parameter."""
        # Token expires in 30 seconds
        token = OAuthToken(
            access_token="test",
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=30),
            scopes=[],
        )
        # With default 60s buffer, should be considered expired
        assert token.is_expired(buffer_seconds=60) is True
        # With 10s buffer, should not be expired
        assert token.is_expired(buffer_seconds=10) is False

    def test_should_default_scopes_to_empty(self) -> None:
        """Verify scopes are optional."""
        token = OAuthToken(access_token="t", expires_at=datetime.now(timezone.utc))
        assert token.scopes == []


@pytest.mark.unit
class TestTokenStatus:
    """Tests for TokenStatus enum."""

    def test_should_have_string_values(self) -> None:
        """Verify status values serialize as strings."""
        assert TokenStatus.VALID.value == "valid"
        assert TokenStatus.EXPIRED.value == "expired"
        assert TokenStatus.MISSING.value == "missing"
