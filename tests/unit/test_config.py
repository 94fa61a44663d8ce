"""Unit tests for settings loading."""

import pytest

from gcollab_mcp.config import Settings
from gcollab_mcp.errors import ConfigurationError

FULL_ENV = {
    "GOOGLE_CLIENT_ID": "client.apps.googleusercontent.com",
    "GOOGLE_CLIENT_SECRET": "s3cr3t-value",  # pragma: allowlist secret
    "GOOGLE_REFRESH_TOKEN": "refresh",
}


@pytest.mark.unit
class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    def test_should_load_all_secrets(self) -> None:
        """Verify secrets are read and kept secret."""
        settings = Settings.from_env(FULL_ENV)

        assert settings.client_id == "client.apps.googleusercontent.com"
        assert settings.client_secret.get_secret_value() == "s3cr3t-value"
        assert settings.refresh_token.get_secret_value() == "refresh"
        assert "s3cr3t-value" not in repr(settings)

    def test_should_apply_defaults(self) -> None:
        """Verify log level and timeout defaults."""
        settings = Settings.from_env(FULL_ENV)

        assert settings.log_level == "INFO"
        assert settings.http_timeout == 30.0

    def test_should_read_optional_settings(self) -> None:
        """Verify log level is normalized and timeout parsed."""
        env = {**FULL_ENV, "GCOLLAB_LOG_LEVEL": "debug", "GCOLLAB_HTTP_TIMEOUT": "12.5"}

        settings = Settings.from_env(env)

        assert settings.log_level == "DEBUG"
        assert settings.http_timeout == 12.5

    def test_should_name_every_missing_variable(self) -> None:
        """Verify all missing secrets are reported together."""
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_env({"GOOGLE_CLIENT_ID": "id"})

        assert str(exc_info.value) == (
            "Missing required environment variables: GOOGLE_CLIENT_SECRET, GOOGLE_REFRESH_TOKEN"
        )

    def test_should_treat_empty_values_as_missing(self) -> None:
        """Verify blank variables do not count as set."""
        with pytest.raises(ConfigurationError, match="GOOGLE_REFRESH_TOKEN"):
            Settings.from_env({**FULL_ENV, "GOOGLE_REFRESH_TOKEN": ""})

    def test_should_read_process_environment_by_default(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        """Verify os.environ is used when no mapping is given."""
        for name, value in FULL_ENV.items():
            clean_env.setenv(name, value)

        assert Settings.from_env().client_id == FULL_ENV["GOOGLE_CLIENT_ID"]

    def test_should_reject_invalid_options(self) -> None:
        """Verify bad log levels and timeouts raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            Settings.from_env({**FULL_ENV, "GCOLLAB_LOG_LEVEL": "LOUD"})
        with pytest.raises(ConfigurationError, match="must be a number"):
            Settings.from_env({**FULL_ENV, "GCOLLAB_HTTP_TIMEOUT": "soon"})
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            Settings.from_env({**FULL_ENV, "GCOLLAB_HTTP_TIMEOUT": "0"})
