"""Runtime configuration for gcollab-mcp.

Environment Variables:
    GOOGLE_CLIENT_ID: Google OAuth client ID (required)
    GOOGLE_CLIENT_SECRET: Google OAuth client secret (required)
    GOOGLE_REFRESH_TOKEN: Long-lived OAuth refresh token (required)
    GCOLLAB_LOG_LEVEL: Log level for stderr logging (default: INFO)
    GCOLLAB_HTTP_TIMEOUT: Request timeout in seconds (default: 30)
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from gcollab_mcp.errors import ConfigurationError

REQUIRED_ENV_VARS = ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Startup secrets and runtime options.

    Attributes:
        client_id: OAuth application identifier.
        client_secret: OAuth application secret.
        refresh_token: Long-lived refresh credential.
        log_level: Level for the stderr log handler.
        http_timeout: Per-request timeout in seconds.
    """

    client_id: str = Field(..., min_length=1, description="OAuth client ID")
    client_secret: SecretStr = Field(..., description="OAuth client secret")
    refresh_token: SecretStr = Field(..., description="OAuth refresh token")
    log_level: str = Field(default="INFO", description="Log level")
    http_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def load(
        cls,
        client_id: str | None,
        client_secret: str | None,
        refresh_token: str | None,
        log_level: str | None = None,
        http_timeout: float | None = None,
    ) -> "Settings":
        """Build settings, reporting every missing secret at once.

        Raises:
            ConfigurationError: If a required secret is missing or a value is invalid.
        """
        provided = {
            "GOOGLE_CLIENT_ID": client_id,
            "GOOGLE_CLIENT_SECRET": client_secret,
            "GOOGLE_REFRESH_TOKEN": refresh_token,
        }
        missing = [name for name in REQUIRED_ENV_VARS if not provided[name]]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        options: dict[str, object] = {}
        if log_level:
            options["log_level"] = log_level
        if http_timeout is not None:
            options["http_timeout"] = http_timeout

        try:
            return cls(
                client_id=client_id,
                client_secret=client_secret,
                refresh_token=refresh_token,
                **options,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ
        timeout = env.get("GCOLLAB_HTTP_TIMEOUT")
        try:
            http_timeout = float(timeout) if timeout else None
        except ValueError as e:
            raise ConfigurationError(
                f"GCOLLAB_HTTP_TIMEOUT must be a number, got {timeout!r}"
            ) from e

        return cls.load(
            client_id=env.get("GOOGLE_CLIENT_ID"),
            client_secret=env.get("GOOGLE_CLIENT_SECRET"),
            refresh_token=env.get("GOOGLE_REFRESH_TOKEN"),
            log_level=env.get("GCOLLAB_LOG_LEVEL"),
            http_timeout=http_timeout,
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure stderr logging once for the whole process.

    stdout carries the MCP stream, so nothing may log there.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
