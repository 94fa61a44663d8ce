"""Command-line interface for gcollab-mcp."""

import asyncio
import sys
from collections.abc import Callable
from typing import Any

import click

from gcollab_mcp.__version__ import __version__
from gcollab_mcp.config import LOG_LEVELS, Settings, configure_logging
from gcollab_mcp.errors import ConfigurationError, classify_error


def settings_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the OAuth secret and runtime options, each backed by an env var."""
    options = [
        click.option("--client-id", envvar="GOOGLE_CLIENT_ID", help="Google OAuth client ID"),
        click.option(
            "--client-secret", envvar="GOOGLE_CLIENT_SECRET", help="Google OAuth client secret"
        ),
        click.option(
            "--refresh-token", envvar="GOOGLE_REFRESH_TOKEN", help="Google OAuth refresh token"
        ),
        click.option(
            "--log-level",
            envvar="GCOLLAB_LOG_LEVEL",
            type=click.Choice(LOG_LEVELS, case_sensitive=False),
            default="INFO",
            show_default=True,
            help="Log level (logs go to stderr)",
        ),
        click.option(
            "--http-timeout",
            envvar="GCOLLAB_HTTP_TIMEOUT",
            type=float,
            default=30.0,
            show_default=True,
            help="Google API request timeout in seconds",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_settings(**kwargs: Any) -> Settings:
    """Load settings or exit with status 1."""
    try:
        return Settings.load(**kwargs)
    except ConfigurationError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Google Collaboration MCP Server - Docs, Sheets, Drive and Gmail for MCP hosts.

    This tool provides 24 tools across:
    - Docs (read, create, batch update)
    - Drive (comments, file listing, search and download)
    - Sheets (values, metadata, batch update)
    - Gmail (messages, threads, labels; read-only)
    """
    pass


@main.command()
@settings_options
def mcp(
    client_id: str | None,
    client_secret: str | None,
    refresh_token: str | None,
    log_level: str,
    http_timeout: float,
) -> None:
    """Start the MCP server over stdio.

    Requires GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and GOOGLE_REFRESH_TOKEN
    (or the matching options). This command is typically invoked by the
    MCP host, which talks to it over stdin/stdout.
    """
    settings = _load_settings(
        client_id=client_id,
        client_secret=client_secret,
        refresh_token=refresh_token,
        log_level=log_level,
        http_timeout=http_timeout,
    )
    configure_logging(settings.log_level)

    from gcollab_mcp.server import main as server_main

    # stdout carries the MCP stream; status messages go to stderr
    try:
        click.echo("Starting gcollab-mcp server...", err=True)
        server_main(settings)
    except KeyboardInterrupt:
        click.echo("\nServer stopped.", err=True)
    except Exception as e:
        click.echo(f"ERROR: Server error: {e}", err=True)
        sys.exit(1)


@main.command()
@settings_options
def doctor(
    client_id: str | None,
    client_secret: str | None,
    refresh_token: str | None,
    log_level: str,
    http_timeout: float,
) -> None:
    """Check configuration and try one token refresh.

    Verifies:
    1. The three OAuth secrets are set
    2. Google accepts the refresh token
    """
    from gcollab_mcp.auth import OAuthManager

    click.echo("gcollab-mcp Status:")
    click.echo("")

    click.echo("Configuration:")
    provided = {
        "GOOGLE_CLIENT_ID": client_id,
        "GOOGLE_CLIENT_SECRET": client_secret,
        "GOOGLE_REFRESH_TOKEN": refresh_token,
    }
    for name, value in provided.items():
        click.echo(f"  {'✓' if value else '❌'} {name}")
    click.echo("")

    settings = _load_settings(
        client_id=client_id,
        client_secret=client_secret,
        refresh_token=refresh_token,
        log_level=log_level,
        http_timeout=http_timeout,
    )

    click.echo("Authentication:")
    manager = OAuthManager(settings)
    try:
        token = asyncio.run(manager.refresh())
    except Exception as e:
        click.echo(f"  ❌ Token refresh failed: {classify_error(e)}")
        sys.exit(1)

    click.echo("  ✓ Refresh token accepted")
    click.echo(f"  Token expires: {token.expires_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    click.echo(f"  Scopes: {len(token.scopes)} configured")
    click.echo("")
    click.echo("✓ Ready to use!")


@main.command()
def tools() -> None:
    """List the registered tools with their hints."""
    from gcollab_mcp.tools import ALL_TOOLS

    click.echo(f"{len(ALL_TOOLS)} tools:")
    for tool in ALL_TOOLS:
        hints = [
            name
            for name, enabled in (
                ("read-only", tool.read_only),
                ("destructive", tool.destructive),
                ("idempotent", tool.idempotent),
            )
            if enabled
        ]
        suffix = f" [{', '.join(hints)}]" if hints else ""
        click.echo(f"  {tool.name}: {tool.title}{suffix}")


if __name__ == "__main__":
    main()
