"""MCP server for Google Docs, Sheets, Drive and Gmail.

Docs Tools (3):
- Read documents as plain text
- Create documents with optional body
- Apply raw batchUpdate requests

Drive Tools (8):
- List, create, reply to, resolve and delete comments
- List and search files
- Download file content (Google formats exported to text)

Sheets Tools (8):
- Read spreadsheet metadata and cell values
- Update, append and clear values
- Create spreadsheets and apply batchUpdate requests

Gmail Tools (5, read-only):
- List and read messages
- List and read threads
- List labels

Transport: Stdio
Authentication: OAuth 2.0 refresh token from the environment
"""

from gcollab_mcp.config import Settings
from gcollab_mcp.server.collab_server import CollabServer, main


def create_server(settings: Settings) -> CollabServer:
    """Create a CollabServer from loaded settings.

    Example:
        >>> server = create_server(Settings.from_env())
        >>> asyncio.run(server.run())
    """
    return CollabServer.from_settings(settings)


__all__ = ["create_server", "CollabServer", "main"]
