"""Shared constants for gcollab-mcp."""

from enum import Enum

SERVER_NAME = "gcollab-mcp"

# Maximum length of a markdown rendering before truncation
CHARACTER_LIMIT = 25000

DATA_TRUNCATED = "\n\n[Data truncated...]"
CONTENT_TRUNCATED = "\n\n[Content truncated...]"

# Google API base URLs
DOCS_API_BASE = "https://docs.googleapis.com/v1"
DRIVE_API_BASE = "https://www.googleapis.com/drive/v3"
SHEETS_API_BASE = "https://sheets.googleapis.com/v4"
GMAIL_API_BASE = "https://gmail.googleapis.com/gmail/v1"

TOKEN_URI = "https://oauth2.googleapis.com/token"  # nosec B105 - public endpoint

SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/gmail.readonly",
]


class ResponseFormat(str, Enum):
    """Output format requested by the caller."""

    MARKDOWN = "markdown"
    JSON = "json"
