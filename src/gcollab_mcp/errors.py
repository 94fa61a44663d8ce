"""Error types and failure classification for tool invocations.

Google failures reach us either as httpx.HTTPStatusError (REST calls) or as
google-auth exceptions (token refresh). Both are reduced to one of a small
set of human-readable messages by classify_error(), which is the only thing
the MCP host ever sees of a failed call.
"""

import httpx
from pydantic import ValidationError

AUTH_FAILED = (
    "Error: Authentication failed. "
    "Please check your Google OAuth credentials and refresh token."
)
PERMISSION_DENIED = (
    "Error: Permission denied. Ensure the OAuth token has the required scopes "
    "(documents, drive, spreadsheets, gmail)."
)
NOT_FOUND = "Error: Resource not found. Please check the document, file, message or comment ID."
RATE_LIMITED = "Error: Rate limit exceeded. Please wait before making more requests."


class ConfigurationError(ValueError):
    """Raised when startup settings are missing or invalid."""


class RemoteResponseError(RuntimeError):
    """Raised when a Google response lacks a field the operation needs."""


def _status_code(error: BaseException) -> int | None:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


def _google_error_message(response: httpx.Response) -> str | None:
    """Pull ``error.message`` out of a Google JSON error body, if present."""
    try:
        payload = response.json()
    except Exception:  # body unread, empty or not JSON
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str):
        # OAuth token endpoint style: {"error": "invalid_grant", ...}
        description = payload.get("error_description")
        return f"{error}: {description}" if description else error
    return None


def describe_error(error: BaseException) -> str:
    """Return the failure text used for matching and for error details."""
    message = str(error) or error.__class__.__name__
    if isinstance(error, httpx.HTTPStatusError):
        google_message = _google_error_message(error.response)
        if google_message and google_message not in message:
            message = f"{message} ({google_message})"
    return message


def format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic validation errors into one line."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "input"
        problems.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(problems)


def classify_error(error: object) -> str:
    """Map any failure to a single human-readable message.

    Checks run in a fixed priority order and the first match wins:
    authentication, permission, not found, rate limit, invalid request,
    then a generic message carrying the original text. HTTP status codes are
    used when the failure carries one; otherwise the failure text is matched
    for the status number. Never raises.

    Args:
        error: The exception (or any other raised value) to classify.

    Returns:
        Message suitable for returning to the MCP host.
    """
    if not isinstance(error, BaseException):
        return f"Error: Unexpected error occurred: {error}"

    if isinstance(error, ValidationError):
        return f"Error: Invalid input: {format_validation_error(error)}"

    message = describe_error(error)
    status = _status_code(error)

    def matches(code: int) -> bool:
        if status is not None:
            return status == code
        return str(code) in message

    if "invalid_grant" in message or matches(401):
        return AUTH_FAILED
    if matches(403):
        return PERMISSION_DENIED
    if matches(404):
        return NOT_FOUND
    if matches(429):
        return RATE_LIMITED
    if matches(400):
        return f"Error: Invalid request. {message}"

    return f"Error: {message}"
