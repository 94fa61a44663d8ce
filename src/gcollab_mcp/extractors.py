"""Plain-text extraction from Google Docs bodies and Gmail payloads.

Pure functions over the JSON structures returned by the Docs and Gmail
APIs. No I/O and no logging here.
"""

import base64
import re
from typing import Any

TABLE_PLACEHOLDER = "[TABLE]"

_HTML_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")


def extract_document_text(body: dict[str, Any] | None) -> str:
    """Flatten a Google Docs body into plain text.

    Paragraph text runs are concatenated in document order. Tables are not
    walked; each contributes a single ``[TABLE]`` marker.

    Args:
        body: The ``body`` section of a Docs API document, or None.

    Returns:
        Plain text content, empty when the body has no content.
    """
    if not body:
        return ""

    text_parts: list[str] = []
    for element in body.get("content") or []:
        paragraph = element.get("paragraph")
        if paragraph:
            for para_element in paragraph.get("elements") or []:
                content = (para_element.get("textRun") or {}).get("content")
                if content:
                    text_parts.append(content)
        if "table" in element:
            text_parts.append(TABLE_PLACEHOLDER)

    return "".join(text_parts)


def decode_base64url(data: str) -> str:
    """Decode Gmail's URL-safe base64 body data to text.

    Gmail omits padding, so it is restored before decoding. Invalid input
    raises ``binascii.Error`` (a ValueError).
    """
    standard = data.replace("-", "+").replace("_", "/")
    missing_padding = len(standard) % 4
    if missing_padding:
        standard += "=" * (4 - missing_padding)
    return base64.b64decode(standard, validate=True).decode("utf-8", errors="replace")


def strip_html(html: str) -> str:
    """Remove tags and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", _HTML_TAG.sub("", html)).strip()


def _part_data(part: dict[str, Any]) -> str | None:
    return (part.get("body") or {}).get("data") or None


def extract_message_body(payload: dict[str, Any] | None) -> str:
    """Extract the readable body of a Gmail message part tree.

    Selection order:
        1. data carried inline on the node itself
        2. the first ``text/plain`` child
        3. the first ``text/html`` child, with markup stripped
        4. the first non-empty result of recursing into children

    Args:
        payload: A Gmail ``MessagePart`` (usually ``message["payload"]``).

    Returns:
        Decoded body text, or an empty string when nothing is found.
    """
    if not payload:
        return ""

    data = _part_data(payload)
    if data:
        return decode_base64url(data)

    parts = payload.get("parts") or []

    for part in parts:
        data = _part_data(part)
        if part.get("mimeType") == "text/plain" and data:
            return decode_base64url(data)

    for part in parts:
        data = _part_data(part)
        if part.get("mimeType") == "text/html" and data:
            return strip_html(decode_base64url(data))

    for part in parts:
        nested = extract_message_body(part)
        if nested:
            return nested

    return ""


def get_header(headers: list[dict[str, Any]] | None, name: str) -> str | None:
    """Look up a message header value by case-insensitive name."""
    wanted = name.lower()
    for header in headers or []:
        if str(header.get("name", "")).lower() == wanted:
            return header.get("value")
    return None
