"""Gmail tools (read-only): messages, threads and labels.

Listing endpoints only return IDs, so the list tools fetch metadata for each
item concurrently and reassemble the results in list order. A failed detail
fetch fails the whole listing.
"""

import asyncio
from typing import Any

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import CONTENT_TRUNCATED, GMAIL_API_BASE
from gcollab_mcp.extractors import extract_message_body, get_header
from gcollab_mcp.models import (
    Label,
    LabelList,
    Message,
    MessageList,
    MessageSummary,
    Thread,
    ThreadList,
    ThreadMessage,
    ThreadSummary,
)
from gcollab_mcp.rendering import (
    label_list_markdown,
    message_list_markdown,
    message_markdown,
    render,
    sort_labels,
    thread_list_markdown,
    thread_markdown,
)
from gcollab_mcp.schemas.gmail import (
    GetMessageInput,
    GetThreadInput,
    ListLabelsInput,
    ListMessagesInput,
    ListThreadsInput,
)
from gcollab_mcp.tools.base import ToolDefinition, ToolResult

USER_BASE = f"{GMAIL_API_BASE}/users/me"

MESSAGE_METADATA_HEADERS = ["From", "To", "Subject", "Date"]
THREAD_METADATA_HEADERS = ["From", "Subject", "Date"]


def _list_params(params: ListMessagesInput) -> dict[str, Any]:
    query: dict[str, Any] = {"maxResults": params.max_results}
    if params.query:
        query["q"] = params.query
    if params.label_ids:
        query["labelIds"] = params.label_ids
    if params.page_token:
        query["pageToken"] = params.page_token
    return query


def _headers(message: dict[str, Any]) -> list[dict[str, Any]]:
    return (message.get("payload") or {}).get("headers") or []


# =============================================================================
# Messages
# =============================================================================


async def _message_summary(client: WorkspaceClient, item: dict[str, Any]) -> MessageSummary:
    detail = await client.request(
        "GET",
        f"{USER_BASE}/messages/{item['id']}",
        params={"format": "metadata", "metadataHeaders": MESSAGE_METADATA_HEADERS},
    )
    headers = _headers(detail)
    return MessageSummary(
        id=item.get("id") or "",
        thread_id=item.get("threadId") or "",
        from_=get_header(headers, "From"),
        to=get_header(headers, "To"),
        subject=get_header(headers, "Subject"),
        date=get_header(headers, "Date"),
        snippet=detail.get("snippet") or "",
        labels=detail.get("labelIds") or [],
    )


async def list_messages(client: WorkspaceClient, params: ListMessagesInput) -> ToolResult:
    """Search messages and fetch header metadata for each hit."""
    response = await client.request("GET", f"{USER_BASE}/messages", params=_list_params(params))

    items = response.get("messages") or []
    messages = await asyncio.gather(*(_message_summary(client, item) for item in items))

    result = MessageList(
        messages=list(messages),
        result_count=len(messages),
        next_page_token=response.get("nextPageToken") or None,
    )
    text = render(
        result,
        params.response_format,
        lambda r: message_list_markdown(r, query=params.query),
    )
    return ToolResult.of(result, text)


async def get_message(client: WorkspaceClient, params: GetMessageInput) -> ToolResult:
    """Fetch a full message and decode its readable body."""
    message = await client.request(
        "GET", f"{USER_BASE}/messages/{params.message_id}", params={"format": "full"}
    )
    headers = _headers(message)

    result = Message(
        id=message.get("id") or params.message_id,
        thread_id=message.get("threadId") or "",
        from_=get_header(headers, "From"),
        to=get_header(headers, "To"),
        cc=get_header(headers, "Cc"),
        subject=get_header(headers, "Subject"),
        date=get_header(headers, "Date"),
        labels=message.get("labelIds") or [],
        body=extract_message_body(message.get("payload")),
    )
    text = render(result, params.response_format, message_markdown, CONTENT_TRUNCATED)
    return ToolResult.of(result, text)


# =============================================================================
# Threads
# =============================================================================


async def _thread_summary(client: WorkspaceClient, item: dict[str, Any]) -> ThreadSummary:
    detail = await client.request(
        "GET",
        f"{USER_BASE}/threads/{item['id']}",
        params={"format": "metadata", "metadataHeaders": THREAD_METADATA_HEADERS},
    )
    messages = detail.get("messages") or []
    first_headers = _headers(messages[0]) if messages else []
    last_headers = _headers(messages[-1]) if messages else []

    return ThreadSummary(
        id=item.get("id") or "",
        subject=get_header(first_headers, "Subject") or "(no subject)",
        from_=get_header(first_headers, "From") or "Unknown",
        date=get_header(last_headers, "Date") or "",
        snippet=item.get("snippet") or "",
        message_count=len(messages),
    )


async def list_threads(client: WorkspaceClient, params: ListThreadsInput) -> ToolResult:
    """Search threads and summarize each from its first and last message."""
    response = await client.request("GET", f"{USER_BASE}/threads", params=_list_params(params))

    items = response.get("threads") or []
    threads = await asyncio.gather(*(_thread_summary(client, item) for item in items))

    result = ThreadList(
        threads=list(threads),
        result_count=len(threads),
        next_page_token=response.get("nextPageToken") or None,
    )
    text = render(result, params.response_format, thread_list_markdown)
    return ToolResult.of(result, text)


async def get_thread(client: WorkspaceClient, params: GetThreadInput) -> ToolResult:
    thread = await client.request(
        "GET", f"{USER_BASE}/threads/{params.thread_id}", params={"format": "full"}
    )

    messages = []
    for message in thread.get("messages") or []:
        headers = _headers(message)
        messages.append(
            ThreadMessage(
                id=message.get("id") or "",
                from_=get_header(headers, "From"),
                to=get_header(headers, "To"),
                subject=get_header(headers, "Subject"),
                date=get_header(headers, "Date"),
                body=extract_message_body(message.get("payload")),
            )
        )

    result = Thread(
        id=thread.get("id") or params.thread_id,
        message_count=len(messages),
        messages=messages,
    )
    text = render(result, params.response_format, thread_markdown, CONTENT_TRUNCATED)
    return ToolResult.of(result, text)


# =============================================================================
# Labels
# =============================================================================


async def list_labels(client: WorkspaceClient, params: ListLabelsInput) -> ToolResult:
    response = await client.request("GET", f"{USER_BASE}/labels")

    labels = [
        Label(
            id=label.get("id") or "",
            name=label.get("name") or "",
            type=label.get("type") or "user",
        )
        for label in response.get("labels") or []
    ]

    result = LabelList(labels=sort_labels(labels))
    text = render(result, params.response_format, label_list_markdown)
    return ToolResult.of(result, text)


_LIST_ARGS = """  - query (string, optional): Gmail search query (e.g., 'from:boss@company.com is:unread')
  - max_results (number): Maximum results to return, 1-100 (default: 10)
  - label_ids (array, optional): Filter by label IDs like 'INBOX', 'UNREAD', 'STARRED'
  - page_token (string, optional): Pagination token for next page
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')"""

GMAIL_TOOLS = [
    ToolDefinition(
        name="gmail_list_messages",
        title="List Gmail Messages",
        description=f"""List or search Gmail messages.

Args:
{_LIST_ARGS}

Returns:
  List of message summaries with ID, subject, from, date, and snippet.
  {{
    "messages": [{{ "id", "threadId", "from", "to", "subject", "date", "snippet", "labels" }}],
    "result_count": number,
    "next_page_token": string | null
  }}

Examples:
  - Unread mail: query="is:unread"
  - From a sender: query="from:alice@example.com", max_results=5""",
        input_model=ListMessagesInput,
        handler=list_messages,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="gmail_get_message",
        title="Get Gmail Message",
        description="""Retrieve the full content of a Gmail message.

Args:
  - message_id (string): The message ID to retrieve
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "id": string,
    "threadId": string,
    "from": string,
    "to": string,
    "cc": string,
    "subject": string,
    "date": string,
    "labels": [string],
    "body": string
  }""",
        input_model=GetMessageInput,
        handler=get_message,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="gmail_list_threads",
        title="List Gmail Threads",
        description=f"""List or search Gmail conversation threads.

Args:
{_LIST_ARGS}

Returns:
  List of threads with message count and snippet.
  {{
    "threads": [{{ "id", "subject", "from", "date", "snippet", "messageCount" }}],
    "result_count": number,
    "next_page_token": string | null
  }}""",
        input_model=ListThreadsInput,
        handler=list_threads,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="gmail_get_thread",
        title="Get Gmail Thread",
        description="""Retrieve every message in a Gmail conversation thread.

Args:
  - thread_id (string): The thread ID to retrieve
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "id": string,
    "messageCount": number,
    "messages": [{ "id", "from", "to", "subject", "date", "body" }]
  }""",
        input_model=GetThreadInput,
        handler=get_thread,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="gmail_list_labels",
        title="List Gmail Labels",
        description="""List all Gmail labels, system labels first.

Args:
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "labels": [{ "id": string, "name": string, "type": "system" | "user" }]
  }""",
        input_model=ListLabelsInput,
        handler=list_labels,
        read_only=True,
        idempotent=True,
    ),
]
