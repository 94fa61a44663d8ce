"""Google Drive tools: comment threads and file listing, search and download."""

from datetime import datetime, timezone
from typing import Any

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import CONTENT_TRUNCATED, DRIVE_API_BASE
from gcollab_mcp.models import (
    Comment,
    CommentList,
    DeletedComment,
    DriveFile,
    FileContent,
    FileList,
    Reply,
    ResolvedComment,
)
from gcollab_mcp.rendering import (
    comment_list_markdown,
    file_content_markdown,
    file_list_markdown,
    render,
    truncate,
)
from gcollab_mcp.schemas.drive import (
    CreateCommentInput,
    DeleteCommentInput,
    GetFileInput,
    ListCommentsInput,
    ListFilesInput,
    ReplyToCommentInput,
    ResolveCommentInput,
    SearchFilesInput,
)
from gcollab_mcp.tools.base import ToolDefinition, ToolResult

COMMENT_LIST_FIELDS = (
    "comments(id,content,author,createdTime,modifiedTime,resolved,quotedFileContent,replies),"
    "nextPageToken"
)
COMMENT_FIELDS = "id,content,author,createdTime"
FILE_LIST_FIELDS = "nextPageToken,files(id,name,mimeType,modifiedTime,webViewLink,owners)"

MIME_TYPE_FILTERS = {
    "documents": "application/vnd.google-apps.document",
    "spreadsheets": "application/vnd.google-apps.spreadsheet",
    "presentations": "application/vnd.google-apps.presentation",
    "folders": "application/vnd.google-apps.folder",
}

# Google Workspace formats have no binary content and must be exported
EXPORT_FORMATS = {
    "application/vnd.google-apps.document": "text/plain",
    "application/vnd.google-apps.spreadsheet": "text/csv",
    "application/vnd.google-apps.presentation": "text/plain",
}


def _author_name(raw: dict[str, Any], default: str = "Unknown") -> str:
    return (raw.get("author") or {}).get("displayName") or default


def _to_reply(raw: dict[str, Any]) -> Reply:
    return Reply(
        id=raw.get("id") or "",
        content=raw.get("content") or "",
        author=_author_name(raw),
        created_time=raw.get("createdTime") or "Unknown",
    )


def _to_comment(raw: dict[str, Any]) -> Comment:
    return Comment(
        id=raw.get("id") or "",
        content=raw.get("content") or "",
        author=_author_name(raw),
        created_time=raw.get("createdTime") or "Unknown",
        modified_time=raw.get("modifiedTime"),
        resolved=bool(raw.get("resolved", False)),
        quoted_file_content=(raw.get("quotedFileContent") or {}).get("value"),
        replies=[_to_reply(reply) for reply in raw.get("replies") or []],
    )


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =============================================================================
# Comments
# =============================================================================


async def list_comments(client: WorkspaceClient, params: ListCommentsInput) -> ToolResult:
    """List one page of comments with their replies."""
    query: dict[str, Any] = {
        "includeDeleted": str(params.include_deleted).lower(),
        "pageSize": params.page_size,
        "fields": COMMENT_LIST_FIELDS,
    }
    if params.page_token:
        query["pageToken"] = params.page_token

    response = await client.request(
        "GET", f"{DRIVE_API_BASE}/files/{params.file_id}/comments", params=query
    )

    result = CommentList(
        comments=[_to_comment(comment) for comment in response.get("comments") or []],
        next_page_token=response.get("nextPageToken") or None,
    )
    text = render(result, params.response_format, comment_list_markdown)
    return ToolResult.of(result, text)


async def create_comment(client: WorkspaceClient, params: CreateCommentInput) -> ToolResult:
    """Add a comment, anchored to quoted text when given."""
    body: dict[str, Any] = {"content": params.content}
    if params.quoted_text:
        body["quotedFileContent"] = {"value": params.quoted_text}

    response = await client.request(
        "POST",
        f"{DRIVE_API_BASE}/files/{params.file_id}/comments",
        params={"fields": COMMENT_FIELDS},
        json_data=body,
    )

    result = Reply(
        id=response.get("id") or "",
        content=response.get("content") or params.content,
        author=_author_name(response, default="You"),
        created_time=response.get("createdTime") or _now_iso(),
    )
    text = (
        "Comment created successfully.\n\n"
        f"**ID**: {result.id}\n**Author**: {result.author}\n**Content**: {result.content}"
    )
    return ToolResult.of(result, text)


async def reply_to_comment(client: WorkspaceClient, params: ReplyToCommentInput) -> ToolResult:
    response = await client.request(
        "POST",
        f"{DRIVE_API_BASE}/files/{params.file_id}/comments/{params.comment_id}/replies",
        params={"fields": COMMENT_FIELDS},
        json_data={"content": params.content},
    )

    result = Reply(
        id=response.get("id") or "",
        content=response.get("content") or params.content,
        author=_author_name(response, default="You"),
        created_time=response.get("createdTime") or _now_iso(),
    )
    text = (
        "Reply created successfully.\n\n"
        f"**Reply ID**: {result.id}\n**Comment ID**: {params.comment_id}\n"
        f"**Content**: {result.content}"
    )
    return ToolResult.of(result, text)


async def resolve_comment(client: WorkspaceClient, params: ResolveCommentInput) -> ToolResult:
    await client.request(
        "PATCH",
        f"{DRIVE_API_BASE}/files/{params.file_id}/comments/{params.comment_id}",
        params={"fields": "id,resolved"},
        json_data={"resolved": True},
    )

    result = ResolvedComment(id=params.comment_id)
    return ToolResult.of(result, f"Comment {params.comment_id} has been marked as resolved.")


async def delete_comment(client: WorkspaceClient, params: DeleteCommentInput) -> ToolResult:
    await client.delete(f"{DRIVE_API_BASE}/files/{params.file_id}/comments/{params.comment_id}")

    result = DeletedComment(comment_id=params.comment_id)
    return ToolResult.of(result, f"Comment {params.comment_id} has been deleted.")


# =============================================================================
# Files
# =============================================================================


def _escape_query_value(value: str) -> str:
    """Escape a literal for use inside a quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_file_query(mime_type: str, search: str | None = None) -> str:
    """Build a Drive ``q`` expression for the given filter and search text."""
    clauses = []
    if search:
        escaped = _escape_query_value(search)
        clauses.append(f"(name contains '{escaped}' or fullText contains '{escaped}')")
    clauses.append("trashed = false")
    if mime_type in MIME_TYPE_FILTERS:
        clauses.append(f"mimeType = '{MIME_TYPE_FILTERS[mime_type]}'")
    return " and ".join(clauses)


def _to_file(raw: dict[str, Any]) -> DriveFile:
    owners = [
        owner.get("displayName") or owner.get("emailAddress") or "Unknown"
        for owner in raw.get("owners") or []
    ]
    return DriveFile(
        id=raw.get("id") or "",
        name=raw.get("name") or "Untitled",
        mime_type=raw.get("mimeType") or "",
        modified_time=raw.get("modifiedTime"),
        web_view_link=raw.get("webViewLink"),
        owners=owners,
    )


async def _fetch_files(
    client: WorkspaceClient,
    q: str,
    page_size: int,
    page_token: str | None,
    order_by: str | None = None,
) -> FileList:
    query: dict[str, Any] = {"q": q, "pageSize": page_size, "fields": FILE_LIST_FIELDS}
    if order_by:
        query["orderBy"] = order_by
    if page_token:
        query["pageToken"] = page_token

    response = await client.request("GET", f"{DRIVE_API_BASE}/files", params=query)
    return FileList(
        files=[_to_file(item) for item in response.get("files") or []],
        next_page_token=response.get("nextPageToken") or None,
    )


async def list_files(client: WorkspaceClient, params: ListFilesInput) -> ToolResult:
    result = await _fetch_files(
        client,
        build_file_query(params.mime_type),
        params.page_size,
        params.page_token,
        order_by=params.order_by,
    )
    text = render(result, params.response_format, file_list_markdown)
    return ToolResult.of(result, text)


async def search_files(client: WorkspaceClient, params: SearchFilesInput) -> ToolResult:
    # Drive rejects orderBy together with fullText queries
    result = await _fetch_files(
        client,
        build_file_query(params.mime_type, search=params.query),
        params.page_size,
        params.page_token,
    )
    text = render(
        result,
        params.response_format,
        lambda r: file_list_markdown(r, heading=f'Search Results for "{params.query}"'),
    )
    return ToolResult.of(result, text)


async def get_file(client: WorkspaceClient, params: GetFileInput) -> ToolResult:
    """Download a file, exporting Google formats to text first."""
    url = f"{DRIVE_API_BASE}/files/{params.file_id}"
    metadata = await client.request("GET", url, params={"fields": "id,name,mimeType,size"})
    mime_type = metadata.get("mimeType") or ""

    if mime_type in EXPORT_FORMATS:
        response = await client.request_raw(
            "GET", f"{url}/export", params={"mimeType": EXPORT_FORMATS[mime_type]}
        )
    else:
        response = await client.request_raw("GET", url, params={"alt": "media"})

    try:
        content = response.content.decode("utf-8")
    except UnicodeDecodeError:
        content = f"[Binary file: {metadata.get('size', len(response.content))} bytes]"

    result = FileContent(
        id=metadata.get("id") or params.file_id,
        name=metadata.get("name") or "Untitled",
        mime_type=mime_type,
        content=content,
    )
    text = truncate(file_content_markdown(result), CONTENT_TRUNCATED)
    return ToolResult.of(result, text)


_FILE_FILTER_HELP = (
    "  - mime_type ('all' | 'documents' | 'spreadsheets' | 'presentations' | 'folders'): "
    "Filter by file type (default: 'all')"
)

DRIVE_TOOLS = [
    ToolDefinition(
        name="drive_list_comments",
        title="List Document Comments",
        description="""List comments on a Google Doc.

Args:
  - file_id (string): The ID of the Google Doc
  - include_deleted (boolean): Include deleted comments (default: false)
  - page_size (number): Max comments to return, 1-100 (default: 20)
  - page_token (string, optional): Pagination token for next page
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  For JSON format:
  {
    "comments": [
      {
        "id": string,
        "content": string,
        "author": string,
        "createdTime": string,
        "resolved": boolean,
        "quotedFileContent": string,
        "replies": [{ "id", "content", "author", "createdTime" }]
      }
    ],
    "next_page_token": string | null
  }""",
        input_model=ListCommentsInput,
        handler=list_comments,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="drive_create_comment",
        title="Create Comment on Document",
        description="""Add a comment to a Google Doc. Can be anchored to specific text or unanchored.

Args:
  - file_id (string): The ID of the Google Doc
  - content (string): The text content of the comment
  - quoted_text (string, optional): Text to anchor the comment to

Returns:
  {
    "id": string,
    "content": string,
    "author": string,
    "createdTime": string
  }

Examples:
  - Unanchored: file_id="...", content="Please review this section"
  - Anchored: file_id="...", content="Typo here", quoted_text="teh\"""",
        input_model=CreateCommentInput,
        handler=create_comment,
    ),
    ToolDefinition(
        name="drive_reply_to_comment",
        title="Reply to Comment",
        description="""Reply to an existing comment on a Google Doc.

Args:
  - file_id (string): The ID of the Google Doc
  - comment_id (string): The ID of the comment to reply to
  - content (string): The text content of the reply

Returns:
  {
    "id": string,
    "content": string,
    "author": string,
    "createdTime": string
  }""",
        input_model=ReplyToCommentInput,
        handler=reply_to_comment,
    ),
    ToolDefinition(
        name="drive_resolve_comment",
        title="Resolve Comment",
        description="""Mark a comment as resolved on a Google Doc.

Args:
  - file_id (string): The ID of the Google Doc
  - comment_id (string): The ID of the comment to resolve

Returns:
  {
    "id": string,
    "resolved": true
  }""",
        input_model=ResolveCommentInput,
        handler=resolve_comment,
        idempotent=True,
    ),
    ToolDefinition(
        name="drive_delete_comment",
        title="Delete Comment",
        description="""Delete a comment from a Google Doc.

Args:
  - file_id (string): The ID of the Google Doc
  - comment_id (string): The ID of the comment to delete

Returns:
  {
    "deleted": true,
    "comment_id": string
  }

Note: This action cannot be undone.""",
        input_model=DeleteCommentInput,
        handler=delete_comment,
        destructive=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="drive_list_files",
        title="List Drive Files",
        description=f"""List files in Google Drive, most recently modified first by default.

Args:
  - page_size (number): Max files to return, 1-100 (default: 20)
  - page_token (string, optional): Pagination token for next page
  - order_by (string): Sort order (default: 'modifiedTime desc')
{_FILE_FILTER_HELP}
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {{
    "files": [{{ "id", "name", "mimeType", "modifiedTime", "webViewLink", "owners" }}],
    "next_page_token": string | null
  }}""",
        input_model=ListFilesInput,
        handler=list_files,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="drive_search_files",
        title="Search Drive Files",
        description=f"""Search Google Drive files by name and content.

Args:
  - query (string): Text to search for in file names and content
  - page_size (number): Max files to return, 1-100 (default: 20)
  - page_token (string, optional): Pagination token for next page
{_FILE_FILTER_HELP}
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  Same shape as drive_list_files.

Examples:
  - Find budget sheets: query="budget", mime_type="spreadsheets\"""",
        input_model=SearchFilesInput,
        handler=search_files,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="drive_get_file",
        title="Get Drive File Content",
        description="""Download the content of a Drive file.

Google Docs and Slides are exported as plain text and Sheets as CSV. Other
files are downloaded as-is; non-UTF-8 content is reported as binary.

Args:
  - file_id (string): The ID of the file (found in the URL)

Returns:
  {
    "id": string,
    "name": string,
    "mimeType": string,
    "content": string
  }""",
        input_model=GetFileInput,
        handler=get_file,
        read_only=True,
        idempotent=True,
    ),
]
