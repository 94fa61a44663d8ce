"""JSON and markdown rendering of tool results.

JSON output is the full structured result and is never truncated. Markdown
output uses a per-operation template and is cut to CHARACTER_LIMIT
characters with a truncation marker appended.
"""

import json
import unicodedata
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from gcollab_mcp.constants import CHARACTER_LIMIT, DATA_TRUNCATED, ResponseFormat
from gcollab_mcp.models import (
    BatchValueRanges,
    Comment,
    CommentList,
    DocumentContent,
    DriveFile,
    FileContent,
    FileList,
    Label,
    LabelList,
    Message,
    MessageList,
    MessageSummary,
    ResultModel,
    SheetInfo,
    SpreadsheetInfo,
    Thread,
    ThreadList,
    ThreadSummary,
    ValueRange,
)

R = TypeVar("R", bound=ResultModel)


def truncate(text: str, marker: str = DATA_TRUNCATED) -> str:
    """Cut text to CHARACTER_LIMIT characters, appending marker when cut."""
    if len(text) <= CHARACTER_LIMIT:
        return text
    return text[:CHARACTER_LIMIT] + marker


def to_json(result: ResultModel) -> str:
    """Serialize a result the same way as its structured content."""
    return json.dumps(result.to_structured(), indent=2, ensure_ascii=False)


def render(
    result: R,
    response_format: ResponseFormat,
    markdown: Callable[[R], str],
    marker: str = DATA_TRUNCATED,
) -> str:
    """Render a result in the requested format.

    Args:
        result: Normalized tool result.
        response_format: JSON or markdown.
        markdown: Template producing the markdown form of ``result``.
        marker: Truncation marker for the markdown form.

    Returns:
        The rendered text.
    """
    if response_format == ResponseFormat.JSON:
        return to_json(result)
    return truncate(markdown(result), marker)


def _more_available(next_page_token: str | None) -> str:
    return " (more available)" if next_page_token else ""


def _page_hint(next_page_token: str | None, noun: str) -> list[str]:
    if not next_page_token:
        return []
    return [f'*Use page_token="{next_page_token}" to load more {noun}.*']


# =============================================================================
# Tabular data
# =============================================================================


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_values_table(values: list[list[Any]] | None, cell_range: str) -> str:
    """Render a 2D value grid as a markdown table.

    Column headers are synthesized (``Col 1``, ``Col 2``, ...) from the width
    of the first row.
    """
    if not values:
        return f"No data found in range: {cell_range}"

    headers = [f"Col {i + 1}" for i in range(len(values[0]))]
    lines = [
        f"## Data from {cell_range}",
        "",
        f"| {' | '.join(headers)} |",
        f"| {' | '.join('---' for _ in headers)} |",
    ]
    for row in values:
        lines.append(f"| {' | '.join(format_cell(cell) for cell in row)} |")

    return "\n".join(lines)


def values_markdown(result: ValueRange) -> str:
    return format_values_table(result.values, result.range or "Unknown")


def batch_values_markdown(result: BatchValueRanges) -> str:
    return "\n\n---\n\n".join(
        format_values_table(vr.values, vr.range or "Unknown") for vr in result.value_ranges
    )


def format_sheet_info(sheet: SheetInfo) -> str:
    return "\n".join(
        [
            f"- **{sheet.title}** (ID: {sheet.sheet_id})",
            f"  - Rows: {sheet.row_count}",
            f"  - Columns: {sheet.column_count}",
        ]
    )


def spreadsheet_markdown(result: SpreadsheetInfo) -> str:
    sheet_info = "\n".join(format_sheet_info(sheet) for sheet in result.sheets)
    return "\n".join(
        [
            f"# {result.title}",
            "",
            f"**Spreadsheet ID**: {result.spreadsheet_id}",
            f"**URL**: {result.spreadsheet_url or 'N/A'}",
            f"**Locale**: {result.locale}",
            "",
            "## Sheets",
            "",
            sheet_info or "No sheets found",
        ]
    )


# =============================================================================
# Documents and files
# =============================================================================


def document_markdown(result: DocumentContent) -> str:
    return "\n".join(
        [
            f"# {result.title}",
            "",
            f"**Document ID**: {result.document_id}",
            f"**Revision ID**: {result.revision_id or 'N/A'}",
            "",
            "## Content",
            "",
            result.text_content,
        ]
    )


def format_file(file: DriveFile) -> str:
    lines = [
        f"### {file.name}",
        f"- **ID**: `{file.id}`",
        f"- **Type**: {file.mime_type}",
        f"- **Modified**: {file.modified_time or 'Unknown'}",
    ]
    if file.owners:
        lines.append(f"- **Owners**: {', '.join(file.owners)}")
    if file.web_view_link:
        lines.append(f"- **Link**: {file.web_view_link}")
    return "\n".join(lines)


def file_list_markdown(result: FileList, heading: str = "Drive Files") -> str:
    if not result.files:
        return "No files found."

    lines = [
        f"# {heading}",
        "",
        f"Found {len(result.files)} file(s){_more_available(result.next_page_token)}.",
        "",
    ]
    for file in result.files:
        lines.extend([format_file(file), ""])
    lines.extend(_page_hint(result.next_page_token, "files"))
    return "\n".join(lines)


def file_content_markdown(result: FileContent) -> str:
    return "\n".join(
        [
            f"# {result.name}",
            "",
            f"**File ID**: {result.id}",
            f"**Type**: {result.mime_type}",
            "",
            "## Content",
            "",
            result.content,
        ]
    )


# =============================================================================
# Comments
# =============================================================================


def format_comment(comment: Comment) -> str:
    """Render one comment and its replies as a markdown block."""
    lines = [
        f"### Comment by {comment.author}",
        f"**ID**: {comment.id}",
        f"**Created**: {comment.created_time}",
    ]
    if comment.modified_time:
        lines.append(f"**Modified**: {comment.modified_time}")
    lines.append(f"**Status**: {'Resolved' if comment.resolved else 'Open'}")

    if comment.quoted_file_content:
        lines.append(f'**Quoted Text**: "{comment.quoted_file_content}"')

    lines.extend(["", comment.content])

    if comment.replies:
        lines.extend(["", "**Replies**:"])
        for reply in comment.replies:
            lines.append(f"- **{reply.author}** ({reply.created_time}): {reply.content}")

    return "\n".join(lines)


def comment_list_markdown(result: CommentList) -> str:
    if not result.comments:
        return "No comments found on this document."

    lines = [
        "# Comments on Document",
        "",
        f"Found {len(result.comments)} comment(s){_more_available(result.next_page_token)}.",
        "",
    ]
    for comment in result.comments:
        lines.extend([format_comment(comment), "---", ""])
    lines.extend(_page_hint(result.next_page_token, "comments"))
    return "\n".join(lines)


# =============================================================================
# Gmail
# =============================================================================


def format_message_summary(message: MessageSummary) -> str:
    lines = [
        f"### {message.subject or '(no subject)'}",
        f"- **From**: {message.from_ or 'Unknown'}",
        f"- **To**: {message.to or 'Unknown'}",
        f"- **Date**: {message.date or 'Unknown'}",
        f"- **ID**: `{message.id}`",
    ]
    if message.labels:
        lines.append(f"- **Labels**: {', '.join(message.labels)}")
    if message.snippet:
        lines.append(f"- **Preview**: {message.snippet}")
    return "\n".join(lines)


def message_list_markdown(result: MessageList, query: str | None = None) -> str:
    if not result.messages:
        return f'No messages found matching "{query}".' if query else "No messages found."

    lines = [
        "# Gmail Messages",
        "",
        f"Found {len(result.messages)} message(s){_more_available(result.next_page_token)}.",
        "",
    ]
    for message in result.messages:
        lines.extend([format_message_summary(message), ""])
    lines.extend(_page_hint(result.next_page_token, "messages"))
    return "\n".join(lines)


def message_markdown(result: Message) -> str:
    lines = [
        f"# {result.subject or '(no subject)'}",
        "",
        f"**From**: {result.from_ or 'Unknown'}",
        f"**To**: {result.to or 'Unknown'}",
    ]
    if result.cc:
        lines.append(f"**CC**: {result.cc}")
    lines.extend(
        [
            f"**Date**: {result.date or 'Unknown'}",
            f"**Labels**: {', '.join(result.labels) or 'None'}",
            "",
            "---",
            "",
            result.body or "(no body content)",
        ]
    )
    return "\n".join(lines)


def format_thread_summary(thread: ThreadSummary) -> str:
    return "\n".join(
        [
            f"### {thread.subject}",
            f"- **From**: {thread.from_}",
            f"- **Messages**: {thread.message_count}",
            f"- **Last activity**: {thread.date}",
            f"- **ID**: `{thread.id}`",
            f"- **Preview**: {thread.snippet}",
        ]
    )


def thread_list_markdown(result: ThreadList) -> str:
    if not result.threads:
        return "No threads found."

    lines = [
        "# Gmail Threads",
        "",
        f"Found {len(result.threads)} thread(s){_more_available(result.next_page_token)}.",
        "",
    ]
    for thread in result.threads:
        lines.extend([format_thread_summary(thread), ""])
    lines.extend(_page_hint(result.next_page_token, "threads"))
    return "\n".join(lines)


def thread_markdown(result: Thread) -> str:
    first_subject = result.messages[0].subject if result.messages else None
    lines = [
        f"# Thread: {first_subject or '(no subject)'}",
        "",
        f"{len(result.messages)} message(s) in this thread.",
        "",
    ]
    for index, message in enumerate(result.messages, start=1):
        lines.extend(
            [
                f"## Message {index}",
                "",
                f"**From**: {message.from_ or 'Unknown'}",
                f"**To**: {message.to or 'Unknown'}",
                f"**Date**: {message.date or 'Unknown'}",
                "",
                message.body or "(no body content)",
                "",
                "---",
                "",
            ]
        )
    return "\n".join(lines)


def sort_labels(labels: Iterable[Label]) -> list[Label]:
    """Order labels system first, then user labels, each by name.

    Names compare by base letter first, so accented names sort beside their
    unaccented forms; accents and case only break ties.
    """
    return sorted(
        labels,
        key=lambda label: (
            label.type != "system",
            _collation_key(label.name),
            label.name.casefold(),
            label.name,
        ),
    )


def _collation_key(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def label_list_markdown(result: LabelList) -> str:
    system_labels = [label for label in result.labels if label.type == "system"]
    user_labels = [label for label in result.labels if label.type != "system"]

    lines = ["# Gmail Labels", "", "## System Labels", ""]
    for label in system_labels:
        lines.append(f"- **{label.name}** (`{label.id}`)")

    if user_labels:
        lines.extend(["", "## User Labels", ""])
        for label in user_labels:
            lines.append(f"- **{label.name}** (`{label.id}`)")

    return "\n".join(lines)
