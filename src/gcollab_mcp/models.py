"""Normalized result models returned by the tools.

Every tool builds one of these from the raw Google response. The structured
MCP output and the JSON rendering both come from ``to_structured()``, and the
markdown renderers read the same instance, so the two presentations never
diverge. Field names serialize as camelCase, except the pagination envelope
keys which stay snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Base class for tool results."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_structured(self) -> dict[str, Any]:
        """Return the JSON-compatible structured form."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Docs
# =============================================================================


class DocumentContent(ResultModel):
    document_id: str
    title: str
    text_content: str
    revision_id: str | None = None


class CreatedDocument(ResultModel):
    document_id: str
    title: str
    revision_id: str | None = None


class DocumentBatchUpdate(ResultModel):
    document_id: str
    replies: list[dict[str, Any]] = Field(default_factory=list)
    write_control: dict[str, Any] | None = None


# =============================================================================
# Drive
# =============================================================================


class Reply(ResultModel):
    """A comment reply; also the shape of a newly created comment."""

    id: str
    content: str
    author: str
    created_time: str


class Comment(ResultModel):
    id: str
    content: str
    author: str
    created_time: str
    modified_time: str | None = None
    resolved: bool = False
    quoted_file_content: str | None = None
    replies: list[Reply] = Field(default_factory=list)


class CommentList(ResultModel):
    comments: list[Comment]
    next_page_token: str | None = Field(default=None, alias="next_page_token")


class ResolvedComment(ResultModel):
    id: str
    resolved: bool = True


class DeletedComment(ResultModel):
    deleted: bool = True
    comment_id: str = Field(alias="comment_id")


class DriveFile(ResultModel):
    id: str
    name: str
    mime_type: str
    modified_time: str | None = None
    web_view_link: str | None = None
    owners: list[str] = Field(default_factory=list)


class FileList(ResultModel):
    files: list[DriveFile]
    next_page_token: str | None = Field(default=None, alias="next_page_token")


class FileContent(ResultModel):
    id: str
    name: str
    mime_type: str
    content: str


# =============================================================================
# Sheets
# =============================================================================


class SheetInfo(ResultModel):
    sheet_id: int | None = None
    title: str
    row_count: int = 0
    column_count: int = 0


class SpreadsheetInfo(ResultModel):
    spreadsheet_id: str
    title: str
    locale: str
    sheets: list[SheetInfo]
    spreadsheet_url: str | None = None


class ValueRange(ResultModel):
    range: str | None = None
    major_dimension: str | None = None
    values: list[list[Any]] = Field(default_factory=list)


class BatchValueRanges(ResultModel):
    spreadsheet_id: str
    value_ranges: list[ValueRange]


class UpdatedValues(ResultModel):
    spreadsheet_id: str
    updated_range: str
    updated_rows: int = 0
    updated_columns: int = 0
    updated_cells: int = 0


class AppendUpdates(ResultModel):
    updated_range: str = ""
    updated_rows: int = 0
    updated_columns: int = 0
    updated_cells: int = 0


class AppendedValues(ResultModel):
    spreadsheet_id: str
    table_range: str
    updates: AppendUpdates


class SheetRef(ResultModel):
    sheet_id: int | None = None
    title: str | None = None


class CreatedSpreadsheet(ResultModel):
    spreadsheet_id: str | None = None
    title: str
    spreadsheet_url: str | None = None
    sheets: list[SheetRef] = Field(default_factory=list)


class SpreadsheetBatchUpdate(ResultModel):
    spreadsheet_id: str
    replies: list[dict[str, Any]] = Field(default_factory=list)


class ClearedValues(ResultModel):
    spreadsheet_id: str
    cleared_range: str


# =============================================================================
# Gmail
# =============================================================================


class MessageSummary(ResultModel):
    id: str
    thread_id: str
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    subject: str | None = None
    date: str | None = None
    snippet: str = ""
    labels: list[str] = Field(default_factory=list)


class MessageList(ResultModel):
    messages: list[MessageSummary]
    result_count: int = Field(alias="result_count")
    next_page_token: str | None = Field(default=None, alias="next_page_token")


class Message(ResultModel):
    id: str
    thread_id: str
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    cc: str | None = None
    subject: str | None = None
    date: str | None = None
    labels: list[str] = Field(default_factory=list)
    body: str = ""


class ThreadSummary(ResultModel):
    id: str
    subject: str
    from_: str = Field(alias="from")
    date: str
    snippet: str = ""
    message_count: int = 0


class ThreadList(ResultModel):
    threads: list[ThreadSummary]
    result_count: int = Field(alias="result_count")
    next_page_token: str | None = Field(default=None, alias="next_page_token")


class ThreadMessage(ResultModel):
    id: str
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    subject: str | None = None
    date: str | None = None
    body: str = ""


class Thread(ResultModel):
    id: str
    message_count: int
    messages: list[ThreadMessage]


class Label(ResultModel):
    id: str
    name: str
    type: str = "user"


class LabelList(ResultModel):
    labels: list[Label]
