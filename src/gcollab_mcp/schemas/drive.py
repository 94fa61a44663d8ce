"""Input models for Google Drive comment and file tools."""

from typing import Literal

from pydantic import Field

from gcollab_mcp.schemas.common import FormattedInput, ToolInput

MimeTypeFilter = Literal["all", "documents", "spreadsheets", "presentations", "folders"]


class ListCommentsInput(FormattedInput):
    file_id: str = Field(
        ..., min_length=1, description="The ID of the Google Doc to list comments from"
    )
    include_deleted: bool = Field(default=False, description="Whether to include deleted comments")
    page_size: int = Field(
        default=20, ge=1, le=100, description="Maximum number of comments to return (1-100)"
    )
    page_token: str | None = Field(
        default=None, description="Token for pagination to retrieve the next page of results"
    )


class CreateCommentInput(ToolInput):
    file_id: str = Field(
        ..., min_length=1, description="The ID of the Google Doc to add a comment to"
    )
    content: str = Field(..., min_length=1, description="The text content of the comment")
    quoted_text: str | None = Field(
        default=None,
        description="Optional text to anchor the comment to (for anchored comments)",
    )


class CommentRef(ToolInput):
    file_id: str = Field(
        ..., min_length=1, description="The ID of the Google Doc containing the comment"
    )
    comment_id: str = Field(..., min_length=1, description="The ID of the comment")


class ReplyToCommentInput(CommentRef):
    content: str = Field(..., min_length=1, description="The text content of the reply")


class ResolveCommentInput(CommentRef):
    pass


class DeleteCommentInput(CommentRef):
    pass


class ListFilesInput(FormattedInput):
    page_size: int = Field(
        default=20, ge=1, le=100, description="Maximum number of files to return (1-100)"
    )
    page_token: str | None = Field(
        default=None, description="Token for pagination to retrieve the next page of results"
    )
    order_by: str = Field(
        default="modifiedTime desc",
        description="Sort order (e.g., 'modifiedTime desc', 'name', 'createdTime desc')",
    )
    mime_type: MimeTypeFilter = Field(default="all", description="Filter by file type")


class SearchFilesInput(FormattedInput):
    query: str = Field(
        ..., min_length=1, description="Search query - searches file names and content"
    )
    page_size: int = Field(
        default=20, ge=1, le=100, description="Maximum number of files to return (1-100)"
    )
    page_token: str | None = Field(
        default=None, description="Token for pagination to retrieve the next page of results"
    )
    mime_type: MimeTypeFilter = Field(default="all", description="Filter by file type")


class GetFileInput(ToolInput):
    file_id: str = Field(
        ..., min_length=1, description="The ID of the file to download (found in the URL)"
    )
