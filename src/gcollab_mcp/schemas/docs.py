"""Input models for Google Docs tools."""

from typing import Any

from pydantic import Field

from gcollab_mcp.schemas.common import FormattedInput, ToolInput


class GetDocumentInput(FormattedInput):
    document_id: str = Field(
        ...,
        min_length=1,
        description="The ID of the Google Doc to retrieve (found in the URL)",
    )


class CreateDocumentInput(ToolInput):
    title: str = Field(
        ..., min_length=1, max_length=500, description="The title for the new document"
    )
    body_content: str | None = Field(
        default=None, description="Optional initial text content for the document body"
    )


class BatchUpdateDocumentInput(ToolInput):
    document_id: str = Field(..., min_length=1, description="The ID of the Google Doc to update")
    requests: list[dict[str, Any]] = Field(
        ...,
        min_length=1,
        description=(
            "Array of batch update request objects "
            "(see Google Docs API batchUpdate documentation)"
        ),
    )
