"""Input models for Gmail tools."""

from pydantic import Field

from gcollab_mcp.schemas.common import FormattedInput


class ListMessagesInput(FormattedInput):
    query: str | None = Field(
        default=None,
        description="Gmail search query (e.g., 'from:boss@company.com is:unread')",
    )
    max_results: int = Field(
        default=10, ge=1, le=100, description="Maximum number of results to return (1-100)"
    )
    label_ids: list[str] | None = Field(
        default=None, description="Filter by label IDs like 'INBOX', 'UNREAD', 'STARRED', 'SENT'"
    )
    page_token: str | None = Field(
        default=None, description="Token for pagination to retrieve the next page of results"
    )


class ListThreadsInput(ListMessagesInput):
    pass


class GetMessageInput(FormattedInput):
    message_id: str = Field(..., min_length=1, description="The message ID to retrieve")


class GetThreadInput(FormattedInput):
    thread_id: str = Field(..., min_length=1, description="The thread ID to retrieve")


class ListLabelsInput(FormattedInput):
    pass
