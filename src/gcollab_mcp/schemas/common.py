"""Shared base classes for tool input models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gcollab_mcp.constants import ResponseFormat


class ToolInput(BaseModel):
    """Base for every tool's arguments. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON schema advertised to the MCP host."""
        return cls.model_json_schema()


class FormattedInput(ToolInput):
    """Arguments for tools that can answer in markdown or JSON."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for structured data",
    )
