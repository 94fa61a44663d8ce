"""Tool definitions and the invocation pipeline.

Every tool call runs the same steps: validate the arguments with the tool's
input model, await the handler, and return its ToolResult. Any failure
along the way is logged and converted into a single classified message
with no structured content.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import TextContent, Tool, ToolAnnotations
from pydantic import ValidationError

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.errors import classify_error
from gcollab_mcp.models import ResultModel
from gcollab_mcp.schemas.common import ToolInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Output of one tool invocation.

    Attributes:
        text: Rendered text (markdown, JSON or a confirmation/error message).
        structured: Structured content, or None for failures.
    """

    text: str
    structured: dict[str, Any] | None = None

    @classmethod
    def of(cls, result: ResultModel, text: str) -> "ToolResult":
        return cls(text=text, structured=result.to_structured())

    @property
    def is_error(self) -> bool:
        return self.structured is None

    def to_content(self) -> list[TextContent]:
        return [TextContent(type="text", text=self.text)]


Handler = Callable[[WorkspaceClient, Any], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: metadata, input model and handler.

    The hint flags are advertised to the host as ToolAnnotations and are
    not enforced here.
    """

    name: str
    title: str
    description: str
    input_model: type[ToolInput]
    handler: Handler
    read_only: bool = False
    destructive: bool = False
    idempotent: bool = False
    open_world: bool = True

    def to_tool(self) -> Tool:
        """Build the MCP Tool advertised by list_tools."""
        return Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_model.input_schema(),
            annotations=ToolAnnotations(
                title=self.title,
                readOnlyHint=self.read_only,
                destructiveHint=self.destructive,
                idempotentHint=self.idempotent,
                openWorldHint=self.open_world,
            ),
        )


async def run_tool(
    definition: ToolDefinition,
    client: WorkspaceClient,
    arguments: dict[str, Any] | None,
) -> ToolResult:
    """Validate, execute and classify one tool call.

    Args:
        definition: The tool being invoked.
        client: Shared workspace client.
        arguments: Raw arguments from the host.

    Returns:
        The handler's result, or a classified error result.
    """
    try:
        params = definition.input_model.model_validate(arguments or {})
        return await definition.handler(client, params)
    except ValidationError as e:
        logger.warning("Invalid arguments for tool %s: %s", definition.name, e)
        return ToolResult(text=classify_error(e))
    except Exception as e:
        logger.exception("Error calling tool %s", definition.name)
        return ToolResult(text=classify_error(e))
