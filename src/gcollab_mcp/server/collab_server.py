"""MCP server exposing Google Docs, Sheets, Drive and Gmail tools.

The server owns one WorkspaceClient for its lifetime. Each tool call is
dispatched by name to the registered ToolDefinition and run through
``run_tool``, so the host always receives a well-formed result: rendered
text plus structured content on success, a single classified error message
on failure.
"""

import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from gcollab_mcp.auth import OAuthManager
from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.config import Settings
from gcollab_mcp.constants import SERVER_NAME
from gcollab_mcp.tools import TOOLS_BY_NAME, ToolDefinition, ToolResult, run_tool

logger = logging.getLogger(__name__)

CallToolOutput = list[TextContent] | tuple[list[TextContent], dict[str, Any]]


class CollabServer:
    """MCP server for Google Workspace collaboration APIs.

    Attributes:
        server: MCP Server instance.
        client: Shared authenticated client passed to every handler.
        tools: Registered tools keyed by name.
    """

    def __init__(
        self,
        client: WorkspaceClient,
        tools: list[ToolDefinition] | None = None,
    ) -> None:
        """Initialize the server.

        Args:
            client: Workspace client used by all tool handlers.
            tools: Tools to register. Defaults to every built-in tool.
        """
        self.server = Server(SERVER_NAME)
        self.client = client
        self.tools = {tool.name: tool for tool in tools} if tools else dict(TOOLS_BY_NAME)
        self._setup_handlers()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CollabServer":
        """Build the OAuth manager and client from startup settings."""
        client = WorkspaceClient(OAuthManager(settings), timeout=settings.http_timeout)
        return cls(client)

    def list_tool_definitions(self) -> list[Tool]:
        return [tool.to_tool() for tool in self.tools.values()]

    async def handle_call(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Run one tool call by name.

        Returns:
            The tool's result, or an error result for unknown names.
        """
        definition = self.tools.get(name)
        if definition is None:
            logger.warning("Unknown tool requested: %s", name)
            return ToolResult(text=f"Error: Unknown tool: {name}")

        logger.info("Calling tool %s", name)
        return await run_tool(definition, self.client, arguments)

    def _setup_handlers(self) -> None:
        """Register MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """Return list of available tools."""
            return self.list_tool_definitions()

        # Arguments are validated by each tool's pydantic model in run_tool
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolOutput:
            """Handle tool calls."""
            result = await self.handle_call(name, arguments)
            if result.structured is None:
                return result.to_content()
            return result.to_content(), result.structured

    async def close(self) -> None:
        """Close the shared client and release resources."""
        await self.client.close()

    async def run(self) -> None:
        """Run the MCP server using stdio transport."""
        logger.info("Starting %s with %d tools", SERVER_NAME, len(self.tools))
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.close()


def main(settings: Settings) -> None:
    """Run the server until the host closes stdio."""
    server = CollabServer.from_settings(settings)
    asyncio.run(server.run())


__all__ = ["CollabServer", "main"]
