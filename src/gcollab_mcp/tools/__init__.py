"""Tool registry.

Tools are grouped by Google service; ``ALL_TOOLS`` is the order advertised
to the host and ``TOOLS_BY_NAME`` is used for dispatch.
"""

from gcollab_mcp.tools.base import ToolDefinition, ToolResult, run_tool
from gcollab_mcp.tools.docs import DOCS_TOOLS
from gcollab_mcp.tools.drive import DRIVE_TOOLS
from gcollab_mcp.tools.gmail import GMAIL_TOOLS
from gcollab_mcp.tools.sheets import SHEETS_TOOLS

ALL_TOOLS: list[ToolDefinition] = [*DOCS_TOOLS, *DRIVE_TOOLS, *SHEETS_TOOLS, *GMAIL_TOOLS]

TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in ALL_TOOLS}

__all__ = [
    "ALL_TOOLS",
    "TOOLS_BY_NAME",
    "ToolDefinition",
    "ToolResult",
    "run_tool",
]
