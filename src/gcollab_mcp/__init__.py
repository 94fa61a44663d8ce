"""Google collaboration MCP server.

Exposes Google Docs, Sheets, Drive comments and files, and Gmail as MCP
tools with JSON and markdown output.
"""

from gcollab_mcp.__version__ import __version__

__all__ = ["__version__"]
