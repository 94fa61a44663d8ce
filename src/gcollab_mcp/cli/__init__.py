"""Command-line interface for gcollab-mcp."""
