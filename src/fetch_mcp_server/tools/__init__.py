"""Tool registration helpers for the fetch MCP server."""

from __future__ import annotations

from fetch_mcp.tools import ToolDefinition
from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.tools.fetch import fetch_tool


def build_tools(settings: FetchSettings) -> list[ToolDefinition]:
    """Instantiate all tool definitions with the provided settings."""
    return [fetch_tool(settings)]
