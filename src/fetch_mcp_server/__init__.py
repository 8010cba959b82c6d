"""MCP server exposing a web fetch tool."""

from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.errors import ToolDomainError
from fetch_mcp_server.tools import build_tools

__all__ = ["FetchSettings", "ToolDomainError", "build_tools"]
