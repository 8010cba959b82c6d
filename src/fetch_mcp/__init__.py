"""fetch_mcp package initialization."""

from fetch_mcp.registry import ToolRegistry
from fetch_mcp.server import MCPServer
from fetch_mcp.tools import (
    ToolDefinition,
    ToolParameters,
    ToolResult,
    echo_tool,
    error_result,
    text_result,
)

__version__ = "1.0.0"

__all__ = [
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolRegistry",
    "ToolResult",
    "__version__",
    "echo_tool",
    "error_result",
    "text_result",
]
