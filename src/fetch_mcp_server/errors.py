"""Tool-domain error type for the fetch tool."""

from __future__ import annotations

from fetch_mcp.tools import ToolResult, error_result


class ToolDomainError(Exception):
    """Expected failure of the tool's own work, reported via ``isError``."""

    def __init__(self, error_type: str, message: str) -> None:
        """Create a domain error with a category and user-facing text."""
        super().__init__(message)
        self.error_type = error_type
        self.message = message

    def to_result(self) -> ToolResult:
        """Return the error as a tool result flagged with ``isError``."""
        return error_result(self.message)
