"""Ordered registry of tool definitions."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fetch_mcp.tools import ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Keyed table of tools that remembers registration order.

    Registering a name that already exists replaces its definition and keeps
    the position the name was first registered at.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """Insert or replace a tool definition.

        Args:
            tool: Tool definition to register.

        """
        if tool.name in self._tools:
            logger.debug("Replacing registered tool '%s'", tool.name)
        self._tools[tool.name] = tool

    def lookup(self, name: str) -> ToolDefinition | None:
        """Return the tool registered under ``name``, if any."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        """List tool names in registration order."""
        return list(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
