"""Line-delimited JSON-RPC server for MCP tools.

The server owns a tool registry and answers the handshake, tool listing and
tool invocation methods. Messages are processed one at a time: each request
is dispatched to completion before the next line is read, so responses leave
in the same order the requests arrived.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncIterable, Mapping
from typing import Any, Callable

from fetch_mcp.framing import Chunk, iter_lines
from fetch_mcp.invoker import ToolInvoker
from fetch_mcp.protocol import (
    PROTOCOL_VERSION,
    ErrorCode,
    JsonRpcError,
    decode_message,
    error_response,
    success_response,
)
from fetch_mcp.registry import ToolRegistry
from fetch_mcp.tools import ToolDefinition, ToolHandler, ToolParameters
from fetch_mcp.transport import LineWriter, read_chunks

logger = logging.getLogger(__name__)


class MCPServer:
    """Tool registry and JSON-RPC dispatcher.

    Each instance owns its registry, so several servers can coexist in one
    process.
    """

    def __init__(self, name: str, version: str) -> None:
        """Initialize a server with an empty registry.

        Args:
            name: Server name reported in ``serverInfo``.
            version: Server version reported in ``serverInfo``.

        """
        self.name = name
        self.version = version
        self._registry = ToolRegistry()
        self._invoker = ToolInvoker(self._registry)
        self._methods: dict[str, Callable[[Mapping[str, Any]], Any]] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._invoker.call,
        }

    @property
    def registry(self) -> ToolRegistry:
        """Registry holding the server's tools."""
        return self._registry

    def register_tool(self, tool: ToolDefinition) -> MCPServer:
        """Register a tool with the server.

        A tool registered under an existing name replaces the earlier one.

        Args:
            tool: Tool definition to register.

        Returns:
            The server itself, for chaining.

        """
        self._registry.register(tool)
        return self

    def register_tools(self, *tools: ToolDefinition) -> MCPServer:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)
        return self

    def tool(
        self,
        name: str,
        *,
        description: str,
        parameters_model: type[ToolParameters],
        handler: ToolHandler,
    ) -> MCPServer:
        """Build a tool definition from its parts and register it."""
        return self.register_tool(
            ToolDefinition(
                name=name,
                description=description,
                parameters_model=parameters_model,
                handler=handler,
            )
        )

    def available_tools(self) -> list[str]:
        """List the names of registered tools in registration order."""
        return self._registry.names()

    def to_catalog(self) -> dict[str, Any]:
        """Produce the ``tools/list`` payload.

        Returns:
            Mapping with a ``tools`` list describing every registered tool.

        """
        return {"tools": [tool.metadata() for tool in self._registry]}

    async def handle_message(self, message: Any) -> dict[str, Any] | None:
        """Dispatch one decoded message.

        Args:
            message: Parsed JSON value of a single line.

        Returns:
            The response to send, or ``None`` for notifications.

        """
        if not isinstance(message, Mapping):
            logger.warning("Rejecting non-object message")
            return error_response(
                None, JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")
            )

        if "id" not in message:
            logger.debug("Ignoring notification %r", message.get("method"))
            return None

        request_id = message["id"]
        try:
            result = await self._dispatch(message)
        except JsonRpcError as error:
            return error_response(request_id, error)
        return success_response(request_id, result)

    async def handle_line(self, line: str) -> dict[str, Any] | None:
        """Decode a framed line and dispatch it."""
        try:
            message = decode_message(line)
        except (ValueError, RecursionError):
            logger.warning("Discarding malformed line: %.200s", line)
            return error_response(
                None, JsonRpcError(ErrorCode.PARSE_ERROR, "Parse error")
            )
        return await self.handle_message(message)

    async def serve(self, chunks: AsyncIterable[Chunk], writer: LineWriter) -> None:
        """Process every line of ``chunks`` until the stream ends.

        Args:
            chunks: Raw input arriving in arbitrary pieces.
            writer: Destination for responses.

        """
        logger.info(
            "Serving %s %s with %d tool(s)", self.name, self.version, len(self._registry)
        )
        async for line in iter_lines(chunks):
            response = await self.handle_line(line)
            if response is not None:
                writer.send(response)
        logger.info("Input closed, stopping %s", self.name)

    async def serve_stdio(self) -> None:
        """Serve over the process's standard input and output."""
        await self.serve(read_chunks(sys.stdin.buffer), LineWriter(sys.stdout))

    async def _dispatch(self, message: Mapping[str, Any]) -> Any:
        method = message.get("method")
        if not isinstance(method, str):
            raise JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")

        params = message.get("params")
        if params is None:
            params = {}
        if not isinstance(params, Mapping):
            raise JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")

        handler = self._methods.get(method)
        if handler is None:
            raise JsonRpcError(
                ErrorCode.METHOD_NOT_FOUND, f"Method not found: {method}"
            )
        logger.debug("Dispatching %s", method)
        return await handler(params)

    async def _initialize(self, _params: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self.name, "version": self.version},
        }

    async def _list_tools(self, _params: Mapping[str, Any]) -> dict[str, Any]:
        return self.to_catalog()
