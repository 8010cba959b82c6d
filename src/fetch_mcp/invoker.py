"""Tool invocation: lookup, validation, execution and result normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fetch_mcp.protocol import ErrorCode, JsonRpcError, encode_message
from fetch_mcp.registry import ToolRegistry
from fetch_mcp.tools import ToolArgumentsError, ToolResult

logger = logging.getLogger(__name__)


class ToolInvoker:
    """Resolve and run tools for ``tools/call`` requests.

    Handler exceptions are translated into ``INTERNAL_ERROR`` here and nowhere
    else. Failures a tool reports itself (``isError``) pass through untouched.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        """Bind the invoker to the registry it resolves tools from."""
        self._registry = registry

    async def call(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Execute the tool named in ``params``.

        Args:
            params: ``tools/call`` parameters holding ``name`` and optional
                ``arguments``.

        Raises:
            JsonRpcError: For unknown tools, invalid arguments and handler
                failures.

        Returns:
            The tool result as a JSON-ready mapping.

        """
        name = params.get("name")
        if not isinstance(name, str):
            raise JsonRpcError(ErrorCode.INVALID_PARAMS, "Tool name must be a string")

        tool = self._registry.lookup(name)
        if tool is None:
            raise JsonRpcError(ErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {name}")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise JsonRpcError(
                ErrorCode.INVALID_PARAMS,
                f"Arguments for tool '{name}' must be an object",
            )

        try:
            validated = tool.validate(dict(arguments))
        except ToolArgumentsError as error:
            raise JsonRpcError(ErrorCode.INVALID_PARAMS, str(error)) from error

        try:
            result = await tool.invoke(validated)
        except Exception as exc:
            logger.exception("Tool '%s' raised", name)
            raise JsonRpcError(
                ErrorCode.INTERNAL_ERROR, str(exc) or type(exc).__name__
            ) from exc

        return _normalize_result(name, result)


def _normalize_result(name: str, result: object) -> dict[str, Any]:
    if isinstance(result, ToolResult):
        payload = result.to_payload()
    elif isinstance(result, Mapping):
        payload = dict(result)
    else:
        raise JsonRpcError(
            ErrorCode.INTERNAL_ERROR,
            f"Tool '{name}' returned unsupported result type {type(result).__name__}",
        )

    try:
        encode_message(payload)
    except (TypeError, ValueError) as exc:
        raise JsonRpcError(
            ErrorCode.INTERNAL_ERROR,
            f"Tool '{name}' returned a result that is not valid JSON: {exc}",
        ) from exc
    return payload
