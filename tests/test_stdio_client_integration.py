"""Interop coverage: the official MCP client drives the server over stdio."""

from __future__ import annotations

import os
import pathlib
import sys

import pytest
from fastmcp.client import Client
from fastmcp.client.transports import StdioTransport

TESTS_DIR = pathlib.Path(__file__).parent
SRC_DIR = TESTS_DIR.parent / "src"


@pytest.fixture()
def anyio_backend() -> str:
    """The fastmcp client is asyncio-only."""
    return "asyncio"


def _transport() -> StdioTransport:
    python_path = os.pathsep.join(
        filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")])
    )
    return StdioTransport(
        command=sys.executable,
        args=[str(TESTS_DIR / "echo_server.py")],
        env={**os.environ, "PYTHONPATH": python_path},
    )


@pytest.mark.anyio()
async def test_client_lists_and_calls_tools() -> None:
    """Handshake, discovery and invocation work with the reference client."""
    async with Client(_transport()) as client:
        tools = await client.list_tools()
        assert [tool.name for tool in tools] == ["echo", "always-fails"]
        assert tools[0].inputSchema["required"] == ["message"]

        result = await client.call_tool("echo", {"message": "hi"})
        assert result.content[0].text == "Received: hi"
        assert result.is_error is False


@pytest.mark.anyio()
async def test_client_sees_tool_reported_errors() -> None:
    """isError results reach the client as tool errors."""
    async with Client(_transport()) as client:
        result = await client.call_tool("always-fails", {}, raise_on_error=False)

    assert result.is_error is True
    assert result.content[0].text == "Something went wrong"
