"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterable

import pytest

from fetch_mcp import MCPServer, echo_tool


@pytest.fixture()
def server() -> MCPServer:
    """Provide a server with the echo tool registered."""
    return MCPServer(name="test-server", version="1.0.0").register_tool(echo_tool())


@pytest.fixture()
def sample_html() -> str:
    """Provide a small HTML page for conversion tests."""
    return """
    <html>
    <head><title>Test Page</title></head>
    <body>
        <h1>Welcome</h1>
        <p>This is a <a href="https://example.com">link</a> with <strong>bold</strong> text.</p>
        <ul>
            <li>Item 1</li>
            <li>Item 2</li>
        </ul>
    </body>
    </html>
    """


async def _chunked(parts: Iterable[bytes | str]) -> AsyncIterator[bytes | str]:
    for part in parts:
        yield part


@pytest.fixture()
def chunk_stream() -> Callable[[Iterable[bytes | str]], AsyncIterator[bytes | str]]:
    """Provide a factory replaying byte or text parts as an async chunk stream."""
    return _chunked
