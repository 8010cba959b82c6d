"""Stdio transport: chunked input reader and line-oriented output writer."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any, BinaryIO, TextIO

import anyio

from fetch_mcp.protocol import encode_message

CHUNK_SIZE = 65536


async def read_chunks(
    stream: BinaryIO, chunk_size: int = CHUNK_SIZE
) -> AsyncIterator[bytes]:
    """Yield raw chunks from a binary stream until it is exhausted.

    Each read returns whatever is available, so a chunk may hold part of a
    line or several lines.
    """
    async_stream = anyio.wrap_file(stream)
    while True:
        chunk = await async_stream.read1(chunk_size)
        if not chunk:
            break
        yield chunk


class LineWriter:
    """Write one JSON message per line to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        """Wrap the output ``stream``."""
        self._stream = stream

    def send(self, message: Mapping[str, Any]) -> None:
        """Serialize ``message`` and emit it with a single write."""
        self._stream.write(encode_message(message) + "\n")
        self._stream.flush()
