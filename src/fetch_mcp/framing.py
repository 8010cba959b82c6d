"""Newline-delimited message framing.

Input arrives in chunks that are not aligned to message boundaries. The
framer buffers partial lines between chunks and yields one string per
complete, non-blank line.
"""

from __future__ import annotations

import codecs
from collections.abc import AsyncIterable, AsyncIterator
from typing import Union

Chunk = Union[bytes, str]


class LineFramer:
    """Split a chunked text or byte stream into lines."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Create a framer decoding byte chunks with ``encoding``."""
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received after the last newline."""
        return self._buffer

    def feed(self, chunk: Chunk) -> list[str]:
        """Append a chunk and return the lines it completed.

        A trailing carriage return is stripped from each line and blank lines
        are dropped.
        """
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk

        lines: list[str] = []
        while True:
            index = self._buffer.find("\n")
            if index == -1:
                break
            line = self._buffer[:index]
            self._buffer = self._buffer[index + 1 :]
            if line.endswith("\r"):
                line = line[:-1]
            if line.strip():
                lines.append(line)
        return lines

    def flush(self) -> list[str]:
        """Return the unterminated remainder once the stream has ended."""
        remainder = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        if remainder.endswith("\r"):
            remainder = remainder[:-1]
        return [remainder] if remainder.strip() else []


async def iter_lines(
    chunks: AsyncIterable[Chunk], framer: LineFramer | None = None
) -> AsyncIterator[str]:
    """Yield complete lines from an asynchronous stream of chunks."""
    framer = framer or LineFramer()
    async for chunk in chunks:
        for line in framer.feed(chunk):
            yield line
    for line in framer.flush():
        yield line
