"""Run the external model CLI over fetched page content."""

from __future__ import annotations

import logging

import anyio

from fetch_mcp.tools import ToolResult, text_result
from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.errors import ToolDomainError

logger = logging.getLogger(__name__)


def build_prompt(content: str, prompt: str) -> str:
    """Wrap page content and append the caller's instructions."""
    return f"<page_content>\n{content}\n</page_content>\n\n{prompt}"


async def summarize(content: str, prompt: str, settings: FetchSettings) -> ToolResult:
    """Feed the prompt to the model CLI and return its answer.

    Raises:
        ToolDomainError: If the process cannot start or exits non-zero.

    """
    command = settings.command()
    try:
        completed = await anyio.run_process(
            command, input=build_prompt(content, prompt).encode(), check=False
        )
    except OSError as exc:
        raise ToolDomainError("SubprocessError", f"Error: {exc}") from exc

    if completed.returncode != 0:
        stderr = completed.stderr.decode(errors="replace")
        logger.debug("%s exited with %d", command[0], completed.returncode)
        raise ToolDomainError(
            "SubprocessError", f"Error processing with Claude: {stderr}"
        )
    return text_result(completed.stdout.decode(errors="replace"))
