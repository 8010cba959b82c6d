"""The fetch tool: retrieve a page and analyze it with the model CLI."""

from __future__ import annotations

import logging
from typing import Any

import anyio.to_thread
from pydantic import Field

from fetch_mcp.tools import (
    ToolDefinition,
    ToolParameters,
    ToolResult,
    error_result,
)
from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.content import page_text
from fetch_mcp_server.errors import ToolDomainError
from fetch_mcp_server.fetching import fetch_page
from fetch_mcp_server.summarizer import summarize

logger = logging.getLogger(__name__)


class FetchParams(ToolParameters):
    """Parameters for the fetch tool."""

    url: str = Field(description="URL to fetch")
    prompt: str = Field(
        description="What information to extract or analyze from the page"
    )


def fetch_tool(settings: FetchSettings) -> ToolDefinition:
    """Create the fetch tool definition."""

    async def handler(arguments: dict[str, Any]) -> ToolResult:
        try:
            page = await anyio.to_thread.run_sync(
                fetch_page, arguments["url"], settings
            )
            content = page_text(page.text, page.content_type)
            return await summarize(content, arguments["prompt"], settings)
        except ToolDomainError as error:
            logger.info("fetch failed (%s): %s", error.error_type, error.message)
            return error.to_result()
        except Exception as exc:
            logger.exception("fetch of %s failed", arguments["url"])
            return error_result(f"Error: {exc}")

    return ToolDefinition(
        name="fetch",
        description=(
            "Fetch web content from a URL and process it with AI. Returns the AI's "
            "analysis based on the provided prompt."
        ),
        parameters_model=FetchParams,
        handler=handler,
    )
