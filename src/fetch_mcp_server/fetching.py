"""Outbound HTTP fetch for the fetch tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.errors import ToolDomainError

logger = logging.getLogger(__name__)


@dataclass
class FetchedPage:
    """Body and content type of a successfully fetched URL."""

    url: str
    content_type: str | None
    text: str


def fetch_page(url: str, settings: FetchSettings) -> FetchedPage:
    """GET ``url`` with browser-like headers.

    Raises:
        ToolDomainError: On network failures and non-2xx responses.

    """
    try:
        response = requests.get(
            url, headers=settings.headers(), timeout=settings.timeout
        )
    except requests.RequestException as exc:
        raise ToolDomainError("NetworkError", f"Error: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise ToolDomainError(
            "HttpError", f"Error: HTTP {response.status_code} {response.reason}"
        )

    content_type = response.headers.get("content-type")
    if "charset" not in (content_type or "").lower():
        response.encoding = "utf-8"

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return FetchedPage(
        url=url,
        content_type=content_type,
        text=response.text,
    )
