"""Content-type detection and HTML to Markdown conversion."""

from __future__ import annotations

from typing import Any

from markdownify import ATX, MarkdownConverter, chomp

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


class _MarkdownConverter(MarkdownConverter):
    """Converter writing emphasis as ``_text_`` and strong text as ``**text**``."""

    def convert_em(self, el: Any, text: str, *args: Any, **kwargs: Any) -> str:
        prefix, suffix, text = chomp(text)
        if not text:
            return ""
        return f"{prefix}_{text}_{suffix}"

    convert_i = convert_em


def is_html_content_type(content_type: str | None) -> bool:
    """Return whether ``content_type`` denotes an HTML document."""
    if not content_type:
        return False
    lowered = content_type.lower()
    return any(marker in lowered for marker in _HTML_CONTENT_TYPES)


def html_to_markdown(html: str) -> str:
    """Render HTML as Markdown with ATX headings, dash bullets and fenced code."""
    return _MarkdownConverter(heading_style=ATX, bullets="-").convert(html).strip()


def page_text(raw_content: str, content_type: str | None) -> str:
    """Convert HTML pages to Markdown and pass other content through."""
    if is_html_content_type(content_type):
        return html_to_markdown(raw_content)
    return raw_content
