"""Tests for content-type detection and Markdown conversion."""

from __future__ import annotations

import pytest

from fetch_mcp_server.content import html_to_markdown, is_html_content_type, page_text


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        ("text/html", True),
        ("text/html; charset=utf-8", True),
        ("application/xhtml+xml", True),
        ("TEXT/HTML", True),
        ("Text/Html", True),
        ("application/json", False),
        ("text/plain", False),
        ("", False),
        (None, False),
    ],
)
def test_is_html_content_type(content_type: str | None, expected: bool) -> None:
    """Only HTML and XHTML content types are treated as HTML."""
    assert is_html_content_type(content_type) is expected


class TestHtmlToMarkdown:
    """Coverage for html_to_markdown."""

    def test_converts_headings_to_atx(self) -> None:
        """Headings use leading hashes."""
        assert "# Title" in html_to_markdown("<h1>Title</h1>")

    def test_converts_links_and_emphasis(self) -> None:
        """Links and bold text keep their Markdown form."""
        markdown = html_to_markdown(
            '<p><a href="https://example.com">Example</a> <strong>bold</strong></p>'
        )

        assert "[Example](https://example.com)" in markdown
        assert "**bold**" in markdown

    def test_emphasis_uses_underscores(self) -> None:
        """Italic text is wrapped in underscores while bold keeps asterisks."""
        markdown = html_to_markdown(
            "<p><em>italic</em> <i>slanted</i> <strong>bold</strong></p>"
        )

        assert markdown == "_italic_ _slanted_ **bold**"

    def test_converts_lists_with_dash_bullets(self) -> None:
        """Unordered list items are rendered with dashes."""
        markdown = html_to_markdown("<ul><li>One</li><li>Two</li></ul>")

        assert "- One" in markdown
        assert "- Two" in markdown

    def test_fences_code_blocks(self) -> None:
        """Preformatted code is wrapped in a fenced block."""
        markdown = html_to_markdown("<pre><code>const x = 1;</code></pre>")

        assert "```" in markdown
        assert "const x = 1;" in markdown

    def test_handles_full_page(self, sample_html: str) -> None:
        """A complete document keeps headings, links and list items."""
        markdown = html_to_markdown(sample_html)

        assert "# Welcome" in markdown
        assert "[link](https://example.com)" in markdown
        assert "**bold**" in markdown
        assert "- Item 1" in markdown

    def test_empty_input_gives_empty_output(self) -> None:
        """Empty HTML converts to an empty string."""
        assert html_to_markdown("") == ""


def test_page_text_passes_non_html_through() -> None:
    """Non-HTML bodies are returned unmodified."""
    body = '{"<h1>": "not html"}'

    assert page_text(body, "application/json") == body
    assert page_text("<h1>Hi</h1>", "text/html").startswith("# Hi")
