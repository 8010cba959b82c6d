"""Runtime settings for the fetch tool."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.5"


class FetchSettings(BaseModel):
    """Configuration for outbound requests and the summarizing subprocess."""

    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    timeout: float = Field(default=30.0, gt=0)
    claude_command: str = "claude"
    model: str = "haiku"

    def headers(self) -> dict[str, str]:
        """Browser-like headers sent with every fetch."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }

    def command(self) -> list[str]:
        """Argument vector of the summarizing subprocess."""
        return [self.claude_command, "-p", "--model", self.model, "--tools", ""]
