"""Entry point for the fetch MCP server."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import anyio
from pydantic import ValidationError

from fetch_mcp import MCPServer, __version__
from fetch_mcp_server.config import FetchSettings
from fetch_mcp_server.tools import build_tools

SERVER_NAME = "web-fetch"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    defaults = FetchSettings()
    parser = argparse.ArgumentParser(
        description="Serve the fetch tool over MCP on stdin/stdout."
    )
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the tool catalog as JSON and exit.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=defaults.timeout,
        help="HTTP timeout in seconds.",
    )
    parser.add_argument(
        "--model", default=defaults.model, help="Model passed to the CLI."
    )
    parser.add_argument(
        "--claude-command",
        default=defaults.claude_command,
        help="Executable used to analyze fetched content.",
    )
    parser.add_argument(
        "--user-agent",
        default=defaults.user_agent,
        help="User-Agent header sent with requests.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr.",
    )
    return parser


def build_server(settings: FetchSettings) -> MCPServer:
    """Create a server with every tool registered."""
    server = MCPServer(name=SERVER_NAME, version=__version__)
    server.register_tools(*build_tools(settings))
    return server


def main(argv: list[str] | None = None) -> int:
    """Run the server, or print its catalog."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = FetchSettings(
            timeout=args.timeout,
            model=args.model,
            claude_command=args.claude_command,
            user_agent=args.user_agent,
        )
    except ValidationError as error:
        parser.error(str(error))

    server = build_server(settings)

    if args.catalog:
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    anyio.run(server.serve_stdio)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
