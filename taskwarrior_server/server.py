"""FastMCP server initialization for Taskwarrior Server."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from taskwarrior_server.config import get_config

# Initialize the MCP server
mcp = FastMCP("taskwarrior_server")


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Run the MCP server."""
    import taskwarrior_server.tools  # noqa: F401  (registers the tools on mcp)

    configure_logging(get_config().log_level)
    mcp.run()
