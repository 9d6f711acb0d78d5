"""
Context-Seven MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from typing import Optional

import httpx
from fastmcp import FastMCP

from context_seven import __version__
from context_seven.config import Settings, get_settings
from context_seven.logging_config import ToolCallLogger, log_startup, setup_logging
from context_seven.services import Context7Client, DocsService

# Import tools (each module builds a router)
from context_seven.tools import (
    echo,
    resolve_library_id,
    get_library_docs,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastMCP:
    """
    Create and configure the MCP application.

    Args:
        settings: Configuration (loaded from environment if None)
        http_client: Shared HTTP client for the Context7 API; a client
            is created per request when omitted

    Returns:
        FastMCP server with all tools mounted
    """
    settings = settings or get_settings()

    call_log = ToolCallLogger(logging.getLogger("context_seven.tools"))
    client = Context7Client(
        settings.context7,
        http_client=http_client,
        logger=logging.getLogger("context_seven.context7"),
    )
    service = DocsService(
        client,
        call_log=call_log,
        default_tokens=settings.context7.default_tokens,
    )

    mcp = FastMCP(
        name=settings.mcp.name,
        instructions=(
            "Looks up up-to-date library documentation through Context7. "
            "Use resolve_library_id to find a library ID, then "
            "get_library_docs to fetch its documentation."
        ),
    )

    # Register all tools
    mcp.mount(echo.create_router(settings.mcp.name, call_log))
    mcp.mount(resolve_library_id.create_router(service))
    mcp.mount(get_library_docs.create_router(service, settings.context7.default_tokens))

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Context-Seven MCP Server")
    parser.add_argument("--version", "-v", action="version", version=f"context-seven {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host for SSE transport (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log)
    log_startup(logger, settings.log, settings.mcp.name)

    transport = args.transport or settings.mcp.transport
    host = args.host or settings.mcp.host
    port = args.port or settings.mcp.port

    mcp = create_app(settings)

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=host, port=port)


if __name__ == "__main__":
    main()
