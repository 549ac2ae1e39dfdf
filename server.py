#!/usr/bin/env python
"""
Phosphor Icons MCP Server
A Model Context Protocol server giving access to Phosphor Icons, a flexible icon
family with 6 weights and 1,400+ icons. SVGs are fetched from the phosphor-icons/core
GitHub repository and recolored/resized on the way out.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from mcp.server.fastmcp import FastMCP

from phosphor import __version__
from phosphor.config import WEIGHTS, PhosphorSettings
from phosphor.icons import register_icon_tools
from phosphor.resources import register_resources
from phosphor.search import register_search_tools
from phosphor.state import ServerState

logger = logging.getLogger("phosphor")


def create_server(settings=None, catalog=None, fetcher=None) -> FastMCP:
    """Build the FastMCP server with all tools, resources and prompts registered.

    Args:
        settings: PhosphorSettings (read from PHOSPHOR_* environment variables when omitted)
        catalog: Catalog used for search and suggestions (built-in catalog when omitted)
        fetcher: AssetFetcher for upstream SVGs (default fetcher when omitted)

    Returns:
        Configured FastMCP instance
    """
    state = ServerState(settings=settings, catalog=catalog, fetcher=fetcher)

    mcp = FastMCP("phosphor-icons")

    # Register all tools
    register_icon_tools(mcp, state)
    register_search_tools(mcp, state)
    register_resources(mcp, state)

    logger.info(
        f"Phosphor Icons server {__version__} ready "
        f"(default weight: {state.default_weight}, {len(state.catalog)} catalog icons)"
    )
    return mcp


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Phosphor Icons MCP server (stdio)")
    parser.add_argument("--default-weight", choices=WEIGHTS, help="Weight used when a request omits one")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for stderr output",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Explicit flags win over PHOSPHOR_* environment variables
    overrides = {}
    if args.default_weight:
        overrides["default_weight"] = args.default_weight
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = PhosphorSettings(**overrides)

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mcp = create_server(settings)
    mcp.run()


if __name__ == "__main__":
    main()
