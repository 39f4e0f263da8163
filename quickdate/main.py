#!/usr/bin/env python3
"""
QuickDate MCP Server

This module provides the main entry point for the QuickDate MCP server.
"""

import sys
import traceback

from mcp.server.fastmcp import FastMCP

from quickdate.utils.logger import get_logger, setup_logger
from quickdate.utils.config import get_config_value
from quickdate.mcp.tools import setup_tools

setup_logger("quickdate")
logger = get_logger(__name__)


def create_server() -> FastMCP:
    """
    Create the FastMCP application with all tools registered.

    Returns:
        FastMCP: The configured application.
    """
    mcp = FastMCP(name=get_config_value("mcp_server_name", "QuickDate MCP"))
    setup_tools(mcp)
    return mcp


def main() -> None:
    """
    Main entry point for the QuickDate MCP server.
    """
    try:
        mcp = create_server()
        logger.info("Starting MCP server")
        mcp.run()
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
