#!/usr/bin/env python3
"""
Groundwork Helpers MCP Server

A Model Context Protocol server for the Groundwork Drupal theme's block style
components.
"""

import logging
import sys

from fastmcp import FastMCP

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("Groundwork Helpers")

# When running as __main__, tool modules import from 'server'.
# Point 'server' at __main__ so they share the mcp instance.
if __name__ == "__main__":
    sys.modules["server"] = sys.modules["__main__"]

# Import tool modules to register @mcp.tool() decorated functions
# IMPORTANT: Must import AFTER mcp instance is created (above)
import src.tools.block_styles  # noqa: E402, F401


def main():
    """Run the MCP server."""
    logger.info("Starting Groundwork Helpers MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
