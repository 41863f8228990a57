"""
MCP Layer for Screenshot Module

This package contains the MCP (Model Context Protocol) layer for the screen
capture functionality, exposing the core as the listScreens and
takeScreenshot tools.

The MCP layer is designed to:
1. Expose core functions as MCP tools
2. Convert results and errors into MCP content blocks
3. Manage server startup and logging

Usage:
    # Start the MCP server
    python -m webdev_mcp.screenshot.mcp.mcp_server start

    # Use the MCP server in Python
    from webdev_mcp.screenshot.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

# MCP server creation
from webdev_mcp.screenshot.mcp.mcp_tools import create_mcp_server, to_content

# MCP server entry point
from webdev_mcp.screenshot.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    configure_logging
)

# MCP wrappers
from webdev_mcp.screenshot.mcp.wrappers import (
    list_screens_wrapper,
    take_screenshot_wrapper
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'to_content',
    'main',
    'health_check',
    'get_server_info',
    'configure_logging',

    # MCP wrappers
    'list_screens_wrapper',
    'take_screenshot_wrapper'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "webdev": {
      "command": "webdev-mcp",
      "args": ["start"]
    }
  }
}
"""
