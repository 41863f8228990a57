"""
Screen Capture MCP Tool

Lists the screens attached to the host and captures one of them as a PNG,
for AI agents over MCP and for humans on the command line.

This package follows a three-layer architecture:

1. Core Layer: Pure business logic
2. Presentation Layer: CLI interface with rich formatting
3. Integration Layer: MCP wrapper for AI agent usage

Usage:
    # Direct API usage (Core Layer)
    import asyncio
    from webdev_mcp.screenshot.core import CaptureOptions, list_screens, take_screenshot
    screens = asyncio.run(list_screens())
    png_base64 = asyncio.run(take_screenshot(CaptureOptions.from_params(screen_id=1)))

    # CLI usage (Presentation Layer)
    # webdev-screens capture --screen 2 --output phone.png

    # MCP server usage (Integration Layer)
    # webdev-mcp start
"""

# Core functionality
from webdev_mcp.screenshot.core import (
    CaptureOptions,
    ScreenDescriptor,
    CaptureFailed,
    UnsupportedPlatform,
    list_screens,
    take_screenshot
)

# CLI layer
from webdev_mcp.screenshot.cli import app as cli_app

# MCP layer
from webdev_mcp.screenshot.mcp import create_mcp_server

__version__ = "0.1.2"

__all__ = [
    # Core
    'CaptureOptions',
    'ScreenDescriptor',
    'CaptureFailed',
    'UnsupportedPlatform',
    'list_screens',
    'take_screenshot',

    # CLI entrypoint
    'cli_app',

    # MCP server
    'create_mcp_server',

    # Version info
    '__version__'
]
