#!/usr/bin/env python3
"""
MCP Tools for Screenshot Module

This module provides the MCP tool definitions for listing screens and
capturing screenshots.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with registered tools
"""

from typing import Annotated, Any, Dict, List, Optional, Union

from loguru import logger
from pydantic import Field

from mcp.server.fastmcp import FastMCP
from mcp.types import ImageContent, TextContent

from webdev_mcp.screenshot.core.config import CONFIG
from webdev_mcp.screenshot.mcp.wrappers import list_screens_wrapper, take_screenshot_wrapper


def to_content(blocks: List[Dict[str, Any]]) -> List[Union[TextContent, ImageContent]]:
    """
    Convert wrapper blocks into MCP content types.

    Args:
        blocks: Dictionaries with a "type" of "text" or "image"

    Returns:
        List[Union[TextContent, ImageContent]]: Protocol content blocks
    """
    content: List[Union[TextContent, ImageContent]] = []
    for block in blocks:
        if block["type"] == "image":
            content.append(ImageContent(type="image", data=block["data"], mimeType=block["mimeType"]))
        else:
            content.append(TextContent(type="text", text=block["text"]))
    return content


def create_mcp_server(name: Optional[str] = None) -> FastMCP:
    """
    Create and configure MCP server with screen capture tools

    Args:
        name: Name for the MCP server, defaults to the configured server name

    Returns:
        FastMCP: Configured MCP server instance
    """
    name = name or CONFIG["server"]["name"]
    mcp = FastMCP(name)
    logger.info(f"Initialized FastMCP server: {name}")

    register_list_screens_tool(mcp)
    register_screenshot_tool(mcp)

    return mcp


def register_list_screens_tool(mcp: FastMCP) -> None:
    """
    Register listScreens tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool(
        name="listScreens",
        description="List available screens/displays that can be captured",
    )
    async def list_screens_tool():
        """
        Lists the screens that can be captured, one "Screen <id>: <description>" line each.

        Returns:
            list: A single text block with the screen list, or with the error message.
        """
        return to_content(await list_screens_wrapper())


def register_screenshot_tool(mcp: FastMCP) -> None:
    """
    Register takeScreenshot tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool(
        name="takeScreenshot",
        description="Take a screenshot of a specific screen and return it as a base64 encoded string.",
    )
    async def take_screenshot_tool(
        screenId: Annotated[
            Optional[int],
            Field(
                description=(
                    "ID of the screen to capture. Use listScreens to find available screens. "
                    "Default is 1 (main screen)"
                )
            ),
        ] = None,
        timeout: Annotated[
            Optional[int],
            Field(description="Maximum time to wait in milliseconds (default: 0, no timeout)"),
        ] = None,
    ):
        """
        Captures one screen as a base64-encoded PNG. Screen 2 is fitted onto an 819x1456 canvas.

        Args:
            screenId (int, optional): Screen to capture. Defaults to 1 (main screen).
            timeout (int, optional): Capture command timeout in milliseconds. Defaults to no timeout.

        Returns:
            list: A success text block plus an image/png block, or a single error text block.
        """
        return to_content(await take_screenshot_wrapper(screen_id=screenId, timeout=timeout))
