#!/usr/bin/env python3
"""
MCP Wrappers for Screenshot Module

This module provides MCP-specific wrapper functions for the core screenshot
functionality. Each wrapper calls the core, catches every error, and returns
a list of MCP content blocks (plain dictionaries) so the tool layer only has
to convert them to protocol types.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- take_screenshot_wrapper(screen_id=2)

Expected output:
- [{"type": "text", "text": "Screenshot of screen 2 captured successfully"},
   {"type": "image", "data": "<base64>", "mimeType": "image/png"}]
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from webdev_mcp.screenshot.core.capture import take_screenshot
from webdev_mcp.screenshot.core.constants import IMAGE_MIME_TYPE
from webdev_mcp.screenshot.core.displays import list_screens
from webdev_mcp.screenshot.core.types import CaptureOptions
from webdev_mcp.screenshot.core.utils import format_screen_list, truncate_large_value


def text_block(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def image_block(data: str, mime_type: str = IMAGE_MIME_TYPE) -> Dict[str, Any]:
    return {"type": "image", "data": data, "mimeType": mime_type}


async def list_screens_wrapper(platform_tag: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    MCP wrapper for listing screens.

    Returns:
        List[Dict[str, Any]]: A single text block with the screen list or the error
    """
    try:
        logger.info("Listing available screens...")
        screens = await list_screens(platform_tag)
        return [text_block(f"Available screens:\n{format_screen_list(screens)}")]
    except Exception as e:
        logger.exception(f"Error listing screens: {str(e)}")
        return [text_block(f"Error listing screens: {str(e)}")]


async def take_screenshot_wrapper(
    screen_id: Optional[int] = None,
    timeout: Optional[int] = None,
    platform_tag: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    MCP wrapper for screenshot capture.

    Args:
        screen_id: Screen to capture, defaults to the main screen
        timeout: Capture command timeout in milliseconds, 0 or None for none
        platform_tag: Override of the host platform tag

    Returns:
        List[Dict[str, Any]]: Text and image blocks, or a single error text block
    """
    try:
        options = CaptureOptions.from_params(screen_id=screen_id, timeout=timeout)
        logger.info(f"Taking screenshot of screen {options.screen_id}...")

        data = await take_screenshot(options, platform_tag=platform_tag)
        logger.info(f"Screenshot captured successfully: {truncate_large_value(data)}")

        return [
            text_block(f"Screenshot of screen {options.screen_id} captured successfully"),
            image_block(data),
        ]
    except Exception as e:
        logger.exception(f"Error taking screenshot: {str(e)}")
        return [text_block(f"Error taking screenshot: {str(e)}")]
