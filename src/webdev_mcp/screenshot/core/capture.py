#!/usr/bin/env python3
"""
Screenshot Capture Module

This module captures one screen with the host's native capture utility and
returns the image as a base64-encoded PNG.

The capture is written to a temp file, optionally fitted onto a fixed canvas
(see RESIZE_POLICY), read back, encoded, and deleted. Temp files never
outlive the call, whether it succeeds or fails.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- CaptureOptions(screen_id=1)
- CaptureOptions(screen_id=2, timeout=5000)

Expected output:
- Base64 string of PNG bytes (screen 2 is always 819x1456)
- On error: CaptureFailed
"""

import asyncio
import os
from typing import List, Optional

from loguru import logger

from webdev_mcp.screenshot.core.config import CONFIG
from webdev_mcp.screenshot.core.constants import (
    DEFAULT_SCREEN_ID,
    RESIZED_FILE_PREFIX,
    RESIZE_POLICY,
    TEMP_FILE_PREFIX,
)
from webdev_mcp.screenshot.core.displays import list_screens
from webdev_mcp.screenshot.core.errors import CaptureFailed
from webdev_mcp.screenshot.core.image_processing import encode_file_base64, resize_image_file
from webdev_mcp.screenshot.core.platforms import CapturePlatform, resolve_platform
from webdev_mcp.screenshot.core.process import run_command
from webdev_mcp.screenshot.core.types import CaptureOptions
from webdev_mcp.screenshot.core.utils import generate_temp_path, remove_file_quietly


async def resolve_target_screen(
    platform: CapturePlatform,
    screen_id: int,
    platform_tag: Optional[str] = None,
    strict: Optional[bool] = None,
) -> Optional[int]:
    """
    Decide which display the capture command should target.

    On platforms without display selection the id is passed through and
    ignored by the command. Otherwise an id that is not enumerated falls back
    to the primary display (None), or fails in strict mode.

    Returns:
        Optional[int]: Display id for the command, None for the primary display
    """
    if not platform.supports_multi_display:
        return screen_id

    screens = await list_screens(platform_tag)
    if screen_id == DEFAULT_SCREEN_ID or any(screen.id == screen_id for screen in screens):
        return screen_id

    if strict is None:
        strict = CONFIG["capture"]["strict_screen_ids"]
    if strict:
        available = ", ".join(str(screen.id) for screen in screens)
        raise CaptureFailed(f"Display ID {screen_id} not found (available: {available})")

    logger.warning(f"Display ID {screen_id} not found, defaulting to main display")
    return None


async def take_screenshot(
    options: Optional[CaptureOptions] = None,
    platform_tag: Optional[str] = None,
    temp_dir: Optional[str] = None,
) -> str:
    """
    Capture a screen and return it as a base64-encoded PNG.

    Args:
        options: Capture options, defaults to the main screen with no timeout
        platform_tag: ``sys.platform`` style tag, defaults to the host platform
        temp_dir: Directory for temp files, defaults to the configured temp dir

    Returns:
        str: Base64 PNG data

    Raises:
        CaptureFailed: Any failure, chained from the underlying error
    """
    options = options or CaptureOptions()
    temp_dir = temp_dir or CONFIG["capture"]["temp_dir"]
    screen_id = options.screen_id
    created: List[str] = []

    timeout_text = f"timeout={options.timeout}ms" if options.timeout else "no timeout"
    logger.info(f"Screenshot requested for screen {screen_id} ({timeout_text})")

    try:
        platform = resolve_platform(platform_tag)

        screenshot_path = generate_temp_path(temp_dir, TEMP_FILE_PREFIX)
        target = await resolve_target_screen(platform, screen_id, platform_tag)
        command = platform.build_capture_command(target, screenshot_path)

        created.append(screenshot_path)
        await run_command(command, timeout=options.timeout_seconds)

        if not os.path.exists(screenshot_path):
            raise CaptureFailed(f"capture command produced no file at {screenshot_path}")

        final_path = screenshot_path
        canvas = RESIZE_POLICY.get(screen_id)
        if canvas is not None:
            resized_path = generate_temp_path(temp_dir, RESIZED_FILE_PREFIX)
            created.append(resized_path)
            await asyncio.to_thread(resize_image_file, screenshot_path, resized_path, canvas)
            os.remove(screenshot_path)
            final_path = resized_path

        data = await asyncio.to_thread(encode_file_base64, final_path)
        os.remove(final_path)

        logger.info(f"Screenshot of screen {screen_id} encoded ({len(data)} characters)")
        return data

    except CaptureFailed as e:
        logger.error(f"Screenshot of screen {screen_id} failed: {str(e)}")
        raise
    except Exception as e:
        logger.error(f"Error taking screenshot: {str(e)}")
        raise CaptureFailed(str(e)) from e
    finally:
        for path in created:
            remove_file_quietly(path)
