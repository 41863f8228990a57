"""
Core Layer for Screenshot Module

This package contains the core business logic for screen capture.
It lists capturable screens and captures one screen to a base64 PNG.

The core layer is designed to be:
1. Independent of UI or integration concerns
2. Fully testable in isolation
3. Focused on business logic only

Usage:
    import asyncio
    from webdev_mcp.screenshot.core import CaptureOptions, list_screens, take_screenshot

    screens = asyncio.run(list_screens())
    data = asyncio.run(take_screenshot(CaptureOptions.from_params(screen_id=2)))
"""

# Core constants and settings
from webdev_mcp.screenshot.core.constants import (
    DEFAULT_SCREEN_ID,
    RESIZE_POLICY,
    IMAGE_MIME_TYPE
)
from webdev_mcp.screenshot.core.config import CONFIG, validate_config

# Types and errors
from webdev_mcp.screenshot.core.types import ScreenDescriptor, CaptureOptions
from webdev_mcp.screenshot.core.errors import (
    ScreenshotError,
    UnsupportedPlatform,
    CommandFailed,
    CommandTimeout,
    CaptureFailed
)

# Platform dispatch
from webdev_mcp.screenshot.core.platforms import (
    CapturePlatform,
    MacOSPlatform,
    WindowsPlatform,
    LinuxPlatform,
    resolve_platform
)

# Display enumeration
from webdev_mcp.screenshot.core.displays import (
    list_screens,
    parse_display_sections,
    parse_resolution_lines,
    build_screen_descriptors
)

# Screenshot capture
from webdev_mcp.screenshot.core.capture import take_screenshot

# Image processing
from webdev_mcp.screenshot.core.image_processing import (
    fit_to_canvas,
    ensure_rgb,
    resize_image_file,
    encode_file_base64
)

# Utility functions
from webdev_mcp.screenshot.core.utils import (
    format_screen_list,
    generate_filename,
    truncate_large_value
)

__all__ = [
    # Constants
    'DEFAULT_SCREEN_ID',
    'RESIZE_POLICY',
    'IMAGE_MIME_TYPE',
    'CONFIG',
    'validate_config',

    # Types and errors
    'ScreenDescriptor',
    'CaptureOptions',
    'ScreenshotError',
    'UnsupportedPlatform',
    'CommandFailed',
    'CommandTimeout',
    'CaptureFailed',

    # Platforms
    'CapturePlatform',
    'MacOSPlatform',
    'WindowsPlatform',
    'LinuxPlatform',
    'resolve_platform',

    # Display enumeration
    'list_screens',
    'parse_display_sections',
    'parse_resolution_lines',
    'build_screen_descriptors',

    # Screenshot capture
    'take_screenshot',

    # Image processing
    'fit_to_canvas',
    'ensure_rgb',
    'resize_image_file',
    'encode_file_base64',

    # Utilities
    'format_screen_list',
    'generate_filename',
    'truncate_large_value'
]
