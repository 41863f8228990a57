#!/usr/bin/env python3
"""
Utility Functions for Screenshot Module

This module provides common utility functions used by other core modules:
temp file naming and cleanup, screen list formatting and log truncation.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- generate_filename("screenshot", "png")

Expected output:
- "screenshot-1718000000000-3f2a9c1b.png"
"""

import os
import platform
import time
import uuid
from typing import Any, Dict, Iterable, Optional

from loguru import logger

from webdev_mcp.screenshot.core.constants import LOG_MAX_STR_LEN, TEMP_FILE_EXTENSION
from webdev_mcp.screenshot.core.types import ScreenDescriptor


def generate_filename(prefix: str = "screenshot", extension: str = TEMP_FILE_EXTENSION) -> str:
    """
    Generates a unique filename from a millisecond timestamp and a random suffix.

    Args:
        prefix: Filename prefix
        extension: File extension without dot

    Returns:
        str: Generated filename
    """
    timestamp = int(time.time() * 1000)
    return f"{prefix}-{timestamp}-{uuid.uuid4().hex[:8]}.{extension}"


def generate_temp_path(directory: str, prefix: str = "screenshot") -> str:
    """Returns a unique PNG path inside ``directory``."""
    return os.path.join(directory, generate_filename(prefix))


def remove_file_quietly(path: Optional[str]) -> bool:
    """
    Deletes a file if it exists, logging instead of raising on failure.

    Returns:
        bool: True if nothing is left at ``path``
    """
    if not path or not os.path.exists(path):
        return True
    try:
        os.remove(path)
        logger.debug(f"Removed temp file {path}")
        return True
    except OSError as e:
        logger.warning(f"Failed to remove temp file {path}: {str(e)}")
        return False


def format_screen_list(screens: Iterable[ScreenDescriptor]) -> str:
    """Formats screens as ``Screen <id>: <description>`` lines."""
    return "\n".join(f"Screen {screen.id}: {screen.description}" for screen in screens)


def truncate_large_value(value: Any, max_str_len: int = LOG_MAX_STR_LEN) -> Any:
    """
    Truncates large string values for logging purposes.

    Args:
        value: The value to truncate
        max_str_len: Maximum string length to allow

    Returns:
        The value, shortened if it is a long string
    """
    if isinstance(value, str) and len(value) > max_str_len:
        return f"{value[:max_str_len]}... [truncated, {len(value)} chars total]"
    return value


def get_system_info() -> Dict[str, str]:
    """
    Get system information for debugging.

    Returns:
        Dict[str, str]: System information
    """
    return {
        "platform": platform.system(),
        "platform_version": platform.version(),
        "python_version": platform.python_version(),
        "architecture": platform.architecture()[0],
    }


def format_error_response(error_message: str, include_system_info: bool = False) -> Dict[str, Any]:
    """
    Creates a standardized error response.

    Args:
        error_message: Error message
        include_system_info: Whether to include system information

    Returns:
        Dict[str, Any]: Error response dictionary
    """
    response: Dict[str, Any] = {"error": error_message}

    if include_system_info:
        response["system_info"] = get_system_info()

    return response
