#!/usr/bin/env python3
"""
Platform Capture Commands

This module maps a host platform to the OS-native commands used to capture
the screen and to describe the attached displays.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- resolve_platform("darwin").build_capture_command(2, "/tmp/shot.png")

Expected output:
- ["screencapture", "-D", "2", "-x", "/tmp/shot.png"]
"""

import sys
from typing import Dict, List, Optional, Type

from webdev_mcp.screenshot.core.config import CONFIG
from webdev_mcp.screenshot.core.errors import UnsupportedPlatform


class CapturePlatform:
    """Capture commands for one host platform."""

    tag: str = ""
    supports_multi_display: bool = False

    def build_capture_command(self, screen_id: Optional[int], output_path: str) -> List[str]:
        """
        Build the command that writes a PNG of the screen to ``output_path``.

        Args:
            screen_id: Display to capture, None for the primary display
            output_path: Where the capture utility writes the image
        """
        raise NotImplementedError

    def introspection_command(self) -> Optional[List[str]]:
        """Command printing display information, None when unavailable."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MacOSPlatform(CapturePlatform):
    tag = "darwin"
    supports_multi_display = True

    def build_capture_command(self, screen_id: Optional[int], output_path: str) -> List[str]:
        # -x silences the shutter sound, -D selects a 1-based display
        if screen_id is None:
            return ["screencapture", "-x", output_path]
        return ["screencapture", "-D", str(screen_id), "-x", output_path]

    def introspection_command(self) -> Optional[List[str]]:
        return ["system_profiler", "SPDisplaysDataType"]


class WindowsPlatform(CapturePlatform):
    """Print Screen into the clipboard, then save the clipboard image."""

    tag = "win32"

    def build_capture_command(self, screen_id: Optional[int], output_path: str) -> List[str]:
        delay_ms = CONFIG["capture"]["clipboard_delay_ms"]
        escaped_path = output_path.replace("'", "''")
        script = (
            "Add-Type -AssemblyName System.Windows.Forms; "
            "[System.Windows.Forms.SendKeys]::SendWait('{PRTSC}'); "
            f"Start-Sleep -Milliseconds {delay_ms}; "
            "$img = [System.Windows.Forms.Clipboard]::GetImage(); "
            f"$img.Save('{escaped_path}')"
        )
        return ["powershell", "-command", script]


class LinuxPlatform(CapturePlatform):
    """ImageMagick capture of the X root window."""

    tag = "linux"

    def build_capture_command(self, screen_id: Optional[int], output_path: str) -> List[str]:
        return ["import", "-window", "root", output_path]


PLATFORMS: Dict[str, Type[CapturePlatform]] = {
    cls.tag: cls for cls in (MacOSPlatform, WindowsPlatform, LinuxPlatform)
}


def resolve_platform(platform_tag: Optional[str] = None) -> CapturePlatform:
    """
    Return the capture platform for a ``sys.platform`` style tag.

    Raises:
        UnsupportedPlatform: The tag is not darwin, win32 or linux
    """
    tag = platform_tag if platform_tag is not None else sys.platform
    try:
        return PLATFORMS[tag]()
    except KeyError:
        raise UnsupportedPlatform(tag) from None
