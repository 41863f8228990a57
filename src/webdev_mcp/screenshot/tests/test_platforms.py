#!/usr/bin/env python3
"""
Unit tests for core/platforms.py
"""

import unittest
from unittest.mock import patch

from webdev_mcp.screenshot.core.errors import UnsupportedPlatform
from webdev_mcp.screenshot.core.platforms import (
    LinuxPlatform,
    MacOSPlatform,
    WindowsPlatform,
    resolve_platform
)


class TestResolvePlatform(unittest.TestCase):
    """Test cases for platform selection"""

    def test_known_tags(self):
        self.assertIsInstance(resolve_platform("darwin"), MacOSPlatform)
        self.assertIsInstance(resolve_platform("win32"), WindowsPlatform)
        self.assertIsInstance(resolve_platform("linux"), LinuxPlatform)

    def test_unknown_tag(self):
        with self.assertRaises(UnsupportedPlatform) as ctx:
            resolve_platform("aix")

        self.assertEqual(ctx.exception.platform_tag, "aix")
        self.assertEqual(str(ctx.exception), "Unsupported platform: aix")

    def test_defaults_to_host(self):
        with patch("webdev_mcp.screenshot.core.platforms.sys.platform", "darwin"):
            self.assertIsInstance(resolve_platform(), MacOSPlatform)

    def test_only_macos_selects_displays(self):
        self.assertTrue(MacOSPlatform.supports_multi_display)
        self.assertFalse(WindowsPlatform.supports_multi_display)
        self.assertFalse(LinuxPlatform.supports_multi_display)


class TestCaptureCommands(unittest.TestCase):
    """Test cases for the per-platform commands"""

    def test_macos_targets_display(self):
        command = MacOSPlatform().build_capture_command(2, "/tmp/shot.png")
        self.assertEqual(command, ["screencapture", "-D", "2", "-x", "/tmp/shot.png"])

    def test_macos_primary_display(self):
        command = MacOSPlatform().build_capture_command(None, "/tmp/shot.png")
        self.assertEqual(command, ["screencapture", "-x", "/tmp/shot.png"])

    def test_macos_introspection(self):
        self.assertEqual(MacOSPlatform().introspection_command(), ["system_profiler", "SPDisplaysDataType"])

    def test_linux_ignores_screen(self):
        self.assertEqual(
            LinuxPlatform().build_capture_command(3, "/tmp/shot.png"),
            ["import", "-window", "root", "/tmp/shot.png"]
        )
        self.assertIsNone(LinuxPlatform().introspection_command())

    def test_windows_clipboard_script(self):
        with patch.dict("webdev_mcp.screenshot.core.platforms.CONFIG", {"capture": {
            "temp_dir": "/tmp",
            "strict_screen_ids": False,
            "clipboard_delay_ms": 750,
        }}):
            command = WindowsPlatform().build_capture_command(2, "C:\\Temp\\it's.png")

        self.assertEqual(command[:2], ["powershell", "-command"])
        script = command[2]
        self.assertIn("SendWait('{PRTSC}')", script)
        self.assertIn("Start-Sleep -Milliseconds 750", script)
        self.assertIn("$img.Save('C:\\Temp\\it''s.png')", script)


if __name__ == "__main__":
    unittest.main()
