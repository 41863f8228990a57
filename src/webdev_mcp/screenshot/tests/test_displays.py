#!/usr/bin/env python3
"""
Unit tests for core/displays.py
"""

import unittest
from unittest.mock import AsyncMock, patch

from webdev_mcp.screenshot.core.displays import (
    build_screen_descriptors,
    descriptors_from_resolutions,
    list_screens,
    parse_display_sections,
    parse_resolution_lines
)
from webdev_mcp.screenshot.core.errors import CommandFailed, UnsupportedPlatform
from webdev_mcp.screenshot.core.types import ScreenDescriptor

RUN_COMMAND = "webdev_mcp.screenshot.core.displays.run_command"

THREE_DISPLAYS = """Graphics/Displays:

    Apple M2 Pro:

      Chipset Model: Apple M2 Pro
      Type: GPU
      Bus: Built-In
      Displays:
        Color LCD:
          Display Type: Built-In Liquid Retina XDR Display
          Resolution: 3456 x 2234 Retina
          Main Display: Yes
          Connection Type: Internal
        DELL U2720Q:
          Resolution: 3840 x 2160 (2160p/4K UHD 1 - Ultra High Definition)
          UI Looks like: 1920 x 1080 @ 60.00Hz
          Main Display: No
        Sidecar:
          Name: iPad Pro
          Display Type: AirPlay
          Resolution: 2732 x 2048
"""

ONE_DISPLAY = """Graphics/Displays:

    Apple M1:

      Chipset Model: Apple M1
      Type: GPU
      Displays:
        Color LCD:
          Display Type: Built-In Retina LCD
          Resolution: 2560 x 1600 Retina
          Main Display: Yes
"""

# Two resolutions under one header, as seen with mirrored or unnamed displays
MERGED_DISPLAYS = """Graphics/Displays:
      Displays:
          Resolution: 2560 x 1600 Retina
          Main Display: Yes
          Resolution: 1920 x 1080
          Main Display: No
"""

NO_DISPLAYS = """Graphics/Displays:

    Apple M1:

      Chipset Model: Apple M1
      Type: GPU
"""

FALLBACK = [ScreenDescriptor(1, "Main Display")]


class TestDisplayParsing(unittest.TestCase):
    """Test cases for the pure parsing functions"""

    def test_three_sections_in_order(self):
        """Each display section becomes one record, GPU section skipped"""
        records = parse_display_sections(THREE_DISPLAYS)

        self.assertEqual(len(records), 3)
        self.assertEqual(records[0]["type"], "Built-In Liquid Retina XDR Display")
        self.assertEqual(records[1]["resolution"], "3840 x 2160 (2160p/4K UHD 1 - Ultra High Definition)")
        self.assertEqual(records[2]["name"], "iPad Pro")

    def test_descriptions_prefer_name_then_type(self):
        """Description falls back from name to type to 'Display'"""
        screens = build_screen_descriptors(parse_display_sections(THREE_DISPLAYS))

        self.assertEqual([s.id for s in screens], [1, 2, 3])
        self.assertEqual(screens[0].description, "Built-In Liquid Retina XDR Display (3456 x 2234 Retina)")
        self.assertEqual(screens[1].description, "Display (3840 x 2160 (2160p/4K UHD 1 - Ultra High Definition))")
        self.assertEqual(screens[2].description, "iPad Pro (2732 x 2048)")

    def test_first_label_match_wins(self):
        """Only the first line for each label is used"""
        records = parse_display_sections(MERGED_DISPLAYS)

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0]["resolution"], "2560 x 1600 Retina")

    def test_no_resolution_omits_parentheses(self):
        screens = build_screen_descriptors([{"type": "Projector", "resolution": None, "name": None}])
        self.assertEqual(screens, [ScreenDescriptor(1, "Projector")])

    def test_no_display_sections(self):
        self.assertEqual(parse_display_sections(NO_DISPLAYS), [])
        self.assertEqual(parse_display_sections(""), [])

    def test_parse_resolution_lines(self):
        self.assertEqual(parse_resolution_lines(MERGED_DISPLAYS), ["2560 x 1600 Retina", "1920 x 1080"])
        self.assertEqual(parse_resolution_lines(NO_DISPLAYS), [])

    def test_descriptors_from_resolutions(self):
        screens = descriptors_from_resolutions(["2560 x 1600", "1920 x 1080", "1280 x 720"])

        self.assertEqual(screens[0], ScreenDescriptor(1, "Main Display (2560 x 1600)"))
        self.assertEqual(screens[1], ScreenDescriptor(2, "External Display 1 (1920 x 1080)"))
        self.assertEqual(screens[2], ScreenDescriptor(3, "External Display 2 (1280 x 720)"))


class TestListScreens(unittest.IsolatedAsyncioTestCase):
    """Test cases for list_screens"""

    async def test_macos_three_displays(self):
        with patch(RUN_COMMAND, AsyncMock(return_value=THREE_DISPLAYS)) as mock_run:
            screens = await list_screens("darwin")

        self.assertEqual([s.id for s in screens], [1, 2, 3])
        self.assertIn("3456 x 2234 Retina", screens[0].description)
        self.assertIn("3840 x 2160", screens[1].description)
        self.assertIn("2732 x 2048", screens[2].description)
        mock_run.assert_awaited_once_with(["system_profiler", "SPDisplaysDataType"])

    async def test_macos_single_display_rescans(self):
        """One parsed display triggers the resolution-line rescan, which agrees"""
        with patch(RUN_COMMAND, AsyncMock(return_value=ONE_DISPLAY)) as mock_run:
            screens = await list_screens("darwin")

        self.assertEqual(screens, [ScreenDescriptor(1, "Built-In Retina LCD (2560 x 1600 Retina)")])
        self.assertEqual(mock_run.await_count, 2)

    async def test_macos_rescan_rebuilds_from_resolutions(self):
        with patch(RUN_COMMAND, AsyncMock(return_value=MERGED_DISPLAYS)):
            screens = await list_screens("darwin")

        self.assertEqual(screens, [
            ScreenDescriptor(1, "Main Display (2560 x 1600 Retina)"),
            ScreenDescriptor(2, "External Display 1 (1920 x 1080)"),
        ])

    async def test_macos_rescan_failure_keeps_first_result(self):
        mock_run = AsyncMock(side_effect=[ONE_DISPLAY, CommandFailed("system_profiler", returncode=1)])
        with patch(RUN_COMMAND, mock_run):
            screens = await list_screens("darwin")

        self.assertEqual(len(screens), 1)
        self.assertIn("2560 x 1600 Retina", screens[0].description)

    async def test_macos_zero_sections_falls_back(self):
        with patch(RUN_COMMAND, AsyncMock(return_value=NO_DISPLAYS)):
            self.assertEqual(await list_screens("darwin"), FALLBACK)

    async def test_macos_empty_output_falls_back(self):
        with patch(RUN_COMMAND, AsyncMock(return_value="  \n")):
            self.assertEqual(await list_screens("darwin"), FALLBACK)

    async def test_introspection_failure_falls_back(self):
        """Any error from the introspection command degrades instead of raising"""
        for error in (CommandFailed("system_profiler", returncode=1), OSError("boom"), ValueError("bad")):
            with self.subTest(error=error):
                with patch(RUN_COMMAND, AsyncMock(side_effect=error)):
                    self.assertEqual(await list_screens("darwin"), FALLBACK)

    async def test_single_screen_platforms(self):
        for tag in ("win32", "linux"):
            with self.subTest(platform=tag):
                with patch(RUN_COMMAND, AsyncMock()) as mock_run:
                    screens = await list_screens(tag)

                self.assertEqual(len(screens), 1)
                self.assertEqual(screens[0].id, 0)
                self.assertIn("not supported", screens[0].description)
                mock_run.assert_not_awaited()

    async def test_unsupported_platform_raises_before_commands(self):
        with patch(RUN_COMMAND, AsyncMock()) as mock_run:
            with self.assertRaises(UnsupportedPlatform):
                await list_screens("sunos5")

        mock_run.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
