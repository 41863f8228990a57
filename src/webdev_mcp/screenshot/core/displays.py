#!/usr/bin/env python3
"""
Display Enumeration Module

This module lists the screens that can be captured on the host. On macOS it
parses the text printed by ``system_profiler SPDisplaysDataType``; other
platforms report a single primary screen.

Enumeration never fails because of the introspection command: any error while
running or parsing it degrades to a single "Main Display" entry. Only an
unsupported platform is raised to the caller.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input (system_profiler excerpt):
    Displays:
      Color LCD:
        Display Type: Built-In Retina LCD
        Resolution: 2560 x 1600 Retina
      DELL U2720Q:
        Resolution: 3840 x 2160

Expected output:
    [ScreenDescriptor(id=1, description="Built-In Retina LCD (2560 x 1600 Retina)"),
     ScreenDescriptor(id=2, description="Display (3840 x 2160)")]
"""

import re
from typing import Dict, List, Optional

from loguru import logger

from webdev_mcp.screenshot.core.constants import (
    DISPLAY_TYPE_LABELS,
    FALLBACK_SCREEN_DESCRIPTION,
    FALLBACK_SCREEN_ID,
    NAME_LABEL,
    RESOLUTION_LABEL,
    SINGLE_SCREEN_DESCRIPTION,
    SINGLE_SCREEN_ID,
)
from webdev_mcp.screenshot.core.platforms import CapturePlatform, resolve_platform
from webdev_mcp.screenshot.core.process import run_command
from webdev_mcp.screenshot.core.types import ScreenDescriptor

# A section header is a line whose text ends in a colon with no value after it
SECTION_HEADER = re.compile(r"^\s*\S[^:]*:\s*$")

# A section describes a display when it carries one of these labels
DISPLAY_SECTION_LABELS = (RESOLUTION_LABEL, "Display Type:")


def fallback_screens() -> List[ScreenDescriptor]:
    return [ScreenDescriptor(FALLBACK_SCREEN_ID, FALLBACK_SCREEN_DESCRIPTION)]


def _label_value(line: str) -> str:
    return line.split(":", 1)[1].strip()


def split_sections(text: str) -> List[List[str]]:
    """Split introspection text into blocks of stripped lines, one per header."""
    sections: List[List[str]] = []
    current: List[str] = []

    for raw_line in text.splitlines():
        if SECTION_HEADER.match(raw_line):
            if current:
                sections.append(current)
            current = []
            continue
        line = raw_line.strip()
        if line:
            current.append(line)

    if current:
        sections.append(current)
    return sections


def parse_display_sections(text: str) -> List[Dict[str, Optional[str]]]:
    """
    Parse display sections out of ``system_profiler`` text.

    Each record has optional ``type``, ``resolution`` and ``name`` values taken
    from the first line starting with the matching label.

    Args:
        text: Raw introspection output

    Returns:
        List[Dict[str, Optional[str]]]: One record per display section, in order
    """
    records = []

    for lines in split_sections(text):
        if not any(line.startswith(DISPLAY_SECTION_LABELS) for line in lines):
            continue

        record: Dict[str, Optional[str]] = {"type": None, "resolution": None, "name": None}
        for line in lines:
            if record["type"] is None and line.startswith(DISPLAY_TYPE_LABELS):
                record["type"] = _label_value(line) or "Unknown"
            elif record["resolution"] is None and line.startswith(RESOLUTION_LABEL):
                record["resolution"] = _label_value(line)
            elif record["name"] is None and line.startswith(NAME_LABEL):
                record["name"] = _label_value(line)
        records.append(record)

    return records


def build_screen_descriptors(records: List[Dict[str, Optional[str]]]) -> List[ScreenDescriptor]:
    """Turn parsed records into descriptors numbered from 1 in record order."""
    screens = []
    for index, record in enumerate(records):
        description = record.get("name") or record.get("type") or "Display"
        if record.get("resolution"):
            description += f" ({record['resolution']})"
        screens.append(ScreenDescriptor(index + 1, description))
    return screens


def parse_resolution_lines(text: str) -> List[str]:
    """Return the value of every line mentioning a resolution, in order."""
    resolutions = []
    for line in text.splitlines():
        if "Resolution" not in line:
            continue
        resolutions.append(line.split(":", 1)[1].strip() if ":" in line else "")
    return resolutions


def descriptors_from_resolutions(resolutions: List[str]) -> List[ScreenDescriptor]:
    """Label the first resolution as the main display and the rest as external."""
    screens = []
    for index, resolution in enumerate(resolutions):
        if index == 0:
            description = f"Main Display ({resolution})"
        else:
            description = f"External Display {index} ({resolution})"
        screens.append(ScreenDescriptor(index + 1, description))
    return screens


async def _introspect_displays(platform: CapturePlatform) -> List[ScreenDescriptor]:
    command = platform.introspection_command()
    output = await run_command(command)

    if not output.strip():
        logger.warning("Display introspection returned no output, assuming a single display")
        return fallback_screens()

    records = parse_display_sections(output)
    if not records:
        logger.warning("No display sections found in introspection output")
        return fallback_screens()

    screens = build_screen_descriptors(records)

    # A single parsed section may hide several displays; count resolution lines instead
    if len(screens) <= 1:
        try:
            resolutions = parse_resolution_lines(await run_command(command))
            if len(resolutions) > 1:
                logger.info(f"Found {len(resolutions)} resolution lines, rebuilding display list")
                screens = descriptors_from_resolutions(resolutions)
        except Exception as e:
            logger.error(f"Error getting alternative screen info: {str(e)}")

    return screens


async def list_screens(platform_tag: Optional[str] = None) -> List[ScreenDescriptor]:
    """
    List capturable screens.

    Args:
        platform_tag: ``sys.platform`` style tag, defaults to the host platform

    Returns:
        List[ScreenDescriptor]: Screens in capture id order

    Raises:
        UnsupportedPlatform: The host platform is not supported
    """
    platform = resolve_platform(platform_tag)

    if not platform.supports_multi_display:
        return [ScreenDescriptor(SINGLE_SCREEN_ID, SINGLE_SCREEN_DESCRIPTION)]

    try:
        screens = await _introspect_displays(platform)
    except Exception as e:
        logger.exception(f"Error listing screens: {str(e)}")
        return fallback_screens()

    logger.info(f"Found {len(screens)} screen(s)")
    return screens


if __name__ == "__main__":
    """Validate display parsing with sample system_profiler output"""
    import sys

    sample = """Graphics/Displays:

    Apple M1:

      Chipset Model: Apple M1
      Type: GPU
      Bus: Built-In
      Displays:
        Color LCD:
          Display Type: Built-In Retina LCD
          Resolution: 2560 x 1600 Retina
          Main Display: Yes
        DELL U2720Q:
          Resolution: 3840 x 2160 (2160p/4K UHD 1 - Ultra High Definition)
          Main Display: No
"""

    all_validation_failures = []
    total_tests = 0

    # Test 1: Two display sections, GPU section ignored
    total_tests += 1
    screens = build_screen_descriptors(parse_display_sections(sample))
    if [s.id for s in screens] != [1, 2]:
        all_validation_failures.append(f"Section parse test: Expected ids [1, 2], got {screens}")

    # Test 2: Resolution lines
    total_tests += 1
    resolutions = parse_resolution_lines(sample)
    if len(resolutions) != 2:
        all_validation_failures.append(f"Resolution parse test: Expected 2 lines, got {resolutions}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
