#!/usr/bin/env python3
"""
Constants for Screenshot Module

This module defines constants used throughout the screen capture functionality,
ensuring consistent defaults across the core, CLI and MCP layers.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict, Tuple

# Screen selected when a request does not name one
DEFAULT_SCREEN_ID: int = 1

# Fixed output canvas per screen id. Screens not listed are never resized.
# Screen 2 is the mobile-sized secondary display.
RESIZE_POLICY: Dict[int, Tuple[int, int]] = {
    2: (819, 1456),
}

# Opaque white used to letterbox resized captures
PAD_COLOR: Tuple[int, int, int] = (255, 255, 255)

# Descriptor returned whenever display enumeration fails
FALLBACK_SCREEN_ID: int = 1
FALLBACK_SCREEN_DESCRIPTION: str = "Main Display"

# Descriptor for platforms that can only capture the primary screen
SINGLE_SCREEN_ID: int = 0
SINGLE_SCREEN_DESCRIPTION: str = "Primary Screen (multi-screen selection not supported yet)"

# Temp file naming
TEMP_FILE_PREFIX: str = "screenshot"
RESIZED_FILE_PREFIX: str = "screenshot-resized"
TEMP_FILE_EXTENSION: str = "png"

# Labels scanned in `system_profiler SPDisplaysDataType` output
DISPLAY_TYPE_LABELS: Tuple[str, ...] = ("Display Type:", "Type:")
RESOLUTION_LABEL: str = "Resolution:"
NAME_LABEL: str = "Name:"

IMAGE_MIME_TYPE: str = "image/png"

# Logging settings
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging


if __name__ == "__main__":
    """Validate module constants"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Resize canvases are positive
    total_tests += 1
    for screen_id, (width, height) in RESIZE_POLICY.items():
        if width <= 0 or height <= 0:
            all_validation_failures.append(f"RESIZE_POLICY[{screen_id}] must be positive, got {(width, height)}")

    # Test 2: Default screen is never resized
    total_tests += 1
    if DEFAULT_SCREEN_ID in RESIZE_POLICY:
        all_validation_failures.append(f"Default screen {DEFAULT_SCREEN_ID} should not be in RESIZE_POLICY")

    # Test 3: Pad color is an RGB triple
    total_tests += 1
    if len(PAD_COLOR) != 3 or not all(0 <= c <= 255 for c in PAD_COLOR):
        all_validation_failures.append(f"PAD_COLOR should be an RGB triple, got {PAD_COLOR}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Constants are valid and ready for use")
        sys.exit(0)
