#!/usr/bin/env python3
"""
Command Line Interface for Screenshot Module

This module provides a CLI for the screen capture functionality using Typer
and Rich, allowing users to list screens and save screenshots to disk.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- webdev-screens screens
- webdev-screens capture --screen 2 --output shots/phone.png

Expected output:
- Formatted console output of operation results
- PNG files saved to disk
- Structured JSON output with --json
"""

import asyncio
import base64
import io
import sys
from typing import Any, Dict, Optional

import typer
from loguru import logger
from PIL import Image

from webdev_mcp.screenshot.core.capture import take_screenshot
from webdev_mcp.screenshot.core.config import CONFIG
from webdev_mcp.screenshot.core.displays import list_screens
from webdev_mcp.screenshot.core.errors import UnsupportedPlatform
from webdev_mcp.screenshot.core.platforms import PLATFORMS
from webdev_mcp.screenshot.core.types import CaptureOptions
from webdev_mcp.screenshot.core.utils import format_error_response, generate_filename
from webdev_mcp.screenshot.cli.formatters import (
    create_progress,
    print_capture_result,
    print_error,
    print_info,
    print_json,
    print_screens_table,
    print_warning
)
from webdev_mcp.screenshot.cli.validators import (
    validate_output_path,
    validate_screen_option,
    validate_timeout_option
)


app = typer.Typer(
    help="webdev-mcp screen capture tool",
    rich_markup_mode="rich",
    add_completion=False
)


def format_cli_response(success: bool, data: Optional[Dict[str, Any]] = None, error: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON envelope printed in --json mode."""
    if success:
        return {"success": True, "data": data or {}}
    response = format_error_response(error or "Unknown error")
    response["success"] = False
    return response


def save_capture(data: str, output: str) -> Dict[str, Any]:
    """Decode a base64 PNG, write it to ``output`` and report its dimensions."""
    png_bytes = base64.b64decode(data)
    with Image.open(io.BytesIO(png_bytes)) as img:
        size = img.size
    with open(output, "wb") as f:
        f.write(png_bytes)
    return {"file": output, "size": list(size)}


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON"
    ),
):
    """
    webdev-mcp screen capture tool - lists screens and captures screenshots
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output


@app.command("screens")
def screens_command(ctx: typer.Context):
    """
    List available screens/displays that can be captured.
    """
    json_output = ctx.obj.get("json_output", False)

    try:
        screens = asyncio.run(list_screens())
    except UnsupportedPlatform as e:
        logger.error(f"Screens command failed: {str(e)}")
        if json_output:
            print_json(format_cli_response(False, error=str(e)))
        else:
            print_error(f"Error listing screens: {str(e)}")
        sys.exit(1)

    if json_output:
        print_json(format_cli_response(True, data={"screens": [screen.to_dict() for screen in screens]}))
    else:
        print_screens_table(screens)


@app.command("capture")
def capture_command(
    ctx: typer.Context,
    screen: Optional[int] = typer.Option(
        None,
        "--screen", "-s",
        help="ID of the screen to capture (see 'screens'). Default is 1 (main screen)",
        callback=validate_screen_option
    ),
    timeout: Optional[int] = typer.Option(
        None,
        "--timeout", "-t",
        help="Maximum time to wait for the capture command in milliseconds (0: no timeout)",
        callback=validate_timeout_option
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output PNG path. If not provided, saves to the current directory.",
        callback=validate_output_path
    ),
):
    """
    Take a screenshot of a specific screen and save it as PNG.
    """
    json_output = ctx.obj.get("json_output", False)
    output = output or generate_filename()

    try:
        options = CaptureOptions.from_params(screen_id=screen, timeout=timeout)

        platform_cls = PLATFORMS.get(sys.platform)
        if screen is not None and platform_cls and not platform_cls.supports_multi_display and not json_output:
            print_warning("Multi-screen selection is not supported on this platform, capturing the primary screen.")

        if json_output:
            data = asyncio.run(take_screenshot(options))
        else:
            with create_progress() as progress:
                progress.add_task(f"Capturing screen {options.screen_id}...", total=None)
                data = asyncio.run(take_screenshot(options))

        result = save_capture(data, output)
        result["screen_id"] = options.screen_id

    except Exception as e:
        logger.error(f"Capture command failed: {str(e)}")
        if json_output:
            print_json(format_cli_response(False, error=str(e)))
        else:
            print_error(str(e))
        sys.exit(1)

    if json_output:
        print_json(format_cli_response(True, data=result))
    else:
        print_capture_result(result)


@app.command("version")
def version_command(ctx: typer.Context):
    """
    Show version information.
    """
    version_info = {
        "name": CONFIG["server"]["name"],
        "version": CONFIG["server"]["version"],
        "description": "Lists screens and captures screenshots for MCP clients.",
    }

    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(True, data=version_info))
    else:
        print_info(
            f"Name: {version_info['name']}\n"
            f"Version: {version_info['version']}\n"
            f"Description: {version_info['description']}"
        )


def run() -> None:
    """Console script entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="WARNING",
        colorize=True
    )
    app()


if __name__ == "__main__":
    run()
