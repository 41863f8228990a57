#!/usr/bin/env python3
"""
Validators for Screenshot Module CLI

This module provides Typer callbacks validating CLI inputs.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CLI parameter values

Expected output:
- Validated and processed parameter values
- Friendly error messages
"""

import os
from typing import Optional

import typer

from webdev_mcp.screenshot.cli.formatters import print_error


def validate_screen_option(ctx: typer.Context, value: Optional[int]) -> Optional[int]:
    """
    Typer callback for validating the screen id option.

    Args:
        ctx: Typer context
        value: Screen id from CLI

    Returns:
        Optional[int]: Validated screen id
    """
    if value is not None and value < 0:
        print_error(f"Invalid screen id: {value}. Must be 0 or greater.")
        raise typer.Exit(1)
    return value


def validate_timeout_option(ctx: typer.Context, value: Optional[int]) -> Optional[int]:
    """
    Typer callback for validating the timeout option (milliseconds).

    Args:
        ctx: Typer context
        value: Timeout from CLI

    Returns:
        Optional[int]: Validated timeout
    """
    if value is not None and value < 0:
        print_error(f"Invalid timeout: {value}. Must be 0 (no timeout) or a positive number of milliseconds.")
        raise typer.Exit(1)
    return value


def validate_output_path(ctx: typer.Context, value: Optional[str]) -> Optional[str]:
    """
    Typer callback for validating the output file path.

    Creates the parent directory when missing.

    Args:
        ctx: Typer context
        value: Output path from CLI

    Returns:
        Optional[str]: Validated output path
    """
    if value is None:
        return None

    if not value.lower().endswith(".png"):
        print_error(f"Invalid output path: {value}. Screenshots are saved as .png files.")
        raise typer.Exit(1)

    directory = os.path.dirname(value)
    if directory:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            print_error(f"Cannot create output directory: {directory}. Error: {str(e)}")
            raise typer.Exit(1)
    return value
