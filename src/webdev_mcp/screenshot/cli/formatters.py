#!/usr/bin/env python3
"""
Formatters for Screenshot Module CLI

This module provides rich formatting utilities for the CLI presentation layer.
It includes tables, panels, and progress indicators for a better user experience.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- List of ScreenDescriptor
- Capture result dictionary
- Error messages

Expected output:
- Rich formatted tables, panels, and progress indicators
"""

import json
import os
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
from rich.text import Text

from webdev_mcp.screenshot.core.types import ScreenDescriptor


# Initialize console
console = Console()


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "path": "cyan",
    "highlight": "magenta",
    "dim": "grey70",
}


def print_screens_table(screens: List[ScreenDescriptor]) -> None:
    """
    Format and print available screens as a table.

    Args:
        screens: Screens returned by the display enumerator
    """
    table = Table(title="Available Screens")

    table.add_column("Screen", justify="right", style=COLORS["highlight"])
    table.add_column("Description", style=COLORS["info"])

    for screen in screens:
        table.add_row(str(screen.id), screen.description)

    console.print(table)


def print_capture_result(result: Dict[str, Any]) -> None:
    """
    Format and print a saved capture to the console.

    Args:
        result: Dictionary with screen_id, file and size keys
    """
    file_path = result.get("file", "Unknown")

    file_info = Text()
    file_info.append("Screen: ", style=COLORS["dim"])
    file_info.append(f"{result.get('screen_id')}\n", style=COLORS["highlight"])
    file_info.append("Filename: ", style=COLORS["dim"])
    file_info.append(f"{os.path.basename(file_path)}\n", style=COLORS["path"])
    file_info.append("Directory: ", style=COLORS["dim"])
    file_info.append(f"{os.path.dirname(os.path.abspath(file_path))}\n", style=COLORS["path"])

    if "size" in result:
        width, height = result["size"]
        file_info.append("Dimensions: ", style=COLORS["dim"])
        file_info.append(f"{width}x{height}\n", style=COLORS["info"])

    if os.path.exists(file_path):
        size_kb = os.path.getsize(file_path) / 1024
        file_info.append("Size: ", style=COLORS["dim"])
        file_info.append(f"{size_kb:.1f} KB", style=COLORS["info"])

    panel = Panel(
        file_info,
        title="[bold green]Screenshot Captured Successfully",
        border_style=COLORS["success"],
        padding=(1, 2)
    )

    console.print(panel)


def _print_message_panel(message: str, title: str, color: str) -> None:
    console.print(Panel(
        Text(message, style=color),
        title=f"[bold {color}]{title}",
        border_style=color,
        padding=(1, 2)
    ))


def print_error(message: str, title: str = "Error") -> None:
    """
    Format and print error message to the console.

    Args:
        message: Error message
        title: Panel title
    """
    _print_message_panel(message, title, COLORS["error"])


def print_warning(message: str, title: str = "Warning") -> None:
    _print_message_panel(message, title, COLORS["warning"])


def print_info(message: str, title: str = "Info") -> None:
    _print_message_panel(message, title, COLORS["info"])


def print_json(data: Dict[str, Any]) -> None:
    """
    Print JSON data for machine consumption.

    Args:
        data: JSON-serializable data
    """
    console.print_json(json.dumps(data), indent=2)


def create_progress() -> Progress:
    """
    Create a progress indicator.

    Returns:
        Progress: Rich progress indicator
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
