"""
CLI Layer for Screenshot Module

This package contains the CLI (Command Line Interface) layer for the screen
capture functionality, providing a rich interface for human users.

The CLI layer is designed to:
1. Handle user interaction concerns
2. Format outputs for human readability
3. Parse and validate command-line arguments
4. Implement CLI-specific error handling

Usage:
    from webdev_mcp.screenshot.cli import app as screenshot_app

    # Run the CLI app
    screenshot_app()
"""

# CLI application
from webdev_mcp.screenshot.cli.cli import app, run

# Formatters for rich output
from webdev_mcp.screenshot.cli.formatters import (
    print_screens_table,
    print_capture_result,
    print_error,
    print_warning,
    print_info,
    print_json,
    create_progress,
    console
)

# CLI validators
from webdev_mcp.screenshot.cli.validators import (
    validate_screen_option,
    validate_timeout_option,
    validate_output_path
)

__all__ = [
    # CLI application
    'app',
    'run',

    # Formatters
    'print_screens_table',
    'print_capture_result',
    'print_error',
    'print_warning',
    'print_info',
    'print_json',
    'create_progress',
    'console',

    # Validators
    'validate_screen_option',
    'validate_timeout_option',
    'validate_output_path'
]
