#!/usr/bin/env python3
"""
MCP Server Entry Point for Screenshot Tools

This is the main entry point for the screen capture MCP server, designed to be
directly referenced in the .mcp.json configuration. The server speaks MCP over
stdio, so all logging goes to stderr and the log file.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import asyncio
import json
import os
import shutil
import sys
from typing import Any, Dict, Optional

from loguru import logger

from webdev_mcp.screenshot.core.config import CONFIG, validate_config
from webdev_mcp.screenshot.core.errors import UnsupportedPlatform
from webdev_mcp.screenshot.core.platforms import resolve_platform
from webdev_mcp.screenshot.mcp.mcp_tools import create_mcp_server


def configure_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    """
    Configure logging with proper format and level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file
    """
    level = level or CONFIG["logging"]["level"]
    log_dir = log_dir or CONFIG["logging"]["log_dir"]
    os.makedirs(log_dir, exist_ok=True)

    # Remove default handlers
    logger.remove()

    logger.add(
        os.path.join(log_dir, "mcp_server.log"),
        rotation="10 MB",
        retention="1 week",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
    )

    # stdout carries the protocol, so visible output goes to stderr
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": CONFIG["server"]["name"],
        "version": CONFIG["server"]["version"],
        "description": "An MCP server that lists screens and captures screenshots",
        "tools": ["listScreens", "takeScreenshot"],
    }


def health_check(platform_tag: Optional[str] = None) -> Dict[str, Any]:
    """
    Check that the host platform is supported and its utilities are installed.

    Returns:
        Dict[str, Any]: Health check results
    """
    import platform
    import PIL

    try:
        capture_platform = resolve_platform(platform_tag)
    except UnsupportedPlatform as e:
        return {"status": "unhealthy", "error": str(e)}

    commands = [capture_platform.build_capture_command(None, "probe.png")[0]]
    introspection = capture_platform.introspection_command()
    if introspection:
        commands.append(introspection[0])

    missing = [command for command in commands if shutil.which(command) is None]
    problems = validate_config()

    result = {
        "status": "healthy" if not missing and not problems else "unhealthy",
        "platform": capture_platform.tag,
        "python_version": platform.python_version(),
        "pil_version": getattr(PIL, "__version__", "unknown"),
        "commands": {command: command not in missing for command in commands},
    }
    if problems:
        result["config_problems"] = problems
    return result


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="webdev-mcp screen capture server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the MCP server on stdio")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers.add_parser("health", help="Check server health")
    subparsers.add_parser("info", help="Display server information")

    schema_parser = subparsers.add_parser("schema", help="Display tool schemas")
    schema_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    # Bare invocation starts the server, which is what MCP clients do
    command = args.command or "start"

    if command == "start":
        log_level = "DEBUG" if getattr(args, "debug", False) else None
        configure_logging(log_level)
        logger.info("Starting webdev-mcp server with screen capture capabilities")

        try:
            mcp = create_mcp_server()
            mcp.run()
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0
        except Exception as e:
            logger.exception(f"Fatal error in main(): {str(e)}")
            return 1
        return 0

    if command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    if command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    if command == "schema":
        mcp = create_mcp_server()
        tools = asyncio.run(mcp.list_tools())
        schema = {tool.name: {"description": tool.description, "inputSchema": tool.inputSchema} for tool in tools}

        if args.json:
            print(json.dumps(schema, indent=2))
        else:
            for tool_name, tool_info in schema.items():
                print(f"Tool: {tool_name}")
                print(f"  Description: {tool_info['description'] or 'No description'}")
                print("  Parameters:")
                for param_name, param_info in tool_info["inputSchema"].get("properties", {}).items():
                    print(f"    {param_name}: {param_info.get('description', 'No description')}")
                print()
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
