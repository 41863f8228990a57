"""
Module Description:
Defines the central configuration dictionary (CONFIG) for the screen capture
server. Loads settings from environment variables using python-dotenv for
logging, temp file location and capture behavior. Includes a validation
function that reports invalid values.

Links:
- python-dotenv: https://github.com/theskumar/python-dotenv

Sample Input/Output:

- Accessing config values:
  from webdev_mcp.screenshot.core.config import CONFIG
  temp_dir = CONFIG["capture"]["temp_dir"]

- Running validation:
  python -m webdev_mcp.screenshot.core.config
  (Prints validation status and exits with 0 or 1)
"""
import os
import sys
import tempfile
from typing import Any, Dict, List

from dotenv import load_dotenv
from loguru import logger

# Load environment variables
load_dotenv()

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default


def load_config() -> Dict[str, Any]:
    """Build the configuration dictionary from the current environment."""
    return {
        "server": {
            "name": os.getenv("WEBDEV_MCP_SERVER_NAME", "webdev-mcp"),
            "version": "0.1.2",
        },
        "logging": {
            "level": os.getenv("WEBDEV_MCP_LOG_LEVEL", "INFO").upper(),
            "log_dir": os.getenv("WEBDEV_MCP_LOG_DIR", "logs"),
        },
        "capture": {
            "temp_dir": os.getenv("WEBDEV_MCP_TEMP_DIR") or tempfile.gettempdir(),
            # Unknown screen ids fail instead of falling back to the primary display
            "strict_screen_ids": _env_flag("WEBDEV_MCP_STRICT_SCREEN_IDS"),
            "clipboard_delay_ms": _env_int("WEBDEV_MCP_CLIPBOARD_DELAY_MS", 500),
        },
    }


# Configuration
CONFIG = load_config()


def validate_config(config: Dict[str, Any] = CONFIG) -> List[str]:
    """
    Check configuration values.

    Returns:
        List[str]: Human-readable problems, empty when the config is valid
    """
    problems = []

    if config["logging"]["level"] not in LOG_LEVELS:
        problems.append(
            f"WEBDEV_MCP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
            f"got {config['logging']['level']}"
        )

    temp_dir = config["capture"]["temp_dir"]
    if not os.path.isdir(temp_dir):
        problems.append(f"WEBDEV_MCP_TEMP_DIR does not exist: {temp_dir}")

    if config["capture"]["clipboard_delay_ms"] < 0:
        problems.append(
            f"WEBDEV_MCP_CLIPBOARD_DELAY_MS must be >= 0, got {config['capture']['clipboard_delay_ms']}"
        )

    return problems


if __name__ == "__main__":
    problems = validate_config()
    if problems:
        print(f"❌ VALIDATION FAILED - {len(problems)} problem(s):")
        for problem in problems:
            print(f"  - {problem}")
        sys.exit(1)
    print("✅ VALIDATION PASSED - configuration is valid")
    sys.exit(0)
