"""
Exceptions raised by the screenshot core.

Core functions raise these; the CLI and MCP layers turn them into
user-facing messages.
"""

from typing import Optional


class ScreenshotError(Exception):
    """Base class for screenshot core errors."""


class UnsupportedPlatform(ScreenshotError):
    """The host platform is not one of the supported capture platforms."""

    def __init__(self, platform_tag: str):
        self.platform_tag = platform_tag
        super().__init__(f"Unsupported platform: {platform_tag}")


class CommandFailed(ScreenshotError):
    """A child process exited with an error or could not be started."""

    def __init__(self, command: str, returncode: Optional[int] = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed: {command}"
        if returncode is not None:
            message += f" (exit code {returncode})"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class CommandTimeout(CommandFailed):
    """A child process was killed after exceeding its timeout."""

    def __init__(self, command: str, timeout: float):
        self.timeout = timeout
        super().__init__(command, stderr=f"timed out after {timeout:g}s")


class CaptureFailed(ScreenshotError):
    """A screenshot could not be produced."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to capture screenshot: {reason}")
