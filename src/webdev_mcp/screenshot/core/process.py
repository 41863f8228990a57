"""
Child process execution for capture and introspection commands.

Commands run through asyncio so the event loop is never blocked while an OS
utility works. The environment is inherited.
"""

import asyncio
import shlex
from typing import Optional, Sequence

from loguru import logger

from webdev_mcp.screenshot.core.errors import CommandFailed, CommandTimeout


async def _kill_process(process: asyncio.subprocess.Process) -> None:
    """Kill a child that is still running and reap it."""
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


async def run_command(args: Sequence[str], timeout: Optional[float] = None) -> str:
    """
    Run a command and return its standard output.

    Args:
        args: Program and arguments
        timeout: Seconds to wait before killing the process, None waits forever

    Returns:
        str: Decoded stdout

    Raises:
        CommandTimeout: The process was killed after ``timeout`` seconds
        CommandFailed: The process could not start or exited non-zero
        asyncio.CancelledError: The caller was cancelled; the process is killed first
    """
    command = shlex.join(args)
    logger.debug(f"Running command: {command} (timeout={timeout})")

    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandFailed(command, stderr=str(e)) from e

    try:
        stdout_raw, stderr_raw = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        await _kill_process(process)
        logger.warning(f"Command timed out after {timeout}s: {command}")
        raise CommandTimeout(command, timeout)
    except BaseException:
        # Cancelled: the child must not outlive the caller
        await _kill_process(process)
        raise

    stdout_text = (stdout_raw or b"").decode("utf-8", errors="replace")
    stderr_text = (stderr_raw or b"").decode("utf-8", errors="replace").strip()

    if process.returncode != 0:
        raise CommandFailed(command, returncode=process.returncode, stderr=stderr_text)

    return stdout_text
