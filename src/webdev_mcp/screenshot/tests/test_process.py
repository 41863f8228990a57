#!/usr/bin/env python3
"""
Unit tests for core/process.py

Runs real child processes using the current interpreter.
"""

import asyncio
import os
import sys
import tempfile
import time
import unittest

from webdev_mcp.screenshot.core.errors import CommandFailed, CommandTimeout
from webdev_mcp.screenshot.core.process import run_command


class TestRunCommand(unittest.IsolatedAsyncioTestCase):
    """Test cases for run_command"""

    async def test_returns_stdout(self):
        output = await run_command([sys.executable, "-c", "print('Resolution: 1920 x 1080')"])
        self.assertEqual(output.strip(), "Resolution: 1920 x 1080")

    async def test_nonzero_exit_raises(self):
        script = "import sys; sys.stderr.write('no display'); sys.exit(3)"
        with self.assertRaises(CommandFailed) as ctx:
            await run_command([sys.executable, "-c", script])

        self.assertEqual(ctx.exception.returncode, 3)
        self.assertEqual(ctx.exception.stderr, "no display")
        self.assertIn("exit code 3", str(ctx.exception))

    async def test_timeout_kills_process(self):
        start = time.monotonic()
        with self.assertRaises(CommandTimeout) as ctx:
            await run_command([sys.executable, "-c", "import time; time.sleep(30)"], timeout=0.3)

        self.assertLess(time.monotonic() - start, 10)
        self.assertEqual(ctx.exception.timeout, 0.3)
        self.assertIsInstance(ctx.exception, CommandFailed)

    @unittest.skipIf(os.name == "nt", "signal 0 liveness check is POSIX only")
    async def test_cancel_kills_process(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            pid_file = os.path.join(temp_dir, "child.pid")
            script = (
                "import os, time\n"
                f"with open({pid_file!r}, 'w') as f: f.write(str(os.getpid()))\n"
                "time.sleep(30)\n"
            )
            task = asyncio.ensure_future(run_command([sys.executable, "-c", script]))

            for _ in range(100):
                if os.path.exists(pid_file) and os.path.getsize(pid_file):
                    break
                await asyncio.sleep(0.05)
            with open(pid_file) as f:
                pid = int(f.read())

            task.cancel()
            with self.assertRaises(asyncio.CancelledError):
                await task

        # Reaped child: the pid no longer exists
        with self.assertRaises(ProcessLookupError):
            os.kill(pid, 0)

    async def test_no_timeout_waits_for_completion(self):
        output = await run_command([sys.executable, "-c", "import time; time.sleep(0.2); print('done')"], timeout=None)
        self.assertEqual(output.strip(), "done")

    async def test_missing_executable(self):
        with self.assertRaises(CommandFailed) as ctx:
            await run_command(["webdev-mcp-no-such-capture-tool", "-x"])

        self.assertIsNone(ctx.exception.returncode)
        self.assertIn("webdev-mcp-no-such-capture-tool", ctx.exception.command)


if __name__ == "__main__":
    unittest.main()
