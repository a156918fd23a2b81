"""
Runs command scripts through the simple renderer process.

Each run spawns one renderer, writes the serialized script to its stdin,
closes stdin and parses what the renderer printed before exiting.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Generator, Iterable, Optional

from .commands import BaseCommand, serialize_script
from .config import SimpleConfig
from .errors import SimpleExecutionError, SimpleTimeoutError
from .events import BaseSimpleEvent, parse_simple_output

logger = logging.getLogger(__name__)


class ScriptHandle:
    """
    A script running in the background.

    Await the handle for the event. ``cancel()`` kills the renderer; awaiting
    a cancelled handle raises ``asyncio.CancelledError``.
    """

    def __init__(self, task: "asyncio.Task[Optional[BaseSimpleEvent]]"):
        self._task = task

    def cancel(self) -> bool:
        return self._task.cancel()

    def done(self) -> bool:
        return self._task.done()

    def cancelled(self) -> bool:
        return self._task.cancelled()

    def __await__(self) -> Generator[object, None, Optional[BaseSimpleEvent]]:
        return self._task.__await__()


class SimpleExecutor:
    """Executes scripts against the simple renderer binary."""

    def __init__(self, config: Optional[SimpleConfig] = None):
        """
        Initialize executor.

        Args:
            config: Executor configuration (default: SimpleConfig())
        """
        self.config = config or SimpleConfig()

    async def run(self, commands: Iterable[BaseCommand]) -> Optional[BaseSimpleEvent]:
        """
        Run one script and wait for the renderer's answer.

        Args:
            commands: Commands to send, in order

        Returns:
            The parsed event, or None when the output was not recognized

        Raises:
            SimpleExecutionError: If the renderer cannot be started or its
                streams fail
            SimpleTimeoutError: If ``response_timeout_sec`` elapses first
            asyncio.CancelledError: If the run is cancelled; the renderer is
                killed before this propagates
        """
        script = serialize_script(commands)
        simple_path = self.config.simple_path
        timeout = self.config.response_timeout_sec

        logger.debug(f"Running {simple_path} with script:\n{script}")

        try:
            process = await asyncio.create_subprocess_exec(
                simple_path,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise SimpleExecutionError(f"Failed to start {simple_path}: {e}") from e

        try:
            if timeout is None:
                output = await self._exchange(process, script)
            else:
                output = await asyncio.wait_for(
                    self._exchange(process, script),
                    timeout=timeout,
                )
        except asyncio.TimeoutError as e:
            await self._kill(process)
            if timeout is None:
                # Raised by the pipes themselves, not by wait_for
                raise SimpleExecutionError(f"I/O error talking to {simple_path}: {e}") from e
            logger.error(f"{simple_path} timed out after {timeout:.1f}s")
            raise SimpleTimeoutError(timeout) from e
        except asyncio.CancelledError:
            logger.info(f"Script cancelled, killing {simple_path} (pid {process.pid})")
            await self._kill(process)
            raise
        except OSError as e:
            await self._kill(process)
            raise SimpleExecutionError(f"I/O error talking to {simple_path}: {e}") from e

        if process.returncode:
            logger.warning(f"{simple_path} exited with code {process.returncode}")

        return parse_simple_output(output)

    def start(self, commands: Iterable[BaseCommand]) -> ScriptHandle:
        """Schedule ``run`` on the running loop and return a cancellable handle."""
        return ScriptHandle(asyncio.create_task(self.run(list(commands))))

    async def _exchange(self, process: asyncio.subprocess.Process, script: str) -> str:
        """Write the script, close stdin and collect stdout until EOF."""
        assert process.stdin is not None and process.stdout is not None

        process.stdin.write(script.encode("utf-8"))
        await process.stdin.drain()
        process.stdin.close()

        buffer = b""
        while True:
            chunk = await process.stdout.read(self.config.read_chunk_size)
            if not chunk:
                break
            if self.config.accumulate_output:
                buffer += chunk
            else:
                # Only the last chunk is kept; the renderer prints its
                # answer in a single write right before exiting.
                buffer = chunk

        await process.wait()

        output = buffer.decode("utf-8", errors="replace")
        if self.config.accumulate_output:
            lines = [line for line in output.splitlines() if line.strip()]
            output = lines[-1] if lines else ""
        return output

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()


def execute_simple_script(
    *commands: BaseCommand,
    config: Optional[SimpleConfig] = None,
) -> ScriptHandle:
    """Start a script with a one-off executor. Must be called inside a running loop."""
    return SimpleExecutor(config).start(commands)


__all__ = ["ScriptHandle", "SimpleExecutor", "execute_simple_script"]
