"""Forward ``bpf_printk`` output from the kernel trace pipe to logging."""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)
trace_logger = logging.getLogger("trace_pipe")

TRACE_PIPE_PATH = "/sys/kernel/debug/tracing/trace_pipe"
_READ_SIZE = 512
_IDLE_DELAY = 0.1


class StopHandle:
    """Stops the background reader when ``stop`` is called."""

    def __init__(self, task: asyncio.Task | None = None) -> None:
        self._task = task

    @property
    def running(self) -> bool:
        """Whether the reader task is still active."""
        return self._task is not None and not self._task.done()

    def stop(self) -> None:
        """Cancel the reader task, if any."""
        if self.running:
            self._task.cancel()

    def __enter__(self) -> StopHandle:
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


def format_msg(data: bytes) -> str:
    """Decode a trace line, dropping the printk prefix."""
    try:
        return data.decode("utf-8").replace("bpf_trace_printk: ", "")
    except UnicodeDecodeError:
        return str(list(data))


def split_messages(buffer: bytes) -> list[bytes]:
    """Split a buffer into its non-empty lines."""
    return [part for part in buffer.split(b"\n") if part]


def _log_buffer(buffer: bytes) -> None:
    for message in split_messages(buffer):
        trace_logger.warning("%s", format_msg(message))


async def _wait_readable(fd: int) -> None:
    loop = asyncio.get_running_loop()
    ready = loop.create_future()
    try:
        loop.add_reader(fd, lambda: ready.done() or ready.set_result(None))
    except (OSError, ValueError, NotImplementedError):
        await asyncio.sleep(_IDLE_DELAY)
        return
    try:
        await ready
    finally:
        loop.remove_reader(fd)


async def _pump(fd: int, path: str) -> None:
    logger.info("Logging events from %s", path)
    try:
        while True:
            try:
                chunk = os.read(fd, _READ_SIZE)
            except BlockingIOError:
                await _wait_readable(fd)
                continue
            except OSError as err:
                logger.warning("Error reading from %s: %r", path, err)
                return
            if not chunk:
                await asyncio.sleep(_IDLE_DELAY)
                continue
            _log_buffer(chunk)
    finally:
        os.close(fd)


async def start(path: str = TRACE_PIPE_PATH) -> StopHandle:
    """Start forwarding trace messages; failures to open are only logged."""
    try:
        fd = os.open(path, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        logger.warning("Error opening %s: %r", path, err)
        return StopHandle()
    task = asyncio.get_running_loop().create_task(_pump(fd, path))
    return StopHandle(task)