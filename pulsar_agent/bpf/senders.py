"""Destinations for events and errors produced by eBPF programs.

``send`` must never block, since it is called from async contexts.
"""

from __future__ import annotations

import abc
import asyncio
import logging
import queue
from typing import Any, Callable, Union

from .events import BpfEvent, ProgramError

logger = logging.getLogger(__name__)

SendData = Union[BpfEvent[Any], ProgramError]


class BpfSender(abc.ABC):
    """Receives events or errors from a program."""

    @abc.abstractmethod
    def send(self, data: SendData) -> None:
        """Deliver an event or an error without blocking."""


class QueueSender(BpfSender):
    """Sender backed by a bounded queue; messages are dropped when it is full."""

    def __init__(self, queue: asyncio.Queue | queue.Queue) -> None:
        self.queue = queue

    def send(self, data: SendData) -> None:
        try:
            self.queue.put_nowait(data)
        except (asyncio.QueueFull, queue.Full):
            logger.warning("dropping msg")


class BpfSenderWrapper(BpfSender):
    """Calls a callback on every event before forwarding to an inner sender."""

    def __init__(self, inner: BpfSender, callback: Callable[[BpfEvent[Any]], None]) -> None:
        self.inner = inner
        self.callback = callback

    def send(self, data: SendData) -> None:
        if not isinstance(data, BaseException):
            self.callback(data)
        self.inner.send(data)