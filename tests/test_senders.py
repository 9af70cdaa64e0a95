import asyncio
import logging
import queue

import pytest

from pulsar_agent.bpf.events import BpfEvent, ProgramError
from pulsar_agent.bpf.senders import BpfSender, BpfSenderWrapper, QueueSender
from pulsar_agent.bpf.timestamp import Timestamp


def _event(payload="payload"):
    return BpfEvent(Timestamp(1), 100, payload)


class _ListSender(BpfSender):
    def __init__(self):
        self.items = []

    def send(self, data):
        self.items.append(data)


def test_abstract_sender_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BpfSender()


@pytest.mark.asyncio
async def test_queue_sender_delivers_event():
    q = asyncio.Queue(maxsize=2)
    event = _event()
    QueueSender(q).send(event)
    assert await q.get() is event


@pytest.mark.asyncio
async def test_queue_sender_drops_when_full(caplog):
    q = asyncio.Queue(maxsize=1)
    sender = QueueSender(q)
    first = _event("first")
    with caplog.at_level(logging.WARNING):
        sender.send(first)
        sender.send(_event("second"))
    assert q.qsize() == 1
    assert q.get_nowait() is first
    assert "dropping msg" in caplog.text


def test_queue_sender_with_thread_queue_drops_when_full():
    q = queue.Queue(maxsize=1)
    sender = QueueSender(q)
    first = _event("first")
    sender.send(first)
    sender.send(_event("second"))
    assert q.qsize() == 1
    assert q.get_nowait() is first


def test_wrapper_calls_callback_and_forwards():
    inner = _ListSender()
    seen = []
    wrapper = BpfSenderWrapper(inner, seen.append)
    event = _event()
    wrapper.send(event)
    assert seen == [event]
    assert inner.items == [event]


def test_wrapper_skips_callback_for_errors():
    inner = _ListSender()
    seen = []
    wrapper = BpfSenderWrapper(inner, seen.append)
    error = ProgramError("boom")
    wrapper.send(error)
    assert seen == []
    assert inner.items == [error]


def test_wrappers_nest():
    inner = _ListSender()
    calls = []
    wrapper = BpfSenderWrapper(
        BpfSenderWrapper(inner, lambda e: calls.append("inner")),
        lambda e: calls.append("outer"),
    )
    wrapper.send(_event())
    assert calls == ["outer", "inner"]
    assert len(inner.items) == 1