import asyncio
import logging

import pytest

from pulsar_agent.bpf.trace_pipe import format_msg, split_messages, start


def test_format_msg_strips_prefix():
    assert format_msg(b"cat-12 bpf_trace_printk: hello") == "cat-12 hello"


def test_format_msg_invalid_utf8():
    assert format_msg(b"\xff\x00") == "[255, 0]"


def test_split_messages_drops_empty_lines():
    assert split_messages(b"one\n\ntwo\n") == [b"one", b"two"]
    assert split_messages(b"") == []


@pytest.mark.asyncio
async def test_start_forwards_messages(tmp_path, caplog):
    pipe = tmp_path / "trace_pipe"
    pipe.write_bytes(b"a-1 bpf_trace_printk: first\n\nsecond\n")
    with caplog.at_level(logging.WARNING, logger="trace_pipe"):
        handle = await start(str(pipe))
        assert handle.running
        await asyncio.sleep(0.05)
        handle.stop()
        await asyncio.sleep(0)
    messages = [r.getMessage() for r in caplog.records if r.name == "trace_pipe"]
    assert messages == ["a-1 first", "second"]
    assert not handle.running


@pytest.mark.asyncio
async def test_start_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        handle = await start(str(tmp_path / "absent"))
    assert not handle.running
    assert any("Error opening" in r.getMessage() for r in caplog.records)