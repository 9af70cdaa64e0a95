import logging

import pytest

from pulsar_agent.bpf.events import (
    PERF_PAGES_DEFAULT,
    BpfContext,
    BpfEvent,
    BpfLogLevel,
    Pinning,
    ProgramError,
    ProgramNotFoundError,
)
from pulsar_agent.bpf.timestamp import Timestamp


@pytest.mark.parametrize("pages", [0, 3, 1000])
def test_invalid_perf_pages_fall_back_to_default(pages):
    ctx = BpfContext.create(Pinning.DISABLED, pages, BpfLogLevel.DEBUG)
    assert ctx.perf_pages == 4096
    assert ctx.perf_pages == PERF_PAGES_DEFAULT


@pytest.mark.parametrize("pages", [1, 512, 4096])
def test_power_of_two_perf_pages_kept(pages):
    ctx = BpfContext.create(Pinning.DISABLED, pages, BpfLogLevel.ERROR)
    assert ctx.perf_pages == pages


def test_invalid_perf_pages_logs_warning(caplog):
    with caplog.at_level(logging.WARNING):
        BpfContext.create(Pinning.ENABLED, 3, BpfLogLevel.DISABLED)
    assert "power of 2" in caplog.text


def test_pinning_paths():
    enabled = BpfContext.create(Pinning.ENABLED, 512, BpfLogLevel.DEBUG)
    disabled = BpfContext.create(Pinning.DISABLED, 512, BpfLogLevel.DEBUG)
    assert enabled.pinning_path == "/sys/fs/bpf/pulsar"
    assert disabled.pinning_path == "/sys/fs/bpf/pulsar_tmp"


@pytest.mark.parametrize(
    ("value", "name"),
    [(0, "DISABLED"), (1, "ERROR"), (2, "DEBUG")],
)
def test_log_level_values(value, name):
    level = BpfLogLevel(value)
    assert level.name == name
    assert int(level.value) == value


def test_program_not_found_error():
    err = ProgramNotFoundError("sys_enter")
    assert isinstance(err, ProgramError)
    assert str(err) == "program not found sys_enter"
    assert err.name == "sys_enter"


def test_event_display():
    event = BpfEvent(Timestamp(10), 42, "payload")
    assert str(event) == f"{Timestamp(10)} 42 payload"


def test_event_fields():
    ts = Timestamp(7)
    event = BpfEvent(ts, 1, {"k": "v"})
    assert event.timestamp == ts
    assert event.payload == {"k": "v"}