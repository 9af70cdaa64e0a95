import re

import pytest

from pulsar_agent.bpf.platform.x86_64 import SYSCALLS

_NAME = re.compile(r"^_?[A-Z][A-Z0-9_]*$")


@pytest.mark.parametrize(
    "number, name",
    [
        (0, "READ"),
        (59, "EXECVE"),
        (257, "OPENAT"),
        (321, "BPF"),
        (322, "EXECVEAT"),
    ],
)
def test_known_entries(number, name):
    assert SYSCALLS.get(number) == name


def test_numbers_are_contiguous_from_zero():
    keys = sorted(SYSCALLS.keys())
    assert keys == list(range(len(keys)))


def test_numbers_below_table_limit():
    assert max(SYSCALLS.keys()) < 512


def test_names_are_unique():
    names = list(SYSCALLS.values())
    assert len(set(names)) == len(names)


def test_names_are_upper_case_identifiers():
    invalid = [name for name in SYSCALLS.values() if not _NAME.match(name)]
    assert invalid == []


def test_unknown_number_is_missing():
    assert SYSCALLS.get(400) is None
    with pytest.raises(KeyError):
        SYSCALLS[400]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SYSCALLS[0] = "OTHER"  # type: ignore[index]
    assert SYSCALLS.get(0) == "READ"