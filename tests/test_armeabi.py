import re

import pytest

from pulsar_agent.bpf.platform.armeabi import SYSCALLS

_NAME = re.compile(r"^_?[A-Z][A-Z0-9_]*$")


@pytest.mark.parametrize(
    ("number", "name"),
    [
        (0, "RESTART_SYSCALL"),
        (3, "READ"),
        (11, "EXECVE"),
        (322, "OPENAT"),
        (386, "BPF"),
        (387, "EXECVEAT"),
    ],
)
def test_known_entries(number, name):
    assert SYSCALLS.get(number) == name


def test_duplicate_number_keeps_later_name():
    assert SYSCALLS.get(341) == "SYNC_FILE_RANGE2"
    assert "ARM_SYNC_FILE_RANGE" not in SYSCALLS.values()


@pytest.mark.parametrize("number", [7, 13, 17, 188, 222, 254, 388])
def test_unassigned_numbers_are_absent(number):
    assert SYSCALLS.get(number) is None
    assert number not in SYSCALLS.keys()


def test_keys_are_in_syscall_range():
    invalid = [n for n in SYSCALLS.keys() if not (isinstance(n, int) and 0 <= n < 512)]
    assert invalid == []


def test_names_are_upper_case_identifiers():
    invalid = [name for name in SYSCALLS.values() if not _NAME.match(name)]
    assert invalid == []


def test_names_are_unique():
    names = list(SYSCALLS.values())
    assert len(names) == len(set(names))


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SYSCALLS[0] = "OTHER"  # type: ignore[index]
    assert SYSCALLS.get(0) == "RESTART_SYSCALL"