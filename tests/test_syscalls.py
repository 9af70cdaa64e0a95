from unittest import mock

import pytest

from pulsar_agent.bpf.platform import aarch64, armeabi, riscv64, x86, x86_64
from pulsar_agent.bpf.syscalls import MAX_SYSCALLS, syscall_name, syscall_table


@pytest.mark.parametrize(
    "arch, expected",
    [
        ("x86_64", x86_64.SYSCALLS),
        ("amd64", x86_64.SYSCALLS),
        ("x86", x86.SYSCALLS),
        ("i686", x86.SYSCALLS),
        ("aarch64", aarch64.SYSCALLS),
        ("arm64", aarch64.SYSCALLS),
        ("armv7l", armeabi.SYSCALLS),
        ("riscv64", riscv64.SYSCALLS),
    ],
)
def test_table_selection(arch, expected):
    assert syscall_table(arch) is expected


def test_unknown_architecture():
    with pytest.raises(ValueError):
        syscall_table("sparc64")


def test_names_differ_per_architecture():
    assert syscall_name(59, "x86_64") == "EXECVE"
    assert syscall_name(221, "aarch64") == "EXECVE"
    assert syscall_name(11, "x86") == "EXECVE"


def test_missing_number_returns_none():
    assert syscall_name(222, "x86") is None
    assert syscall_name(MAX_SYSCALLS, "x86_64") is None


def test_default_uses_current_machine():
    with mock.patch("platform.machine", return_value="aarch64"):
        assert syscall_table() is aarch64.SYSCALLS
        assert syscall_name(63) == "READ"


def test_all_tables_fit_limit():
    for arch in ("x86_64", "x86", "aarch64", "armeabi", "riscv64"):
        assert max(syscall_table(arch)) < MAX_SYSCALLS