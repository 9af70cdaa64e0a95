import pytest

from pulsar_agent.bpf.platform.x86 import SYSCALLS
from pulsar_agent.bpf.syscalls import MAX_SYSCALLS


@pytest.mark.parametrize(
    ("number", "name"),
    [(0, "RESTART_SYSCALL"), (11, "EXECVE"), (358, "EXECVEAT")],
)
def test_known_entries(number, name):
    assert SYSCALLS.get(number) == name


@pytest.mark.parametrize("number", [222, 223, 251, 285])
def test_gaps_are_absent(number):
    assert SYSCALLS.get(number) is None
    assert number not in SYSCALLS.keys()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SYSCALLS[999] = "NOPE"  # type: ignore[index]
    assert SYSCALLS.get(999) is None


def test_keys_within_limit():
    invalid = [n for n in SYSCALLS.keys() if not 0 <= n < MAX_SYSCALLS]
    assert invalid == []


def test_names_are_upper_case():
    invalid = [name for name in SYSCALLS.values() if not name or name != name.upper()]
    assert invalid == []