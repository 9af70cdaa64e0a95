import os

import pytest

from pulsar_agent.bpf import procfs
from pulsar_agent.bpf.procfs import (
    ParentNotFoundError,
    ProcfsError,
    ReadFileError,
    UserNotFoundError,
    get_process_cgroup_id,
    get_process_comm,
    get_process_command_line,
    get_process_cwd,
    get_process_fd_path,
    get_process_image,
    get_process_parent_pid,
    get_process_user_id,
    get_running_processes,
)

PID = 42


@pytest.fixture
def fake_proc(tmp_path, monkeypatch):
    proc = tmp_path / "proc"
    entry = proc / str(PID)
    (entry / "fd").mkdir(parents=True)
    os.symlink("/usr/bin/fake", entry / "exe")
    os.symlink("/home/work", entry / "cwd")
    os.symlink("/var/log/app.log", entry / "fd" / "3")
    (entry / "cmdline").write_bytes(b"ls\0-l\0/tmp\0")
    (entry / "comm").write_text("bash\n")
    (entry / "status").write_text(
        "Name:\tbash\nPPid:\t7\nUid:\t1000\t1001\t1002\t1003\n"
    )
    (entry / "cgroup").write_text("12:memory:/a\n3:cpuset:/docker/abc:def\n")
    monkeypatch.setattr(procfs, "PROC_ROOT", proc)
    return proc


def test_image_and_cwd(fake_proc):
    assert str(get_process_image(PID)) == "/usr/bin/fake"
    assert str(get_process_cwd(PID)) == "/home/work"


def test_fd_path(fake_proc):
    assert str(get_process_fd_path(PID, 3)) == "/var/log/app.log"


def test_fd_path_at_fdcwd_returns_cwd(fake_proc):
    assert get_process_fd_path(PID, procfs.AT_FDCWD) == get_process_cwd(PID)


def test_missing_link_raises(fake_proc):
    with pytest.raises(ReadFileError) as info:
        get_process_image(999)
    assert isinstance(info.value, ProcfsError)
    assert info.value.path.endswith(os.path.join("999", "exe"))


def test_command_line(fake_proc):
    assert get_process_command_line(PID) == ["ls", "-l", "/tmp"]


def test_command_line_invalid_utf8(fake_proc):
    (fake_proc / str(PID) / "cmdline").write_bytes(b"\xff\xfe\0")
    with pytest.raises(ReadFileError):
        get_process_command_line(PID)


def test_comm(fake_proc):
    assert get_process_comm(PID) == "bash"


def test_parent_and_user(fake_proc):
    assert get_process_parent_pid(PID) == 7
    assert get_process_user_id(PID) == 1000


def test_status_without_entries(fake_proc):
    (fake_proc / str(PID) / "status").write_text("Name:\tbash\n")
    with pytest.raises(ParentNotFoundError) as parent:
        get_process_parent_pid(PID)
    assert parent.value.pid == PID
    with pytest.raises(UserNotFoundError) as user:
        get_process_user_id(PID)
    assert user.value.pid == PID


def test_cgroup_id(fake_proc):
    assert get_process_cgroup_id(PID) == "/docker/abc:def"


def test_cgroup_missing(fake_proc):
    assert get_process_cgroup_id(999) is None
    (fake_proc / str(PID) / "cgroup").write_text("12:memory:/a\n")
    assert get_process_cgroup_id(PID) is None


def test_running_processes(fake_proc):
    for name in ("1", "20", "3"):
        (fake_proc / name).mkdir()
    (fake_proc / "self").mkdir()
    assert set(get_running_processes()) == {1, 3, 20, PID}


def test_running_processes_bad_entry(fake_proc):
    (fake_proc / "7abc").mkdir()
    with pytest.raises(ProcfsError):
        get_running_processes()


def test_real_proc_contains_self():
    assert os.getpid() in get_running_processes()
    assert get_process_parent_pid(os.getpid()) == os.getppid()