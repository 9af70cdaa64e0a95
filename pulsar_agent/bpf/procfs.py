"""Helpers that extract process information from procfs."""

from __future__ import annotations

import os
from pathlib import Path

PROC_ROOT = Path("/proc")

# Special value telling openat to use the current working directory.
AT_FDCWD = -100


class ProcfsError(Exception):
    """Failure while reading process information."""


class ReadFileError(ProcfsError):
    """A procfs entry could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"reading link failed {path}")
        self.path = path


class ParentNotFoundError(ProcfsError):
    """The status file of a process has no parent entry."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"parent for process {pid} not found")
        self.pid = pid


class UserNotFoundError(ProcfsError):
    """The status file of a process has no user entry."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"user id for process {pid} not found")
        self.pid = pid


def _proc_path(pid: int, *parts: str) -> Path:
    return PROC_ROOT.joinpath(str(pid), *parts)


def _read_link(path: Path) -> Path:
    try:
        return Path(os.readlink(path))
    except OSError as err:
        raise ReadFileError(str(path)) from err


def _read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ReadFileError(str(path)) from err


def _readable_lines(path: Path) -> list[str]:
    """Lines of a file, skipping those that are not valid UTF-8."""
    try:
        data = path.read_bytes()
    except OSError as err:
        raise ReadFileError(str(path)) from err
    lines = []
    for raw in data.split(b"\n"):
        try:
            lines.append(raw.decode("utf-8").rstrip("\r"))
        except UnicodeDecodeError:
            continue
    return lines


def get_process_image(pid: int) -> Path:
    """Path of the executable image of a process."""
    return _read_link(_proc_path(pid, "exe"))


def get_process_cwd(pid: int) -> Path:
    """Current working directory of a process."""
    return _read_link(_proc_path(pid, "cwd"))


def get_process_fd_path(pid: int, fd: int) -> Path:
    """Path a file descriptor of a process points to."""
    if fd == AT_FDCWD:
        return get_process_cwd(pid)
    return _read_link(_proc_path(pid, "fd", str(fd)))


def get_process_command_line(pid: int) -> list[str]:
    """Command line arguments of a process."""
    data = _read_text(_proc_path(pid, "cmdline"))
    return [arg for arg in data.split("\0") if arg]


def get_process_comm(pid: int) -> str:
    """Command name of a process."""
    return _read_text(_proc_path(pid, "comm")).strip()


def get_process_parent_pid(pid: int) -> int:
    """Parent pid of a process."""
    for line in _readable_lines(_proc_path(pid, "status")):
        if line.startswith("PPid:"):
            value = line.split(":")[1].strip()
            try:
                return int(value)
            except ValueError as err:
                raise ProcfsError(f"invalid parent pid {value!r}") from err
    raise ParentNotFoundError(pid)


def get_process_user_id(pid: int) -> int:
    """Real user id of a process."""
    for line in _readable_lines(_proc_path(pid, "status")):
        if line.startswith("Uid:"):
            fields = line.split(":")[1].split("\t")
            try:
                return int(fields[1].strip())
            except (IndexError, ValueError) as err:
                raise ProcfsError(f"invalid user id line {line!r}") from err
    raise UserNotFoundError(pid)


def get_process_cgroup_id(pid: int) -> str | None:
    """The cpuset cgroup of a process, or None if unavailable."""
    try:
        lines = _readable_lines(_proc_path(pid, "cgroup"))
    except ReadFileError:
        return None
    for line in lines:
        if ":cpuset:" in line:
            parts = line.split(":", 2)
            return parts[2] if len(parts) == 3 else None
    return None


def get_running_processes() -> list[int]:
    """Pids of every process listed in procfs."""
    pids = []
    for entry in sorted(PROC_ROOT.glob("[0-9]*"), key=lambda p: p.name):
        try:
            pids.append(int(entry.name))
        except ValueError as err:
            raise ProcfsError(f"invalid process entry {entry}") from err
    return pids