"""Make sure the BPF file system is mounted exactly once."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

BPF_FS_PATH = "/sys/fs/bpf"
BPF = "bpf"
MOUNTINFO_PATH = "/proc/self/mountinfo"

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


class BpfFsError(Exception):
    """The BPF file system could not be checked or mounted."""


@dataclass(frozen=True)
class MountInfo:
    """One entry of a mountinfo file."""

    mount_id: int
    parent_id: int
    major_minor: str
    root: str
    mount_point: str
    mount_options: str
    optional_fields: tuple[str, ...]
    fs_type: str
    mount_source: str
    super_options: str


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def _parse_line(line: str) -> MountInfo:
    fields = line.split(" ")
    try:
        separator = fields.index("-", 6)
    except ValueError:
        raise BpfFsError(f"malformed mountinfo line: {line!r}") from None
    if len(fields) < separator + 4:
        raise BpfFsError(f"malformed mountinfo line: {line!r}")
    try:
        mount_id, parent_id = int(fields[0]), int(fields[1])
    except ValueError as err:
        raise BpfFsError(f"malformed mountinfo line: {line!r}") from err
    return MountInfo(
        mount_id=mount_id,
        parent_id=parent_id,
        major_minor=fields[2],
        root=_unescape(fields[3]),
        mount_point=_unescape(fields[4]),
        mount_options=fields[5],
        optional_fields=tuple(fields[6:separator]),
        fs_type=fields[separator + 1],
        mount_source=_unescape(fields[separator + 2]),
        super_options=fields[separator + 3],
    )


def parse_mountinfo(text: str) -> list[MountInfo]:
    """Parse the contents of a mountinfo file."""
    return [_parse_line(line) for line in text.splitlines() if line.strip()]


def read_mountinfo(path: str | os.PathLike = MOUNTINFO_PATH) -> list[MountInfo]:
    """Read and parse a mountinfo file."""
    try:
        text = Path(path).read_text()
    except OSError as err:
        raise BpfFsError("Error accessing process mount info") from err
    return parse_mountinfo(text)


def find_bpf_mount(mounts: Iterable[MountInfo]) -> MountInfo | None:
    """Return the mount on the BPF path, failing if it has another type."""
    for mount in mounts:
        if mount.mount_point == BPF_FS_PATH:
            if mount.fs_type == BPF:
                return mount
            raise BpfFsError(
                f"File system {BPF_FS_PATH} is mounted but with type {mount.fs_type}"
            )
    return None


def count_bpf_mounts(mounts: Iterable[MountInfo]) -> int:
    """Number of root mounts on the BPF path."""
    return sum(1 for m in mounts if m.root == "/" and m.mount_point == BPF_FS_PATH)


def _mount_bpf_fs() -> None:
    path = Path(BPF_FS_PATH)
    if not path.exists():
        logger.debug("Create '%s' because is not found", BPF_FS_PATH)
        try:
            os.makedirs(path, mode=0o755, exist_ok=True)
        except OSError as err:
            raise BpfFsError(f"Error creating {BPF_FS_PATH}") from err
    if not path.is_dir():
        raise BpfFsError(f"'{BPF_FS_PATH}' already exists and is not a directory")

    logger.debug("Mount BPF file system")
    try:
        result = subprocess.run(
            ["mount", "-t", BPF, BPF, BPF_FS_PATH],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as err:
        raise BpfFsError("Failed to mount BPF file system") from err
    if result.returncode != 0:
        raise BpfFsError(f"Failed to mount BPF file system: {result.stderr.strip()}")


def check_or_mount_bpf_fs() -> None:
    """Mount the BPF file system if missing and reject duplicate mounts."""
    if find_bpf_mount(read_mountinfo()) is None:
        _mount_bpf_fs()
    if count_bpf_mounts(read_mountinfo()) > 1:
        raise BpfFsError("Multiple bpf fs mounts detected")