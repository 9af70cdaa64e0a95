"""Look up system call names for the supported Linux architectures."""

from __future__ import annotations

import platform as _stdplatform
from typing import Mapping

from .platform import aarch64, armeabi, riscv64, x86, x86_64

MAX_SYSCALLS = 512

_TABLES: dict[str, Mapping[int, str]] = {
    "x86_64": x86_64.SYSCALLS,
    "x86": x86.SYSCALLS,
    "aarch64": aarch64.SYSCALLS,
    "armeabi": armeabi.SYSCALLS,
    "riscv64": riscv64.SYSCALLS,
}

_ALIASES = {
    "amd64": "x86_64",
    "x86-64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "arm64": "aarch64",
    "arm": "armeabi",
    "armv6l": "armeabi",
    "armv7l": "armeabi",
    "armv7": "armeabi",
}


def _normalize(arch: str) -> str:
    name = arch.lower()
    name = _ALIASES.get(name, name)
    if name not in _TABLES:
        raise ValueError(f"unsupported architecture {arch!r}")
    return name


def syscall_table(arch: str | None = None) -> Mapping[int, str]:
    """The system call table for ``arch``, defaulting to the current machine."""
    if arch is None:
        arch = _stdplatform.machine()
    return _TABLES[_normalize(arch)]


def syscall_name(number: int, arch: str | None = None) -> str | None:
    """Name of a system call number, or None if the architecture lacks it."""
    return syscall_table(arch).get(number)