"""Compile eBPF probes with clang."""

from __future__ import annotations

import logging
import os
import platform
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

CLANG_DEFAULT = "clang"
OUTPUT_NAME = "probe.bpf.o"

_ARCH_ALIASES = {"x86_64": "x86", "aarch64": "arm64", "riscv64": "riscv"}


class BuildError(Exception):
    """The probe could not be compiled."""


def target_arch_define(arch: str) -> str:
    """The ``-D__TARGET_ARCH_*`` flag for a machine architecture."""
    return f"-D__TARGET_ARCH_{_ARCH_ALIASES.get(arch, arch)}"


def clang_command(
    clang: str,
    probe: str | os.PathLike,
    out_object: str | os.PathLike,
    include_path: str | os.PathLike,
    arch: str,
) -> list[str]:
    """The clang invocation that compiles ``probe`` into ``out_object``."""
    include = Path(include_path)
    return [
        str(clang),
        f"-I{include}",
        f"-I{include / arch}",
        "-g",
        "-O2",
        "-target",
        "bpf",
        "-c",
        target_arch_define(arch),
        str(probe),
        "-o",
        str(out_object),
    ]


def build(
    probe: str | os.PathLike,
    include_path: str | os.PathLike,
    out_dir: str | os.PathLike | None = None,
    arch: str | None = None,
    clang: str | None = None,
) -> Path:
    """Compile a probe and return the path of the object file.

    ``out_dir`` defaults to ``$OUT_DIR``, ``clang`` to ``$CLANG`` or ``clang``
    and ``arch`` to the current machine.
    """
    if out_dir is None:
        out_dir = os.environ.get("OUT_DIR")
        if out_dir is None:
            raise BuildError("OUT_DIR is not set")
    if clang is None:
        clang = os.environ.get("CLANG", CLANG_DEFAULT)
    if arch is None:
        arch = platform.machine()

    out_object = Path(out_dir) / OUTPUT_NAME
    command = clang_command(clang, probe, out_object, include_path, arch)
    logger.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(command, check=False)
    except OSError as err:
        raise BuildError("Failed to execute clang") from err
    if result.returncode != 0:
        raise BuildError("Failed to compile eBPF program")
    return out_object