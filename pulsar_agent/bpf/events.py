"""Program configuration, errors and the events produced by eBPF probes."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from .timestamp import Timestamp

logger = logging.getLogger(__name__)

PINNED_MAPS_PATH = "/sys/fs/bpf/pulsar"
PERF_PAGES_DEFAULT = 4096

P = TypeVar("P")


class Pinning(enum.Enum):
    """Whether shared maps are pinned to the file system."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class BpfLogLevel(enum.IntEnum):
    """Log level for eBPF print statements."""

    DISABLED = 0
    ERROR = 1
    DEBUG = 2


class ProgramError(Exception):
    """Failure while loading or running an eBPF program."""


class ProgramNotFoundError(ProgramError):
    """A requested program is missing from the probe."""

    def __init__(self, name: str) -> None:
        super().__init__(f"program not found {name}")
        self.name = name


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class BpfContext:
    """Settings supplied when loading a program.

    ``perf_pages`` is the number of 4 KiB pages used for each perf array.
    """

    pinning: Pinning
    perf_pages: int
    log_level: BpfLogLevel

    @classmethod
    def create(
        cls, pinning: Pinning, perf_pages: int, log_level: BpfLogLevel
    ) -> BpfContext:
        """Build a context, replacing an invalid page count with the default."""
        if not _is_power_of_two(perf_pages):
            logger.warning(
                "Invalid value (%s) for perf_pages, which must be a power of 2.",
                perf_pages,
            )
            logger.warning("The default value %s will be used.", PERF_PAGES_DEFAULT)
            perf_pages = PERF_PAGES_DEFAULT
        return cls(pinning, perf_pages, log_level)

    @property
    def pinning_path(self) -> str:
        """Where maps are pinned; a temporary folder when pinning is disabled."""
        if self.pinning is Pinning.ENABLED:
            return PINNED_MAPS_PATH
        return f"{PINNED_MAPS_PATH}_tmp"


@dataclass
class BpfEvent(Generic[P]):
    """An event emitted by a probe."""

    timestamp: Timestamp
    pid: int
    payload: P

    def __str__(self) -> str:
        return f"{self.timestamp} {self.pid} {self.payload}"