"""Kernel-compatible timestamps expressed in nanoseconds since boot."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_U64_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class Timestamp:
    """Nanoseconds since boot, compatible with ``bpf_ktime_get_ns``."""

    raw: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.raw <= _U64_MAX:
            raise OverflowError(f"timestamp {self.raw} out of the unsigned 64-bit range")

    @classmethod
    def now(cls) -> Timestamp:
        """Return the current monotonic time, or zero if it cannot be read."""
        try:
            return cls(time.clock_gettime_ns(time.CLOCK_MONOTONIC))
        except (AttributeError, OSError):
            return cls(0)

    def to_system_time(self) -> datetime:
        """Convert to wall-clock time, measuring the elapsed time on every call.

        The monotonic clock stops during suspend, so the offset is computed
        against the current monotonic time rather than cached.
        """
        elapsed = (Timestamp.now() - self).raw
        return datetime.now(timezone.utc) - timedelta(microseconds=elapsed / 1000)

    def __add__(self, other: int) -> Timestamp:
        if not isinstance(other, int):
            return NotImplemented
        return Timestamp(self.raw + other)

    def __sub__(self, other: Timestamp) -> Timestamp:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return Timestamp(self.raw - other.raw)

    def __str__(self) -> str:
        return str(self.raw)