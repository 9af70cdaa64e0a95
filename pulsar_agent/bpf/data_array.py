"""Length-prefixed byte arrays shared with eBPF code.

The binary layout is a native ``u32`` holding the number of valid bytes,
followed by a fixed-capacity byte array. Bytes past the length are garbage
and are ignored by comparisons.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

_LEN = struct.Struct("=I")


def _struct_size(capacity: int) -> int:
    size = _LEN.size + capacity
    return (size + _LEN.size - 1) // _LEN.size * _LEN.size


@dataclass(frozen=True, eq=False)
class DataArray:
    """Up to ``capacity`` bytes of data, of which ``len(self)`` are valid."""

    capacity: int
    data: bytes

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must not be negative")
        if len(self.data) > self.capacity:
            raise ValueError(
                f"{len(self.data)} bytes do not fit in an array of {self.capacity}"
            )

    @classmethod
    def from_bytes(cls, data: bytes, capacity: int) -> DataArray:
        """Build an array holding ``data``."""
        return cls(capacity, bytes(data))

    @classmethod
    def unpack(cls, buffer: bytes, capacity: int) -> DataArray:
        """Decode the binary layout, discarding bytes past the stored length."""
        needed = _LEN.size + capacity
        if len(buffer) < needed:
            raise ValueError(f"buffer of {len(buffer)} bytes is shorter than {needed}")
        (length,) = _LEN.unpack_from(buffer)
        if length > capacity:
            raise ValueError(f"stored length {length} exceeds capacity {capacity}")
        start = _LEN.size
        return cls(capacity, bytes(buffer[start : start + length]))

    def pack(self) -> bytes:
        """Encode to the binary layout, zero-filling unused space."""
        body = _LEN.pack(len(self.data)) + self.data
        return body.ljust(_struct_size(self.capacity), b"\0")

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataArray):
            return NotImplemented
        return self.capacity == other.capacity and self.data == other.data

    def __hash__(self) -> int:
        return hash((self.capacity, self.data))

    def __repr__(self) -> str:
        return f"DataArray(copied_data_len={len(self.data)})"