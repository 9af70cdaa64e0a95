"""Zero-terminated strings stored in fixed-size arrays shared with eBPF code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class StringArray:
    """A fixed-size buffer holding a zero-terminated string.

    A buffer without a zero byte is considered garbage.
    """

    data: bytes

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_str(cls, text: str, capacity: int) -> StringArray:
        """Store ``text`` and its terminator in a buffer of ``capacity`` bytes."""
        encoded = text.encode("utf-8")
        if len(encoded) >= capacity:
            raise ValueError(
                f"string of {len(encoded)} bytes plus terminator does not fit in {capacity}"
            )
        return cls(encoded.ljust(capacity, b"\0"))

    @classmethod
    def unpack(cls, buffer: bytes, capacity: int) -> StringArray:
        """Read a buffer of ``capacity`` bytes."""
        if len(buffer) < capacity:
            raise ValueError(f"buffer of {len(buffer)} bytes is shorter than {capacity}")
        return cls(bytes(buffer[:capacity]))

    def pack(self) -> bytes:
        """Return the raw buffer."""
        return self.data

    def length(self) -> int | None:
        """Position of the terminator, or None if the buffer holds no zero byte."""
        position = self.data.find(0)
        return None if position < 0 else position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringArray):
            return NotImplemented
        length = self.length()
        if length is None:
            return False
        return self.data[: length + 1] == other.data[: length + 1]

    def __str__(self) -> str:
        length = self.length()
        if length is None:
            return ""
        return self.data[:length].decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"StringArray(data={str(self)!r})"