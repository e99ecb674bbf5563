"""A cursor over a byte buffer for reading big-endian DNS wire data."""

from __future__ import annotations

from doglookup.errors import TruncatedDataError


class Reader:
    """Reads integers and byte strings from a buffer, tracking its position.

    The position may be moved freely, which is how compressed names jump
    around inside a packet.
    """

    def __init__(self, data: bytes, position: int = 0) -> None:
        self.data = bytes(data)
        self.position = position

    @property
    def remaining(self) -> int:
        """The number of bytes left after the current position."""
        return max(0, len(self.data) - self.position)

    def read_exact(self, count: int) -> bytes:
        """Read exactly ``count`` bytes, or raise TruncatedDataError."""
        start = self.position
        end = start + count
        if count < 0 or start < 0 or end > len(self.data):
            raise TruncatedDataError()
        self.position = end
        return self.data[start:end]

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self.read_exact(1)[0]

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return int.from_bytes(self.read_exact(2), "big")

    def read_u32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return int.from_bytes(self.read_exact(4), "big")