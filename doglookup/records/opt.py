"""The OPT pseudo-record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.reader import Reader

log = logging.getLogger(__name__)

_MAX_DATA_LENGTH = 0xFFFF


@dataclass(frozen=True)
class OPT:
    """An **OPT** pseudo-record, which extends DNS with additional flags.

    It re-purposes the class and TTL fields of an answer, so it is read
    without a stated length, straight after its type number.
    """

    RR_TYPE: ClassVar[int] = 41

    udp_payload_size: int
    higher_bits: int
    edns0_version: int
    flags: int
    data: bytes = b""

    @classmethod
    def read(cls, reader: Reader) -> OPT:
        """Read an OPT record that follows its type number."""
        udp_payload_size = reader.read_u16()
        log.debug("Parsed UDP payload size -> %d", udp_payload_size)

        higher_bits = reader.read_u8()
        log.debug("Parsed higher bits -> %#010b", higher_bits)

        edns0_version = reader.read_u8()
        log.debug("Parsed EDNS(0) version -> %d", edns0_version)

        flags = reader.read_u16()
        log.debug("Parsed flags -> %#018b", flags)

        data_length = reader.read_u16()
        log.debug("Parsed data length -> %d", data_length)

        data = reader.read_exact(data_length)
        log.debug("Parsed data -> %s", data.hex())

        return cls(udp_payload_size, higher_bits, edns0_version, flags, data)

    def to_bytes(self) -> bytes:
        """Serialise this record, as sent in the additional section of requests."""
        if len(self.data) > _MAX_DATA_LENGTH:
            raise ValueError("Sending too much data")

        return b"".join(
            (
                self.udp_payload_size.to_bytes(2, "big"),
                self.higher_bits.to_bytes(1, "big"),
                self.edns0_version.to_bytes(1, "big"),
                self.flags.to_bytes(2, "big"),
                len(self.data).to_bytes(2, "big"),
                bytes(self.data),
            )
        )