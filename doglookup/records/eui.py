"""The EUI48 and EUI64 record types."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)


def _read_octets(stated_length: int, reader: Reader, size: int) -> bytes:
    if stated_length != size:
        log.warning(
            "Length is incorrect (record length %d, but should be %d)",
            stated_length,
            size,
        )
        raise WrongRecordLengthError(stated_length, MandatedLength.exactly(size))

    octets = reader.read_exact(size)
    log.debug("Parsed %d-byte address -> %s", size, octets.hex())
    return octets


def _dashed_hex(octets: bytes) -> str:
    return "-".join(f"{octet:02x}" for octet in octets)


@dataclass(frozen=True)
class EUI48:
    """An **EUI48** record, holding a six-octet Extended Unique Identifier."""

    NAME: ClassVar[str] = "EUI48"
    RR_TYPE: ClassVar[int] = 108

    octets: bytes

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> EUI48:
        """Read an identifier, which must be exactly six bytes long."""
        return cls(_read_octets(stated_length, reader, 6))

    def formatted_address(self) -> str:
        """The identifier as hexadecimal numbers separated by dashes."""
        return _dashed_hex(self.octets)


@dataclass(frozen=True)
class EUI64:
    """An **EUI64** record, holding an eight-octet Extended Unique Identifier."""

    NAME: ClassVar[str] = "EUI64"
    RR_TYPE: ClassVar[int] = 109

    octets: bytes

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> EUI64:
        """Read an identifier, which must be exactly eight bytes long."""
        return cls(_read_octets(stated_length, reader, 8))

    def formatted_address(self) -> str:
        """The identifier as hexadecimal numbers separated by dashes."""
        return _dashed_hex(self.octets)