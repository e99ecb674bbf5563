"""The A record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class A:
    """An **A** record, which contains an IPv4 address."""

    NAME: ClassVar[str] = "A"
    RR_TYPE: ClassVar[int] = 1

    address: IPv4Address

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> A:
        """Read an A record, which must be exactly four bytes long."""
        if stated_length != 4:
            log.warning(
                "Length is incorrect (record length %d, but should be four)",
                stated_length,
            )
            raise WrongRecordLengthError(stated_length, MandatedLength.exactly(4))

        address = IPv4Address(reader.read_exact(4))
        log.debug("Parsed IPv4 address -> %s", address)
        return cls(address)