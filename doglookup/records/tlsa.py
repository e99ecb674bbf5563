"""The TLSA record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLSA:
    """A **TLSA** record, associating a TLS certificate with a domain."""

    NAME: ClassVar[str] = "TLSA"
    RR_TYPE: ClassVar[int] = 52

    certificate_usage: int
    selector: int
    matching_type: int
    certificate_data: bytes

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> TLSA:
        """Read a TLSA record, whose certificate data must not be empty."""
        certificate_usage = reader.read_u8()
        log.debug("Parsed certificate usage -> %d", certificate_usage)

        selector = reader.read_u8()
        log.debug("Parsed selector -> %d", selector)

        matching_type = reader.read_u8()
        log.debug("Parsed matching type -> %d", matching_type)

        if stated_length <= 3:
            raise WrongRecordLengthError(stated_length, MandatedLength.at_least(4))

        certificate_data = reader.read_exact(stated_length - 3)
        log.debug("Parsed certificate data -> %s", certificate_data.hex())

        return cls(certificate_usage, selector, matching_type, certificate_data)

    def hex_certificate_data(self) -> str:
        """The certificate data as lower-case hexadecimal."""
        return self.certificate_data.hex()