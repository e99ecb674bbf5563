"""The SSHFP record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SSHFP:
    """An **SSHFP** record, holding the fingerprint of an SSH public key."""

    NAME: ClassVar[str] = "SSHFP"
    RR_TYPE: ClassVar[int] = 44

    algorithm: int
    fingerprint_type: int
    fingerprint: bytes

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> SSHFP:
        """Read an SSHFP record, whose fingerprint must not be empty."""
        algorithm = reader.read_u8()
        log.debug("Parsed algorithm -> %d", algorithm)

        fingerprint_type = reader.read_u8()
        log.debug("Parsed fingerprint type -> %d", fingerprint_type)

        if stated_length <= 2:
            raise WrongRecordLengthError(stated_length, MandatedLength.at_least(3))

        fingerprint = reader.read_exact(stated_length - 2)
        log.debug("Parsed fingerprint -> %s", fingerprint.hex())
        return cls(algorithm, fingerprint_type, fingerprint)

    def hex_fingerprint(self) -> str:
        """The fingerprint as lower-case hexadecimal."""
        return self.fingerprint.hex()