"""The OPENPGPKEY record type."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OPENPGPKEY:
    """An **OPENPGPKEY** record, which holds a PGP key."""

    NAME: ClassVar[str] = "OPENPGPKEY"
    RR_TYPE: ClassVar[int] = 61

    key: bytes

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> OPENPGPKEY:
        """Read an OPENPGPKEY record, which must be at least one byte long."""
        if stated_length == 0:
            raise WrongRecordLengthError(stated_length, MandatedLength.at_least(1))

        key = reader.read_exact(stated_length)
        log.debug("Parsed key -> %s", key.hex())
        return cls(key)

    def base64_key(self) -> str:
        """The key encoded as standard base64."""
        return base64.b64encode(self.key).decode("ascii")