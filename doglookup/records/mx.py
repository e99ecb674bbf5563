"""The MX record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import WrongLabelLengthError
from doglookup.labels import Labels, read_labels
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MX:
    """An **MX** record, naming a mail server for the domain."""

    NAME: ClassVar[str] = "MX"
    RR_TYPE: ClassVar[int] = 15

    preference: int
    exchange: Labels

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> MX:
        """Read a preference followed by the exchange's name."""
        preference = reader.read_u16()
        log.debug("Parsed preference -> %d", preference)

        exchange, exchange_length = read_labels(reader)
        log.debug("Parsed exchange -> %s", exchange)

        length_after_labels = 2 + exchange_length
        if stated_length != length_after_labels:
            log.warning(
                "Length is incorrect (stated length %d, "
                "preference plus exchange length %d)",
                stated_length,
                length_after_labels,
            )
            raise WrongLabelLengthError(stated_length, length_after_labels)

        return cls(preference, exchange)