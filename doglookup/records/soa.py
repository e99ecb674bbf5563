"""The SOA record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import WrongLabelLengthError
from doglookup.labels import Labels, read_labels
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SOA:
    """A **SOA** record, holding administrative information about a zone."""

    NAME: ClassVar[str] = "SOA"
    RR_TYPE: ClassVar[int] = 6

    mname: Labels
    rname: Labels
    serial: int
    refresh_interval: int
    retry_interval: int
    expire_limit: int
    minimum_ttl: int

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> SOA:
        """Read two names followed by five 32-bit fields."""
        mname, mname_length = read_labels(reader)
        log.debug("Parsed mname -> %s", mname)

        rname, rname_length = read_labels(reader)
        log.debug("Parsed rname -> %s", rname)

        serial = reader.read_u32()
        refresh_interval = reader.read_u32()
        retry_interval = reader.read_u32()
        expire_limit = reader.read_u32()
        minimum_ttl = reader.read_u32()
        log.debug(
            "Parsed serial %d, refresh %d, retry %d, expire %d, minimum TTL %d",
            serial,
            refresh_interval,
            retry_interval,
            expire_limit,
            minimum_ttl,
        )

        length_after_labels = 4 * 5 + mname_length + rname_length
        if stated_length != length_after_labels:
            log.warning(
                "Length is incorrect (stated length %d, "
                "mname plus rname plus fields length %d)",
                stated_length,
                length_after_labels,
            )
            raise WrongLabelLengthError(stated_length, length_after_labels)

        return cls(
            mname,
            rname,
            serial,
            refresh_interval,
            retry_interval,
            expire_limit,
            minimum_ttl,
        )