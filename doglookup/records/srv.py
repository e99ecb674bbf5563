"""The SRV record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import WrongLabelLengthError
from doglookup.labels import Labels, read_labels
from doglookup.reader import Reader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SRV:
    """An **SRV** record, giving the host and port of a service."""

    NAME: ClassVar[str] = "SRV"
    RR_TYPE: ClassVar[int] = 33

    priority: int
    weight: int
    port: int
    target: Labels

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> SRV:
        """Read priority, weight and port, followed by the target's name."""
        priority = reader.read_u16()
        log.debug("Parsed priority -> %d", priority)

        weight = reader.read_u16()
        log.debug("Parsed weight -> %d", weight)

        port = reader.read_u16()
        log.debug("Parsed port -> %d", port)

        target, target_length = read_labels(reader)
        log.debug("Parsed target -> %s", target)

        length_after_labels = 3 * 2 + target_length
        if stated_length != length_after_labels:
            log.warning(
                "Length is incorrect (stated length %d, fields plus target length %d)",
                stated_length,
                length_after_labels,
            )
            raise WrongLabelLengthError(stated_length, length_after_labels)

        return cls(priority, weight, port, target)