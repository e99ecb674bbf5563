"""The NAPTR record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import WrongLabelLengthError
from doglookup.labels import Labels, read_labels
from doglookup.reader import Reader

log = logging.getLogger(__name__)


def _read_character_string(reader: Reader) -> bytes:
    length = reader.read_u8()
    return reader.read_exact(length)


@dataclass(frozen=True)
class NAPTR:
    """A **NAPTR** record, holding a rule for Dynamic Delegation Discovery."""

    NAME: ClassVar[str] = "NAPTR"
    RR_TYPE: ClassVar[int] = 35

    order: int
    preference: int
    flags: bytes
    service: bytes
    regex: bytes
    replacement: Labels

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> NAPTR:
        """Read order, preference, three strings and a replacement name."""
        order = reader.read_u16()
        log.debug("Parsed order -> %d", order)

        preference = reader.read_u16()
        log.debug("Parsed preference -> %d", preference)

        flags = _read_character_string(reader)
        log.debug("Parsed flags -> %r", flags.decode("utf-8", "replace"))

        service = _read_character_string(reader)
        log.debug("Parsed service -> %r", service.decode("utf-8", "replace"))

        regex = _read_character_string(reader)
        log.debug("Parsed regex -> %r", regex.decode("utf-8", "replace"))

        replacement, replacement_length = read_labels(reader)
        log.debug("Parsed replacement -> %s", replacement)

        length_after_labels = (
            2
            + 2
            + 1
            + len(flags)
            + 1
            + len(service)
            + 1
            + len(regex)
            + replacement_length
        )
        if stated_length != length_after_labels:
            log.warning(
                "Length is incorrect (stated length %d, fields length %d)",
                stated_length,
                length_after_labels,
            )
            raise WrongLabelLengthError(stated_length, length_after_labels)

        return cls(order, preference, flags, service, regex, replacement)