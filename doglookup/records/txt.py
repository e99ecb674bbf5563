"""The TXT record type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import WrongLabelLengthError
from doglookup.reader import Reader

log = logging.getLogger(__name__)

_CONTINUATION_LENGTH = 255


@dataclass(frozen=True)
class TXT:
    """A **TXT** record, which holds arbitrary descriptive text.

    Each message is kept as raw bytes. A chunk of exactly 255 bytes is
    joined with the chunk that follows it into a single message.
    """

    NAME: ClassVar[str] = "TXT"
    RR_TYPE: ClassVar[int] = 16

    messages: tuple[bytes, ...]

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> TXT:
        """Read messages until the stated length has been consumed."""
        messages: list[bytes] = []
        total_length = 0

        while True:
            message = bytearray()
            while True:
                next_length = reader.read_u8()
                total_length += next_length + 1
                log.debug(
                    "Parsed slice length -> %d (total so far %d)",
                    next_length,
                    total_length,
                )
                message += reader.read_exact(next_length)
                if next_length < _CONTINUATION_LENGTH:
                    break
                log.debug("Got length 255, so looping")

            log.debug(
                "Parsed message -> %r", bytes(message).decode("utf-8", "replace")
            )
            messages.append(bytes(message))

            if total_length >= stated_length:
                break

        if stated_length != total_length:
            log.warning(
                "Length is incorrect (stated length %d, messages length %d)",
                stated_length,
                total_length,
            )
            raise WrongLabelLengthError(stated_length, total_length)

        return cls(tuple(messages))