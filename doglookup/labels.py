"""Domain names as length-prefixed labels, and reading them from packets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import idna

from doglookup.errors import TooMuchRecursionError
from doglookup.reader import Reader

log = logging.getLogger(__name__)

RECURSION_LIMIT = 8
_MAX_LABEL_LENGTH = 255


class LabelEncodingError(ValueError):
    """A label could not be encoded, because it is too long or invalid."""

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"could not encode label {self.label!r}"


def _label_to_ascii(label: str) -> str:
    if label.isascii():
        return label.lower()
    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except idna.IDNAError as error:
        log.warning("Could not encode label %r: %s", label, error)
        raise LabelEncodingError(label) from error


@dataclass(frozen=True, order=True)
class Labels:
    """A domain name as a sequence of (length, label) segments.

    When written out, each segment is followed by a dot.
    """

    segments: tuple[tuple[int, str], ...] = ()

    @classmethod
    def root(cls) -> Labels:
        """The root of the DNS: a name with no labels."""
        return cls(())

    @classmethod
    def encode(cls, text: str) -> Labels:
        """Encode a dotted name, raising LabelEncodingError for a bad label."""
        segments = []
        for label in text.split("."):
            if not label:
                continue
            ascii_label = _label_to_ascii(label)
            if len(ascii_label) > _MAX_LABEL_LENGTH:
                log.warning("Could not encode label %r: too long", label)
                raise LabelEncodingError(label)
            segments.append((len(ascii_label), ascii_label))
        return cls(tuple(segments))

    def extend(self, other: Labels) -> Labels:
        """A new name made of this name's labels followed by the other's."""
        return Labels(self.segments + other.segments)

    def to_bytes(self) -> bytes:
        """The wire form: each label prefixed by its length, ending with zero."""
        out = bytearray()
        for length, label in self.segments:
            out.append(length)
            out += label.encode("utf-8")
        out.append(0)
        return bytes(out)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "".join(f"{label}." for _, label in self.segments)


def read_labels(reader: Reader) -> tuple[Labels, int]:
    """Read a possibly compressed name.

    Returns the name and the number of bytes consumed at the original
    position, counting pointer bytes but not bytes read after jumping.
    """
    segments: list[tuple[int, str]] = []
    bytes_read = _read_recursive(segments, reader, [])
    return Labels(tuple(segments)), bytes_read


def _read_recursive(
    segments: list[tuple[int, str]], reader: Reader, recursions: list[int]
) -> int:
    bytes_read = 0
    while True:
        byte = reader.read_u8()
        bytes_read += 1

        if byte == 0:
            break

        if byte >= 0b1100_0000:
            second = reader.read_u8()
            bytes_read += 1
            offset = ((byte - 0b1100_0000) << 8) | second

            if offset in recursions:
                log.warning("Hit previous offset (%d) decoding string", offset)
                raise TooMuchRecursionError(recursions)

            recursions.append(offset)
            if len(recursions) >= RECURSION_LIMIT:
                log.warning("Hit recursion limit (%d) decoding string", RECURSION_LIMIT)
                raise TooMuchRecursionError(recursions)

            resume_at = reader.position
            reader.position = offset
            _read_recursive(segments, reader, recursions)
            reader.position = resume_at
            break

        name = reader.read_exact(byte)
        bytes_read += byte
        segments.append((byte, name.decode("utf-8", errors="replace")))

    return bytes_read