"""Packet header flags, opcodes, response codes and query classes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

_CLASS_NAMES = {0x0001: "IN", 0x0003: "CH", 0x0004: "HS"}


@dataclass(frozen=True)
class QClass:
    """A DNS record class, such as the Internet class, or any other number."""

    number: int

    IN: ClassVar[QClass]
    CH: ClassVar[QClass]
    HS: ClassVar[QClass]

    @classmethod
    def from_number(cls, number: int) -> QClass:
        """The class with the given number."""
        return cls(number)

    def to_number(self) -> int:
        """The number of this class, as written on the wire."""
        return self.number

    @property
    def name(self) -> str | None:
        """The short name of a known class, or None."""
        return _CLASS_NAMES.get(self.number)

    def __str__(self) -> str:
        return self.name if self.name is not None else str(self.number)


QClass.IN = QClass(0x0001)
QClass.CH = QClass(0x0003)
QClass.HS = QClass(0x0004)


@dataclass(frozen=True)
class Opcode:
    """The operation being performed; zero is a standard query."""

    number: int

    QUERY: ClassVar[Opcode]

    @classmethod
    def from_bits(cls, bits: int) -> Opcode:
        """The opcode for a four-bit number in the range 0–15."""
        if bits == 0:
            return cls.QUERY
        if not 0 <= bits <= 15:
            raise ValueError(f"opcode bits {bits:#010b} out of range")
        return cls(bits)

    @property
    def is_query(self) -> bool:
        """Whether this is the standard query opcode."""
        return self.number == 0


Opcode.QUERY = Opcode(0)


class ErrorKind(enum.Enum):
    """The meaning of a response code."""

    FORMAT_ERROR = "FormErr"
    SERVER_FAILURE = "ServFail"
    NX_DOMAIN = "NXDomain"
    NOT_IMPLEMENTED = "NotImp"
    QUERY_REFUSED = "Refused"
    BAD_VERSION = "BADVERS"
    OTHER = "Other"
    PRIVATE = "Private"


_KNOWN_CODES = {
    1: ErrorKind.FORMAT_ERROR,
    2: ErrorKind.SERVER_FAILURE,
    3: ErrorKind.NX_DOMAIN,
    4: ErrorKind.NOT_IMPLEMENTED,
    5: ErrorKind.QUERY_REFUSED,
    16: ErrorKind.BAD_VERSION,
}


@dataclass(frozen=True)
class ErrorCode:
    """A code indicating an error in a response."""

    kind: ErrorKind
    number: int

    FORMAT_ERROR: ClassVar[ErrorCode]
    SERVER_FAILURE: ClassVar[ErrorCode]
    NX_DOMAIN: ClassVar[ErrorCode]
    NOT_IMPLEMENTED: ClassVar[ErrorCode]
    QUERY_REFUSED: ClassVar[ErrorCode]
    BAD_VERSION: ClassVar[ErrorCode]

    @classmethod
    def from_bits(cls, bits: int) -> ErrorCode | None:
        """The error for a response code, or None when it signals success."""
        if 0x0F01 <= bits < 0x0FFF:
            return cls(ErrorKind.PRIVATE, bits)
        if bits == 0:
            return None
        return cls(_KNOWN_CODES.get(bits, ErrorKind.OTHER), bits)

    def __str__(self) -> str:
        if self.kind in (ErrorKind.OTHER, ErrorKind.PRIVATE):
            return f"{self.kind.value}({self.number})"
        return self.kind.value


ErrorCode.FORMAT_ERROR = ErrorCode(ErrorKind.FORMAT_ERROR, 1)
ErrorCode.SERVER_FAILURE = ErrorCode(ErrorKind.SERVER_FAILURE, 2)
ErrorCode.NX_DOMAIN = ErrorCode(ErrorKind.NX_DOMAIN, 3)
ErrorCode.NOT_IMPLEMENTED = ErrorCode(ErrorKind.NOT_IMPLEMENTED, 4)
ErrorCode.QUERY_REFUSED = ErrorCode(ErrorKind.QUERY_REFUSED, 5)
ErrorCode.BAD_VERSION = ErrorCode(ErrorKind.BAD_VERSION, 16)


_RESPONSE = 0b1000_0000_0000_0000
_AUTHORITATIVE = 0b0000_0100_0000_0000
_TRUNCATED = 0b0000_0010_0000_0000
_RECURSION_DESIRED = 0b0000_0001_0000_0000
_RECURSION_AVAILABLE = 0b0000_0000_1000_0000
_AUTHENTIC_DATA = 0b0000_0000_0010_0000
_CHECKING_DISABLED = 0b0000_0000_0001_0000


@dataclass(frozen=True)
class Flags:
    """The flags that accompany every DNS packet."""

    response: bool = False
    opcode: Opcode = Opcode.QUERY
    authoritative: bool = False
    truncated: bool = False
    recursion_desired: bool = False
    recursion_available: bool = False
    authentic_data: bool = False
    checking_disabled: bool = False
    error_code: ErrorCode | None = None

    @classmethod
    def query(cls) -> Flags:
        """The flags of a query packet."""
        return cls.from_u16(0b0000_0001_0000_0000)

    @classmethod
    def standard_response(cls) -> Flags:
        """The flags of a successful response."""
        return cls.from_u16(0b1000_0001_1000_0000)

    def to_u16(self) -> int:
        """Pack the flags into a two-byte number.

        Only the standard query opcode can be packed; the response code
        is not written.
        """
        if not self.opcode.is_query:
            raise ValueError(f"cannot encode opcode {self.opcode.number}")

        bits = 0
        for is_set, bit in (
            (self.response, _RESPONSE),
            (self.authoritative, _AUTHORITATIVE),
            (self.truncated, _TRUNCATED),
            (self.recursion_desired, _RECURSION_DESIRED),
            (self.recursion_available, _RECURSION_AVAILABLE),
            (self.authentic_data, _AUTHENTIC_DATA),
            (self.checking_disabled, _CHECKING_DISABLED),
        ):
            if is_set:
                bits |= bit
        return bits

    @classmethod
    def from_u16(cls, bits: int) -> Flags:
        """Unpack the flags from a two-byte number."""

        def has_bit(bit: int) -> bool:
            return bits & bit == bit

        high_byte = (bits >> 8) & 0xFF
        return cls(
            response=has_bit(_RESPONSE),
            opcode=Opcode.from_bits((high_byte & 0b0111_1000) >> 3),
            authoritative=has_bit(_AUTHORITATIVE),
            truncated=has_bit(_TRUNCATED),
            recursion_desired=has_bit(_RECURSION_DESIRED),
            recursion_available=has_bit(_RECURSION_AVAILABLE),
            authentic_data=has_bit(_AUTHENTIC_DATA),
            checking_disabled=has_bit(_CHECKING_DISABLED),
            error_code=ErrorCode.from_bits(bits & 0b1111),
        )