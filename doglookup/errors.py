"""Errors raised while decoding DNS wire data."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LengthRule(enum.Enum):
    """How a mandated record length is to be applied."""

    EXACTLY = "exactly"
    AT_LEAST = "at least"


@dataclass(frozen=True)
class MandatedLength:
    """The rule for how long a record in a packet should be."""

    rule: LengthRule
    length: int

    @classmethod
    def exactly(cls, length: int) -> MandatedLength:
        """The record should be exactly this many bytes long."""
        return cls(LengthRule.EXACTLY, length)

    @classmethod
    def at_least(cls, length: int) -> MandatedLength:
        """The record should be at least this many bytes long."""
        return cls(LengthRule.AT_LEAST, length)

    def __str__(self) -> str:
        return f"{self.rule.value} {self.length}"


class WireError(Exception):
    """Something that went wrong deciphering DNS wire data."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class TruncatedDataError(WireError):
    """The buffer ended before everything needed could be read."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "unexpected end of data"


class WrongRecordLengthError(WireError):
    """A record's stated length differs from the length its type mandates."""

    def __init__(self, stated_length: int, mandated_length: MandatedLength) -> None:
        super().__init__(stated_length, mandated_length)
        self.stated_length = stated_length
        self.mandated_length = mandated_length

    def __str__(self) -> str:
        return (
            f"record length {self.stated_length}, "
            f"but should be {self.mandated_length}"
        )


class WrongLabelLengthError(WireError):
    """A record's stated length differs from the number of bytes actually read."""

    def __init__(self, stated_length: int, length_after_labels: int) -> None:
        super().__init__(stated_length, length_after_labels)
        self.stated_length = stated_length
        self.length_after_labels = length_after_labels

    def __str__(self) -> str:
        return (
            f"record length {self.stated_length}, "
            f"but {self.length_after_labels} bytes were read"
        )


class TooMuchRecursionError(WireError):
    """A compressed name contained a pointer cycle or too many pointers."""

    def __init__(self, recursions) -> None:
        recursions = tuple(recursions)
        super().__init__(recursions)
        self.recursions = recursions

    def __str__(self) -> str:
        return f"too much recursion decoding name: {list(self.recursions)}"


class OutOfBoundsError(WireError):
    """A compressed name pointed outside of the packet."""

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"pointer out of bounds: {self.index}"


class WrongVersionError(WireError):
    """A record's layout version is newer than the one supported."""

    def __init__(self, stated_version: int, maximum_supported_version: int) -> None:
        super().__init__(stated_version, maximum_supported_version)
        self.stated_version = stated_version
        self.maximum_supported_version = maximum_supported_version

    def __str__(self) -> str:
        return (
            f"record version {self.stated_version} is newer than "
            f"supported version {self.maximum_supported_version}"
        )