"""The LOC record type, with its size, position and altitude values."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar

from doglookup.errors import MandatedLength, WrongRecordLengthError, WrongVersionError
from doglookup.reader import Reader

log = logging.getLogger(__name__)

_EQUATOR = 0x8000_0000
_MILLIARCSECONDS_PER_DEGREE = 1000 * 60 * 60
_BASE_ALTITUDE = 10_000_000  # 100,000 metres, in centimetres


class Direction(enum.Enum):
    """A direction relative to the equator or the prime meridian."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Size:
    """A size in centimetres, held as a base and a power of ten."""

    base: int
    power_of_ten: int

    @classmethod
    def from_u8(cls, value: int) -> Size:
        """Split an octet into a four-bit base and a four-bit exponent."""
        return cls(value >> 4, value & 0b0000_1111)

    def __str__(self) -> str:
        return f"{self.base}e{self.power_of_ten}"


@dataclass(frozen=True)
class Position:
    """A position on one of the world's axes."""

    degrees: int
    arcminutes: int
    arcseconds: int
    milliarcseconds: int
    direction: Direction

    @classmethod
    def from_u32(cls, value: int, vertical: bool) -> Position | None:
        """Decode a position measured in milliarcseconds, with 2^31 as zero.

        Returns None when the value lies outside the range for its axis.
        """
        max_degrees = 90 if vertical else 180
        limit = _MILLIARCSECONDS_PER_DEGREE * max_degrees

        if value < _EQUATOR - limit or value > _EQUATOR + limit:
            return None

        if value >= _EQUATOR:
            offset = value - _EQUATOR
            total_arcseconds, milliarcseconds = divmod(offset, 1000)
            total_arcminutes, arcseconds = divmod(total_arcseconds, 60)
            degrees, arcminutes = divmod(total_arcminutes, 60)
            direction = Direction.NORTH if vertical else Direction.EAST
            return cls(degrees, arcminutes, arcseconds, milliarcseconds, direction)

        mirrored = cls.from_u32(value + (_EQUATOR - value) * 2, vertical)
        if mirrored is None:
            return None
        direction = Direction.SOUTH if vertical else Direction.WEST
        return cls(
            mirrored.degrees,
            mirrored.arcminutes,
            mirrored.arcseconds,
            mirrored.milliarcseconds,
            direction,
        )

    def __str__(self) -> str:
        text = f"{self.degrees}°{self.arcminutes}′{self.arcseconds}"
        if self.milliarcseconds:
            text += f".{self.milliarcseconds:03}"
        return f"{text}″ {self.direction}"


@dataclass(frozen=True)
class Altitude:
    """A position on the vertical axis, in metres and centimetres."""

    metres: int
    centimetres: int

    @classmethod
    def from_u32(cls, value: int) -> Altitude:
        """Decode centimetres above a base 100,000 metres below the spheroid."""
        relative = value - _BASE_ALTITUDE
        metres = abs(relative) // 100
        if relative < 0:
            metres = -metres
        return cls(metres, relative - metres * 100)

    def __str__(self) -> str:
        if self.centimetres == 0:
            return f"{self.metres}m"
        return f"{self.metres}.{self.centimetres:02}m"


@dataclass(frozen=True)
class LOC:
    """A **LOC** record, pointing to a location on Earth."""

    NAME: ClassVar[str] = "LOC"
    RR_TYPE: ClassVar[int] = 29

    size: Size
    horizontal_precision: int
    vertical_precision: int
    latitude: Position | None
    longitude: Position | None
    altitude: Altitude

    @classmethod
    def read(cls, stated_length: int, reader: Reader) -> LOC:
        """Read a version-0 LOC record, which must be sixteen bytes long."""
        version = reader.read_u8()
        log.debug("Parsed version -> %d", version)
        if version != 0:
            raise WrongVersionError(version, 0)

        if stated_length != 16:
            raise WrongRecordLengthError(stated_length, MandatedLength.exactly(16))

        size = Size.from_u8(reader.read_u8())
        horizontal_precision = reader.read_u8()
        vertical_precision = reader.read_u8()
        latitude = Position.from_u32(reader.read_u32(), True)
        longitude = Position.from_u32(reader.read_u32(), False)
        altitude = Altitude.from_u32(reader.read_u32())
        log.debug(
            "Parsed LOC -> size %s, latitude %s, longitude %s, altitude %s",
            size,
            latitude,
            longitude,
            altitude,
        )

        return cls(
            size,
            horizontal_precision,
            vertical_precision,
            latitude,
            longitude,
            altitude,
        )