"""Coordinate types and the unified-range normalizer.

Both axes are folded into a single unsigned range so one fraction in
[0, 1] carries hemisphere and magnitude together:

    latitude   0 = 90°S,  90 = equator, 180 = 90°N        (range 180)
    longitude  0..180 = 0°E..180°E, 180..360 = 180°W..0°W  (range 360)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..config import SNAP_EPSILON
from .errors import InvalidFormatError, OutOfRangeCoordinateError


class Axis(Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def max_degrees(self) -> int:
        return 90 if self is Axis.LATITUDE else 180

    @property
    def unified_range(self) -> int:
        return 2 * self.max_degrees


class Hemisphere(Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @property
    def axis(self) -> Axis:
        return Axis.LATITUDE if self in (Hemisphere.N, Hemisphere.S) else Axis.LONGITUDE

    @property
    def sign(self) -> int:
        """Map-display sign: south and west are negative."""
        return -1 if self in (Hemisphere.S, Hemisphere.W) else 1

    @classmethod
    def parse(cls, letter: str, axis: Axis) -> Hemisphere:
        """Parse a hemisphere letter for ``axis`` (case insensitive)."""
        expected = "N or S" if axis is Axis.LATITUDE else "E or W"
        try:
            hemisphere = cls(str(letter).strip().upper())
        except ValueError:
            hemisphere = None
        if hemisphere is None or hemisphere.axis is not axis:
            raise InvalidFormatError(
                f'Error: Invalid {axis.value} hemisphere "{letter}" (expected {expected}).'
            )
        return hemisphere


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Unsigned degree magnitude on one axis plus its hemisphere."""
    degrees: float
    hemisphere: Hemisphere

    @property
    def axis(self) -> Axis:
        return self.hemisphere.axis

    @property
    def signed(self) -> float:
        """Signed degrees (south/west negative), as map widgets expect."""
        return self.hemisphere.sign * self.degrees

    def format(self, decimals: int = 7) -> str:
        return f"{self.degrees:.{decimals}f}° {self.hemisphere.value}"

    def __str__(self) -> str:
        return self.format()


def validate(coord: Coordinate) -> Coordinate:
    """Check the degree magnitude against its axis' legal range."""
    axis = coord.axis
    if not math.isfinite(coord.degrees) or not 0 <= coord.degrees <= axis.max_degrees:
        raise OutOfRangeCoordinateError(axis.value, coord.degrees, axis.max_degrees)
    return coord


def unify(coord: Coordinate) -> float:
    """Map a validated coordinate into its axis' unified range."""
    validate(coord)
    if coord.hemisphere is Hemisphere.S:
        return 90 - coord.degrees
    if coord.hemisphere is Hemisphere.N:
        return coord.degrees + 90
    if coord.hemisphere is Hemisphere.W:
        return 360 - coord.degrees
    return coord.degrees


def normalize(unified: float, axis: Axis) -> float:
    """Scale a unified value into [0, 1]."""
    return unified / axis.unified_range


def denormalize(fraction: float, axis: Axis, epsilon: float = SNAP_EPSILON) -> float:
    """Scale a decoded fraction back into the unified range.

    Fractions within ``epsilon`` of 1.0 snap to the axis maximum so that
    float truncation cannot flip the hemisphere at the pole/antimeridian.
    """
    if abs(fraction - 1.0) < epsilon:
        return float(axis.unified_range)
    return fraction * axis.unified_range


def from_unified(unified: float, axis: Axis) -> Coordinate:
    """Inverse of ``unify``."""
    if axis is Axis.LATITUDE:
        if unified < 90.0:
            return Coordinate(abs(90.0 - unified), Hemisphere.S)
        return Coordinate(abs(unified - 90.0), Hemisphere.N)

    if 180.0 < unified < 360.0:
        return Coordinate(abs(360.0 - unified), Hemisphere.W)
    # 360 is the 0° meridian again; exactly 180 is reported as east.
    degrees = 0.0 if unified >= 360.0 else unified
    return Coordinate(abs(degrees), Hemisphere.E)
