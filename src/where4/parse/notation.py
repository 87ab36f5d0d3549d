"""Parse human-entered coordinate text.

Accepted notations, tried in this order (first match wins):

    DMS   49°47'51.9" N, 18°15'24.3" E     (seconds mark may be '' instead of ")
    DM    49°47.865' N 18°15.405' E        (minutes must carry a fraction)
    DD    49.7977543° N 18.2567507° E

Axes are separated by a comma and/or whitespace; hemisphere letters are
case insensitive. Whole-minute DM text such as ``49°30' N`` is not
recognised by DM and falls through to DD, which rejects it.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..core.errors import InvalidFormatError
from ..core.normalize import Axis, Coordinate, Hemisphere

logger = logging.getLogger(__name__)

_SEP = r"(?:\s*,\s*|\s+)"
_FLAGS = re.IGNORECASE | re.ASCII

DMS_RE = re.compile(
    r"(\d{1,3})°\s*(\d{1,2})'\s*(\d{1,2}(?:\.\d*)?)(?:\"|'')\s*([NS])"
    + _SEP +
    r"(\d{1,3})°\s*(\d{1,2})'\s*(\d{1,2}(?:\.\d*)?)(?:\"|'')\s*([EW])",
    _FLAGS,
)

DM_RE = re.compile(
    r"(\d{1,3})°\s*(\d{1,2}\.\d+)'\s*([NS])"
    + _SEP +
    r"(\d{1,3})°\s*(\d{1,2}\.\d+)'\s*([EW])",
    _FLAGS,
)

DD_RE = re.compile(
    r"(\d+\.?\d*)°\s*([NS])"
    + _SEP +
    r"(\d+\.?\d*)°\s*([EW])",
    _FLAGS,
)


class Notation(Enum):
    DMS = "DMS"
    DM = "DM"
    DD = "DD"


@dataclass(frozen=True, slots=True)
class ParsedCoordinates:
    """Both axes of one parsed input, before range validation."""
    lat: Coordinate
    lng: Coordinate
    notation: Notation

    def dd_string(self, decimals: int = 8) -> str:
        return f"{self.lat.format(decimals)} {self.lng.format(decimals)}"


def dms_to_degrees(degrees: str, minutes: str = "0", seconds: str = "0") -> float:
    """Combine degree/minute/second fields into decimal degrees."""
    return float(degrees) + float(minutes) / 60 + float(seconds or "0") / 3600


def _pair(lat_deg: float, lat_hem: str, lng_deg: float, lng_hem: str, notation: Notation):
    return ParsedCoordinates(
        lat=Coordinate(lat_deg, Hemisphere.parse(lat_hem, Axis.LATITUDE)),
        lng=Coordinate(lng_deg, Hemisphere.parse(lng_hem, Axis.LONGITUDE)),
        notation=notation,
    )


def match_dms(text: str) -> ParsedCoordinates | None:
    m = DMS_RE.fullmatch(text)
    if not m:
        return None
    lat_d, lat_m, lat_s, lat_h, lng_d, lng_m, lng_s, lng_h = m.groups()
    return _pair(
        dms_to_degrees(lat_d, lat_m, lat_s), lat_h,
        dms_to_degrees(lng_d, lng_m, lng_s), lng_h,
        Notation.DMS,
    )


def match_dm(text: str) -> ParsedCoordinates | None:
    m = DM_RE.fullmatch(text)
    if not m:
        return None
    lat_d, lat_m, lat_h, lng_d, lng_m, lng_h = m.groups()
    return _pair(
        dms_to_degrees(lat_d, lat_m), lat_h,
        dms_to_degrees(lng_d, lng_m), lng_h,
        Notation.DM,
    )


def match_dd(text: str) -> ParsedCoordinates | None:
    m = DD_RE.fullmatch(text)
    if not m:
        return None
    lat_d, lat_h, lng_d, lng_h = m.groups()
    return _pair(float(lat_d), lat_h, float(lng_d), lng_h, Notation.DD)


MATCHERS = (match_dms, match_dm, match_dd)


def parse_coordinates(text: str) -> ParsedCoordinates:
    """Parse coordinate text in DMS, DM or DD notation.

    Raises InvalidFormatError (with the usage hint) when nothing matches.
    Range checks are left to the normalizer.
    """
    text = text.strip()
    for matcher in MATCHERS:
        parsed = matcher(text)
        if parsed is not None:
            logger.debug("Parsed %r as %s", text, parsed.notation.value)
            return parsed
    logger.debug("No notation matched %r", text)
    raise InvalidFormatError()
