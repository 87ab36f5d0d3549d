"""Coordinates <-> word addresses.

Encode:  text -> parse -> validate/unify -> normalize -> base-50 digits
         -> syllables -> words
Decode:  words -> syllables -> digits -> fraction -> unified -> coordinate

Both directions return a result object instead of raising: exactly one of
the payload and ``error`` is set.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..config import DEFAULT_PRECISION, SNAP_EPSILON, check_precision
from ..core.base_n import decode_digits, encode_fraction
from ..core.errors import (
    InternalError,
    InvalidFormatError,
    OutOfRangeCoordinateError,
    Where4Error,
)
from ..core.normalize import (
    Axis,
    Coordinate,
    Hemisphere,
    denormalize,
    from_unified,
    normalize,
    unify,
)
from ..core.syllables import syllables_for
from ..parse.notation import Notation, parse_coordinates
from .trace import DECODE, ENCODE, ProcessingTrace
from .words import format_words, split_syllables, split_words, syllables_to_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MapCoordinates:
    """Signed degrees for map widgets (south/west negative)."""
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class EncodeResult:
    words: str | None
    map_coordinates: MapCoordinates | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "words": self.words,
            "map_coordinates": self.map_coordinates.to_dict() if self.map_coordinates else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class DecodeResult:
    dd_string: str | None
    map_coordinates: MapCoordinates | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "dd_string": self.dd_string,
            "map_coordinates": self.map_coordinates.to_dict() if self.map_coordinates else None,
            "error": self.error,
        }


def _fail(err: Where4Error, trace: ProcessingTrace | None) -> str:
    if isinstance(err, InternalError):
        logger.warning("Codec invariant violated: %s", err.message)
    else:
        logger.debug("%s: %s", err.kind, err.message)
    if trace is not None:
        trace.error = err.message
    return err.message


def _coordinate_dict(lat: Coordinate, lng: Coordinate) -> dict:
    return {
        "lat": lat.degrees,
        "lat_hemisphere": lat.hemisphere.value,
        "lng": lng.degrees,
        "lng_hemisphere": lng.hemisphere.value,
    }


def _magnitude(value, axis: Axis) -> float:
    try:
        return abs(float(value))
    except (TypeError, ValueError):
        raise InvalidFormatError(
            f"Error: Invalid {axis.value} value {value!r} (expected a number)."
        ) from None
    except OverflowError:
        raise OutOfRangeCoordinateError(axis.value, math.inf, axis.max_degrees) from None


def encode_coordinates(
    lat: Coordinate,
    lng: Coordinate,
    precision: int = DEFAULT_PRECISION,
    trace: ProcessingTrace | None = None,
) -> tuple[str, MapCoordinates]:
    """Encode a parsed coordinate pair into words.

    Raises OutOfRangeCoordinateError or InternalError.
    """
    check_precision(precision)
    if trace is not None:
        trace.parsed = _coordinate_dict(lat, lng)

    unified_lat = unify(lat)
    unified_lng = unify(lng)
    map_coords = MapCoordinates(lat.signed, lng.signed)
    if trace is not None:
        trace.map_coordinates = map_coords.to_dict()
        trace.unified = {"lat": unified_lat, "lng": unified_lng}

    norm_lat = normalize(unified_lat, Axis.LATITUDE)
    norm_lng = normalize(unified_lng, Axis.LONGITUDE)
    if trace is not None:
        trace.normalized = {"lat": norm_lat, "lng": norm_lng}

    lat_digits = encode_fraction(norm_lat, precision)
    lng_digits = encode_fraction(norm_lng, precision)
    lat_syllables = syllables_for(lat_digits)
    lng_syllables = syllables_for(lng_digits)
    if trace is not None:
        trace.lat_digits = lat_digits
        trace.lng_digits = lng_digits
        trace.lat_syllables = lat_syllables
        trace.lng_syllables = lng_syllables

    words = format_words(lat_syllables, lng_syllables, precision)
    logger.debug("Encoded %s %s -> %s", lat, lng, words)
    return words, map_coords


def coordinates_to_words(
    text: str,
    trace: ProcessingTrace | None = None,
    precision: int = DEFAULT_PRECISION,
) -> EncodeResult:
    """Convert coordinate text (DMS, DM or DD) into a word address."""
    check_precision(precision)
    if trace is not None:
        trace.reset(text, ENCODE)

    try:
        try:
            parsed = parse_coordinates(text)
        except InvalidFormatError:
            # DMS and DM were tried first; only the DD fallback is left.
            if trace is not None:
                trace.detected_format = "DD (assumed)"
            raise
        if trace is not None:
            trace.detected_format = parsed.notation.value
            if parsed.notation is not Notation.DD:
                trace.converted_dd_string = parsed.dd_string(8)
        words, map_coords = encode_coordinates(parsed.lat, parsed.lng, precision, trace)
    except Where4Error as err:
        return EncodeResult(words=None, map_coordinates=None, error=_fail(err, trace))

    return EncodeResult(words=words, map_coordinates=map_coords)


def coordinates_to_words_from_values(
    lat: float,
    lat_hemisphere: str,
    lng: float,
    lng_hemisphere: str,
    trace: ProcessingTrace | None = None,
    precision: int = DEFAULT_PRECISION,
) -> EncodeResult:
    """Convert already-parsed degree values into a word address.

    Degree signs are dropped; the hemisphere letters decide direction.
    """
    check_precision(precision)
    if trace is not None:
        trace.reset((lat, lat_hemisphere, lng, lng_hemisphere), ENCODE)
        trace.detected_format = "Values"

    try:
        lat_coord = Coordinate(
            _magnitude(lat, Axis.LATITUDE),
            Hemisphere.parse(lat_hemisphere, Axis.LATITUDE),
        )
        lng_coord = Coordinate(
            _magnitude(lng, Axis.LONGITUDE),
            Hemisphere.parse(lng_hemisphere, Axis.LONGITUDE),
        )
        words, map_coords = encode_coordinates(lat_coord, lng_coord, precision, trace)
    except Where4Error as err:
        return EncodeResult(words=None, map_coordinates=None, error=_fail(err, trace))

    return EncodeResult(words=words, map_coordinates=map_coords)


def decode_words(
    words,
    precision: int = DEFAULT_PRECISION,
    trace: ProcessingTrace | None = None,
) -> tuple[Coordinate, Coordinate]:
    """Decode a list of words into a (latitude, longitude) pair.

    Raises WrongWordCountError, WrongWordLengthError or InvalidSyllableError.
    """
    check_precision(precision)
    lat_syllables, lng_syllables = split_syllables(words, precision)
    lat_digits = syllables_to_digits(lat_syllables)
    lng_digits = syllables_to_digits(lng_syllables)
    if trace is not None:
        trace.lat_syllables = lat_syllables
        trace.lng_syllables = lng_syllables
        trace.lat_digits = lat_digits
        trace.lng_digits = lng_digits

    norm_lat = decode_digits(lat_digits)
    norm_lng = decode_digits(lng_digits)
    if trace is not None:
        trace.normalized = {"lat": norm_lat, "lng": norm_lng}

    unified_lat = denormalize(norm_lat, Axis.LATITUDE, SNAP_EPSILON)
    unified_lng = denormalize(norm_lng, Axis.LONGITUDE, SNAP_EPSILON)
    if trace is not None:
        trace.unified = {"lat": unified_lat, "lng": unified_lng}

    lat = from_unified(unified_lat, Axis.LATITUDE)
    lng = from_unified(unified_lng, Axis.LONGITUDE)
    if trace is not None:
        trace.final_decoded = _coordinate_dict(lat, lng)
    logger.debug("Decoded %s -> %s %s", " ".join(words), lat, lng)
    return lat, lng


def words_to_coordinates(
    text: str,
    trace: ProcessingTrace | None = None,
    precision: int = DEFAULT_PRECISION,
) -> DecodeResult:
    """Convert a word address back into coordinates."""
    check_precision(precision)
    if trace is not None:
        trace.reset(text, DECODE)

    words = split_words(text)
    if trace is not None:
        trace.parsed_words = words

    try:
        lat, lng = decode_words(words, precision, trace)
    except Where4Error as err:
        return DecodeResult(dd_string=None, map_coordinates=None, error=_fail(err, trace))

    map_coords = MapCoordinates(lat.signed, lng.signed)
    if trace is not None:
        trace.map_coordinates = map_coords.to_dict()
    return DecodeResult(dd_string=f"{lat.format(7)} {lng.format(7)}", map_coordinates=map_coords)
