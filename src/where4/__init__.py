"""
Where4 - geographic coordinates as pronounceable words.

A location is written as four words of two syllables each, e.g.
``ROBI SEME NERU RODI``. Every word adds one base-50 digit of latitude
and one of longitude, so four words resolve to a few metres.

Usage:
    from where4 import coordinates_to_words, words_to_coordinates

    result = coordinates_to_words("49.7977543° N 18.2567507° E")
    result.words                 # "ROBI SEME NERU RODI"

    back = words_to_coordinates(result.words)
    back.dd_string               # "49.7977...° N 18.2567...° E"
    back.map_coordinates.lat     # signed degrees for a map pin
"""

from .codec.convert import (
    DecodeResult,
    EncodeResult,
    MapCoordinates,
    coordinates_to_words,
    coordinates_to_words_from_values,
    decode_words,
    encode_coordinates,
    words_to_coordinates,
)

from .codec.trace import ProcessingTrace

from .core.errors import (
    InternalError,
    InvalidFormatError,
    InvalidSyllableError,
    OutOfRangeCoordinateError,
    Where4Error,
    WrongWordCountError,
    WrongWordLengthError,
)

from .core.normalize import (
    Axis,
    Coordinate,
    Hemisphere,
)

from .core.syllables import (
    BASE,
    SYLLABLES,
    digit_for,
    syllable_for,
)

from .parse.notation import (
    Notation,
    ParsedCoordinates,
    parse_coordinates,
)

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "coordinates_to_words",
    "coordinates_to_words_from_values",
    "words_to_coordinates",
    "encode_coordinates",
    "decode_words",
    "EncodeResult",
    "DecodeResult",
    "MapCoordinates",
    "ProcessingTrace",
    # Types
    "Axis",
    "Coordinate",
    "Hemisphere",
    "Notation",
    "ParsedCoordinates",
    "parse_coordinates",
    # Syllables
    "BASE",
    "SYLLABLES",
    "digit_for",
    "syllable_for",
    # Errors
    "Where4Error",
    "InvalidFormatError",
    "OutOfRangeCoordinateError",
    "WrongWordCountError",
    "WrongWordLengthError",
    "InvalidSyllableError",
    "InternalError",
]
