"""Interleave per-axis syllables into words, and split them back.

Word i is latitude syllable i followed by longitude syllable i, so
``["RO", "SE"]`` + ``["BI", "ME"]`` -> ``"ROBI SEME"``.
"""
from __future__ import annotations

from ..config import WORD_LENGTH
from ..core.errors import InternalError, WrongWordCountError, WrongWordLengthError
from ..core.syllables import digit_for


def format_words(lat_syllables, lng_syllables, precision: int) -> str:
    """Join two syllable sequences of length ``precision`` into words."""
    if len(lat_syllables) != precision or len(lng_syllables) != precision:
        raise InternalError("Error generating syllable arrays.")
    return " ".join(lat + lng for lat, lng in zip(lat_syllables, lng_syllables))


def split_words(text: str) -> list[str]:
    """Upper-case and split a word address on whitespace."""
    return text.strip().upper().split()


def split_syllables(words, precision: int) -> tuple[list[str], list[str]]:
    """Split words into (latitude syllables, longitude syllables).

    Checks the word count, then each word's length, then each syllable;
    the first violation raises.
    """
    if len(words) != precision:
        raise WrongWordCountError(precision, len(words))

    lat_syllables = []
    lng_syllables = []
    half = WORD_LENGTH // 2
    for word in words:
        if len(word) != WORD_LENGTH:
            raise WrongWordLengthError(word, WORD_LENGTH)
        lat, lng = word[:half], word[half:]
        digit_for(lat, word=word, axis="latitude")
        digit_for(lng, word=word, axis="longitude")
        lat_syllables.append(lat)
        lng_syllables.append(lng)
    return lat_syllables, lng_syllables


def syllables_to_digits(syllables) -> list[int]:
    return [digit_for(s) for s in syllables]
