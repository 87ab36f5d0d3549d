"""Base-50 syllable table.

Each digit 0-49 is spelled as a consonant-vowel pair:
consonants B D F G K M N R S T, vowels A E I O U, in that order.
Two syllables (one latitude, one longitude) make a four-letter word.
"""

from .errors import InvalidSyllableError

CONSONANTS = "BDFGKMNRST"
VOWELS = "AEIOU"

# Digit order: BA BE BI BO BU DA ... TU
SYLLABLES = tuple(c + v for c in CONSONANTS for v in VOWELS)
BASE = len(SYLLABLES)  # 50

# Reverse lookup: syllable -> digit
SYLLABLE_TO_DIGIT = {s: i for i, s in enumerate(SYLLABLES)}


def syllable_for(digit: int) -> str:
    """Return the syllable spelling a base-50 digit."""
    if not 0 <= digit < BASE:
        raise ValueError(f"Digit must be 0-{BASE - 1}, got {digit}")
    return SYLLABLES[digit]


def digit_for(syllable: str, word: str | None = None, axis: str | None = None) -> int:
    """Return the digit a syllable stands for (case insensitive).

    ``word`` and ``axis`` only enrich the error raised for an unknown
    syllable.
    """
    digit = SYLLABLE_TO_DIGIT.get(syllable.upper())
    if digit is None:
        raise InvalidSyllableError(syllable.upper(), word=word, axis=axis)
    return digit


def syllables_for(digits) -> list[str]:
    """Spell a digit sequence as syllables."""
    return [syllable_for(d) for d in digits]
