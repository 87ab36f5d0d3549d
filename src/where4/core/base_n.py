"""Positional base-N expansion of fractions in [0, 1).

A fraction f is written as digits d0, d1, ... with
f = d0/N + d1/N^2 + ...; the first digit is the coarsest.
"""

import math

from .syllables import BASE


def encode_fraction(value: float, digit_count: int, base: int = BASE) -> list[int]:
    """Expand ``value`` into ``digit_count`` base-``base`` digits.

    Digits are truncated, not rounded. Each digit is clamped to
    [0, base - 1] because the multiplication can overshoot at digit
    boundaries (and ``value == 1.0`` yields all maximal digits).
    """
    if digit_count < 0:
        raise ValueError(f"digit_count must be non-negative, got {digit_count}")

    digits = []
    remainder = value
    for _ in range(digit_count):
        remainder *= base
        digit = math.floor(remainder)
        if digit >= base:
            digit = base - 1
        if digit < 0:
            digit = 0
        digits.append(digit)
        remainder -= digit
    return digits


def decode_digits(digits, base: int = BASE) -> float:
    """Collapse base-``base`` digits back into a fraction."""
    value = 0.0
    for i, digit in enumerate(digits):
        value += digit / base ** (i + 1)
    return value


def resolution(digit_count: int, base: int = BASE) -> float:
    """Width of one step of the last digit, as a fraction of the range."""
    return 1.0 / base ** digit_count
