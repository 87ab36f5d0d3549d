"""Error taxonomy for the Where4 codec.

Every failure is a ``Where4Error`` (a ``ValueError``) carrying the message
shown to the user. The public conversion functions turn these into result
values; the lower-level helpers let them propagate.
"""

FORMAT_HINT = (
    "Error: Invalid coordinate format.\n"
    "Supported: DD.D° H, DD.D° H or DD°MM.M' H, DD°MM.M' H "
    "or DD°MM'SS\" H, DD°MM'SS\" H (or SS'')"
)


class Where4Error(ValueError):
    """Base class for all codec failures."""

    kind = "Where4Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFormatError(Where4Error):
    """Coordinate text matches none of the accepted notations."""

    kind = "InvalidFormat"

    def __init__(self, message: str = FORMAT_HINT) -> None:
        super().__init__(message)


class OutOfRangeCoordinateError(Where4Error):
    """A degree value lies outside its axis' legal range."""

    kind = "OutOfRangeCoordinate"

    def __init__(self, axis: str, value: float, max_degrees: int) -> None:
        self.axis = axis
        self.value = value
        super().__init__(
            f"Error: {axis.capitalize()} value ({value:.5f}°) "
            f"is out of range (0-{max_degrees})."
        )


class WrongWordCountError(Where4Error):
    kind = "WrongWordCount"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Error: Input must contain exactly {expected} words separated by spaces."
        )


class WrongWordLengthError(Where4Error):
    kind = "WrongWordLength"

    def __init__(self, word: str, expected: int = 4) -> None:
        self.word = word
        super().__init__(
            f'Error: Each word must be {expected} characters long. Word "{word}" is not.'
        )


class InvalidSyllableError(Where4Error):
    """A two-letter token that is not in the syllable table."""

    kind = "InvalidSyllable"

    def __init__(self, syllable: str, word: str | None = None, axis: str | None = None) -> None:
        self.syllable = syllable
        self.word = word
        self.axis = axis
        if word is not None and axis is not None:
            message = f'Error: Invalid {axis} syllable "{syllable}" in word "{word}".'
        else:
            message = f'Error: Invalid syllable "{syllable}".'
        super().__init__(message)


class InternalError(Where4Error):
    """A structural invariant of the codec was violated."""

    kind = "InternalError"
