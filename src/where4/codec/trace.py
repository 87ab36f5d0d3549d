"""Optional record of every intermediate stage of one conversion.

Pass a ``ProcessingTrace`` to ``coordinates_to_words`` or
``words_to_coordinates`` to see how the result was reached. The trace is
write-only from the codec's point of view and never changes the result.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields

ENCODE = "Coordinates to Words"
DECODE = "Words to Coordinates"


@dataclass
class ProcessingTrace:
    conversion_type: str | None = None
    raw_input: str | None = None
    error: str | None = None

    # Coordinates -> words
    detected_format: str | None = None
    converted_dd_string: str | None = None
    parsed: dict | None = None

    # Words -> coordinates
    parsed_words: list[str] | None = None
    final_decoded: dict | None = None

    # Shared stages
    unified: dict | None = None
    normalized: dict | None = None
    lat_digits: list[int] | None = None
    lng_digits: list[int] | None = None
    lat_syllables: list[str] | None = None
    lng_syllables: list[str] | None = None
    map_coordinates: dict | None = None

    def reset(self, raw_input, conversion_type: str) -> None:
        """Clear every stage and start recording a new conversion."""
        for f in fields(self):
            setattr(self, f.name, None)
        self.raw_input = raw_input
        self.conversion_type = conversion_type
        if conversion_type == ENCODE:
            self.detected_format = "Unknown"

    @property
    def lat_string(self) -> str | None:
        return "".join(self.lat_syllables) if self.lat_syllables is not None else None

    @property
    def lng_string(self) -> str | None:
        return "".join(self.lng_syllables) if self.lng_syllables is not None else None

    def to_dict(self) -> dict:
        """JSON-serialisable snapshot, empty stages omitted."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if self.lat_syllables is not None:
            data["lat_string"] = self.lat_string
        if self.lng_syllables is not None:
            data["lng_string"] = self.lng_string
        return data
