"""Tests for coordinate notation parsing."""
import pytest

from where4.core.errors import FORMAT_HINT, InvalidFormatError
from where4.core.normalize import Hemisphere
from where4.parse.notation import (
    Notation,
    dms_to_degrees,
    match_dd,
    match_dm,
    match_dms,
    parse_coordinates,
)


class TestDMS:
    """Test degrees-minutes-seconds input."""

    def test_double_quote_seconds(self):
        """Seconds marked with a double quote parse."""
        p = parse_coordinates('49°47\'51.9" N, 18°15\'24.3" E')
        assert p.notation is Notation.DMS
        assert p.lat.degrees == pytest.approx(49.79775)
        assert p.lat.hemisphere is Hemisphere.N
        assert p.lng.degrees == pytest.approx(18.25675)
        assert p.lng.hemisphere is Hemisphere.E

    def test_two_apostrophe_seconds(self):
        """Seconds marked with two apostrophes parse."""
        p = parse_coordinates("49°47'51.9'' N 18°15'24.3'' E")
        assert p.notation is Notation.DMS
        assert p.lat.degrees == pytest.approx(49.79775)

    def test_whole_seconds_no_spaces(self):
        """Whole seconds without spacing parse."""
        p = parse_coordinates('33°51\'54"S 151°12\'34"E')
        assert p.notation is Notation.DMS
        assert p.lat.hemisphere is Hemisphere.S
        assert p.lat.degrees == pytest.approx(33 + 51 / 60 + 54 / 3600)
        assert p.lng.degrees == pytest.approx(151 + 12 / 60 + 34 / 3600)

    def test_lowercase_hemispheres(self):
        """Hemisphere letters may be lowercase."""
        p = parse_coordinates('40°26\'46" n 79°58\'56" w')
        assert p.lat.hemisphere is Hemisphere.N
        assert p.lng.hemisphere is Hemisphere.W

    def test_dd_string(self):
        """The converted DD string has eight decimals."""
        p = parse_coordinates('49°47\'51.9" N, 18°15\'24.3" E')
        assert p.dd_string(8) == "49.79775000° N 18.25675000° E"


class TestDM:
    """Test degrees-decimal-minutes input."""

    def test_basic(self):
        """Decimal minutes convert to degrees."""
        p = parse_coordinates("49°47.865' N 18°15.405' E")
        assert p.notation is Notation.DM
        assert p.lat.degrees == pytest.approx(49.79775)
        assert p.lng.degrees == pytest.approx(18.25675)

    def test_comma_separator(self):
        """A comma may separate the two halves."""
        p = parse_coordinates("12°30.5' S, 45°15.25' W")
        assert p.notation is Notation.DM
        assert p.lat.hemisphere is Hemisphere.S
        assert p.lng.hemisphere is Hemisphere.W

    def test_whole_minutes_not_recognised(self):
        """Minutes without a fraction are neither DM nor DD."""
        assert match_dm("49°30' N 18°15' E") is None
        with pytest.raises(InvalidFormatError):
            parse_coordinates("49°30' N 18°15' E")


class TestDD:
    """Test decimal-degrees input."""

    def test_basic(self):
        """Decimal degrees parse as given."""
        p = parse_coordinates("49.7977543° N 18.2567507° E")
        assert p.notation is Notation.DD
        assert p.lat.degrees == 49.7977543
        assert p.lng.degrees == 18.2567507

    def test_integers(self):
        """Whole degrees parse."""
        p = parse_coordinates("0° N 0° E")
        assert p.lat.degrees == 0.0
        assert p.lng.degrees == 0.0

    def test_trailing_dot(self):
        """A trailing decimal point is accepted."""
        p = parse_coordinates("10.° S 20.° W")
        assert p.lat.degrees == 10.0

    def test_comma_and_no_space_before_hemisphere(self):
        """Comma separator and no space before the letter parse."""
        p = parse_coordinates("51.5°N, 0.1275°W")
        assert p.lat.hemisphere is Hemisphere.N
        assert p.lng.hemisphere is Hemisphere.W

    def test_surrounding_whitespace(self):
        """Leading and trailing whitespace is stripped."""
        assert parse_coordinates("  1° N 2° E \n").notation is Notation.DD

    def test_out_of_range_still_parses(self):
        """Range is checked by the normalizer, not the parser."""
        p = parse_coordinates("95.0° N 10.0° E")
        assert p.lat.degrees == 95.0


class TestPriority:
    """Test matcher ordering."""

    def test_each_matcher_is_exclusive(self):
        """Each notation is matched by one matcher only."""
        dms = '49°47\'51.9" N, 18°15\'24.3" E'
        dm = "49°47.865' N 18°15.405' E"
        dd = "49.79775° N 18.25675° E"
        assert match_dms(dms) and not match_dm(dms) and not match_dd(dms)
        assert match_dm(dm) and not match_dms(dm) and not match_dd(dm)
        assert match_dd(dd) and not match_dms(dd) and not match_dm(dd)


class TestInvalid:
    """Test rejected input."""

    @pytest.mark.parametrize("text", [
        "49,7977543 N 18,2567 E",
        "49.79 18.25",
        "-49.5° N 18.5° E",
        "49.5° E 18.5° N",
        "49.5° N",
        "",
        "ROBI SEME NERU RODI",
        "49.5° N 18.5° E extra",
    ])
    def test_rejected(self, text):
        """Malformed text raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError) as exc:
            parse_coordinates(text)
        assert exc.value.message == FORMAT_HINT

    def test_hint_lists_notations(self):
        """The error lists every supported notation."""
        assert "DD.D° H" in FORMAT_HINT
        assert "DD°MM.M' H" in FORMAT_HINT
        assert "DD°MM'SS\" H" in FORMAT_HINT


def test_dms_to_degrees():
    """dms_to_degrees adds minutes and seconds as fractions."""
    assert dms_to_degrees("10", "30", "36") == pytest.approx(10.51)
    assert dms_to_degrees("10", "30") == 10.5
    assert dms_to_degrees("10", "30", "") == 10.5
