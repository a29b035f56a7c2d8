"""Tests for RMC sentence parsing."""

import pytest

from navsentence.nmea import (
    ChecksumMismatchError,
    InsufficientFieldsError,
    InvalidFieldError,
    UnsupportedIdentifierError,
    parse_rmc,
)

RMC_VALID = "$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074,,140225,,,A,V*1B"
RMC_COMPLETE = "$GPRMC,235947,A,5550.000,N,03736.000,E,0.13,309.62,130720,5.5,W,A*08"


class TestParseRMC:
    """Tests for successful RMC decoding."""

    def test_valid_sentence(self):
        result = parse_rmc(RMC_VALID)
        assert result.utc_time == "180201.80"
        assert result.status == "A"
        assert result.latitude_degrees == pytest.approx(63 + 25.8068737 / 60, rel=1e-12)
        assert result.longitude_degrees == pytest.approx(10 + 25.0920747 / 60, rel=1e-12)
        assert result.speed_knots == pytest.approx(0.074)
        assert result.course_degrees is None
        assert result.date == "140225"
        assert result.magnetic_variation_degrees is None
        assert result.magnetic_variation_direction is None
        assert result.mode == "A"
        assert result.valid is True

    def test_all_fields_present(self):
        result = parse_rmc(RMC_COMPLETE)
        assert result.latitude_degrees == pytest.approx(55.8333333, rel=1e-7)
        assert result.longitude_degrees == pytest.approx(37.6)
        assert result.speed_knots == pytest.approx(0.13)
        assert result.course_degrees == pytest.approx(309.62)
        assert result.date == "130720"
        assert result.magnetic_variation_degrees == pytest.approx(5.5)
        assert result.magnetic_variation_direction == "W"
        assert result.mode == "A"

    def test_void_fix_in_southern_and_western_hemispheres(self):
        result = parse_rmc("$GPRMC,235947,V,3356.123,S,15112.456,W,,,130720,5.5,E*65")
        assert result.status == "V"
        assert result.valid is False
        assert result.latitude_degrees == pytest.approx(-33.93538333, rel=1e-8)
        assert result.longitude_degrees == pytest.approx(-151.2076, rel=1e-8)
        assert result.speed_knots is None
        assert result.course_degrees is None
        assert result.magnetic_variation_direction == "E"
        assert result.mode is None

    def test_twelve_fields_without_mode(self):
        result = parse_rmc(
            "$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074,,140225,,*0C"
        )
        assert result.mode is None
        assert result.valid is True

    def test_malformed_speed_is_none(self):
        result = parse_rmc(
            "$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,ABC,,140225,,,A,V*76"
        )
        assert result.speed_knots is None
        assert result.valid is True

    def test_glonass_talker(self):
        result = parse_rmc(
            "$GLRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074,,140225,,,A,V*19"
        )
        assert result.valid is True

    def test_trailing_line_terminator(self):
        assert parse_rmc(RMC_COMPLETE + "\r\n") == parse_rmc(RMC_COMPLETE)


class TestParseRMCErrors:
    """Tests for RMC decode failures."""

    def test_altered_speed_fails_checksum(self):
        with pytest.raises(ChecksumMismatchError):
            parse_rmc(
                "$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.075,,140225,,,A,V*1B"
            )

    def test_lowercase_checksum(self):
        with pytest.raises(ChecksumMismatchError):
            parse_rmc(RMC_VALID.replace("*1B", "*1b"))

    def test_insufficient_fields(self):
        with pytest.raises(InsufficientFieldsError) as exc_info:
            parse_rmc("$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074*0C")
        assert exc_info.value.expected == 12
        assert exc_info.value.actual == 8

    def test_empty_latitude(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_rmc("$GNRMC,180201.80,A,,N,01025.0920747,E,0.074,,140225,,,A,V*02")
        assert exc_info.value.field_name == "latitude"

    def test_gga_sentence_is_rejected(self):
        with pytest.raises(UnsupportedIdentifierError) as exc_info:
            parse_rmc(
                "$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74"
            )
        assert exc_info.value.identifier == "$GNGGA"

    def test_unsupported_talker(self):
        with pytest.raises(UnsupportedIdentifierError):
            parse_rmc(RMC_VALID.replace("$GNRMC", "$GBRMC"))
