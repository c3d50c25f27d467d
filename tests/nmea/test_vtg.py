"""Tests for VTG sentence parsing."""

import pytest

from navdecode.nmea import UNKNOWN, FaaMode, FixedPoint, parse_vtg, to_float


class TestParseVTG:
    """Tests for parse_vtg function."""

    def test_valid_vtg_autonomous(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        assert result is not None
        assert result.true_track_degrees == FixedPoint(547, 10)
        assert result.magnetic_track_degrees == FixedPoint(344, 10)
        assert result.speed_knots == FixedPoint(55, 10)
        assert result.speed_kph == FixedPoint(102, 10)
        assert to_float(result.speed_kph) / 3.6 == pytest.approx(10.2 / 3.6)
        assert result.faa_mode is FaaMode.AUTONOMOUS
        assert result.valid is True

    def test_vtg_differential_mode(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*3E")
        assert result is not None and result.faa_mode is FaaMode.DIFFERENTIAL and result.valid

    def test_vtg_not_valid_mode(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,N*34")
        assert result is not None and result.faa_mode is FaaMode.NOT_VALID and not result.valid

    def test_vtg_stationary_empty_track(self):
        result = parse_vtg("$GNVTG,,T,,M,0.0,N,0.0,K,A*3D")
        assert result is not None
        assert result.true_track_degrees == UNKNOWN
        assert result.speed_knots == FixedPoint(0, 10)
        assert to_float(result.speed_kph) == 0.0
        assert result.faa_mode is FaaMode.AUTONOMOUS and result.valid

    def test_vtg_all_empty_fields(self):
        result = parse_vtg("$GNVTG,,T,,M,,N,,K,N*32")
        assert result is not None
        assert result.true_track_degrees.scale == 0
        assert result.speed_knots.scale == 0
        assert result.speed_kph.scale == 0
        assert not result.valid

    def test_vtg_no_mode_indicator(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56")
        assert result is not None and result.faa_mode is None and not result.valid

    def test_vtg_wrong_unit_letter(self):
        assert parse_vtg("$GNVTG,054.7,X,034.4,M,005.5,N,010.2,K,A*37") is None

    def test_vtg_invalid_checksum(self):
        assert parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF") is None

    def test_vtg_malformed_too_few_fields(self):
        assert parse_vtg("$GNVTG,054.7,T*30") is None

    def test_vtg_wrong_sentence_type(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
        assert parse_vtg(sentence) is None

    def test_vtg_multi_constellation_prefixes(self):
        prefixes = [("GP", "25"), ("GN", "3B"), ("GL", "39"),
                    ("GA", "34"), ("GB", "37"), ("GQ", "24")]
        for prefix, cs in prefixes:
            s = f"${prefix}VTG,054.7,T,034.4,M,005.5,N,010.2,K,A*{cs}"
            assert parse_vtg(s) is not None, f"Failed: {prefix}"

    def test_vtg_empty_kph(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,,K,A*16")
        assert result is not None and result.speed_kph == UNKNOWN
