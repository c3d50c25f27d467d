"""Tests for GSA, GLL, GST, GSV and ZDA sentence parsing."""

import pytest

from navdecode.nmea import (
    UNKNOWN,
    UNKNOWN_DATE,
    UNKNOWN_TIME,
    CalendarDate,
    FaaMode,
    FixedPoint,
    GllStatus,
    GsaFixType,
    GsaMode,
    SatelliteInfo,
    TimeOfDay,
    parse_gll,
    parse_gsa,
    parse_gst,
    parse_gsv,
    parse_zda,
    to_timestamp,
)


class TestParseGSA:
    """Tests for parse_gsa function."""

    def test_valid(self):
        result = parse_gsa("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")
        assert result is not None
        assert result.mode is GsaMode.AUTO
        assert result.fix_type is GsaFixType.FIX_3D
        assert result.sats == (4, 5, 0, 9, 12, 0, 0, 24, 0, 0, 0, 0)
        assert result.pdop == FixedPoint(25, 10)
        assert result.hdop == FixedPoint(13, 10)
        assert result.vdop == FixedPoint(21, 10)

    def test_forced_2d(self):
        result = parse_gsa("$GPGSA,M,2,04,05,,,,,,,,,,,3.1,2.0,2.4*38")
        assert result is not None
        assert result.mode is GsaMode.FORCED
        assert result.fix_type is GsaFixType.FIX_2D
        assert result.sats[:3] == (4, 5, 0)

    def test_no_fix(self):
        result = parse_gsa("$GPGSA,A,1,,,,,,,,,,,,,,,*1E")
        assert result is not None
        assert result.fix_type is GsaFixType.NONE
        assert result.sats == (0,) * 12
        assert result.pdop == UNKNOWN

    def test_unknown_fix_type(self):
        assert parse_gsa("$GPGSA,A,4,,,,,,,,,,,,,,,*1B") is None

    def test_missing_dop_fields(self):
        assert parse_gsa("$GPGSA,A,3,04,05") is None


class TestParseGLL:
    """Tests for parse_gll function."""

    def test_valid(self):
        result = parse_gll("$GPGLL,3723.2475,N,12158.3416,W,161229.487,A,A*41")
        assert result is not None
        assert result.latitude == FixedPoint(37232475, 10000)
        assert result.longitude == FixedPoint(-121583416, 10000)
        assert result.time == TimeOfDay(16, 12, 29, 487000)
        assert result.status is GllStatus.DATA_VALID
        assert result.faa_mode is FaaMode.AUTONOMOUS

    def test_without_mode(self):
        result = parse_gll("$GPGLL,3723.2475,N,12158.3416,W,161229.487,A*2C")
        assert result is not None and result.faa_mode is None

    def test_empty(self):
        result = parse_gll("$GPGLL,,,,,,V,N*64")
        assert result is not None
        assert result.latitude == UNKNOWN
        assert result.time == UNKNOWN_TIME
        assert result.status is GllStatus.DATA_NOT_VALID
        assert result.faa_mode is FaaMode.NOT_VALID

    def test_time_and_status_required(self):
        assert parse_gll("$GPGLL,3751.65,S,14507.36,E*77") is None


class TestParseGST:
    """Tests for parse_gst function."""

    def test_valid(self):
        result = parse_gst("$GPGST,024603.00,3.2,6.6,4.7,47.3,5.8,5.6,22.0*58")
        assert result is not None
        assert result.time == TimeOfDay(2, 46, 3, 0)
        assert result.rms_deviation == FixedPoint(32, 10)
        assert result.semi_major_deviation == FixedPoint(66, 10)
        assert result.semi_minor_deviation == FixedPoint(47, 10)
        assert result.semi_major_orientation == FixedPoint(473, 10)
        assert result.latitude_error_deviation == FixedPoint(58, 10)
        assert result.longitude_error_deviation == FixedPoint(56, 10)
        assert result.altitude_error_deviation == FixedPoint(220, 10)

    def test_empty(self):
        result = parse_gst("$GPGST,,,,,,,,*57")
        assert result is not None
        assert result.time == UNKNOWN_TIME
        assert result.rms_deviation == UNKNOWN


class TestParseGSV:
    """Tests for parse_gsv function."""

    def test_first_message(self):
        result = parse_gsv(
            "$GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74"
        )
        assert result is not None
        assert (result.total_msgs, result.msg_nr, result.total_sats) == (3, 1, 11)
        assert result.sats == [
            SatelliteInfo(3, 3, 111, 0),
            SatelliteInfo(4, 15, 270, 0),
            SatelliteInfo(6, 1, 10, 0),
            SatelliteInfo(13, 6, 292, 0),
        ]

    def test_last_message_with_three_satellites(self):
        result = parse_gsv("$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00*4D")
        assert result is not None
        assert [satellite.nr for satellite in result.sats] == [22, 24, 27]
        assert result.sats[0].snr == 42

    def test_empty_satellite_fields(self):
        result = parse_gsv("$GPGSV,1,1,02,07,,,,09,45,120,*47")
        assert result is not None
        assert result.sats == [SatelliteInfo(7, 0, 0, 0), SatelliteInfo(9, 45, 120, 0)]

    def test_no_satellites(self):
        result = parse_gsv("$GPGSV,1,1,00*79")
        assert result is not None and result.sats == []

    def test_wrong_type(self):
        assert parse_gsv("$GPGSA,A,1,,,,,,,,,,,,,,,*1E") is None


class TestParseZDA:
    """Tests for parse_zda function."""

    def test_valid(self):
        result = parse_zda("$GPZDA,160012.71,11,03,2004,-1,00*7D")
        assert result is not None
        assert result.time == TimeOfDay(16, 0, 12, 710000)
        assert result.date == CalendarDate(11, 3, 2004)
        assert result.hour_offset == -1
        assert result.minute_offset == 0

    def test_timestamp(self):
        result = parse_zda("$GPZDA,160012.71,11,03,2004,-1,00*7D")
        assert result is not None
        timestamp = to_timestamp(result.date, result.time)
        assert timestamp.seconds == 1079020812
        assert timestamp.microseconds == 710000

    def test_leap_second(self):
        result = parse_zda("$GPZDA,235960,31,12,2016,00,00*47")
        assert result is not None
        assert result.time.seconds == 60
        assert to_timestamp(result.date, result.time).seconds == 1483228800

    def test_empty(self):
        result = parse_zda("$GPZDA,,,,,,*48")
        assert result is not None
        assert result.time == UNKNOWN_TIME
        assert result.date == UNKNOWN_DATE

    @pytest.mark.parametrize("sentence", ["$GPZDA,160012.71,11,03*00", "$GPZDA,1600,11,03,2004,,"])
    def test_rejects(self, sentence):
        assert parse_zda(sentence) is None
