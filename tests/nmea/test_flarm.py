"""Tests for FLARM and Garmin proprietary sentence parsing."""

from navdecode.nmea import FixedPoint, parse_laa, parse_lae, parse_lau, parse_rmz


class TestParseLAU:
    """Tests for parse_lau function."""

    def test_alarm(self):
        result = parse_lau("$PFLAU,3,1,2,1,1,-62,2,-54,355,DD8F12*07")
        assert result is not None
        assert (result.rx, result.tx, result.gps, result.power) == (3, 1, 2, 1)
        assert result.alarm_level == 1
        assert result.relative_bearing == -62
        assert result.alarm_type == "2"
        assert result.relative_vertical == -54
        assert result.relative_distance == 355
        assert result.id == "DD8F12"

    def test_without_target_id(self):
        result = parse_lau("$PFLAU,3,1,2,1,1,-62,2,-54,355*56")
        assert result is not None and result.id == ""

    def test_no_target(self):
        result = parse_lau("$PFLAU,0,0,0,1,0,,0,,*63")
        assert result is not None
        assert result.relative_bearing == 0
        assert result.relative_distance == 0
        assert result.id == ""

    def test_wrong_type(self):
        assert parse_lau("$PFLAE,A,0,0*33") is None


class TestParseLAA:
    """Tests for parse_laa function."""

    def test_traffic(self):
        result = parse_laa("$PFLAA,0,-1234,1234,220,2,DD8F12,180,,30,-1.4,1*19")
        assert result is not None
        assert result.alarm_level == 0
        assert result.relative_north == -1234
        assert result.relative_east == 1234
        assert result.relative_vertical == 220
        assert result.id_type == 2
        assert result.id == "DD8F12"
        assert result.track == 180
        assert result.turn_rate == 0
        assert result.ground_speed == 30
        assert result.climb_rate == FixedPoint(-14, 10)
        assert result.aircraft_type == 1
        assert (result.no_track, result.source, result.rssi) == (0, 0, 0)

    def test_extended_fields(self):
        result = parse_laa("$PFLAA,0,-1234,1234,220,2,DD8F12,180,,30,-1.4,1,0,1,-70*1E")
        assert result is not None
        assert result.source == 1
        assert result.rssi == -70

    def test_hex_aircraft_type(self):
        result = parse_laa("$PFLAA,2,100,-50,10,1,A1B2C3,90,,25,0.5,A*79")
        assert result is not None
        assert result.aircraft_type == 10
        assert result.climb_rate == FixedPoint(5, 10)

    def test_bad_aircraft_type(self):
        assert parse_laa("$PFLAA,2,100,-50,10,1,A1B2C3,90,,25,0.5,Z*62") is None


class TestParseLAE:
    """Tests for parse_lae function."""

    def test_no_error(self):
        result = parse_lae("$PFLAE,A,0,0*33")
        assert result is not None
        assert result.query_type == "A"
        assert result.severity == 0
        assert result.error_code == "0"
        assert result.message == ""

    def test_error_with_message(self):
        result = parse_lae("$PFLAE,A,2,81,Obstacle database expired*77")
        assert result is not None
        assert result.severity == 2
        assert result.error_code == "81"
        assert result.message == "Obstacle database expired"


class TestParseRMZ:
    """Tests for parse_rmz function."""

    def test_altitude(self):
        result = parse_rmz("$PGRMZ,246,f,3*1B")
        assert result is not None
        assert result.barometric_altitude == 246
        assert result.unit == "f"
        assert result.position_fix_dimension == 3

    def test_empty_altitude(self):
        result = parse_rmz("$PGRMZ,,f,*18")
        assert result is not None
        assert result.barometric_altitude == 0
        assert result.position_fix_dimension == 0

    def test_standard_talker_rejected(self):
        assert parse_rmz("$GPRMZ,246,f,3") is None
