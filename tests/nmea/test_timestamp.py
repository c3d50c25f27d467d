"""Tests for calendar conversion."""

import pytest

from navdecode.nmea import (
    UNKNOWN_DATE,
    UNKNOWN_TIME,
    CalendarDate,
    CalendarRangeError,
    TimeOfDay,
    Timestamp,
    days_from_civil,
    to_timestamp,
    window_year,
)

MIDNIGHT = TimeOfDay(0, 0, 0, 0)


class TestDaysFromCivil:
    """Tests for days_from_civil function."""

    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            ((1970, 1, 1), 0),
            ((1970, 1, 2), 1),
            ((1972, 3, 1), 790),
            ((2000, 3, 1), 11017),
            ((2024, 2, 29), 19782),
            ((2099, 12, 31), 47481),
        ],
    )
    def test_values(self, date, expected):
        assert days_from_civil(*date) == expected

    def test_consecutive_days(self):
        assert days_from_civil(2024, 3, 1) - days_from_civil(2024, 2, 28) == 2
        assert days_from_civil(2023, 3, 1) - days_from_civil(2023, 2, 28) == 1


class TestWindowYear:
    @pytest.mark.parametrize(
        ("year", "expected"), [(0, 2000), (24, 2024), (79, 2079), (80, 1980), (98, 1998)]
    )
    def test_two_digit(self, year, expected):
        assert window_year(year) == expected

    def test_four_digit_passes_through(self):
        assert window_year(2004) == 2004


class TestToTimestamp:
    """Tests for to_timestamp function."""

    def test_rmc_example(self):
        timestamp = to_timestamp(CalendarDate(13, 9, 1998), TimeOfDay(8, 18, 36, 0))
        assert timestamp == Timestamp(905674716, 0)

    def test_two_digit_year(self):
        timestamp = to_timestamp(CalendarDate(13, 9, 98), TimeOfDay(8, 18, 36, 0))
        assert timestamp.seconds == 905674716

    def test_epoch(self):
        assert to_timestamp(CalendarDate(1, 1, 1970), MIDNIGHT) == Timestamp(0, 0)

    def test_leap_day(self):
        timestamp = to_timestamp(CalendarDate(29, 2, 2024), TimeOfDay(12, 0, 0, 250000))
        assert timestamp == Timestamp(1709208000, 250000)

    def test_leap_second(self):
        timestamp = to_timestamp(CalendarDate(31, 12, 2016), TimeOfDay(23, 59, 60, 0))
        assert timestamp.seconds == to_timestamp(CalendarDate(1, 1, 2017), MIDNIGHT).seconds

    @pytest.mark.parametrize(
        "date",
        [
            CalendarDate(29, 2, 2023),
            CalendarDate(31, 4, 2024),
            CalendarDate(0, 1, 2024),
            CalendarDate(1, 13, 2024),
            CalendarDate(1, 0, 2024),
            CalendarDate(31, 12, 1969),
            CalendarDate(1, 1, 2100),
            UNKNOWN_DATE,
        ],
    )
    def test_rejects_date(self, date):
        with pytest.raises(CalendarRangeError):
            to_timestamp(date, MIDNIGHT)

    @pytest.mark.parametrize(
        "time",
        [
            TimeOfDay(24, 0, 0, 0),
            TimeOfDay(0, 60, 0, 0),
            TimeOfDay(0, 0, 61, 0),
            TimeOfDay(0, 0, 0, 1000000),
            UNKNOWN_TIME,
        ],
    )
    def test_rejects_time(self, time):
        with pytest.raises(CalendarRangeError):
            to_timestamp(CalendarDate(1, 1, 2024), time)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_timestamp(UNKNOWN_DATE, UNKNOWN_TIME)
