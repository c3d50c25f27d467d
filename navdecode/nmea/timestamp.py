"""NMEA date and time values and their conversion to absolute timestamps.

NMEA carries UTC time as ``HHMMSS.sss`` and, in RMC, the date as ``DDMMYY``.
The conversion to seconds since the Unix epoch is done with a closed-form
proleptic Gregorian day count (no ``time.mktime``, no timezone database),
so results never depend on the host locale or TZ setting.

Two-digit years are windowed around 1980, the start of GPS time:
    00-79 -> 2000-2079
    80-99 -> 1980-1999
"""

from dataclasses import dataclass
from typing import NamedTuple

from navdecode.nmea.errors import CalendarRangeError

__all__ = [
    "UNKNOWN_DATE",
    "UNKNOWN_TIME",
    "CalendarDate",
    "TimeOfDay",
    "Timestamp",
    "days_from_civil",
    "to_timestamp",
    "window_year",
]

_CENTURY_PIVOT = 80
_FIRST_SUPPORTED_YEAR = 1970
_LAST_SUPPORTED_YEAR = 2099

_SECONDS_PER_DAY = 86400
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class CalendarDate:
    """A calendar date as decoded from a sentence.

    All fields are ``-1`` when the date field was empty (``UNKNOWN_DATE``).

    Attributes:
        day: Day of month, 1-31.
        month: Month, 1-12.
        year: Four-digit year.
    """

    day: int
    month: int
    year: int


@dataclass(frozen=True)
class TimeOfDay:
    """A UTC time of day as decoded from a sentence.

    All fields are ``-1`` when the time field was empty (``UNKNOWN_TIME``).
    ``seconds`` may be 60 during a leap second.
    """

    hours: int
    minutes: int
    seconds: int
    microseconds: int


UNKNOWN_DATE = CalendarDate(-1, -1, -1)
UNKNOWN_TIME = TimeOfDay(-1, -1, -1, -1)


class Timestamp(NamedTuple):
    """Seconds since 1970-01-01T00:00:00Z plus the sub-second part."""

    seconds: int
    microseconds: int


def window_year(year: int) -> int:
    """Expand a two-digit NMEA year to four digits; larger years pass through."""
    if 0 <= year < _CENTURY_PIVOT:
        return 2000 + year
    if _CENTURY_PIVOT <= year < 100:
        return 1900 + year
    return year


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and _is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Count days from 1970-01-01 to the given proleptic Gregorian date.

    Shifts the year to start in March so the leap day falls at the end,
    then counts whole 400-year eras, years within the era and days within
    the year.

    Example:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    month_index = month - 3 if month > 2 else month + 9
    day_of_year = (153 * month_index + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * 146097 + day_of_era - 719468


def _check_date(date: CalendarDate) -> int:
    """Validate a date and return its windowed year."""
    if date == UNKNOWN_DATE:
        raise CalendarRangeError("date is unknown")
    year = window_year(date.year)
    if not _FIRST_SUPPORTED_YEAR <= year <= _LAST_SUPPORTED_YEAR:
        raise CalendarRangeError(f"year {date.year} outside supported window")
    if not 1 <= date.month <= 12:
        raise CalendarRangeError(f"month {date.month} out of range")
    if not 1 <= date.day <= _days_in_month(year, date.month):
        raise CalendarRangeError(
            f"day {date.day} out of range for {year:04d}-{date.month:02d}"
        )
    return year


def _check_time(time: TimeOfDay) -> None:
    if time == UNKNOWN_TIME:
        raise CalendarRangeError("time is unknown")
    if not (
        0 <= time.hours <= 23
        and 0 <= time.minutes <= 59
        and 0 <= time.seconds <= 60
        and 0 <= time.microseconds <= 999999
    ):
        raise CalendarRangeError(f"time {time} out of range")


def to_timestamp(date: CalendarDate, time: TimeOfDay) -> Timestamp:
    """Convert a decoded date and time to seconds since the Unix epoch.

    Args:
        date: Date from an RMC ``D`` field or assembled from ZDA integers.
            Two-digit years are windowed with ``window_year``.
        time: UTC time of day.

    Returns:
        ``Timestamp(seconds, microseconds)``.

    Raises:
        CalendarRangeError: If either value is unknown, a component is out
            of its calendar range, or the year falls outside 1970-2099.

    Example:
        >>> to_timestamp(CalendarDate(13, 9, 1998), TimeOfDay(8, 18, 36, 0))
        Timestamp(seconds=905674716, microseconds=0)
    """
    year = _check_date(date)
    _check_time(time)
    days = days_from_civil(year, date.month, date.day)
    seconds = (
        days * _SECONDS_PER_DAY + time.hours * 3600 + time.minutes * 60 + time.seconds
    )
    return Timestamp(seconds, time.microseconds)
