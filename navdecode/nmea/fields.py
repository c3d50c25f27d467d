"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Every parser maps an empty field to a typed "not provided"
value (0, "", an unknown FixedPoint or an unknown date/time) and raises
``ValueError`` with a short reason for content it cannot decode.

All parsing is integer-exact; nothing here produces a float.
"""

import re

from navdecode.nmea.fixed import UNKNOWN, FixedPoint
from navdecode.nmea.timestamp import (
    UNKNOWN_DATE,
    UNKNOWN_TIME,
    CalendarDate,
    TimeOfDay,
    window_year,
)

__all__ = [
    "parse_char_field",
    "parse_date_field",
    "parse_direction_field",
    "parse_fraction_field",
    "parse_int_field",
    "parse_string_field",
    "parse_talker_field",
    "parse_time_field",
]

_INT32_MAX = 2**31 - 1
_MAX_SCALE = 10**9
_DIGITS = "0123456789"
_MICROSECOND_DIGITS = 6

_DIRECTION_SIGNS = {"N": 1, "E": 1, "S": -1, "W": -1}

_INTEGER_PATTERN = re.compile(r" *[+-]?[0-9]+")
_DATE_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")
_TIME_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})(?:\.([0-9]*))?")


def parse_char_field(value: str) -> str:
    """Parse a single-character field such as a status or unit letter.

    Example:
        >>> parse_char_field("A")
        'A'
        >>> parse_char_field("")
        ''
    """
    if len(value) > 1:
        raise ValueError("expected a single character")
    return value


def parse_direction_field(value: str) -> int:
    """Parse a hemisphere letter into a sign: N/E -> 1, S/W -> -1, empty -> 0."""
    if not value:
        return 0
    try:
        return _DIRECTION_SIGNS[value]
    except KeyError:
        raise ValueError("expected one of N, E, S, W") from None


def parse_fraction_field(value: str) -> FixedPoint:
    """Parse a decimal field into a fixed-point number without rounding.

    Accepts optional leading spaces (some receivers pad fields), an optional
    sign, digits, and an optional decimal point followed by more digits.
    The scale is 10 to the number of digits after the point, so the
    transmitted precision is preserved exactly.

    Digits after the point that would push the value or the scale past
    32 bits are dropped; an integer part that overflows is an error.

    Args:
        value: String value from an NMEA field

    Returns:
        FixedPoint value, or ``UNKNOWN`` (scale 0) if the field is empty

    Example:
        >>> parse_fraction_field("4807.038")
        FixedPoint(value=4807038, scale=1000)
        >>> parse_fraction_field("-12")
        FixedPoint(value=-12, scale=1)
        >>> parse_fraction_field("")
        FixedPoint(value=0, scale=0)
    """
    sign = 0
    number: int | None = None
    scale = 0

    for character in value:
        if character in "+-" and not sign and number is None and not scale:
            sign = 1 if character == "+" else -1
        elif character in _DIGITS:
            if scale >= _MAX_SCALE:
                break
            digit = ord(character) - ord("0")
            if number is None:
                number = 0
            if number > (_INT32_MAX - digit) // 10:
                if scale:
                    break
                raise ValueError("integer part overflows 32 bits")
            number = number * 10 + digit
            if scale:
                scale *= 10
        elif character == "." and not scale:
            scale = 1
        elif character == " ":
            if sign or number is not None or scale:
                raise ValueError("space inside number")
        else:
            raise ValueError(f"unexpected character {character!r}")

    if number is None:
        if sign or scale:
            raise ValueError("sign or decimal point without digits")
        return UNKNOWN

    if sign:
        number *= sign
    return FixedPoint(number, scale or 1)


def parse_int_field(value: str) -> int:
    """Parse a signed decimal integer, returning 0 if the field is empty.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        0
    """
    if not value:
        return 0
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError("expected an integer")
    return int(value)


def parse_string_field(value: str, max_length: int | None = None) -> str:
    """Return the field verbatim, enforcing an optional length limit."""
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"longer than {max_length} characters")
    return value


def parse_talker_field(value: str) -> str:
    """Parse the leading ``$TTFFF`` token into its five type characters.

    Standard tokens are a two-letter talker plus a three-letter sentence
    type ("GPRMC"); proprietary tokens are 'P' plus a vendor code and type
    ("PFLAU"). Longer tokens are cut to five characters.

    Example:
        >>> parse_talker_field("$GPRMC")
        'GPRMC'
    """
    if not value.startswith("$"):
        raise ValueError("type token must start with '$'")
    token = value[1:]
    if len(token) < 5:
        raise ValueError("type token shorter than 5 characters")
    if not (token.isascii() and token.isalnum()):
        raise ValueError("type token is not alphanumeric")
    return token[:5]


def parse_date_field(value: str) -> CalendarDate:
    """Parse a ``DDMMYY`` date, windowing the year to four digits.

    Example:
        >>> parse_date_field("130998")
        CalendarDate(day=13, month=9, year=1998)
    """
    if not value:
        return UNKNOWN_DATE
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError("expected six digits DDMMYY")
    day, month, year = (int(group) for group in match.groups())
    return CalendarDate(day, month, window_year(year))


def parse_time_field(value: str) -> TimeOfDay:
    """Parse an ``HHMMSS[.sss]`` UTC time.

    Fractional seconds keep up to six digits as microseconds; any further
    digits are ignored.

    Example:
        >>> parse_time_field("123519.25")
        TimeOfDay(hours=12, minutes=35, seconds=19, microseconds=250000)
    """
    if not value:
        return UNKNOWN_TIME
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError("expected HHMMSS with optional fraction")

    hours, minutes, seconds = (int(group) for group in match.groups()[:3])
    if hours > 23 or minutes > 59 or seconds > 60:
        raise ValueError("time component out of range")

    fraction = (match.group(4) or "")[:_MICROSECOND_DIGITS]
    microseconds = int(fraction.ljust(_MICROSECOND_DIGITS, "0"))
    return TimeOfDay(hours, minutes, seconds, microseconds)
