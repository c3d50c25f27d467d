"""Format-driven field scanner.

Every sentence decoder reduces to "read these fields as these types". The
scanner takes a compact format string with one directive per field and
returns the decoded values in order:

    >>> scan("$GPGLL,3751.65,S,14507.36,E", "tfdfd")
    ['GPGLL', FixedPoint(value=375165, scale=100), -1,
     FixedPoint(value=1450736, scale=100), 1]

Directives:
    c   single character (str, "" if empty)
    d   direction, N/E -> 1, S/W -> -1 (int, 0 if empty)
    f   fixed-point fraction (FixedPoint, scale 0 if empty)
    i   signed integer (int, 0 if empty)
    s   string, verbatim; a decimal width prefix ("6s") caps its length
    t   "$TTFFF" type token (str), only valid as the first directive
    D   DDMMYY date (CalendarDate, UNKNOWN_DATE if empty)
    T   HHMMSS.sss time (TimeOfDay, UNKNOWN_TIME if empty)
    _   skip the field, produces no value
    ;   all following directives are optional

When the format does not start with 't', the type token is skipped and the
first directive reads the first field after it. Fields end at ',' or at the
'*' checksum marker. Extra trailing fields are ignored; missing mandatory
fields are an error.
"""

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from navdecode.nmea.checksum import check_sentence, strip_terminator
from navdecode.nmea.classify import message_type
from navdecode.nmea.errors import FieldCountError, FieldDecodeError, SentenceTypeError
from navdecode.nmea.fields import (
    parse_char_field,
    parse_date_field,
    parse_direction_field,
    parse_fraction_field,
    parse_int_field,
    parse_string_field,
    parse_talker_field,
    parse_time_field,
)

__all__ = ["Directive", "parse_format", "scan", "scan_sentence"]

logger = logging.getLogger(__name__)

_TALKER = "t"
_STRING = "s"
_SKIP = "_"
_OPTIONAL_MARKER = ";"

_DECODERS: dict[str, Callable[[str], Any]] = {
    "c": parse_char_field,
    "d": parse_direction_field,
    "f": parse_fraction_field,
    "i": parse_int_field,
    _TALKER: parse_talker_field,
    "D": parse_date_field,
    "T": parse_time_field,
}

_DIRECTIVE_CODES = frozenset(_DECODERS) | {_STRING, _SKIP}


@dataclass(frozen=True)
class Directive:
    """One parsed format directive.

    Attributes:
        code: Directive character.
        optional: True when the directive follows ';'.
        width: Maximum length for 's' directives, None for no limit.
    """

    code: str
    optional: bool = False
    width: int | None = None

    def decode(self, field: str) -> Any:
        if self.code == _STRING:
            return parse_string_field(field, self.width)
        return _DECODERS[self.code](field)


@functools.lru_cache(maxsize=64)
def parse_format(format_string: str) -> tuple[Directive, ...]:
    """Parse a format string into directives.

    Raises:
        ValueError: For unknown directives, a width on anything but 's',
            or 't' anywhere but first.
    """
    directives: list[Directive] = []
    optional = False
    width = ""

    for position, code in enumerate(format_string):
        if code.isascii() and code.isdigit():
            width += code
            continue
        if width and code != _STRING:
            raise ValueError(f"width prefix before {code!r} at position {position}")
        if code == _OPTIONAL_MARKER:
            optional = True
            continue
        if code not in _DIRECTIVE_CODES:
            raise ValueError(f"unknown directive {code!r} at position {position}")
        if code == _TALKER and directives:
            raise ValueError("'t' must be the first directive")
        directives.append(Directive(code, optional, int(width) if width else None))
        width = ""

    if width:
        raise ValueError("format ends with a dangling width prefix")
    return tuple(directives)


def _split_fields(sentence: str) -> list[str]:
    content = strip_terminator(sentence).split("*", 1)[0]
    return content.split(",")


def scan(sentence: str, format_string: str) -> list[Any]:
    """Decode the fields of a sentence according to a format string.

    Args:
        sentence: One NMEA line. Its checksum is not verified here.
        format_string: Directive string, see the module docstring.

    Returns:
        One value per directive, skipped fields ('_') excluded.

    Raises:
        FieldCountError: A mandatory directive has no field left.
        FieldDecodeError: A field does not match its directive. Scanning
            stops at the first such field.
        ValueError: The format string itself is invalid.
    """
    directives = parse_format(format_string)
    fields = _split_fields(sentence)
    if not directives or directives[0].code != _TALKER:
        fields = fields[1:]

    values: list[Any] = []
    for index, directive in enumerate(directives):
        if index < len(fields):
            field = fields[index]
        elif directive.optional:
            field = ""
        else:
            mandatory = sum(1 for each in directives if not each.optional)
            raise FieldCountError(mandatory, len(fields))

        if directive.code == _SKIP:
            continue
        try:
            values.append(directive.decode(field))
        except ValueError as error:
            logger.debug("Field %d of %r rejected: %s", index, sentence, error)
            raise FieldDecodeError(index, directive.code, field, str(error)) from error

    return values


def scan_sentence(
    sentence: str,
    format_string: str,
    expected_type: str,
    strict: bool = False,
) -> list[Any]:
    """Validate a sentence, check its type and scan it.

    The format must start with 't'. The type token is checked against
    ``expected_type`` ("RMC", "PFLAU", ...) and dropped from the result,
    so the returned list starts with the first body field.

    Raises:
        NMEAError: Any validation, type or scan failure.
    """
    check_sentence(sentence, strict)
    token, *values = scan(sentence, format_string)
    if message_type(token) != expected_type:
        raise SentenceTypeError(f"expected a {expected_type} sentence, got {token}")
    return values
