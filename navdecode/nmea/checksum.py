"""NMEA sentence structure and checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62
    ^                       checksum content                       ^^
    start                                                 checksum (0x62 = 98)

The checksum field is optional in the protocol. Strict mode rejects sentences
that omit it; lenient mode accepts them as long as the rest of the line is
well formed.
"""

import string

from navdecode.nmea.errors import (
    ChecksumMismatchError,
    ChecksumMissingError,
    MalformedSentenceError,
    NMEAError,
)

__all__ = [
    "MAX_SENTENCE_LENGTH",
    "calculate_checksum",
    "check_sentence",
    "is_sentence_valid",
    "strip_terminator",
    "validate_checksum",
]

# Characters between '$' and the end of the checksum, terminator excluded.
MAX_SENTENCE_LENGTH = 80

_LINE_TERMINATOR = "\r\n"
_PRINTABLE = frozenset(chr(code) for code in range(0x20, 0x7F))
_HEX_DIGITS = frozenset(string.hexdigits)


def strip_terminator(sentence: str) -> str:
    """Remove a trailing CR/LF; framing is the transport's job, not ours."""
    return sentence.rstrip(_LINE_TERMINATOR)


def calculate_checksum(sentence: str) -> int:
    """Calculate the XOR checksum of a sentence.

    XORs every character after a leading '$' up to the first '*', or up to
    the end of the line when there is no checksum field. Nothing is
    validated; use ``check_sentence`` for that.

    Args:
        sentence: NMEA sentence, with or without '$', '*HH' and CR/LF.

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62")
        98
    """
    content = strip_terminator(sentence)
    if content.startswith("$"):
        content = content[1:]
    content = content.split("*", 1)[0]

    result = 0
    for character in content:
        result ^= ord(character)
    return result & 0xFF


def _check_checksum_field(content: str, provided: str) -> None:
    if len(provided) != 2 or not _HEX_DIGITS.issuperset(provided):
        raise MalformedSentenceError(f"malformed checksum field {provided!r}")

    calculated = calculate_checksum(content)
    transmitted = int(provided, 16)
    if calculated != transmitted:
        raise ChecksumMismatchError(calculated, transmitted)


def check_sentence(sentence: str, strict: bool = False) -> None:
    """Validate sentence structure and, when present, its checksum.

    Checks that:
    1. The line starts with '$'
    2. It is at most ``MAX_SENTENCE_LENGTH`` characters (CR/LF excluded)
    3. It contains only printable ASCII
    4. A '*' is followed by exactly two hex digits matching the computed
       checksum (either case)
    5. In strict mode, the checksum field is present

    Args:
        sentence: Raw line, optionally terminated by CR/LF.
        strict: Require a checksum field.

    Raises:
        MalformedSentenceError: Structural problems (1-3, bad checksum field).
        ChecksumMismatchError: The checksum does not match.
        ChecksumMissingError: Strict mode and no checksum field.
    """
    line = strip_terminator(sentence)

    if not line.startswith("$"):
        raise MalformedSentenceError("sentence does not start with '$'")
    if len(line) > MAX_SENTENCE_LENGTH:
        raise MalformedSentenceError(
            f"sentence is {len(line)} characters long, limit is {MAX_SENTENCE_LENGTH}"
        )
    if not _PRINTABLE.issuperset(line):
        raise MalformedSentenceError("sentence contains non-printable characters")

    content, marker, provided = line.partition("*")
    if marker:
        _check_checksum_field(content, provided)
    elif strict:
        raise ChecksumMissingError("strict mode requires a checksum field")


def is_sentence_valid(sentence: str, strict: bool = False) -> bool:
    """Return True if ``check_sentence`` accepts the line.

    Example:
        >>> is_sentence_valid("$GPRMC,,V,,,,,,,,,,N")
        True
        >>> is_sentence_valid("$GPRMC,,V,,,,,,,,,,N", strict=True)
        False
    """
    try:
        check_sentence(sentence, strict)
    except NMEAError:
        return False
    return True


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Shorthand for strict validation: the checksum must be present and correct.

    Example:
        >>> validate_checksum("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        True
        >>> validate_checksum("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF")
        False
    """
    return is_sentence_valid(sentence, strict=True)
