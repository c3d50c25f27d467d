"""Talker and sentence type classification.

Standard sentences start with a two-letter talker ID followed by a
three-letter sentence type:

    $GPRMC,...   talker "GP" (GPS), type "RMC"
    $GNGGA,...   talker "GN" (multi-GNSS), type "GGA"

Proprietary sentences replace the talker with 'P' plus a three-letter
vendor code, and the vendor code acts as the talker:

    $PFLAU,...   talker "FLA" (FLARM), type "PFLAU"
    $PGRMZ,...   talker "GRM" (Garmin), type "PGRMZ"
"""

import logging

from navdecode.nmea.checksum import check_sentence, strip_terminator
from navdecode.nmea.fields import parse_talker_field
from navdecode.nmea.types import SentenceKind

__all__ = ["message_type", "sentence_id", "talker_id", "type_token"]

logger = logging.getLogger(__name__)

_PROPRIETARY_PREFIX = "P"

_STANDARD_KINDS = {
    "RMC": SentenceKind.RMC,
    "GGA": SentenceKind.GGA,
    "GSA": SentenceKind.GSA,
    "GLL": SentenceKind.GLL,
    "GST": SentenceKind.GST,
    "GSV": SentenceKind.GSV,
    "VTG": SentenceKind.VTG,
    "ZDA": SentenceKind.ZDA,
}

_PROPRIETARY_KINDS = {
    "PFLAU": SentenceKind.FLARM_LAU,
    "PFLAA": SentenceKind.FLARM_LAA,
    "PFLAE": SentenceKind.FLARM_LAE,
    "PFLAR": SentenceKind.FLARM_LAR,
    "PFLAF": SentenceKind.FLARM_LAF,
    "PGRMZ": SentenceKind.GARMIN_RMZ,
}


def type_token(sentence: str) -> str:
    """Return the five-character type token, e.g. "GPRMC" or "PFLAU".

    Raises:
        ValueError: If the line does not start with a ``$`` token of at
            least five alphanumeric characters.
    """
    first_field = strip_terminator(sentence).split("*", 1)[0].split(",", 1)[0]
    return parse_talker_field(first_field)


def message_type(token: str) -> str:
    """Sentence type of a token: "RMC" for "GPRMC", "PFLAU" for "PFLAU"."""
    if token.startswith(_PROPRIETARY_PREFIX):
        return token
    return token[2:]


def talker_id(sentence: str) -> str | None:
    """Extract the talker ID from a sentence.

    Returns:
        Two-letter talker for standard sentences, three-letter vendor code
        for proprietary ones, or None if the type token is malformed.

    Example:
        >>> talker_id("$GPRMC,081836,A,...")
        'GP'
        >>> talker_id("$PFLAU,3,1,2,1,0,,0,,")
        'FLA'
    """
    try:
        token = type_token(sentence)
    except ValueError:
        return None
    if token.startswith(_PROPRIETARY_PREFIX):
        return token[1:4]
    return token[:2]


def sentence_id(sentence: str, strict: bool = False) -> SentenceKind:
    """Classify a sentence.

    Returns:
        ``SentenceKind.INVALID`` if the line fails ``check_sentence`` or has
        a malformed type token, ``SentenceKind.UNKNOWN`` for well-formed
        lines of a type we do not know, and the matching kind otherwise.
    """
    try:
        check_sentence(sentence, strict)
        token = type_token(sentence)
    except ValueError as error:
        logger.debug("Invalid sentence %r: %s", sentence, error)
        return SentenceKind.INVALID

    if token.startswith(_PROPRIETARY_PREFIX):
        return _PROPRIETARY_KINDS.get(token, SentenceKind.UNKNOWN)
    return _STANDARD_KINDS.get(message_type(token), SentenceKind.UNKNOWN)
