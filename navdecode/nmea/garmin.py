"""Garmin proprietary sentence parser.

PGRMZ Sentence Format:
    $PGRMZ,246,f,3*1B
           |   | |
           |   | +-- Position fix dimension (2 = 2D, 3 = 3D)
           |   +-- Unit ('f' = feet)
           +-- Barometric altitude
"""

import logging

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import RMZData

__all__ = ["parse_rmz"]

logger = logging.getLogger(__name__)

_FORMAT = "tici"


def parse_rmz(sentence: str, strict: bool = False) -> RMZData | None:
    """Parse a PGRMZ barometric altitude sentence; None if malformed."""
    try:
        values = scan_sentence(sentence, _FORMAT, "PGRMZ", strict)
        return RMZData(*values)
    except ValueError as error:
        logger.debug("Rejected PGRMZ sentence %r: %s", sentence, error)
        return None
