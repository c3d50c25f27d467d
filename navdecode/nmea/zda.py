"""ZDA sentence parser.

ZDA (Time and Date) carries the full UTC date with a four-digit year, plus
the local time zone offset.

ZDA Sentence Format:
    $GPZDA,160012.71,11,03,2004,-1,00*7D
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         |  |  +-- Year (four digits)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time
"""

import logging
from typing import Any

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.timestamp import UNKNOWN_DATE, CalendarDate
from navdecode.nmea.types import ZDAData

__all__ = ["parse_zda"]

logger = logging.getLogger(__name__)

_FORMAT = "tTiiiii"


def _build_zda_data(values: list[Any]) -> ZDAData:
    time, day, month, year, hour_offset, minute_offset = values
    date = CalendarDate(day, month, year) if day or month or year else UNKNOWN_DATE
    return ZDAData(
        time=time,
        date=date,
        hour_offset=hour_offset,
        minute_offset=minute_offset,
    )


def parse_zda(sentence: str, strict: bool = False) -> ZDAData | None:
    """Parse a ZDA sentence; None if it is malformed or not ZDA."""
    try:
        values = scan_sentence(sentence, _FORMAT, "ZDA", strict)
        return _build_zda_data(values)
    except ValueError as error:
        logger.debug("Rejected ZDA sentence %r: %s", sentence, error)
        return None
