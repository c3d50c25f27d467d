"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude) is the minimal position
sentence: coordinates, the time they refer to, and a status.

GLL Sentence Format:
    $GPGLL,3723.2475,N,12158.3416,W,161229.487,A,A*41
           |         | |          | |          | |
           |         | |          | |          | +-- FAA mode (NMEA 2.3+)
           |         | |          | |          +-- Status (A = valid, V = not valid)
           |         | |          | +-- UTC time
           |         | +----------+-- Longitude + E/W
           +---------+-- Latitude + N/S
"""

import logging
from typing import Any

from navdecode.nmea.fixed import apply_direction
from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import FaaMode, GLLData, GllStatus

__all__ = ["parse_gll"]

logger = logging.getLogger(__name__)

_FORMAT = "tfdfdTc;c"


def _build_gll_data(values: list[Any]) -> GLLData:
    (
        latitude,
        latitude_direction,
        longitude,
        longitude_direction,
        time,
        status,
        mode,
    ) = values

    return GLLData(
        latitude=apply_direction(latitude, latitude_direction),
        longitude=apply_direction(longitude, longitude_direction),
        time=time,
        status=GllStatus(status) if status else None,
        faa_mode=FaaMode(mode) if mode else None,
    )


def parse_gll(sentence: str, strict: bool = False) -> GLLData | None:
    """Parse a GLL sentence; None if it is malformed or not GLL."""
    try:
        values = scan_sentence(sentence, _FORMAT, "GLL", strict)
        return _build_gll_data(values)
    except ValueError as error:
        logger.debug("Rejected GLL sentence %r: %s", sentence, error)
        return None
