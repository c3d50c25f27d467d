"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) is the one sentence that carries
both the date and a position fix, which makes it the usual source for
absolute timestamps.

RMC Sentence Format:
    $GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62
           |      | |       | |        | |     |     |      |     |
           |      | |       | |        | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |       | |        | |     |     +-- Date (DDMMYY)
           |      | |       | |        | |     +-- Course over ground (degrees true)
           |      | |       | |        | +-- Speed over ground (knots)
           |      | |       | +--------+-- Longitude + E/W
           |      | +-------+-- Latitude + N/S
           |      +-- Status (A = valid, V = navigation receiver warning)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3+ receivers append an FAA mode indicator after the variation.
"""

import logging
from typing import Any

from navdecode.nmea.fixed import apply_direction
from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import FaaMode, RMCData

__all__ = ["parse_rmc"]

logger = logging.getLogger(__name__)

_FORMAT = "tTcfdfdffDfd;c"
_STATUS_VALID = "A"


def _build_rmc_data(values: list[Any]) -> RMCData:
    (
        time,
        status,
        latitude,
        latitude_direction,
        longitude,
        longitude_direction,
        speed,
        course,
        date,
        variation,
        variation_direction,
        mode,
    ) = values

    return RMCData(
        time=time,
        valid=status == _STATUS_VALID,
        latitude=apply_direction(latitude, latitude_direction),
        longitude=apply_direction(longitude, longitude_direction),
        speed=speed,
        course=course,
        date=date,
        variation=apply_direction(variation, variation_direction),
        faa_mode=FaaMode(mode) if mode else None,
    )


def parse_rmc(sentence: str, strict: bool = False) -> RMCData | None:
    """Parse an RMC sentence into structured data.

    Args:
        sentence: Raw NMEA RMC sentence string
        strict: Require a checksum field

    Returns:
        RMCData object if parsing succeeds, or None if the sentence is
        malformed, fails its checksum, is not RMC, or has undecodable fields.

    Note:
        A returned RMCData with valid=False is a well-formed sentence from a
        receiver without a fix. Its coordinates are usually unknown
        (scale 0).
    """
    try:
        values = scan_sentence(sentence, _FORMAT, "RMC", strict)
        return _build_rmc_data(values)
    except ValueError as error:
        logger.debug("Rejected RMC sentence %r: %s", sentence, error)
        return None
