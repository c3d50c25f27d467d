"""GSV sentence parser.

GSV (GNSS Satellites in View) describes up to four satellites per sentence;
a full sky view spans several sentences numbered 1..total.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |  |  |   |  +-- next satellite ...
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | +-- Total satellites in view
           | +-- Message number
           +-- Total number of messages
"""

import logging
from typing import Any

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import GSVData, SatelliteInfo

__all__ = ["parse_gsv"]

logger = logging.getLogger(__name__)

_SATELLITES_PER_MESSAGE = 4
_FIELDS_PER_SATELLITE = 4
_FORMAT = "tiii;" + "i" * (_SATELLITES_PER_MESSAGE * _FIELDS_PER_SATELLITE)


def _build_satellites(values: list[Any]) -> list[SatelliteInfo]:
    """Group satellite fields; slots without a PRN (absent or empty) are dropped."""
    satellites = []
    for start in range(0, len(values), _FIELDS_PER_SATELLITE):
        satellite = SatelliteInfo(*values[start : start + _FIELDS_PER_SATELLITE])
        if satellite.nr:
            satellites.append(satellite)
    return satellites


def _build_gsv_data(values: list[Any]) -> GSVData:
    total_msgs, msg_nr, total_sats = values[:3]
    return GSVData(
        total_msgs=total_msgs,
        msg_nr=msg_nr,
        total_sats=total_sats,
        sats=_build_satellites(values[3:]),
    )


def parse_gsv(sentence: str, strict: bool = False) -> GSVData | None:
    """Parse a GSV sentence; None if it is malformed or not GSV."""
    try:
        values = scan_sentence(sentence, _FORMAT, "GSV", strict)
        return _build_gsv_data(values)
    except ValueError as error:
        logger.debug("Rejected GSV sentence %r: %s", sentence, error)
        return None
