"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
current solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                       |   |   |
           | | |                       |   |   +-- VDOP
           | | |                       |   +-- HDOP
           | | |                       +-- PDOP
           | | +-- PRNs of up to 12 satellites used in the fix
           | +-- Fix type (1 = none, 2 = 2D, 3 = 3D)
           +-- Mode (A = automatic 2D/3D, M = forced)
"""

import logging
from typing import Any

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import GSAData, GsaFixType, GsaMode

__all__ = ["parse_gsa"]

logger = logging.getLogger(__name__)

_SATELLITE_SLOTS = 12
_FORMAT = "tci" + "i" * _SATELLITE_SLOTS + "fff"


def _build_gsa_data(values: list[Any]) -> GSAData:
    mode, fix_type = values[:2]
    sats = tuple(values[2 : 2 + _SATELLITE_SLOTS])
    pdop, hdop, vdop = values[2 + _SATELLITE_SLOTS :]

    return GSAData(
        mode=GsaMode(mode) if mode else None,
        fix_type=GsaFixType(fix_type) if fix_type else None,
        sats=sats,
        pdop=pdop,
        hdop=hdop,
        vdop=vdop,
    )


def parse_gsa(sentence: str, strict: bool = False) -> GSAData | None:
    """Parse a GSA sentence; None if it is malformed or not GSA."""
    try:
        values = scan_sentence(sentence, _FORMAT, "GSA", strict)
        return _build_gsa_data(values)
    except ValueError as error:
        logger.debug("Rejected GSA sentence %r: %s", sentence, error)
        return None
