"""FLARM proprietary sentence parsers.

FLARM collision-avoidance units emit proprietary sentences with the "PFLA"
prefix alongside standard GPS output:

    PFLAU   heartbeat, status and the most relevant alarm
    PFLAA   one sentence per proximate aircraft
    PFLAE   self-test result and error codes

PFLAU Sentence Format:
    $PFLAU,3,1,2,1,1,-62,2,-54,355,DD8F12*07
           | | | | | |   | |   |   |
           | | | | | |   | |   |   +-- Target ID (6 hex digits, protocol 4+)
           | | | | | |   | |   +-- Relative distance (m)
           | | | | | |   | +-- Relative vertical (m)
           | | | | | |   +-- Alarm type (2 hex digits)
           | | | | | +-- Relative bearing (degrees, -180..180)
           | | | | +-- Alarm level (0-3)
           | | | +-- Power status
           | | +-- GPS status (0 none, 1 on ground, 2 airborne)
           | +-- TX status
           +-- Number of devices received (0-99)

PFLAA Sentence Format:
    $PFLAA,0,-1234,1234,220,2,DD8F12,180,,30,-1.4,1*19
           | |     |    |   | |      |   | |  |    |
           | |     |    |   | |      |   | |  |    +-- Aircraft type (hex digit)
           | |     |    |   | |      |   | |  +-- Climb rate (m/s)
           | |     |    |   | |      |   | +-- Ground speed (m/s)
           | |     |    |   | |      |   +-- Turn rate (currently empty)
           | |     |    |   | |      +-- Track (degrees)
           | |     |    |   | +-- ID (6 hex digits)
           | |     |    |   +-- ID type
           | |     |    +-- Relative vertical (m)
           | |     +-- Relative east (m)
           | +-- Relative north (m)
           +-- Alarm level

Newer protocol versions append NoTrack, Source and RSSI to PFLAA.
"""

import logging
from typing import Any

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import LAAData, LAEData, LAUData

__all__ = ["parse_laa", "parse_lae", "parse_lau"]

logger = logging.getLogger(__name__)

_LAU_FORMAT = "tiiiiii2sii;6s"
_LAA_FORMAT = "tiiiii6siiifc;iii"
_LAE_FORMAT = "tci3s;40s"


def _build_laa_data(values: list[Any]) -> LAAData:
    *leading, climb_rate, aircraft_type, no_track, source, rssi = values
    return LAAData(
        *leading,
        climb_rate=climb_rate,
        aircraft_type=int(aircraft_type, 16) if aircraft_type else 0,
        no_track=no_track,
        source=source,
        rssi=rssi,
    )


def parse_lau(sentence: str, strict: bool = False) -> LAUData | None:
    """Parse a PFLAU heartbeat sentence.

    Relative bearing, vertical and distance are empty (decoded as 0) when
    there is no alarm target.

    Returns:
        LAUData, or None if the sentence is malformed or not PFLAU.
    """
    try:
        values = scan_sentence(sentence, _LAU_FORMAT, "PFLAU", strict)
        return LAUData(*values)
    except ValueError as error:
        logger.debug("Rejected PFLAU sentence %r: %s", sentence, error)
        return None


def parse_laa(sentence: str, strict: bool = False) -> LAAData | None:
    """Parse a PFLAA traffic sentence.

    Returns:
        LAAData, or None if the sentence is malformed or not PFLAA.
    """
    try:
        values = scan_sentence(sentence, _LAA_FORMAT, "PFLAA", strict)
        return _build_laa_data(values)
    except ValueError as error:
        logger.debug("Rejected PFLAA sentence %r: %s", sentence, error)
        return None


def parse_lae(sentence: str, strict: bool = False) -> LAEData | None:
    """Parse a PFLAE self-test sentence; None if malformed or not PFLAE."""
    try:
        values = scan_sentence(sentence, _LAE_FORMAT, "PFLAE", strict)
        return LAEData(*values)
    except ValueError as error:
        logger.debug("Rejected PFLAE sentence %r: %s", sentence, error)
        return None
