"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |     | |
           |         |        | |         | | |  |   |     | |     | +-- DGPS station ID (optional)
           |         |        | |         | | |  |   |     | |     +-- DGPS age (seconds)
           |         |        | |         | | |  |   |     | +-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

import logging
from typing import Any

from navdecode.nmea.fixed import apply_direction
from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import GGAData

__all__ = ["parse_gga"]

logger = logging.getLogger(__name__)

# The station ID is skipped; some receivers omit it entirely.
_FORMAT = "tTfdfdiiffcfcf;_"


def _build_gga_data(values: list[Any]) -> GGAData:
    """Construct a GGAData object from scanned fields.

    Note: fix_quality decodes to 0 (invalid) if the field is empty,
    since 0 already means "no fix" semantically.
    """
    (
        time,
        latitude,
        latitude_direction,
        longitude,
        longitude_direction,
        fix_quality,
        satellites_tracked,
        hdop,
        altitude,
        altitude_units,
        height,
        height_units,
        dgps_age,
    ) = values

    return GGAData(
        time=time,
        latitude=apply_direction(latitude, latitude_direction),
        longitude=apply_direction(longitude, longitude_direction),
        fix_quality=fix_quality,
        satellites_tracked=satellites_tracked,
        hdop=hdop,
        altitude=altitude,
        altitude_units=altitude_units,
        height=height,
        height_units=height_units,
        dgps_age=dgps_age,
    )


def parse_gga(sentence: str, strict: bool = False) -> GGAData | None:
    """Parse a GGA sentence into structured data.

    This is the main entry point for GGA parsing. It performs:
    1. Structure and checksum validation
    2. Message type validation (must be GGA, any talker)
    3. Field scanning into fixed-point values

    Args:
        sentence: Raw NMEA GGA sentence string
        strict: Require a checksum field

    Returns:
        GGAData object if parsing succeeds, or None if:
        - The sentence is malformed or its checksum is wrong
        - Sentence has too few fields
        - Message type is not GGA
        - Any field fails to decode

    Note:
        A returned GGAData with valid=False indicates a successfully parsed
        sentence that has no GPS fix (fix_quality=0). This is different from
        returning None, which indicates a malformed sentence.

    Example:
        >>> result = parse_gga("$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F")
        >>> result.latitude
        FixedPoint(value=4807038, scale=1000)
        >>> result.valid
        True
    """
    try:
        values = scan_sentence(sentence, _FORMAT, "GGA", strict)
        return _build_gga_data(values)
    except ValueError as error:
        logger.debug("Rejected GGA sentence %r: %s", sentence, error)
        return None
