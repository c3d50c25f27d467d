"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

import logging
from typing import Any

from navdecode.nmea.errors import FieldDecodeError
from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import FaaMode, VTGData

__all__ = ["parse_vtg"]

logger = logging.getLogger(__name__)

_FORMAT = "tfcfcfcfc;c"

# Unit letter expected after each value; an empty unit is tolerated.
_UNITS = (("true track", "T"), ("magnetic track", "M"), ("knots", "N"), ("kph", "K"))


def _check_units(units: tuple[str, ...]) -> None:
    """Values are only meaningful with the correct unit letters."""
    for position, (unit, (name, expected)) in enumerate(zip(units, _UNITS)):
        if unit and unit != expected:
            raise FieldDecodeError(
                2 * position + 2, "c", unit, f"expected {expected!r} unit for {name}"
            )


def _build_vtg_data(values: list[Any]) -> VTGData:
    (
        true_track,
        true_unit,
        magnetic_track,
        magnetic_unit,
        speed_knots,
        knots_unit,
        speed_kph,
        kph_unit,
        mode,
    ) = values
    _check_units((true_unit, magnetic_unit, knots_unit, kph_unit))

    return VTGData(
        true_track_degrees=true_track,
        magnetic_track_degrees=magnetic_track,
        speed_knots=speed_knots,
        speed_kph=speed_kph,
        faa_mode=FaaMode(mode) if mode else None,
    )


def parse_vtg(sentence: str, strict: bool = False) -> VTGData | None:
    """Parse a VTG sentence into structured data.

    Args:
        sentence: Raw NMEA VTG sentence string
        strict: Require a checksum field

    Returns:
        VTGData object if parsing succeeds, or None if the sentence is
        malformed, fails its checksum, is not VTG, carries the wrong unit
        letters, or has an unknown mode indicator.

    Note:
        A returned VTGData with valid=False indicates a successfully parsed
        sentence where the mode is 'N' (not valid) or missing.

    Example:
        >>> result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        >>> result.speed_kph
        FixedPoint(value=102, scale=10)
        >>> result.valid
        True
    """
    try:
        values = scan_sentence(sentence, _FORMAT, "VTG", strict)
        return _build_vtg_data(values)
    except ValueError as error:
        logger.debug("Rejected VTG sentence %r: %s", sentence, error)
        return None
