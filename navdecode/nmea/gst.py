"""GST sentence parser.

GST (GNSS Pseudorange Error Statistics) reports the receiver's own accuracy
estimate for the current fix.

GST Sentence Format:
    $GPGST,024603.00,3.2,6.6,4.7,47.3,5.8,5.6,22.0*58
           |         |   |   |   |    |   |   |
           |         |   |   |   |    |   |   +-- Altitude error (1 sigma, m)
           |         |   |   |   |    |   +-- Longitude error (1 sigma, m)
           |         |   |   |   |    +-- Latitude error (1 sigma, m)
           |         |   |   |   +-- Error ellipse orientation (degrees)
           |         |   |   +-- Error ellipse semi-minor axis (m)
           |         |   +-- Error ellipse semi-major axis (m)
           |         +-- RMS of pseudorange residuals
           +-- UTC time
"""

import logging
from typing import Any

from navdecode.nmea.scanner import scan_sentence
from navdecode.nmea.types import GSTData

__all__ = ["parse_gst"]

logger = logging.getLogger(__name__)

_FORMAT = "tTfffffff"


def _build_gst_data(values: list[Any]) -> GSTData:
    return GSTData(*values)


def parse_gst(sentence: str, strict: bool = False) -> GSTData | None:
    """Parse a GST sentence; None if it is malformed or not GST."""
    try:
        values = scan_sentence(sentence, _FORMAT, "GST", strict)
        return _build_gst_data(values)
    except ValueError as error:
        logger.debug("Rejected GST sentence %r: %s", sentence, error)
        return None
