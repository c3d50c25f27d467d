"""Classify a sentence and run the matching parser."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from navdecode.nmea.classify import sentence_id, talker_id
from navdecode.nmea.flarm import parse_laa, parse_lae, parse_lau
from navdecode.nmea.garmin import parse_rmz
from navdecode.nmea.gga import parse_gga
from navdecode.nmea.gll import parse_gll
from navdecode.nmea.gsa import parse_gsa
from navdecode.nmea.gst import parse_gst
from navdecode.nmea.gsv import parse_gsv
from navdecode.nmea.rmc import parse_rmc
from navdecode.nmea.types import SentenceKind
from navdecode.nmea.vtg import parse_vtg
from navdecode.nmea.zda import parse_zda

__all__ = ["PARSERS", "DecodedSentence", "decode"]

# Every kind must appear here; kinds without a record type map to None.
PARSERS: dict[SentenceKind, Callable[[str, bool], Any] | None] = {
    SentenceKind.INVALID: None,
    SentenceKind.UNKNOWN: None,
    SentenceKind.RMC: parse_rmc,
    SentenceKind.GGA: parse_gga,
    SentenceKind.GSA: parse_gsa,
    SentenceKind.GLL: parse_gll,
    SentenceKind.GST: parse_gst,
    SentenceKind.GSV: parse_gsv,
    SentenceKind.VTG: parse_vtg,
    SentenceKind.ZDA: parse_zda,
    SentenceKind.FLARM_LAU: parse_lau,
    SentenceKind.FLARM_LAA: parse_laa,
    SentenceKind.FLARM_LAE: parse_lae,
    SentenceKind.GARMIN_RMZ: parse_rmz,
    SentenceKind.FLARM_LAR: None,
    SentenceKind.FLARM_LAF: None,
}


@dataclass
class DecodedSentence:
    """A classified sentence and, where one exists, its decoded record.

    Attributes:
        kind: Sentence classification; never INVALID.
        talker: Talker ID ("GP", "GN", "FLA", ...).
        record: Parsed record, or None for UNKNOWN, for kinds without a
            record type (PFLAR, PFLAF), and when the fields fail to decode.
    """

    kind: SentenceKind
    talker: str | None
    record: Any = None


def decode(sentence: str, strict: bool = False) -> DecodedSentence | None:
    """Classify one line and decode it.

    Returns:
        DecodedSentence, or None if the line is structurally invalid.

    Example:
        >>> decoded = decode("$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62")
        >>> decoded.kind, decoded.talker
        (<SentenceKind.RMC: 1>, 'GP')
    """
    kind = sentence_id(sentence, strict)
    if kind is SentenceKind.INVALID:
        return None

    parser = PARSERS[kind]
    record = parser(sentence, strict) if parser is not None else None
    return DecodedSentence(kind=kind, talker=talker_id(sentence), record=record)
