"""NMEA 0183 sentence validation, classification and fixed-point decoding."""

from navdecode.nmea.checksum import (
    MAX_SENTENCE_LENGTH,
    calculate_checksum,
    check_sentence,
    is_sentence_valid,
    validate_checksum,
)
from navdecode.nmea.classify import sentence_id, talker_id
from navdecode.nmea.decoder import DecodedSentence, decode
from navdecode.nmea.errors import (
    CalendarRangeError,
    ChecksumMismatchError,
    ChecksumMissingError,
    FieldCountError,
    FieldDecodeError,
    MalformedSentenceError,
    NMEAError,
    ScanError,
    SentenceTypeError,
)
from navdecode.nmea.fixed import (
    UNKNOWN,
    FixedPoint,
    apply_direction,
    rescale,
    to_coordinate,
    to_float,
)
from navdecode.nmea.flarm import parse_laa, parse_lae, parse_lau
from navdecode.nmea.garmin import parse_rmz
from navdecode.nmea.gga import parse_gga
from navdecode.nmea.gll import parse_gll
from navdecode.nmea.gsa import parse_gsa
from navdecode.nmea.gst import parse_gst
from navdecode.nmea.gsv import parse_gsv
from navdecode.nmea.rmc import parse_rmc
from navdecode.nmea.scanner import parse_format, scan
from navdecode.nmea.timestamp import (
    UNKNOWN_DATE,
    UNKNOWN_TIME,
    CalendarDate,
    TimeOfDay,
    Timestamp,
    days_from_civil,
    to_timestamp,
    window_year,
)
from navdecode.nmea.types import (
    FaaMode,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    GllStatus,
    GsaFixType,
    GsaMode,
    LAAData,
    LAEData,
    LAUData,
    RMCData,
    RMZData,
    SatelliteInfo,
    SentenceKind,
    VTGData,
    ZDAData,
)
from navdecode.nmea.vtg import parse_vtg
from navdecode.nmea.zda import parse_zda

__all__ = [
    "MAX_SENTENCE_LENGTH",
    "UNKNOWN",
    "UNKNOWN_DATE",
    "UNKNOWN_TIME",
    "CalendarDate",
    "CalendarRangeError",
    "ChecksumMismatchError",
    "ChecksumMissingError",
    "DecodedSentence",
    "FaaMode",
    "FieldCountError",
    "FieldDecodeError",
    "FixedPoint",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVData",
    "GllStatus",
    "GsaFixType",
    "GsaMode",
    "LAAData",
    "LAEData",
    "LAUData",
    "MalformedSentenceError",
    "NMEAError",
    "RMCData",
    "RMZData",
    "SatelliteInfo",
    "ScanError",
    "SentenceKind",
    "SentenceTypeError",
    "TimeOfDay",
    "Timestamp",
    "VTGData",
    "ZDAData",
    "apply_direction",
    "calculate_checksum",
    "check_sentence",
    "days_from_civil",
    "decode",
    "is_sentence_valid",
    "parse_format",
    "parse_gga",
    "parse_gll",
    "parse_gsa",
    "parse_gst",
    "parse_gsv",
    "parse_laa",
    "parse_lae",
    "parse_lau",
    "parse_rmc",
    "parse_rmz",
    "parse_vtg",
    "parse_zda",
    "rescale",
    "scan",
    "sentence_id",
    "talker_id",
    "to_coordinate",
    "to_float",
    "to_timestamp",
    "validate_checksum",
    "window_year",
]
