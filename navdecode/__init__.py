"""Fixed-point NMEA 0183 decoding for GNSS receivers and FLARM transponders."""

from navdecode.nmea import (
    DecodedSentence,
    FixedPoint,
    NMEAError,
    SentenceKind,
    calculate_checksum,
    check_sentence,
    decode,
    is_sentence_valid,
    parse_gga,
    parse_gll,
    parse_gsa,
    parse_gst,
    parse_gsv,
    parse_laa,
    parse_lae,
    parse_lau,
    parse_rmc,
    parse_rmz,
    parse_vtg,
    parse_zda,
    rescale,
    scan,
    sentence_id,
    talker_id,
    to_coordinate,
    to_float,
    to_timestamp,
    validate_checksum,
)

__all__ = [
    "DecodedSentence",
    "FixedPoint",
    "NMEAError",
    "SentenceKind",
    "calculate_checksum",
    "check_sentence",
    "decode",
    "is_sentence_valid",
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
]
