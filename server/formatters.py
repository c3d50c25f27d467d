"""JSON formatting utilities for decoded sentences."""

import dataclasses
import enum
import json
from typing import Any

from navdecode.nmea import DecodedSentence, SentenceKind

__all__ = ["format_decoded_message", "format_rejected_message"]


def _encode_default(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def _record_to_dict(record: Any) -> dict[str, Any] | None:
    """Fixed-point values become {"value": ..., "scale": ...} objects."""
    if record is None:
        return None
    return dataclasses.asdict(record)


def format_decoded_message(decoded: DecodedSentence) -> str:
    """Serialize a decoded sentence into a JSON string."""
    return json.dumps(
        {
            "type": "nmea",
            "kind": decoded.kind.name.lower(),
            "talker": decoded.talker,
            "record": _record_to_dict(decoded.record),
        },
        default=_encode_default,
    )


def format_rejected_message(detail: str) -> str:
    """Serialize a rejected line into a JSON string."""
    return json.dumps(
        {
            "type": "nmea",
            "kind": SentenceKind.INVALID.name.lower(),
            "talker": None,
            "record": None,
            "detail": detail,
        }
    )
