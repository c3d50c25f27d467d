"""Exceptions raised while validating and decoding NMEA sentences.

Every exception derives from ``ValueError`` so callers that already guard
parsing with ``except ValueError`` keep working. The boolean and optional
entry points (``is_sentence_valid``, ``sentence_id``, ``parse_*``) catch these
and return ``False``/``INVALID``/``None`` instead.
"""

__all__ = [
    "CalendarRangeError",
    "ChecksumMismatchError",
    "ChecksumMissingError",
    "FieldCountError",
    "FieldDecodeError",
    "MalformedSentenceError",
    "NMEAError",
    "ScanError",
    "SentenceTypeError",
]


class NMEAError(ValueError):
    """Base class for all sentence decoding failures."""


class MalformedSentenceError(NMEAError):
    """The line is not a structurally valid sentence."""


class ChecksumMismatchError(NMEAError):
    """The transmitted checksum does not match the computed one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"checksum mismatch: computed 0x{expected:02X}, sentence has 0x{actual:02X}"
        )
        self.expected = expected
        self.actual = actual


class ChecksumMissingError(NMEAError):
    """Strict mode requires a checksum field but the sentence has none."""


class SentenceTypeError(NMEAError):
    """The sentence is well formed but of a different type than requested."""


class ScanError(NMEAError):
    """Base class for field scanner failures."""


class FieldCountError(ScanError):
    """The format asks for more fields than the sentence carries."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected at least {expected} fields, sentence has {actual}")
        self.expected = expected
        self.actual = actual


class FieldDecodeError(ScanError):
    """A single field could not be decoded by its directive."""

    def __init__(self, index: int, directive: str, field: str, reason: str) -> None:
        super().__init__(f"field {index} ({directive!r}) {field!r}: {reason}")
        self.index = index
        self.directive = directive
        self.field = field
        self.reason = reason


class CalendarRangeError(NMEAError):
    """A date or time cannot be converted to an absolute timestamp."""
