"""Fixed-point numbers decoded from NMEA fields.

NMEA transmits decimal numbers with whatever precision the receiver chooses
("3751.65", "4807.03812345"). Converting them to ``float`` while decoding
would lose that precision, so fields are kept as an integer numerator with
a power-of-ten denominator:

    "3751.65"  -> FixedPoint(value=375165, scale=100)
    "-12"      -> FixedPoint(value=-12, scale=1)
    ""         -> FixedPoint(value=0, scale=0)   # unknown

A ``scale`` of zero never means a real fraction; it marks a field that was
empty. Floating point is only produced by ``to_float`` and ``to_coordinate``.
"""

import math
from dataclasses import dataclass

__all__ = [
    "UNKNOWN",
    "FixedPoint",
    "apply_direction",
    "rescale",
    "to_coordinate",
    "to_float",
]


@dataclass(frozen=True)
class FixedPoint:
    """A decimal number stored as ``value / scale``.

    Attributes:
        value: Signed numerator, within the signed 32-bit range.
        scale: Positive power of ten, or ``0`` when the field was empty.
    """

    value: int
    scale: int

    @property
    def known(self) -> bool:
        """True unless this is the "not provided" sentinel."""
        return self.scale != 0


UNKNOWN = FixedPoint(0, 0)


def apply_direction(number: FixedPoint, direction: int) -> FixedPoint:
    """Sign a value with a decoded hemisphere (1, -1, or 0 for "not given")."""
    if direction == 0:
        return number
    return FixedPoint(number.value * direction, number.scale)


def _truncating_divide(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as C does."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def rescale(number: FixedPoint, new_scale: int) -> int:
    """Express ``number`` as a numerator over ``new_scale``.

    Shrinking the scale rounds to the nearest integer with ties away from
    zero: half the scale ratio is added in the direction of the sign before
    a truncating division. Growing the scale is an exact multiplication.

    Args:
        number: Value to convert.
        new_scale: Target power-of-ten denominator.

    Returns:
        The numerator under ``new_scale``, or ``0`` for unknown values.

    Raises:
        ValueError: If ``new_scale`` is not positive.

    Example:
        >>> rescale(FixedPoint(375165, 100), 10)
        37517
        >>> rescale(FixedPoint(-15, 10), 1)
        -2
        >>> rescale(FixedPoint(12, 1), 1000)
        12000
    """
    if new_scale <= 0:
        raise ValueError(f"scale must be positive, got {new_scale}")
    if number.scale == 0:
        return 0
    if number.scale == new_scale:
        return number.value
    if number.scale > new_scale:
        ratio = number.scale // new_scale
        sign = (number.value > 0) - (number.value < 0)
        return _truncating_divide(number.value + sign * (ratio // 2), ratio)
    return number.value * (new_scale // number.scale)


def to_float(number: FixedPoint) -> float:
    """Convert to ``float``; ``nan`` for unknown values."""
    if number.scale == 0:
        return math.nan
    return number.value / number.scale


def to_coordinate(number: FixedPoint) -> float:
    """Convert an NMEA ``DDDMM.MMMM`` coordinate to decimal degrees.

    The two digits before the decimal point are whole minutes; everything
    above them is degrees. A negative value (southern or western hemisphere
    after sign application) yields negative degrees.

    Example:
        >>> to_coordinate(FixedPoint(375165, 100))   # 37 deg 51.65 min
        37.86083...
        >>> to_coordinate(FixedPoint(-375165, 100))
        -37.86083...
    """
    if number.scale == 0:
        return math.nan
    minutes_per_degree = number.scale * 100
    degrees = _truncating_divide(number.value, minutes_per_degree)
    minutes = number.value - degrees * minutes_per_degree
    return degrees + minutes / (60 * number.scale)
