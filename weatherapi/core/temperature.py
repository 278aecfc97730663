"""Single-precision temperature handling.

The upstream temperature is kept as a 32-bit float and rendered with the
shortest decimal digits that parse back to the same 32-bit value, always in
fixed-point notation (``7.5`` -> ``"7.5"``, ``12.0`` -> ``"12"``).
"""
from __future__ import annotations

import math
import struct
from decimal import Decimal, localcontext
from typing import Tuple

# Nine significant digits always round-trip a binary32 value.
_MAX_FLOAT32_DIGITS = 9
_FLOAT32_INF_BITS = 0x7F800000


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest 32-bit float.

    Raises :class:`ValueError` for values that are not finite or do not fit
    in single precision.
    """

    value = float(value)
    if not math.isfinite(value):
        raise ValueError("temperature must be a finite number")
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ValueError("temperature is out of single precision range") from exc


def _bits_to_float32(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _rounding_interval(magnitude: float) -> Tuple[Decimal, Decimal, bool]:
    """Decimal range that rounds to ``magnitude`` when parsed as binary32.

    The bounds are the exact midpoints to the neighbouring floats; they are
    inclusive when the mantissa is even (round half to even).
    """

    bits = struct.unpack("<I", struct.pack("<f", magnitude))[0]
    exact = Decimal(magnitude)
    below = Decimal(_bits_to_float32(bits - 1))
    if bits + 1 == _FLOAT32_INF_BITS:
        above = Decimal(2) ** 128
    else:
        above = Decimal(_bits_to_float32(bits + 1))
    return (below + exact) / 2, (exact + above) / 2, bits % 2 == 0


def _shortest_digits(magnitude: float) -> Decimal:
    low, high, inclusive = _rounding_interval(magnitude)
    exact = Decimal(magnitude)

    def parses_back(candidate: Decimal) -> bool:
        if inclusive:
            return low <= candidate <= high
        return low < candidate < high

    for precision in range(1, _MAX_FLOAT32_DIGITS + 1):
        nearest = Decimal(f"{magnitude:.{precision - 1}e}")
        step = Decimal(1).scaleb(nearest.adjusted() - precision + 1)
        matches = [c for c in (nearest, nearest - step, nearest + step) if c > 0 and parses_back(c)]
        if matches:
            return min(matches, key=lambda c: abs(c - exact))
    return exact


def format_temperature(value: float) -> str:
    single = to_float32(value)
    if single == 0:
        return "-0" if math.copysign(1.0, single) < 0 else "0"
    with localcontext() as ctx:
        # exact arithmetic on binary32 values, subnormals included
        ctx.prec = 400
        digits = _shortest_digits(abs(single))
        text = format(digits.normalize(), "f")
    return f"-{text}" if single < 0 else text


def parse_temperature(text: str) -> float:
    """Parse a cached temperature string back to its 32-bit value."""

    return to_float32(float(text))


__all__ = ["format_temperature", "parse_temperature", "to_float32"]
