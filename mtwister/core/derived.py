"""Derived-value arithmetic built on raw 32-bit words.

Pure functions only.  Argument checks are separate from the scaling so a
caller can validate before consuming any words from a generator.
"""

from __future__ import annotations

import math
import numbers

from mtwister.core.errors import InvalidArgumentError, InvalidRangeError

U32_MAX = 0xFFFFFFFF
INT_MAX = 0x7FFFFFFF

# 2^32 as a double, the width of the raw word range
U32_SPAN = 4294967296.0

# 9007199254740991.0 is the largest integer a double holds with exponent 0
FIFTY_THREE_BITS_OF_ONES = 9007199254740991.0
INCLUSIVE_SCALE = 1.0 / FIFTY_THREE_BITS_OF_ONES
EXCLUSIVE_SCALE = 1.0 / (FIFTY_THREE_BITS_OF_ONES + 1.0)

# Translation applied before scaling
HALF_OPEN = 0.0
STRICTLY_POSITIVE = 0.5

# Largest double below 1.0
LARGEST_BELOW_ONE = math.nextafter(1.0, 0.0)


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def as_int(name: str, value: object) -> int:
    """Return ``value`` as a Python int, accepting numpy integer scalars."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer (got {type(value).__name__})")
    return int(value)


def check_u32_bound(max_value: int) -> int:
    """Validate the exclusive upper bound of an unsigned draw."""
    max_value = as_int("max_value", max_value)
    if max_value == 0:
        raise InvalidArgumentError("max_value must be non-zero")
    if max_value < 0 or max_value > U32_MAX:
        raise InvalidRangeError(f"max_value must be in [1, {U32_MAX}] (got {max_value})")
    return max_value


def check_u32_range(min_value: int, max_value: int) -> tuple[int, int]:
    min_value = as_int("min_value", min_value)
    max_value = as_int("max_value", max_value)
    if min_value >= max_value:
        raise InvalidRangeError(
            f"min_value must be < max_value (got {min_value} >= {max_value})"
        )
    if min_value < 0 or max_value > U32_MAX:
        raise InvalidRangeError(
            f"bounds must lie in [0, {U32_MAX}] (got {min_value}, {max_value})"
        )
    return min_value, max_value


def check_int_bound(max_value: int) -> int:
    max_value = as_int("max_value", max_value)
    if max_value < 0:
        raise InvalidRangeError(f"max_value must be >= 0 (got {max_value})")
    return max_value


def check_int_range(min_value: int, max_value: int) -> tuple[int, int]:
    min_value = as_int("min_value", min_value)
    max_value = as_int("max_value", max_value)
    if min_value > max_value:
        raise InvalidRangeError(
            f"min_value must be <= max_value (got {min_value} > {max_value})"
        )
    return min_value, max_value


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

def scale_u32_below(raw: int, max_value: int) -> int:
    """Map a raw word onto [0, max_value) by floating-point division.

    The division is kept as-is (rather than a rejection method) so that
    sequences stay bit-compatible with other implementations.
    """
    return int(raw / (U32_SPAN / max_value))


def scale_u32_between(raw: int, min_value: int, max_value: int) -> int:
    return scale_u32_below(raw, max_value - min_value) + min_value


def scale_int_below(unit: float, max_value: int) -> int:
    """Map a double in [0, 1) onto [0, max_value); bounds <= 1 give 0."""
    if max_value <= 1:
        return 0
    return int(unit * max_value)


def combine_53bit(raw1: int, raw2: int, translate: float, scale: float) -> float:
    """Build a double with 53 random bits from two raw words.

    27 bits come from ``raw1`` and 26 from ``raw2``.
    """
    a = raw1 >> 5
    b = raw2 >> 6
    return ((a * 67108864.0 + b) + translate) * scale


def combine_53bit_open(raw1: int, raw2: int) -> float:
    """Build a double strictly inside (0, 1) from two raw words.

    Adding 0.5 to the highest 53-bit patterns rounds half-to-even, and the
    inclusive scale then lands on 1.0 or just above it.  Those results are
    clamped to the largest double below 1.0; every other value is unchanged.
    """
    value = combine_53bit(raw1, raw2, STRICTLY_POSITIVE, INCLUSIVE_SCALE)
    return min(value, LARGEST_BELOW_ONE)
