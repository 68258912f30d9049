"""Random source interface for pluggable generator backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from mtwister.core import derived
from mtwister.core.errors import InvalidArgumentError


class RandomSource(ABC):
    """Interface that all generator backends must implement.

    A backend supplies raw 32-bit words through ``next_u32``; every other
    draw is derived from those words, so two backends producing the same
    words produce the same derived values.
    """

    @abstractmethod
    def next_u32(self) -> int:
        """Return the next raw unsigned 32-bit word."""

    # ------------------------------------------------------------------
    # Unsigned integers
    # ------------------------------------------------------------------

    def next_u32_below(self, max_value: int) -> int:
        """Return an unsigned int in [0, max_value)."""
        max_value = derived.check_u32_bound(max_value)
        return derived.scale_u32_below(self.next_u32(), max_value)

    def next_u32_between(self, min_value: int, max_value: int) -> int:
        """Return an unsigned int in [min_value, max_value).

        Raises InvalidRangeError if ``min_value >= max_value``.
        """
        min_value, max_value = derived.check_u32_range(min_value, max_value)
        return derived.scale_u32_between(self.next_u32(), min_value, max_value)

    def next_u32_array(self, count: int) -> np.ndarray:
        count = self._check_count(count)
        return np.fromiter((self.next_u32() for _ in range(count)), dtype=np.uint32, count=count)

    # ------------------------------------------------------------------
    # Signed integers
    # ------------------------------------------------------------------

    def next_int(self) -> int:
        """Return a non-negative int in [0, INT_MAX)."""
        return self.next_int_below(derived.INT_MAX)

    def next_int_below(self, max_value: int) -> int:
        """Return an int in [0, max_value).

        Bounds of 0 and 1 return 0 without consuming any words; a negative
        bound raises InvalidRangeError.
        """
        max_value = derived.check_int_bound(max_value)
        if max_value <= 1:
            return 0
        return derived.scale_int_below(self.next_double(), max_value)

    def next_int_between(self, min_value: int, max_value: int) -> int:
        """Return an int in [min_value, max_value), or ``min_value`` when equal."""
        min_value, max_value = derived.check_int_range(min_value, max_value)
        if min_value == max_value:
            return min_value
        return self.next_int_below(max_value - min_value) + min_value

    # ------------------------------------------------------------------
    # Bytes
    # ------------------------------------------------------------------

    def fill_bytes(self, buffer) -> None:
        """Fill a writable buffer (bytearray, memoryview, numpy array) in order."""
        if buffer is None:
            raise InvalidArgumentError("buffer must not be None")
        try:
            view = memoryview(buffer)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"buffer must support the buffer protocol (got {type(buffer).__name__})"
            ) from exc
        if view.readonly:
            raise InvalidArgumentError("buffer is read-only")
        try:
            view = view.cast("B")
        except TypeError as exc:
            raise InvalidArgumentError("buffer must be C-contiguous") from exc
        for idx in range(view.nbytes):
            view[idx] = self.next_int_below(256) & 0xFF

    def next_bytes(self, count: int) -> bytes:
        buf = bytearray(self._check_count(count))
        self.fill_bytes(buf)
        return bytes(buf)

    # ------------------------------------------------------------------
    # Doubles and floats
    # ------------------------------------------------------------------

    def next_double(self, include_one: bool = False) -> float:
        """Return a double in [0, 1), or [0, 1] when ``include_one`` is set.

        Uses the 53-bit method (two words per value).  The 32-bit method of
        dividing a single word fails the repetition test of Matsumoto et
        al. and is deliberately not offered.
        """
        scale = derived.INCLUSIVE_SCALE if include_one else derived.EXCLUSIVE_SCALE
        return derived.combine_53bit(self.next_u32(), self.next_u32(), derived.HALF_OPEN, scale)

    def next_double_positive(self) -> float:
        """Return a double strictly inside (0, 1)."""
        return derived.combine_53bit_open(self.next_u32(), self.next_u32())

    def next_double_between(self, min_value: float, max_value: float) -> float:
        """Return a double in [min_value, max_value]."""
        return self.next_double(include_one=True) * (max_value - min_value) + min_value

    def next_doubles(self, count: int, include_one: bool = False) -> np.ndarray:
        """Return ``count`` successive ``next_double`` values as float64."""
        count = self._check_count(count)
        return np.fromiter(
            (self.next_double(include_one) for _ in range(count)), dtype=np.float64, count=count
        )

    def next_float(self, include_one: bool = False) -> np.float32:
        return np.float32(self.next_double(include_one))

    def next_float_positive(self) -> np.float32:
        return np.float32(self.next_double_positive())

    # ------------------------------------------------------------------

    @staticmethod
    def _check_count(count: int) -> int:
        count = derived.as_int("count", count)
        if count < 0:
            raise InvalidArgumentError(f"count must be >= 0 (got {count})")
        return count
