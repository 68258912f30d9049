"""Seed handling utilities.

Every generator is fully determined by its seed, so experiments are
reproducible given the same config + seed.  Fresh entropy is used only
when no seed is supplied anywhere.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable

import numpy as np

from mtwister.core.errors import InvalidArgumentError
from mtwister.core.state import WORD_MASK

logger = logging.getLogger(__name__)


def normalize_seed(seed: object) -> int:
    """Reduce an integer seed to its unsigned 32-bit pattern.

    Negative seeds map to their two's-complement value, so ``-1`` seeds
    the same stream as ``0xFFFFFFFF``.
    """
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidArgumentError(
            f"seed must be an integer (got {type(seed).__name__})"
        )
    return int(seed) & WORD_MASK


def normalize_key(key: Iterable[object] | None) -> tuple[int, ...]:
    """Reduce every element of an array seed to 32 bits."""
    if key is None:
        raise InvalidArgumentError("key must not be None")
    if isinstance(key, (str, bytes)):
        raise InvalidArgumentError("key must be a sequence of integers, not a string")
    if isinstance(key, np.ndarray):
        values = key.ravel().tolist()
    else:
        try:
            values = list(key)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"key must be a sequence of integers (got {type(key).__name__})"
            ) from exc
    words = tuple(normalize_seed(k) for k in values)
    if not words:
        raise InvalidArgumentError("key must contain at least one element")
    return words


def entropy_seed() -> int:
    """Draw a fresh, non-reproducible 32-bit seed from OS entropy."""
    seed = int(np.random.SeedSequence().generate_state(1)[0])
    logger.debug("Drew entropy seed %d", seed)
    return seed


def derive_seed(parent_seed: int, index: int) -> int:
    """Derive a child seed deterministically from a parent seed + index.

    Useful for giving each worker or task its own generator while
    keeping the whole experiment reproducible from one root seed.
    """
    ss = np.random.SeedSequence(normalize_seed(parent_seed)).spawn(index + 1)
    return int(ss[-1].generate_state(1)[0])


def resolve_seed(override: int | None = None, configured: int | None = None) -> int:
    """Pick the effective seed: override, then configured value, then entropy."""
    if override is not None:
        return normalize_seed(override)
    if configured is not None:
        return normalize_seed(configured)
    return entropy_seed()


def seed_numpy(seed: int) -> None:
    """Seed numpy's global legacy generator with the same value.

    Called by the host layer after building a generator so that any code
    drawing from ``numpy.random`` is reproducible alongside it.
    """
    np.random.seed(normalize_seed(seed))
    logger.debug("Cross-seeded numpy.random with %d", normalize_seed(seed))
