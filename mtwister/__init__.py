"""MT19937 Mersenne Twister random number generation.

Deterministic and bit-for-bit reproducible across implementations for a
given seed.  Not for cryptographic use.
"""

from __future__ import annotations

from mtwister.core.errors import InvalidArgumentError, InvalidRangeError, MTwisterError
from mtwister.core.seeding import derive_seed, entropy_seed, resolve_seed, seed_numpy
from mtwister.sources import SOURCE_REGISTRY, MersenneTwister, RandomSource, create_source

__version__ = "0.1.0"

__all__ = [
    "MersenneTwister",
    "RandomSource",
    "SOURCE_REGISTRY",
    "create_source",
    "derive_seed",
    "entropy_seed",
    "resolve_seed",
    "seed_numpy",
    "MTwisterError",
    "InvalidArgumentError",
    "InvalidRangeError",
]
