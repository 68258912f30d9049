"""MT19937 Mersenne Twister random source.

Period 2^19937 - 1, 624-word state.  Output is bit-for-bit identical to the
reference ``mt19937ar.c`` for the same seed or key, which is what makes
experiment runs reproducible across implementations.

Not suitable for cryptographic use.  Instances are not synchronised: give
each thread or task its own generator (see ``mtwister.core.seeding.derive_seed``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from mtwister.core import twister
from mtwister.core.errors import InvalidArgumentError
from mtwister.core.seeding import entropy_seed, normalize_key, normalize_seed
from mtwister.core.state import GeneratorState
from mtwister.sources.base import RandomSource

logger = logging.getLogger(__name__)


class MersenneTwister(RandomSource):
    """MT19937 generator seeded by an int, a key sequence, or OS entropy.

    ``MersenneTwister(5489)`` seeds with ``init_genrand``;
    ``MersenneTwister([0x123, 0x234])`` seeds with ``init_by_array``;
    ``MersenneTwister()`` draws a fresh seed from entropy.
    """

    def __init__(self, seed: int | Iterable[int] | None = None) -> None:
        self._seed: int | None = None
        self._key: tuple[int, ...] | None = None

        if isinstance(seed, np.ndarray) and seed.ndim == 0:
            # A 0-d array is a scalar seed, not a one-word key
            seed = seed.item()

        if seed is None:
            self._seed = entropy_seed()
            self._state = twister.new_state_from_seed(self._seed)
        elif isinstance(seed, (str, bytes, float)):
            raise InvalidArgumentError(
                f"seed must be an int or a sequence of ints (got {type(seed).__name__})"
            )
        elif isinstance(seed, Iterable):
            self._key = normalize_key(seed)
            self._state = twister.new_state_from_key(self._key)
        else:
            self._seed = normalize_seed(seed)
            self._state = twister.new_state_from_seed(self._seed)

    @classmethod
    def from_seed(cls, seed: int) -> MersenneTwister:
        return cls(normalize_seed(seed))

    @classmethod
    def from_key(cls, key: Iterable[int]) -> MersenneTwister:
        return cls(normalize_key(key))

    @property
    def seed(self) -> int | None:
        """Scalar seed in use, or None when seeded from a key."""
        return self._seed

    @property
    def key(self) -> tuple[int, ...] | None:
        """Key in use, or None when seeded from a scalar."""
        return self._key

    @property
    def state(self) -> GeneratorState:
        """The live twist state.  FOR INSPECTION ONLY; do not mutate."""
        return self._state

    def next_u32(self) -> int:
        return twister.next_word(self._state)

    def __repr__(self) -> str:
        if self._key is not None:
            return f"MersenneTwister(key={list(self._key)!r})"
        return f"MersenneTwister(seed={self._seed!r})"
