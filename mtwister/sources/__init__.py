"""Random source backends: registry and factory."""

from __future__ import annotations

from collections.abc import Iterable

from mtwister.core.errors import InvalidArgumentError
from mtwister.sources.base import RandomSource
from mtwister.sources.mersenne import MersenneTwister

SOURCE_REGISTRY: dict[str, type[RandomSource]] = {
    "mt19937": MersenneTwister,
}


def create_source(
    name: str = "mt19937",
    seed: int | None = None,
    key: Iterable[int] | None = None,
) -> RandomSource:
    """Instantiate a random source by algorithm name.

    Pass at most one of ``seed`` and ``key``; with neither the source is
    seeded from entropy.

    Raises KeyError if the algorithm name is not registered.
    """
    if seed is not None and key is not None:
        raise InvalidArgumentError("seed and key are mutually exclusive")
    cls = SOURCE_REGISTRY[name]
    return cls(key if key is not None else seed)


__all__ = [
    "RandomSource",
    "MersenneTwister",
    "SOURCE_REGISTRY",
    "create_source",
]
