"""Per-thread default generator.

Library code should take a ``RandomSource`` argument.  This module is the
convenience layer for application entry points that want one ambient
generator per thread without passing it around.

Seed precedence, highest first:
  1. ``override`` argument, or the ``MTWISTER_SEED`` environment variable
  2. the caller's configured seed (``GeneratorConfig`` or ``default_seed``)
  3. fresh OS entropy (only when the caller passes no default at all)

When cross-seeding is enabled, ``numpy.random`` is seeded with the same
resolved value right after the generator is built.
"""

from __future__ import annotations

import logging
import os
import threading

from mtwister.config.defaults import DEFAULT_SEED
from mtwister.config.schema import GeneratorConfig
from mtwister.core.errors import InvalidArgumentError
from mtwister.core.seeding import resolve_seed, seed_numpy
from mtwister.sources.mersenne import MersenneTwister

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "MTWISTER_SEED"

_local = threading.local()


def _env_override() -> int | None:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip(), 0)
    except ValueError as exc:
        raise InvalidArgumentError(f"{SEED_ENV_VAR} must be an integer (got {raw!r})") from exc


def _install(source: MersenneTwister, numpy_seed: int | None) -> MersenneTwister:
    if numpy_seed is not None:
        seed_numpy(numpy_seed)
    _local.source = source
    logger.debug(
        "Installed %r for thread %s", source, threading.current_thread().name
    )
    return source


def initialize(
    config: GeneratorConfig | None = None,
    override: int | None = None,
) -> MersenneTwister:
    """Build the current thread's generator from ``config``.

    Replaces any generator the thread already had.  A seed override (from
    the argument or the environment) takes priority over both ``config.seed``
    and ``config.key``.
    """
    if config is None:
        config = GeneratorConfig(seed=DEFAULT_SEED)
    if override is None:
        override = _env_override()

    if override is None and config.key is not None:
        source = MersenneTwister(config.key)
        numpy_seed = config.key[0]
    else:
        configured = config.seed if config.seed is not None else DEFAULT_SEED
        numpy_seed = resolve_seed(override, configured)
        source = MersenneTwister(numpy_seed)

    return _install(source, numpy_seed if config.cross_seed_numpy else None)


def current_source(
    override: int | None = None,
    default_seed: int | None = DEFAULT_SEED,
) -> MersenneTwister:
    """Return the current thread's generator, creating it on first use.

    Later calls on the same thread return the same instance and ignore
    their arguments.  Pass ``default_seed=None`` to fall back to entropy
    when no override is set.
    """
    source = getattr(_local, "source", None)
    if source is not None:
        return source

    if override is None:
        override = _env_override()
    seed = resolve_seed(override, default_seed)
    return _install(MersenneTwister(seed), seed)


def reset() -> None:
    """Drop the current thread's generator; the next access rebuilds it."""
    if hasattr(_local, "source"):
        del _local.source
