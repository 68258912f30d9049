"""MT19937 core: seeding, block regeneration (twist) and tempering.

Plain functions over a ``GeneratorState``.  All arithmetic is done on
Python ints and masked back to 32 bits, which reproduces the unsigned
wraparound of the reference C implementation bit for bit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mtwister.core.errors import InvalidArgumentError
from mtwister.core.state import M, N, WORD_MASK, GeneratorState

logger = logging.getLogger(__name__)

MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF

TEMPERING_MASK_B = 0x9D2C5680
TEMPERING_MASK_C = 0xEFC60000

# Constant used by seed_array before mixing in the key
ARRAY_SEED_BASE = 19650218

_MAG01 = (0x0, MATRIX_A)


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

def seed_scalar(state: GeneratorState, seed: int) -> None:
    """Initialise ``state`` from a single 32-bit seed (init_genrand)."""
    mt = state.words
    mt[0] = seed & WORD_MASK
    for i in range(1, N):
        prev = mt[i - 1]
        mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & WORD_MASK
    state.cursor = N


def seed_array(state: GeneratorState, key: Sequence[int]) -> None:
    """Initialise ``state`` from a key of 32-bit words (init_by_array)."""
    key_length = len(key)
    if key_length == 0:
        raise InvalidArgumentError("array seed requires at least one key element")

    seed_scalar(state, ARRAY_SEED_BASE)
    mt = state.words

    i, j = 1, 0
    for _ in range(max(N, key_length)):
        prev = mt[i - 1]
        mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & WORD_MASK
        i += 1
        j += 1
        if i >= N:
            mt[0] = mt[N - 1]
            i = 1
        if j >= key_length:
            j = 0

    for _ in range(N - 1):
        prev = mt[i - 1]
        mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & WORD_MASK
        i += 1
        if i >= N:
            mt[0] = mt[N - 1]
            i = 1

    # MSB is 1; non-zero initial array
    mt[0] = 0x80000000
    state.cursor = N


def new_state_from_seed(seed: int) -> GeneratorState:
    state = GeneratorState()
    seed_scalar(state, seed)
    logger.debug("Seeded MT19937 state from scalar seed %d", seed & WORD_MASK)
    return state


def new_state_from_key(key: Sequence[int]) -> GeneratorState:
    state = GeneratorState()
    seed_array(state, key)
    logger.debug("Seeded MT19937 state from %d-word key", len(key))
    return state


# ---------------------------------------------------------------------------
# Twist
# ---------------------------------------------------------------------------

def regenerate(state: GeneratorState) -> None:
    """Produce the next block of N words in place and rewind the cursor.

    The three loops split the index range so that ``kk + 1`` and
    ``kk + M`` wrap exactly where the reference implementation wraps them.
    """
    mt = state.words
    for kk in range(N - M):
        y = (mt[kk] & UPPER_MASK) | (mt[kk + 1] & LOWER_MASK)
        mt[kk] = mt[kk + M] ^ (y >> 1) ^ _MAG01[y & 0x1]

    for kk in range(N - M, N - 1):
        y = (mt[kk] & UPPER_MASK) | (mt[kk + 1] & LOWER_MASK)
        mt[kk] = mt[kk + (M - N)] ^ (y >> 1) ^ _MAG01[y & 0x1]

    y = (mt[N - 1] & UPPER_MASK) | (mt[0] & LOWER_MASK)
    mt[N - 1] = mt[M - 1] ^ (y >> 1) ^ _MAG01[y & 0x1]

    state.cursor = 0
    state.regenerations += 1


# ---------------------------------------------------------------------------
# Temper / extract
# ---------------------------------------------------------------------------

def temper(y: int) -> int:
    y ^= y >> 11
    y ^= (y << 7) & TEMPERING_MASK_B
    y ^= (y << 15) & TEMPERING_MASK_C
    y ^= y >> 18
    return y & WORD_MASK


def next_word(state: GeneratorState) -> int:
    """Return the next tempered 32-bit word, regenerating when exhausted."""
    if state.cursor >= N:
        regenerate(state)
    y = state.words[state.cursor]
    state.cursor += 1
    return temper(y)
