"""Generator state for MT19937.

The twist state is plain data.  It is mutated only by the functions in
``mtwister.core.twister`` and is owned by exactly one generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Period parameters
N = 624
M = 397

WORD_MASK = 0xFFFFFFFF


@dataclass(slots=True)
class GeneratorState:
    """The 624-word twist vector plus the read cursor.

    ``cursor == N`` means the block is exhausted and must be regenerated
    before the next read.
    """

    words: list[int] = field(default_factory=lambda: [0] * N)
    cursor: int = N
    # Number of block regenerations performed so far
    regenerations: int = 0

    def __post_init__(self) -> None:
        if len(self.words) != N:
            raise ValueError(f"state must hold exactly {N} words (got {len(self.words)})")
        if not 0 <= self.cursor <= N:
            raise ValueError(f"cursor must be in [0, {N}] (got {self.cursor})")

    @property
    def exhausted(self) -> bool:
        return self.cursor >= N

    def snapshot(self) -> tuple[tuple[int, ...], int]:
        """Return an immutable copy of ``(words, cursor)``."""
        return tuple(self.words), self.cursor
