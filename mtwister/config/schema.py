"""Configuration schema for a generator instance.

A single GeneratorConfig fully determines the stream a run draws from,
so it is what gets stored alongside experiment results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

U32_MAX = 0xFFFFFFFF


class GeneratorConfig(BaseModel):
    """How to build and seed the generator for one run."""

    algorithm: Literal["mt19937"] = Field(
        default="mt19937",
        description="Generator algorithm. Only MT19937 is supported.",
    )
    seed: int | None = Field(
        default=None,
        ge=0, le=U32_MAX,
        description="Scalar seed. None (with no key) means the default seed is used.",
    )
    key: list[int] | None = Field(
        default=None,
        description="Array seed, 32-bit words. Mutually exclusive with seed.",
    )
    cross_seed_numpy: bool = Field(
        default=True,
        description="Also seed numpy.random with the resolved seed.",
    )

    @field_validator("key")
    @classmethod
    def key_words_are_u32(cls, v: list[int] | None) -> list[int] | None:
        if v is not None:
            if not v:
                raise ValueError("key must contain at least one element")
            bad = [k for k in v if not 0 <= k <= U32_MAX]
            if bad:
                raise ValueError(f"key elements must be in [0, {U32_MAX}] (got {bad})")
        return v

    @model_validator(mode="after")
    def seed_and_key_exclusive(self) -> GeneratorConfig:
        if self.seed is not None and self.key is not None:
            raise ValueError("seed and key are mutually exclusive; set only one.")
        return self


def load_config(path: str | Path) -> GeneratorConfig:
    """Read and validate a GeneratorConfig from a JSON file."""
    raw = Path(path).read_text(encoding="utf-8")
    return GeneratorConfig.model_validate_json(raw)
