"""Default generator configuration."""

from mtwister.config.schema import GeneratorConfig

# Canonical MT19937 default seed
DEFAULT_SEED = 5489


def default_config(seed: int = DEFAULT_SEED) -> GeneratorConfig:
    """Return a valid config seeded with ``seed``."""
    return GeneratorConfig(seed=seed)
