"""Process-wide default random generator for the sampling layer.

Ranges accept an explicit ``numpy.random.Generator``; when a caller passes
none, the generator returned here is used. It is seeded from
``settings.SAMPLING_SEED`` when configured, otherwise from OS entropy.
"""

from __future__ import annotations

import numpy as np

from dungen_geometry.config import settings
from dungen_geometry.utils.logging import get_logger

logger = get_logger(__name__)

_default_rng: np.random.Generator | None = None


def get_default_rng() -> np.random.Generator:
    """Return the shared default generator, creating it on first use."""
    global _default_rng  # noqa: PLW0603
    if _default_rng is None:
        _default_rng = np.random.default_rng(settings.SAMPLING_SEED)
        logger.debug("Default generator created", seed=settings.SAMPLING_SEED)
    return _default_rng


def reset_default_rng(seed: int | None = None) -> np.random.Generator:
    """Replace the shared default generator.

    Args:
        seed: Seed for the new generator. Defaults to
            ``settings.SAMPLING_SEED``.

    Returns:
        The new default generator.
    """
    global _default_rng  # noqa: PLW0603
    seed = seed if seed is not None else settings.SAMPLING_SEED
    _default_rng = np.random.default_rng(seed)
    logger.debug("Default generator reset", seed=seed)
    return _default_rng


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` or the shared default generator when it is None."""
    return rng if rng is not None else get_default_rng()
