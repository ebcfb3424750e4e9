"""Sampling module: inclusive-bound ranges and callable providers.

Ranges draw from a ``numpy.random.Generator``. Pass one explicitly for
reproducible output, or let ``provide_*`` fall back to the shared default
generator (seeded from ``SAMPLING_SEED`` when set).
"""

from __future__ import annotations

from dungen_geometry.sampling.providers import (
    AreaProvider,
    CountProvider,
    PositionProvider,
    SizeProvider,
)
from dungen_geometry.sampling.ranges import (
    AreaRange,
    CountRange,
    PositionRange,
    SizeRange,
)
from dungen_geometry.sampling.rng import get_default_rng, reset_default_rng

__all__ = [
    "AreaProvider",
    "AreaRange",
    "CountProvider",
    "CountRange",
    "PositionProvider",
    "PositionRange",
    "SizeProvider",
    "SizeRange",
    "get_default_rng",
    "reset_default_rng",
]
