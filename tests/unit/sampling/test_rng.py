"""Unit tests for the shared default generator."""

from __future__ import annotations

import numpy as np

from dungen_geometry.sampling.rng import get_default_rng, reset_default_rng, resolve_rng


class TestDefaultRng:
    """Tests for get_default_rng, reset_default_rng and resolve_rng."""

    def test_default_generator_is_shared(self) -> None:
        assert get_default_rng() is get_default_rng()

    def test_reset_with_seed_is_reproducible(self) -> None:
        first = reset_default_rng(seed=5).integers(0, 1_000_000, size=4)
        second = reset_default_rng(seed=5).integers(0, 1_000_000, size=4)
        np.testing.assert_array_equal(first, second)
        assert get_default_rng() is not None

    def test_reset_replaces_generator(self) -> None:
        before = get_default_rng()
        after = reset_default_rng(seed=1)
        assert after is not before
        assert get_default_rng() is after

    def test_resolve_prefers_explicit_generator(self) -> None:
        explicit = np.random.default_rng(0)
        assert resolve_rng(explicit) is explicit
        assert resolve_rng(None) is get_default_rng()
