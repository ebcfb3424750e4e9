"""Unit tests for the inclusive-bound range samplers."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from dungen_geometry.geometry import Area, Position, Size
from dungen_geometry.sampling import AreaRange, CountRange, PositionRange, SizeRange
from dungen_geometry.sampling.ranges import U64_MAX, round_half_away, unit_interval

N_SAMPLES = 5000


class _FixedDraw:
    """Stands in for a generator whose uint64 draws are fixed."""

    def __init__(self, *draws: int) -> None:
        self._draws = list(draws)

    def integers(self, *args: object, **kwargs: object) -> np.uint64:
        _ = args, kwargs
        return np.uint64(self._draws.pop(0))


class TestRoundHalfAway:
    """Tests for round_half_away."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, 0),
            (2.4, 2),
            (2.5, 3),
            (3.5, 4),
            (-2.5, -3),
            (-0.5, -1),
            (-0.4, 0),
            (12.999, 13),
        ],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_away(value) == expected


class TestUnitInterval:
    """Tests for unit_interval."""

    def test_both_ends_reachable(self) -> None:
        assert unit_interval(_FixedDraw(0)) == 0.0  # type: ignore[arg-type]
        assert unit_interval(_FixedDraw(U64_MAX)) == 1.0  # type: ignore[arg-type]

    def test_draws_stay_in_closed_interval(self, rng: np.random.Generator) -> None:
        draws = [unit_interval(rng) for _ in range(1000)]
        assert all(0.0 <= draw <= 1.0 for draw in draws)


class TestPositionRange:
    """Tests for PositionRange."""

    def test_samples_lie_on_the_diagonal(self, rng: np.random.Generator) -> None:
        """Test one shared parameter drives both axes."""
        position_range = PositionRange(
            start=Position(x=4, y=14), end=Position(x=13, y=23)
        )
        for _ in range(N_SAMPLES):
            position = position_range.sample(rng)
            assert 4 <= position.x <= 13
            assert 14 <= position.y <= 23
            assert position.x - 4 == position.y - 14

    def test_endpoints_are_reachable(self, rng: np.random.Generator) -> None:
        position_range = PositionRange(
            start=Position(x=4, y=14), end=Position(x=13, y=23)
        )
        xs = {position_range.sample(rng).x for _ in range(N_SAMPLES)}
        assert xs == set(range(4, 14))

    def test_extreme_parameters_hit_the_endpoints(self) -> None:
        position_range = PositionRange(
            start=Position(x=-7, y=3), end=Position(x=9, y=-12)
        )
        first = position_range.sample(_FixedDraw(0))  # type: ignore[arg-type]
        last = position_range.sample(_FixedDraw(U64_MAX))  # type: ignore[arg-type]
        assert first == Position(x=-7, y=3)
        assert last == Position(x=9, y=-12)

    def test_reversed_and_negative_bounds(self, rng: np.random.Generator) -> None:
        position_range = PositionRange(
            start=Position(x=10, y=-5), end=Position(x=-10, y=5)
        )
        for _ in range(1000):
            position = position_range.sample(rng)
            assert -10 <= position.x <= 10
            assert -5 <= position.y <= 5

    def test_degenerate_range(self, rng: np.random.Generator) -> None:
        position = Position(x=-3, y=8)
        position_range = PositionRange.from_position(position)
        assert {position_range.sample(rng) for _ in range(50)} == {position}

    def test_provide_position_uses_given_generator(self) -> None:
        position_range = PositionRange(
            start=Position(x=0, y=0), end=Position(x=100, y=50)
        )
        first = [
            position_range.provide_position(np.random.default_rng(3)) for _ in range(3)
        ]
        second = [
            position_range.provide_position(np.random.default_rng(3)) for _ in range(3)
        ]
        assert first == second


class TestSizeRange:
    """Tests for SizeRange."""

    def test_samples_respect_inclusive_bounds(self, rng: np.random.Generator) -> None:
        size_range = SizeRange(
            min_size=Size(width=4, height=14), max_size=Size(width=13, height=23)
        )
        sizes = [size_range.sample(rng) for _ in range(N_SAMPLES)]
        widths = {size.width for size in sizes}
        heights = {size.height for size in sizes}
        assert widths == set(range(4, 14))
        assert heights == set(range(14, 24))

    def test_axes_are_independent(self, rng: np.random.Generator) -> None:
        """Test width and height are not locked together like positions are."""
        size_range = SizeRange(
            min_size=Size(width=4, height=14), max_size=Size(width=13, height=23)
        )
        sizes = [size_range.sample(rng) for _ in range(500)]
        assert any(size.width - 4 != size.height - 14 for size in sizes)

    def test_min_above_max_raises(self) -> None:
        with pytest.raises(ValidationError, match="min width 5 exceeds max width 4"):
            SizeRange(
                min_size=Size(width=5, height=1), max_size=Size(width=4, height=1)
            )
        with pytest.raises(ValidationError, match="min height"):
            SizeRange(
                min_size=Size(width=1, height=9), max_size=Size(width=1, height=2)
            )

    def test_from_size(self, rng: np.random.Generator) -> None:
        size = Size(width=7, height=0)
        assert {SizeRange.from_size(size).sample(rng) for _ in range(20)} == {size}

    def test_provide_area_places_at_origin(self, rng: np.random.Generator) -> None:
        size_range = SizeRange(
            min_size=Size(width=1, height=1), max_size=Size(width=3, height=3)
        )
        area = size_range.provide_area(rng)
        assert area.position == Position.zero()
        assert 1 <= area.width <= 3
        assert 1 <= area.height <= 3
        assert isinstance(size_range.provide_placed_shape(rng), Area)

    def test_provide_size_falls_back_to_default_generator(
        self, seeded_default_rng: np.random.Generator
    ) -> None:
        _ = seeded_default_rng
        size_range = SizeRange(
            min_size=Size(width=0, height=0), max_size=Size(width=1000, height=1000)
        )
        expected = size_range.sample(np.random.default_rng(7))
        assert size_range.provide_size() == expected


class TestCountRange:
    """Tests for CountRange."""

    def test_samples_respect_inclusive_bounds(self, rng: np.random.Generator) -> None:
        count_range = CountRange(min_count=2, max_count=5)
        counts = {count_range.sample(rng) for _ in range(1000)}
        assert counts == {2, 3, 4, 5}

    def test_provide_count_returns_int(self, rng: np.random.Generator) -> None:
        assert isinstance(CountRange.from_count(3).provide_count(rng), int)
        assert CountRange.from_count(3).provide_count(rng) == 3

    def test_min_above_max_raises(self) -> None:
        with pytest.raises(ValidationError, match="min_count 6 exceeds max_count 5"):
            CountRange(min_count=6, max_count=5)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            CountRange(min_count=-1, max_count=5)


class TestAreaRange:
    """Tests for AreaRange."""

    @pytest.fixture
    def area_range(self) -> AreaRange:
        return AreaRange(
            position_range=PositionRange(
                start=Position(x=0, y=10), end=Position(x=20, y=30)
            ),
            size_range=SizeRange(
                min_size=Size(width=2, height=3), max_size=Size(width=4, height=6)
            ),
        )

    def test_samples_combine_both_ranges(
        self, area_range: AreaRange, rng: np.random.Generator
    ) -> None:
        for _ in range(1000):
            area = area_range.sample(rng)
            assert area.x == area.y - 10
            assert 0 <= area.x <= 20
            assert 2 <= area.width <= 4
            assert 3 <= area.height <= 6

    def test_position_is_drawn_before_size(self, area_range: AreaRange) -> None:
        expected_rng = np.random.default_rng(11)
        position = area_range.position_range.sample(expected_rng)
        size = area_range.size_range.sample(expected_rng)
        assert area_range.provide_area(np.random.default_rng(11)) == Area(
            position=position, size=size
        )

    def test_provide_position_and_size(
        self, area_range: AreaRange, rng: np.random.Generator
    ) -> None:
        position = area_range.provide_position(rng)
        size = area_range.provide_size(rng)
        assert position.x == position.y - 10
        assert 2 <= size.width <= 4

    def test_from_area_is_constant(self, rng: np.random.Generator) -> None:
        area = Area.from_tuple((5, -3, 42, 24))
        area_range = AreaRange.from_area(area)
        assert {area_range.sample(rng) for _ in range(20)} == {area}
