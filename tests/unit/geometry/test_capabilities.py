"""Unit tests for the capability protocols."""

from __future__ import annotations

import numpy as np
import pytest

from dungen_geometry.geometry import (
    Area,
    Inclusion,
    InvertPlacedShape,
    IsArea,
    IsSize,
    Oval,
    PlacedShape,
    PlacedShapeSlice,
    Position,
    ProvidesPlacedShape,
    Size,
)
from dungen_geometry.sampling import SizeRange


def _place(provider: ProvidesPlacedShape, rng: np.random.Generator) -> PlacedShape:
    return provider.provide_placed_shape(rng)


class TestRefinementProtocols:
    """Tests for IsSize and IsArea."""

    @pytest.mark.parametrize(
        "value",
        [
            Area.from_tuple((1, 2, 3, 4)),
            Oval(area=Area.from_tuple((1, 2, 3, 4))),
            InvertPlacedShape(Area.from_tuple((1, 2, 3, 4))),
            PlacedShapeSlice([(Inclusion.INCLUDE, Area.from_tuple((1, 2, 3, 4)))]),
        ],
    )
    def test_placed_shapes_are_areas(self, value: object) -> None:
        assert isinstance(value, IsSize)
        assert isinstance(value, IsArea)

    def test_size_is_size_but_not_area(self) -> None:
        size = Size(width=3, height=4)
        assert isinstance(size, IsSize)
        assert not isinstance(size, IsArea)
        assert not isinstance(Position(x=1, y=2), IsSize)

    def test_ranges_only_provide(self) -> None:
        size_range = SizeRange(
            min_size=Size(width=1, height=1), max_size=Size(width=2, height=2)
        )
        assert not isinstance(size_range, IsSize)


class TestProvidesPlacedShape:
    """Tests for ProvidesPlacedShape implementers."""

    def test_size_range_places_rectangle_at_origin(
        self, rng: np.random.Generator
    ) -> None:
        size_range = SizeRange(
            min_size=Size(width=2, height=3), max_size=Size(width=5, height=6)
        )
        shape = _place(size_range, rng)
        assert isinstance(shape, PlacedShape)
        assert shape.position == Position.zero()
        assert 2 <= shape.width <= 5
        assert 3 <= shape.height <= 6

    def test_slice_provides_equivalent_copy(self, rng: np.random.Generator) -> None:
        shape = PlacedShapeSlice([(Inclusion.INCLUDE, Area.from_tuple((1, 1, 2, 2)))])
        provided = _place(shape, rng)
        assert provided is not shape
        assert provided.area == shape.area
