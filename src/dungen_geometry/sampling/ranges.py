"""Closed-interval samplers over the geometry primitives.

Every bound is inclusive: a range from 4 to 13 can produce both 4 and 13.

- ``PositionRange`` interpolates between two corners with ONE shared
  parameter, so samples lie on the segment from ``start`` to ``end`` rather
  than anywhere in the rectangle they span.
- ``SizeRange`` and ``CountRange`` draw each component independently and
  uniformly from ``[min, max]``.
- ``AreaRange`` pairs a position range with a size range.

Ranges only provide values (``provide_*``); they never store one.
"""

from __future__ import annotations

import math
from typing import Self

import numpy as np
from pydantic import BaseModel, Field, model_validator

from dungen_geometry.geometry.primitives import Area, Count, Position, Size
from dungen_geometry.sampling.rng import resolve_rng

# Largest uint64; dividing a uniform draw from [0, U64_MAX] by it gives a
# parameter in [0, 1] with both ends reachable.
U64_MAX = 2**64 - 1


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's ``round`` rounds halves to even; interpolated coordinates use
    the conventional rule so ``2.5 -> 3`` and ``-2.5 -> -3``.
    """
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude) if value >= 0 else -int(magnitude)


def unit_interval(rng: np.random.Generator) -> float:
    """Draw a uniform parameter from the closed interval [0, 1]."""
    draw = int(rng.integers(0, U64_MAX, endpoint=True, dtype=np.uint64))
    return draw / U64_MAX


class PositionRange(BaseModel, frozen=True):
    """Positions on the segment between two corners.

    A single parameter ``i`` in [0, 1] is drawn per sample and both axes are
    ``round(start * (1 - i) + end * i)``.

    Attributes:
        start: Segment start (reached when ``i == 0``).
        end: Segment end (reached when ``i == 1``).
    """

    start: Position = Field(..., description="Segment start, inclusive")
    end: Position = Field(..., description="Segment end, inclusive")

    @classmethod
    def from_position(cls, position: Position) -> Self:
        """Create a degenerate range that always yields ``position``."""
        return cls(start=position, end=position)

    def _interpolate(self, start: int, end: int, i: float) -> int:
        return round_half_away(start * (1.0 - i) + end * i)

    def sample(self, rng: np.random.Generator) -> Position:
        """Draw one position using ``rng``."""
        i = unit_interval(rng)
        return Position(
            x=self._interpolate(self.start.x, self.end.x, i),
            y=self._interpolate(self.start.y, self.end.y, i),
        )

    def provide_position(self, rng: np.random.Generator | None = None) -> Position:
        """Draw one position, using the default generator if ``rng`` is None."""
        return self.sample(resolve_rng(rng))


class SizeRange(BaseModel, frozen=True):
    """Sizes with width and height drawn independently from closed bounds.

    Attributes:
        min_size: Smallest width and height.
        max_size: Largest width and height.
    """

    min_size: Size = Field(..., description="Inclusive lower bound")
    max_size: Size = Field(..., description="Inclusive upper bound")

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        """Ensure each component of min_size is <= that of max_size."""
        if self.min_size.width > self.max_size.width:
            raise ValueError(
                f"min width {self.min_size.width} exceeds "
                f"max width {self.max_size.width}"
            )
        if self.min_size.height > self.max_size.height:
            raise ValueError(
                f"min height {self.min_size.height} exceeds "
                f"max height {self.max_size.height}"
            )
        return self

    @classmethod
    def from_size(cls, size: Size) -> Self:
        """Create a degenerate range that always yields ``size``."""
        return cls(min_size=size, max_size=size)

    def sample(self, rng: np.random.Generator) -> Size:
        """Draw one size using ``rng``."""
        width = rng.integers(self.min_size.width, self.max_size.width, endpoint=True)
        height = rng.integers(
            self.min_size.height, self.max_size.height, endpoint=True
        )
        return Size(width=int(width), height=int(height))

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        return self.sample(resolve_rng(rng))

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        """Draw a size and place it at the origin."""
        return Area.from_size(self.provide_size(rng))

    def provide_placed_shape(self, rng: np.random.Generator | None = None) -> Area:
        """Draw a size as a placed rectangle at the origin."""
        return self.provide_area(rng)


class CountRange(BaseModel, frozen=True):
    """Counts drawn uniformly from ``[min_count, max_count]``.

    Attributes:
        min_count: Smallest count.
        max_count: Largest count.
    """

    min_count: Count = Field(..., ge=0, description="Inclusive lower bound")
    max_count: Count = Field(..., ge=0, description="Inclusive upper bound")

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        """Ensure min_count <= max_count."""
        if self.min_count > self.max_count:
            raise ValueError(
                f"min_count {self.min_count} exceeds max_count {self.max_count}"
            )
        return self

    @classmethod
    def from_count(cls, count: Count) -> Self:
        """Create a degenerate range that always yields ``count``."""
        return cls(min_count=count, max_count=count)

    def sample(self, rng: np.random.Generator) -> Count:
        return int(rng.integers(self.min_count, self.max_count, endpoint=True))

    def provide_count(self, rng: np.random.Generator | None = None) -> Count:
        return self.sample(resolve_rng(rng))


class AreaRange(BaseModel, frozen=True):
    """Areas built from a sampled position and an independently sampled size.

    Attributes:
        position_range: Where the top-left corner may fall.
        size_range: Extents the area may take.
    """

    position_range: PositionRange = Field(..., description="Top-left sampler")
    size_range: SizeRange = Field(..., description="Extent sampler")

    @classmethod
    def from_area(cls, area: Area) -> Self:
        """Create a degenerate range that always yields ``area``."""
        return cls(
            position_range=PositionRange.from_position(area.position),
            size_range=SizeRange.from_size(area.size),
        )

    def sample(self, rng: np.random.Generator) -> Area:
        """Draw one area; the position is drawn before the size."""
        position = self.position_range.sample(rng)
        size = self.size_range.sample(rng)
        return Area(position=position, size=size)

    def provide_position(self, rng: np.random.Generator | None = None) -> Position:
        return self.position_range.provide_position(rng)

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        return self.size_range.provide_size(rng)

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        return self.sample(resolve_rng(rng))
