"""Ellipse inscribed in an area's bounding box.

Containment is tri-state and built to be consistent with a flood fill:

1. Intersection is the true ellipse test. The ellipse is centred on the
   bounding box with semi-axes ``fwidth = width/2 - 0.5`` and
   ``fheight = height/2 - 0.5``; x offsets are scaled by
   ``fwidth / fheight`` so the test becomes a circle of radius ``fheight``.
2. Containment first rejects non-intersecting tiles. Tiles inside an
   inscribed safe square of half-width
   ``sqrt(max(min(fwidth, fheight) - 1, 0)^2 / 2)`` CONTAIN outright; a
   square of zero extent still holds the exact centre of an odd-sized oval.
   Any other intersecting tile CONTAINS only if its eight neighbours all
   intersect, and INTERSECTS otherwise.

Step 2 makes the boundary exactly the tiles whose neighbourhood leaves the
ellipse, so INTERSECTS tiles form one closed ring around the CONTAINS
tiles.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from dungen_geometry.geometry.capabilities import AreaMixin, PlacedShapeMixin
from dungen_geometry.geometry.containment import Containment
from dungen_geometry.geometry.primitives import Area, Position, Size

if TYPE_CHECKING:
    import numpy as np

# N, NE, E, SE, S, SW, W, NW
_MOORE_NEIGHBOURHOOD: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


def _semi_axes(size: Size) -> tuple[float, float]:
    """Return the (horizontal, vertical) semi-axes, clamped at zero."""
    fwidth = max(size.width / 2.0 - 0.5, 0.0)
    fheight = max(size.height / 2.0 - 0.5, 0.0)
    return fwidth, fheight


def inner_bounds(size: Size) -> float:
    """Half-width of the square guaranteed to lie inside the ellipse.

    Args:
        size: Bounding box extent of the oval.

    Returns:
        ``sqrt(max(min(fwidth, fheight) - 1, 0)^2 / 2)``; 0.0 when the
        shorter semi-axis is 1 or less.
    """
    fwidth, fheight = _semi_axes(size)
    fmin_bounds = max(min(fwidth, fheight) - 1.0, 0.0)
    fmin_bounds = (fmin_bounds * fmin_bounds) / 2.0
    if fmin_bounds > 0.0:
        return math.sqrt(fmin_bounds)
    return fmin_bounds


class Oval(AreaMixin, PlacedShapeMixin, BaseModel, frozen=True):
    """An oval defined by the area of its bounding rectangle.

    The area's position is the top-left corner of the rectangle surrounding
    the oval, and its size determines the bottom-right corner.

    Attributes:
        area: Bounding rectangle of the oval.
    """

    area: Area = Field(..., description="Bounding rectangle")

    @property
    def position(self) -> Position:
        return self.area.position

    @property
    def size(self) -> Size:
        return self.area.size

    def with_position(self, position: Position) -> Oval:
        return self.model_copy(update={"area": self.area.with_position(position)})

    def with_size(self, size: Size) -> Oval:
        return self.model_copy(update={"area": self.area.with_size(size)})

    def with_area(self, area: Area) -> Oval:
        return self.model_copy(update={"area": area})

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        _ = rng
        return self.area

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        _ = rng
        return self.area.size

    def __str__(self) -> str:
        return f"Oval{self.area}"

    def _intersects_offset(self, x: int, y: int) -> bool:
        size = self.area.size
        if size.width == 0 or size.height == 0:
            return False

        fwidth, fheight = _semi_axes(size)
        adjusted_x = x - fwidth
        adjusted_y = y - fheight

        # A zero semi-axis collapses the ellipse onto a segment.
        if fwidth == 0.0:
            return adjusted_x == 0.0 and abs(adjusted_y) <= fheight
        if fheight == 0.0:
            return adjusted_y == 0.0 and abs(adjusted_x) <= fwidth

        ratio = fwidth / fheight
        circular_x = adjusted_x / ratio
        circular_y = adjusted_y
        radius_sqr = fheight * fheight
        dist_sqr = circular_x * circular_x + circular_y * circular_y
        return radius_sqr >= dist_sqr

    def intersects_local_position(self, position: Position) -> bool:
        """Return True if the tile lies inside or on the ellipse.

        Args:
            position: Position relative to the bounding box's top-left.
        """
        return self._intersects_offset(position.x, position.y)

    def contains_local_position(self, position: Position) -> Containment:
        """Classify a tile relative to the oval.

        Args:
            position: Position relative to the bounding box's top-left.

        Returns:
            DISJOINT outside the ellipse, INTERSECTS on its boundary ring,
            CONTAINS inside the ring.
        """
        x, y = position.x, position.y
        if not self._intersects_offset(x, y):
            return Containment.DISJOINT

        fwidth, fheight = _semi_axes(self.area.size)
        fmin_bounds = inner_bounds(self.area.size)
        # A segment has no interior; otherwise a zero-width square still
        # holds the exact centre tile.
        is_segment = fwidth == 0.0 or fheight == 0.0
        if (
            not is_segment
            and abs(x - fwidth) <= fmin_bounds
            and abs(y - fheight) <= fmin_bounds
        ):
            return Containment.CONTAINS

        for dx, dy in _MOORE_NEIGHBOURHOOD:
            if not self._intersects_offset(x + dx, y + dy):
                return Containment.INTERSECTS
        return Containment.CONTAINS
