"""Geometry primitives for dungen-geometry.

This module provides immutable Pydantic models for representing positions,
sizes, and areas on an integer tile grid. All coordinates follow the
convention where (0, 0) is the top-left corner, x grows towards the east
and y grows towards the south.

Positions are signed and may lie anywhere on the grid. Sizes are
non-negative. An ``Area`` is a position plus a size; its right and bottom
edges are inclusive tile coordinates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, Field

from dungen_geometry.geometry.capabilities import AreaMixin, PlacedShapeMixin
from dungen_geometry.geometry.containment import Containment
from dungen_geometry.geometry.directions import CardinalDirection, CardinalRotation

if TYPE_CHECKING:
    import numpy as np

# A coordinate component; negative, zero or positive.
Coord = int
# A distance; zero or positive.
Length = int
# A number of things; zero or positive.
Count = int

_DIRECTION_OFFSETS: dict[CardinalDirection, tuple[int, int]] = {
    CardinalDirection.NORTH: (0, -1),
    CardinalDirection.EAST: (1, 0),
    CardinalDirection.SOUTH: (0, 1),
    CardinalDirection.WEST: (-1, 0),
}


class Position(BaseModel, frozen=True):
    """A signed position on the tile grid.

    Attributes:
        x: Horizontal component (tiles east of the origin).
        y: Vertical component (tiles south of the origin).
    """

    x: Coord = Field(..., description="X coordinate (tiles east of origin)")
    y: Coord = Field(..., description="Y coordinate (tiles south of origin)")

    @classmethod
    def zero(cls) -> Self:
        """Return the origin (0, 0)."""
        return cls(x=0, y=0)

    @classmethod
    def from_direction(cls, direction: CardinalDirection) -> Self:
        """Return the unit offset one tile towards ``direction``.

        NORTH is (0, -1) because y grows towards the south.
        """
        dx, dy = _DIRECTION_OFFSETS[direction]
        return cls(x=dx, y=dy)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[int, int]) -> Self:
        """Create Position from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> Position:
        return Position(x=-self.x, y=-self.y)

    def __str__(self) -> str:
        return f"( x: {self.x}, y: {self.y} )"

    def rotated(self, rotation: CardinalRotation) -> Position:
        """Rotate about the origin by a quarter-turn multiple.

        RIGHT_90 maps (x, y) to (y, -x); four of them return the original.

        Args:
            rotation: Rotation to apply.

        Returns:
            The rotated position.
        """
        if rotation is CardinalRotation.RIGHT_90:
            return Position(x=self.y, y=-self.x)
        if rotation is CardinalRotation.FULL_180:
            return Position(x=-self.x, y=-self.y)
        if rotation is CardinalRotation.LEFT_90:
            return Position(x=-self.y, y=self.x)
        return self

    @property
    def position(self) -> Position:
        """A position is its own position."""
        return self

    def provide_position(self, rng: np.random.Generator | None = None) -> Position:
        """Return this position; fixed values ignore ``rng``."""
        _ = rng
        return self


class Size(BaseModel, frozen=True):
    """A non-negative tile extent.

    A size is also a shape: the rectangle of its extent anchored at the
    origin.

    Attributes:
        width: Horizontal extent in tiles.
        height: Vertical extent in tiles.
    """

    width: Length = Field(..., ge=0, description="Width in tiles")
    height: Length = Field(..., ge=0, description="Height in tiles")

    @classmethod
    def zero(cls) -> Self:
        """Return the empty size (0, 0)."""
        return cls(width=0, height=0)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[int, int]) -> Self:
        """Create Size from (width, height) tuple."""
        return cls(width=size[0], height=size[1])

    def __str__(self) -> str:
        return f"( width: {self.width}, height: {self.height} )"

    def rotated(self, rotation: CardinalRotation) -> Size:
        """Rotate by a quarter-turn multiple; quarter turns swap the axes."""
        if rotation in (CardinalRotation.RIGHT_90, CardinalRotation.LEFT_90):
            return Size(width=self.height, height=self.width)
        return self

    @property
    def size(self) -> Size:
        """A size is its own size."""
        return self

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        """Return this size; fixed values ignore ``rng``."""
        _ = rng
        return self

    def contains_local_position(self, position: Position) -> Containment:
        """Classify a position against the rectangle anchored at the origin.

        Positions on the outermost ring of tiles INTERSECT, positions
        strictly inside CONTAIN, anything else is DISJOINT.

        Args:
            position: Position relative to the top-left tile.

        Returns:
            The containment classification.
        """
        right = max(self.width - 1, 0)
        bottom = max(self.height - 1, 0)
        x, y = position.x, position.y
        if x < 0 or y < 0 or x > right or y > bottom:
            return Containment.DISJOINT
        if x in (0, right) or y in (0, bottom):
            return Containment.INTERSECTS
        return Containment.CONTAINS

    def intersects_local_position(self, position: Position) -> bool:
        """Return True if the position is one of the rectangle's tiles.

        Uses the half-open test ``0 <= x < width and 0 <= y < height``; a
        zero-sized rectangle has no tiles.
        """
        return 0 <= position.x < self.width and 0 <= position.y < self.height


class Area(AreaMixin, PlacedShapeMixin, BaseModel, frozen=True):
    """A rectangular area on the tile grid.

    Represents a bounding box defined by a top-left ``position`` and a
    ``size``. The right and bottom edges are inclusive tile coordinates:

    - Top-left: (x, y)
    - Bottom-right: (x + max(width - 1, 0), y + max(height - 1, 0))

    An area is the simplest placed shape. Its edge tiles INTERSECT and its
    interior tiles CONTAIN.

    Attributes:
        position: Top-left tile.
        size: Extent in tiles.
    """

    position: Position = Field(..., description="Top-left tile")
    size: Size = Field(..., description="Extent in tiles")

    @classmethod
    def from_size(cls, size: Size) -> Self:
        """Create an Area of ``size`` at the origin."""
        return cls(position=Position.zero(), size=size)

    @classmethod
    def from_tuple(cls, bbox: tuple[int, int, int, int]) -> Self:
        """Create Area from (x, y, width, height) tuple."""
        return cls(
            position=Position(x=bbox[0], y=bbox[1]),
            size=Size(width=bbox[2], height=bbox[3]),
        )

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (x, y, width, height) tuple."""
        return (self.position.x, self.position.y, self.size.width, self.size.height)

    def __str__(self) -> str:
        return f"( {self.position}, {self.size} )"

    @property
    def area(self) -> Area:
        """An area is its own area."""
        return self

    def with_position(self, position: Position) -> Area:
        """Return a copy moved to ``position``."""
        return self.model_copy(update={"position": position})

    def with_size(self, size: Size) -> Area:
        """Return a copy resized to ``size``."""
        return self.model_copy(update={"size": size})

    def provide_position(self, rng: np.random.Generator | None = None) -> Position:
        _ = rng
        return self.position

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        _ = rng
        return self.size

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        """Return this area; fixed values ignore ``rng``."""
        _ = rng
        return self

    def contains_local_position(self, position: Position) -> Containment:
        return self.size.contains_local_position(position)

    def intersects_local_position(self, position: Position) -> bool:
        return self.size.intersects_local_position(position)
