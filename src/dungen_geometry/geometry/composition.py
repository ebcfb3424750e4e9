"""Shapes composed from other placed shapes.

- ``InvertPlacedShape`` flips the polarity of a single shape.
- ``PlacedShapeSlice`` folds an ordered collection of included and
  excluded shapes into one.

Both forward geometry (position, size, bounding area) and re-derive only
the containment classification.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Generic, TypeVar

from dungen_geometry.geometry.capabilities import (
    BoundsMixin,
    PlacedShape,
    PlacedShapeMixin,
)
from dungen_geometry.geometry.containment import Containment, Inclusion
from dungen_geometry.geometry.primitives import Area, Position, Size
from dungen_geometry.utils.logging import get_logger

if TYPE_CHECKING:
    import numpy as np

logger = get_logger(__name__)

TPlacedShape = TypeVar("TPlacedShape", bound=PlacedShape)


class InvertPlacedShape(BoundsMixin, PlacedShapeMixin, Generic[TPlacedShape]):
    """The logical complement of a placed shape.

    Positions outside the inner shape CONTAIN, its boundary still
    INTERSECTS, and its interior is DISJOINT. The bounding area stays that
    of the inner shape; the unbounded exterior is never materialized.

    Example:
        >>> area = Area(position=Position(x=0, y=0), size=Size(width=3, height=3))
        >>> inverted = InvertPlacedShape(area)
        >>> inverted.contains_position(Position(x=-1, y=-1))
        <Containment.CONTAINS: 2>
        >>> inverted.contains_position(Position(x=1, y=1))
        <Containment.DISJOINT: 0>
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: TPlacedShape) -> None:
        self._inner = inner

    def __repr__(self) -> str:
        return f"InvertPlacedShape({self._inner!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvertPlacedShape):
            return NotImplemented
        return bool(self._inner == other._inner)

    def __hash__(self) -> int:
        return hash((InvertPlacedShape, self._inner))

    @property
    def inner(self) -> TPlacedShape:
        """Return the wrapped shape."""
        return self._inner

    @property
    def position(self) -> Position:
        return self._inner.position

    @property
    def size(self) -> Size:
        return self._inner.size

    @property
    def area(self) -> Area:
        return self._inner.area

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        _ = rng
        return self._inner.area

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        _ = rng
        return self._inner.size

    def contains_local_position(self, position: Position) -> Containment:
        return self._inner.contains_local_position(position).inverted()

    def intersects_local_position(self, position: Position) -> bool:
        return self.contains_local_position(position) != Containment.DISJOINT

    def clone(self) -> InvertPlacedShape[TPlacedShape]:
        return InvertPlacedShape(self._inner.clone())


def _bounding_area(shapes: Iterable[PlacedShape]) -> Area:
    """Union bounding box of ``shapes``; zero-sized at the origin if empty."""
    shapes = list(shapes)
    if not shapes:
        return Area(position=Position.zero(), size=Size.zero())

    left = min(shape.left for shape in shapes)
    top = min(shape.top for shape in shapes)
    right = max(shape.right for shape in shapes)
    bottom = max(shape.bottom for shape in shapes)
    area = Area(position=Position(x=left, y=top), size=Size.zero())
    return area.with_right(right).with_bottom(bottom)


class PlacedShapeSlice(BoundsMixin, PlacedShapeMixin):
    """A boolean combination of placed shapes.

    Members are folded in insertion order starting from DISJOINT: an
    INCLUDE member combines with ``max`` (union) and an EXCLUDE member with
    ``min``, which keeps only what the member also covers. Exclusion can only
    lower what was included before it. To cut a hole, exclude the
    ``InvertPlacedShape`` of the hole.

    Example:
        >>> plus = PlacedShapeSlice([
        ...     (Inclusion.INCLUDE, Area.from_tuple((1, 0, 3, 5))),
        ...     (Inclusion.INCLUDE, Area.from_tuple((0, 1, 5, 3))),
        ... ])
        >>> plus.intersects_position(Position(x=0, y=0))
        False
        >>> plus.intersects_position(Position(x=2, y=0))
        True
    """

    __slots__ = ("_area", "_values")

    def __init__(self, values: Iterable[tuple[Inclusion, PlacedShape]] = ()) -> None:
        self._values: tuple[tuple[Inclusion, PlacedShape], ...] = tuple(values)
        self._area = _bounding_area(shape for _, shape in self._values)
        logger.debug(
            "Slice bounding area computed",
            members=len(self._values),
            area=self._area.to_tuple(),
        )

    def __repr__(self) -> str:
        return f"PlacedShapeSlice({list(self._values)!r})"

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple[tuple[Inclusion, PlacedShape], ...]:
        """Return the (inclusion, shape) members in fold order."""
        return self._values

    @property
    def area(self) -> Area:
        return self._area

    @property
    def position(self) -> Position:
        return self._area.position

    @property
    def size(self) -> Size:
        return self._area.size

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        _ = rng
        return self._area

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        _ = rng
        return self._area.size

    def provide_placed_shape(
        self, rng: np.random.Generator | None = None
    ) -> PlacedShapeSlice:
        _ = rng
        return self.clone()

    def contains_position(self, position: Position) -> Containment:
        """Fold member classifications of an absolute position in order."""
        containment = Containment.DISJOINT
        for inclusion, shape in self._values:
            member = shape.contains_position(position)
            if inclusion is Inclusion.INCLUDE:
                containment = max(containment, member)
            else:
                containment = min(containment, member)
        return containment

    def intersects_position(self, position: Position) -> bool:
        return self.contains_position(position) != Containment.DISJOINT

    def contains_local_position(self, position: Position) -> Containment:
        return self.contains_position(self.position + position)

    def intersects_local_position(self, position: Position) -> bool:
        return self.intersects_position(self.position + position)

    def clone(self) -> PlacedShapeSlice:
        return PlacedShapeSlice(
            (inclusion, shape.clone()) for inclusion, shape in self._values
        )
