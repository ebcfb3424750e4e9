"""Capability protocols and the mixins that implement their derived methods.

Shapes opt into exactly the capabilities they support. Each protocol names
the minimal members a type must supply; the mixins layer the derived
behaviour on top so it is written once:

- ``BoundsMixin`` derives ``x``/``y``/``width``/``height`` and the four
  edge coordinates from ``position`` and ``size``; ``AreaMixin`` adds
  ``with_right``/``with_bottom`` for values that own their size.
- ``PlacedShapeMixin`` derives absolute queries from the local ones by
  translating ``local = absolute - self.position``. Concrete shapes only
  implement ``contains_local_position`` and ``intersects_local_position``.

All values are immutable, so the mutable half of each ``Has*`` accessor
pair is expressed as a ``with_*`` method returning an updated copy.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from dungen_geometry.geometry.containment import Containment
    from dungen_geometry.geometry.primitives import Area, Count, Position, Size


# =============================================================================
# Accessor protocols
# =============================================================================


@runtime_checkable
class HasPosition(Protocol):
    """A value that stores a ``Position``."""

    @property
    def position(self) -> Position: ...


@runtime_checkable
class HasSize(Protocol):
    """A value that stores a ``Size``."""

    @property
    def size(self) -> Size: ...


@runtime_checkable
class HasArea(HasPosition, HasSize, Protocol):
    """A value that stores an ``Area`` (and therefore a position and size)."""

    @property
    def area(self) -> Area: ...


# =============================================================================
# Provider protocols
# =============================================================================


class ProvidesPosition(Protocol):
    """Produces a fresh ``Position`` on request (stored or sampled)."""

    def provide_position(self, rng: np.random.Generator | None = None) -> Position: ...


class ProvidesSize(Protocol):
    """Produces a fresh ``Size`` on request (stored or sampled)."""

    def provide_size(self, rng: np.random.Generator | None = None) -> Size: ...


class ProvidesArea(Protocol):
    """Produces a fresh ``Area`` on request (stored or sampled)."""

    def provide_area(self, rng: np.random.Generator | None = None) -> Area: ...


class ProvidesCount(Protocol):
    """Produces a fresh ``Count`` on request (stored or sampled)."""

    def provide_count(self, rng: np.random.Generator | None = None) -> Count: ...


class ProvidesPlacedShape(Protocol):
    """Produces a fresh ``PlacedShape`` on request (stored or sampled)."""

    def provide_placed_shape(
        self, rng: np.random.Generator | None = None
    ) -> PlacedShape: ...


# =============================================================================
# Refinement protocols
# =============================================================================


@runtime_checkable
class IsSize(HasSize, ProvidesSize, Protocol):
    """A value that owns a size and can also provide it.

    ``BoundsMixin`` supplies ``width`` and ``height``.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


@runtime_checkable
class IsArea(IsSize, HasArea, ProvidesArea, Protocol):
    """A value that owns an area and exposes its edge coordinates.

    ``BoundsMixin`` supplies the edges from ``position`` and ``size``.
    """

    @property
    def left(self) -> int: ...

    @property
    def top(self) -> int: ...

    @property
    def right(self) -> int: ...

    @property
    def bottom(self) -> int: ...


# =============================================================================
# Query protocols
# =============================================================================


class ContainsLocalPosition(Protocol):
    """Classifies a position relative to the value's own top-left origin."""

    def contains_local_position(self, position: Position) -> Containment: ...


class IntersectsLocalPosition(Protocol):
    """Tests a position relative to the value's own top-left origin."""

    def intersects_local_position(self, position: Position) -> bool: ...


class ContainsPosition(HasPosition, ContainsLocalPosition, Protocol):
    """Classifies an absolute position."""

    def contains_position(self, position: Position) -> Containment: ...


class IntersectsPosition(HasPosition, IntersectsLocalPosition, Protocol):
    """Tests an absolute position."""

    def intersects_position(self, position: Position) -> bool: ...


@runtime_checkable
class Shape(HasSize, ContainsLocalPosition, IntersectsLocalPosition, Protocol):
    """A tile shape that can be queried locally but has no placement."""


@runtime_checkable
class PlacedShape(Shape, HasArea, ContainsPosition, IntersectsPosition, Protocol):
    """A tile shape placed at an absolute position.

    "Shape" rather than "polygon": shapes need not have regular vertices
    or edges.
    """

    @property
    def left(self) -> int: ...

    @property
    def top(self) -> int: ...

    @property
    def right(self) -> int: ...

    @property
    def bottom(self) -> int: ...

    def clone(self) -> Self:
        """Return an independent handle to an equal shape."""
        ...


# =============================================================================
# Mixins
# =============================================================================


class BoundsMixin:
    """Edge and component accessors shared by every area-like value.

    Requires ``position`` and ``size`` attributes.
    """

    __slots__ = ()

    if TYPE_CHECKING:

        @property
        def position(self) -> Position: ...

        @property
        def size(self) -> Size: ...

    @property
    def x(self) -> int:
        """Horizontal component of the top-left corner."""
        return self.position.x

    @property
    def y(self) -> int:
        """Vertical component of the top-left corner."""
        return self.position.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def left(self) -> int:
        """Left-most tile coordinate; x grows towards the east."""
        return self.position.x

    @property
    def top(self) -> int:
        """Top-most tile coordinate; y grows towards the south."""
        return self.position.y

    @property
    def right(self) -> int:
        """Right-most tile coordinate.

        An area of width 0 or 1 has the same right tile as its left tile.
        """
        return self.position.x + max(self.size.width - 1, 0)

    @property
    def bottom(self) -> int:
        """Bottom-most tile coordinate.

        An area of height 0 or 1 has the same bottom tile as its top tile.
        """
        return self.position.y + max(self.size.height - 1, 0)


class AreaMixin(BoundsMixin):
    """``BoundsMixin`` plus edge setters for values that own their size.

    Requires a ``with_size`` method returning an updated copy.
    """

    __slots__ = ()

    if TYPE_CHECKING:

        def with_size(self, size: Size) -> Self: ...

    def with_right(self, value: int) -> Self:
        """Return a copy whose right edge is ``value``.

        The width is clamped at 0 when ``value`` lies left of ``x``.
        """
        width = max(value - self.position.x + 1, 0)
        return self.with_size(self.size.model_copy(update={"width": width}))

    def with_bottom(self, value: int) -> Self:
        """Return a copy whose bottom edge is ``value``.

        The height is clamped at 0 when ``value`` lies above ``y``.
        """
        height = max(value - self.position.y + 1, 0)
        return self.with_size(self.size.model_copy(update={"height": height}))


class PlacedShapeMixin:
    """Absolute queries derived from local ones by translation.

    Requires a ``position`` attribute plus ``contains_local_position`` and
    ``intersects_local_position``.
    """

    __slots__ = ()

    if TYPE_CHECKING:

        @property
        def position(self) -> Position: ...

        def contains_local_position(self, position: Position) -> Containment: ...

        def intersects_local_position(self, position: Position) -> bool: ...

    def contains_position(self, position: Position) -> Containment:
        """Classify an absolute position against this shape."""
        return self.contains_local_position(position - self.position)

    def intersects_position(self, position: Position) -> bool:
        """Return True if an absolute position lies within this shape."""
        return self.intersects_local_position(position - self.position)

    def clone(self) -> Self:
        """Return an independent handle to an equal shape."""
        return copy.copy(self)
