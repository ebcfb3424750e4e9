"""Geometry module for dungen-geometry.

This package provides tile-grid primitives, tri-state containment, the
capability protocols shapes implement, and composite shapes.

Key Components:
    - Primitives: Position, Size, Area models on the integer tile grid
    - Oval: ellipse inscribed in an area, with a closed boundary ring
    - Composition: InvertPlacedShape and PlacedShapeSlice
    - Directions: CardinalDirection and CardinalRotation
    - Render: containment grids and text rendering

Example:
    from dungen_geometry.geometry import (
        Area, Inclusion, InvertPlacedShape, Oval, PlacedShapeSlice, Position,
    )

    room = Area.from_tuple((0, 0, 9, 7))
    pillar = InvertPlacedShape(Oval(area=Area.from_tuple((3, 2, 3, 3))))
    hall = PlacedShapeSlice([(Inclusion.INCLUDE, room), (Inclusion.EXCLUDE, pillar)])
    hall.contains_position(Position(x=4, y=3))  # Containment.DISJOINT
    hall.contains_position(Position(x=1, y=1))  # Containment.CONTAINS
"""

from dungen_geometry.geometry.capabilities import (
    AreaMixin,
    BoundsMixin,
    ContainsLocalPosition,
    ContainsPosition,
    HasArea,
    HasPosition,
    HasSize,
    IntersectsLocalPosition,
    IntersectsPosition,
    IsArea,
    IsSize,
    PlacedShape,
    PlacedShapeMixin,
    ProvidesArea,
    ProvidesCount,
    ProvidesPlacedShape,
    ProvidesPosition,
    ProvidesSize,
    Shape,
)
from dungen_geometry.geometry.composition import InvertPlacedShape, PlacedShapeSlice
from dungen_geometry.geometry.containment import Containment, Inclusion
from dungen_geometry.geometry.directions import CardinalDirection, CardinalRotation
from dungen_geometry.geometry.oval import Oval, inner_bounds
from dungen_geometry.geometry.primitives import (
    Area,
    Coord,
    Count,
    Length,
    Position,
    Size,
)
from dungen_geometry.geometry.render import (
    RenderStyle,
    containment_grid,
    padded,
    render_containment,
)

__all__ = [
    "Area",
    "AreaMixin",
    "BoundsMixin",
    "CardinalDirection",
    "CardinalRotation",
    "Containment",
    "ContainsLocalPosition",
    "ContainsPosition",
    "Coord",
    "Count",
    "HasArea",
    "HasPosition",
    "HasSize",
    "Inclusion",
    "IntersectsLocalPosition",
    "IntersectsPosition",
    "InvertPlacedShape",
    "IsArea",
    "IsSize",
    "Length",
    "Oval",
    "PlacedShape",
    "PlacedShapeMixin",
    "PlacedShapeSlice",
    "Position",
    "ProvidesArea",
    "ProvidesCount",
    "ProvidesPlacedShape",
    "ProvidesPosition",
    "ProvidesSize",
    "RenderStyle",
    "Shape",
    "Size",
    "containment_grid",
    "inner_bounds",
    "padded",
    "render_containment",
]
