"""Containment grids and text rendering for placed shapes.

A containment grid is a ``(height, width)`` numpy array of ``Containment``
values sampled over a bounding area, row-major in y like an image mask.
The text renderer turns it into one character per tile, which is the
quickest way to eyeball an oval's boundary ring or a slice's shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt

from dungen_geometry.config import settings
from dungen_geometry.geometry.containment import Containment
from dungen_geometry.geometry.primitives import Area, Position, Size

if TYPE_CHECKING:
    from dungen_geometry.geometry.capabilities import PlacedShape


def _default_chars() -> dict[Containment, str]:
    return {
        Containment.DISJOINT: settings.RENDER_DISJOINT_CHAR,
        Containment.INTERSECTS: settings.RENDER_INTERSECTS_CHAR,
        Containment.CONTAINS: settings.RENDER_CONTAINS_CHAR,
    }


@dataclass(frozen=True)
class RenderStyle:
    """Characters used for each containment class.

    Attributes:
        chars: Mapping of containment to a single display character.
            Defaults come from settings (" ", "#", ".").
    """

    chars: dict[Containment, str] = field(default_factory=_default_chars)

    def char_for(self, containment: Containment) -> str:
        return self.chars[containment]


def padded(area: Area, padding: int) -> Area:
    """Grow ``area`` by ``padding`` tiles on every side.

    Args:
        area: Area to grow.
        padding: Tiles to add per side; must be non-negative.

    Raises:
        ValueError: If padding is negative.
    """
    if padding < 0:
        raise ValueError(f"padding must be >= 0, got {padding}")
    return Area(
        position=Position(x=area.x - padding, y=area.y - padding),
        size=Size(width=area.width + 2 * padding, height=area.height + 2 * padding),
    )


def containment_grid(
    shape: PlacedShape,
    bounds: Area | None = None,
) -> npt.NDArray[Any]:
    """Classify every tile of ``bounds`` against ``shape``.

    Args:
        shape: Shape to query with absolute positions.
        bounds: Tiles to sample. Defaults to the shape's bounding area.

    Returns:
        ``int8`` array of shape ``(bounds.height, bounds.width)``; entry
        ``[row, col]`` is the containment of ``(bounds.x + col, bounds.y + row)``.
    """
    bounds = bounds if bounds is not None else shape.area
    grid = np.zeros((bounds.height, bounds.width), dtype=np.int8)
    for row in range(bounds.height):
        for col in range(bounds.width):
            position = Position(x=bounds.x + col, y=bounds.y + row)
            grid[row, col] = int(shape.contains_position(position))
    return grid


def render_containment(
    shape: PlacedShape,
    bounds: Area | None = None,
    style: RenderStyle | None = None,
) -> str:
    """Render ``shape`` as text, one line per row of ``bounds``.

    Args:
        shape: Shape to render.
        bounds: Tiles to render. Defaults to the shape's bounding area.
        style: Characters per containment class.

    Returns:
        The rendered rows joined by newlines.
    """
    style = style or RenderStyle()
    grid = containment_grid(shape, bounds)
    return "\n".join(
        "".join(style.char_for(Containment(int(value))) for value in row)
        for row in grid
    )
