"""Tri-state containment classification and slice inclusion tags."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Self


class Containment(IntEnum):
    """How a position relates to a shape.

    Members are totally ordered (DISJOINT < INTERSECTS < CONTAINS), so
    ``max`` and ``min`` combine classifications from several shapes.
    """

    DISJOINT = 0  # outside the shape
    INTERSECTS = 1  # on the shape's boundary
    CONTAINS = 2  # strictly inside the shape

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Decode an integer in [0, 2].

        Raises:
            ValueError: If ``value`` is out of range. Callers only produce
                in-range values, so this signals a logic defect.
        """
        if value not in (0, 1, 2):
            raise ValueError(f"Cannot convert {value} to Containment; range is [0..2]")
        return cls(value)

    def inverted(self) -> Containment:
        """Swap DISJOINT and CONTAINS; INTERSECTS is a fixed point."""
        return Containment(2 - self.value)


class Inclusion(str, Enum):
    """Whether a slice member adds to or subtracts from the combined shape."""

    INCLUDE = "include"
    EXCLUDE = "exclude"
