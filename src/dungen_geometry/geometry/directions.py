"""Cardinal directions and quarter-turn rotations.

Both enums are closed cyclic groups of order four. Integer decoding wraps
modulo 4, so any sum or difference of members maps back onto a member.
"""

from __future__ import annotations

from enum import Enum
from typing import Self

_QUARTER_TURNS = 4


class CardinalRotation(Enum):
    """A rotation on the tile plane built from 90-degree steps."""

    NONE = 0
    RIGHT_90 = 1
    FULL_180 = 2
    LEFT_90 = 3

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Decode a quarter-turn count, wrapping modulo 4."""
        return cls(value % _QUARTER_TURNS)

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: CardinalRotation) -> CardinalRotation:
        if not isinstance(other, CardinalRotation):
            return NotImplemented
        return CardinalRotation.from_int(self.value + other.value)

    def __sub__(self, other: CardinalRotation) -> CardinalRotation:
        if not isinstance(other, CardinalRotation):
            return NotImplemented
        return CardinalRotation.from_int(self.value - other.value)

    def __neg__(self) -> CardinalRotation:
        # Negation is the half turn, matching the opposite-direction rule.
        return CardinalRotation.from_int(self.value + 2)


class CardinalDirection(Enum):
    """An orthogonal compass direction; y grows towards SOUTH."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Decode a direction index, wrapping modulo 4."""
        return cls(value % _QUARTER_TURNS)

    def __int__(self) -> int:
        return self.value

    def __add__(self, rotation: CardinalRotation) -> CardinalDirection:
        """Turn this direction by ``rotation``."""
        if not isinstance(rotation, CardinalRotation):
            return NotImplemented
        return CardinalDirection.from_int(self.value + rotation.value)

    def __sub__(self, other: CardinalDirection) -> CardinalRotation:
        """Return the rotation that turns ``other`` into this direction."""
        if not isinstance(other, CardinalDirection):
            return NotImplemented
        return CardinalRotation.from_int(self.value - other.value)

    def __neg__(self) -> CardinalDirection:
        return CardinalDirection.from_int(self.value + 2)
