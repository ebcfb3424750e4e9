"""Providers backed by plain zero-argument callables.

Useful when a value comes from somewhere other than a range, such as a
counter, a lookup table, or a closure over generation state. The ``rng``
argument of each ``provide_*`` method is accepted for interface
compatibility and ignored.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from dungen_geometry.geometry.primitives import Area, Count, Position, Size


class PositionProvider:
    """Provides positions by calling a function."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Position]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[], Position]:
        """Return the wrapped function."""
        return self._func

    def provide_position(self, rng: np.random.Generator | None = None) -> Position:
        _ = rng
        return self._func()


class SizeProvider:
    """Provides sizes by calling a function."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Size]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[], Size]:
        """Return the wrapped function."""
        return self._func

    def provide_size(self, rng: np.random.Generator | None = None) -> Size:
        _ = rng
        return self._func()


class AreaProvider:
    """Provides areas by calling a function."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Area]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[], Area]:
        """Return the wrapped function."""
        return self._func

    def provide_area(self, rng: np.random.Generator | None = None) -> Area:
        _ = rng
        return self._func()


class CountProvider:
    """Provides counts by calling a function."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Count]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[], Count]:
        """Return the wrapped function."""
        return self._func

    def provide_count(self, rng: np.random.Generator | None = None) -> Count:
        _ = rng
        return self._func()
