"""Point class for 2D drawing coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Self

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """An immutable (x, y) position in the caller's drawing space.

    Points add and subtract with other points or plain 2-tuples, and unpack
    like a tuple:

        x, y = layout[1]
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def coerce(cls, value: Point | tuple[float, float] | NDArray[np.float64]) -> Self:
        """Convert a point-like value (Point, pair, or length-2 array) to a Point."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other: Point | tuple[float, float]) -> Point:
        ox, oy = other
        return Point(self.x + ox, self.y + oy)

    def __radd__(self, other: tuple[float, float]) -> Point:
        return self + other

    def __sub__(self, other: Point | tuple[float, float]) -> Point:
        ox, oy = other
        return Point(self.x - ox, self.y - oy)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_array(self) -> NDArray[np.float64]:
        """Return the point as a length-2 float array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def is_close(self, other: Point | tuple[float, float], tol: float = 1e-9) -> bool:
        """Check whether two points coincide within an absolute tolerance."""
        ox, oy = other
        return abs(self.x - ox) <= tol and abs(self.y - oy) <= tol


# Origin of the drawing space
O = Point(0.0, 0.0)
