from __future__ import annotations

"""Points on a plane.

A :class:`Point` is a location, a :class:`~linal.vec2.Vec2` is a displacement.
Only the affine combinations make sense:

- ``Point + Vec2 -> Point``
- ``Point - Vec2 -> Point``
- ``Point - Point -> Vec2``
"""

import math
from dataclasses import dataclass
from typing import Iterator

from .common.types import Scalar, Tuple2

from ._scalar import format_component, parse_components, to_float
from .vec2 import Vec2


@dataclass(frozen=True, eq=False)
class Point:
    """2D point in cartesian coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_float(self.x, "x"))
        object.__setattr__(self, "y", to_float(self.y, "y"))

    @classmethod
    def zero(cls) -> "Point":
        """Return the origin."""
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, r: Scalar, theta: Scalar) -> "Point":
        r_f, t_f = to_float(r, "r"), to_float(theta, "theta")
        return cls(r_f * math.cos(t_f), r_f * math.sin(t_f))

    @classmethod
    def from_vec2(cls, v: Vec2) -> "Point":
        """Return the point whose radius vector is ``v``."""
        if not isinstance(v, Vec2):
            raise TypeError(f"v must be Vec2: got {type(v).__name__}")
        return cls(v.x, v.y)

    @classmethod
    def parse(cls, text: str) -> "Point":
        x, y = parse_components(text, 2, cls.__name__)
        return cls(x, y)

    def position(self) -> Vec2:
        """Radius vector from the origin to this point."""
        return Vec2(self.x, self.y)

    def as_tuple(self) -> Tuple2:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"{format_component(self.x)} {format_component(self.y)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Point | Vec2":
        if isinstance(other, Point):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec2):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)


__all__ = ["Point"]
