from __future__ import annotations

"""Vectors on a plane.

:class:`Vec2` is an immutable 2D vector in cartesian coordinates. Components
are stored as ``float`` regardless of the real number type used to build the
vector, so ``Vec2(1, 2) == Vec2(1.0, 2.0)``.
"""

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .common.types import Scalar, Tuple2

from ._scalar import (
    array_components,
    divide_components,
    format_component,
    is_close_components,
    is_scalar,
    parse_components,
    sqrt_or_nan,
    to_float,
)


def _require_vec2(value: object, name: str = "other") -> "Vec2":
    if not isinstance(value, Vec2):
        raise TypeError(f"{name} must be Vec2: got {type(value).__name__}")
    return value


@dataclass(frozen=True, eq=False)
class Vec2:
    """2D vector in cartesian coordinates.

    Attributes
    ----------
    x, y:
        Components as float64. Any real number (``int``, ``float``,
        ``Fraction``, NumPy scalars) is accepted at construction.

    Every method returns a new value; instances are never mutated.
    """

    x: float
    y: float

    # NumPy scalars on the left of an operator defer to our reflected methods.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_float(self.x, "x"))
        object.__setattr__(self, "y", to_float(self.y, "y"))

    # -- constructors -------------------------------------------------

    @classmethod
    def zero(cls) -> "Vec2":
        """Return the zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, r: Scalar, theta: Scalar) -> "Vec2":
        """Build a vector from polar coordinates ``(r, theta)``, theta in radians."""
        r_f, t_f = to_float(r, "r"), to_float(theta, "theta")
        return cls(r_f * math.cos(t_f), r_f * math.sin(t_f))

    @classmethod
    def from_array(cls, arr: object) -> "Vec2":
        """Build a vector from an array-like of shape ``(2,)``."""
        x, y = array_components(arr, 2, cls.__name__)
        return cls(x, y)

    @classmethod
    def parse(cls, text: str) -> "Vec2":
        """Parse the ``str()`` form, two whitespace-separated numbers (``"1 2"``)."""
        x, y = parse_components(text, 2, cls.__name__)
        return cls(x, y)

    # -- arithmetic ---------------------------------------------------

    def add(self, other: "Vec2") -> "Vec2":
        """Componentwise sum."""
        o = _require_vec2(other)
        return Vec2(self.x + o.x, self.y + o.y)

    def sub(self, other: "Vec2") -> "Vec2":
        """Componentwise difference ``self - other``."""
        o = _require_vec2(other)
        return Vec2(self.x - o.x, self.y - o.y)

    def mul(self, k: Scalar) -> "Vec2":
        """Scale both components by ``k``."""
        s = to_float(k, "k")
        return Vec2(self.x * s, self.y * s)

    def div(self, k: Scalar) -> "Vec2":
        """Divide both components by ``k``.

        Raises
        ------
        ZeroDivisionError
            If ``k == 0`` and the ``zero_division`` setting is ``"raise"``
            (the default). With ``"ieee"`` the result holds ``inf``/``nan``.
        """
        x, y = divide_components((self.x, self.y), k)
        return Vec2(x, y)

    def hadamard(self, other: "Vec2") -> "Vec2":
        """Componentwise product."""
        o = _require_vec2(other)
        return Vec2(self.x * o.x, self.y * o.y)

    def neg(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    # -- products -----------------------------------------------------

    def dot(self, other: "Vec2") -> float:
        """Scalar product ``x1*x2 + y1*y2``."""
        o = _require_vec2(other)
        return self.x * o.x + self.y * o.y

    def cross(self, other: "Vec2") -> float:
        """Scalar cross product ``x1*y2 - y1*x2``.

        Positive when ``other`` lies counter-clockwise from ``self``, negative
        when clockwise, zero when the two are collinear.
        """
        o = _require_vec2(other)
        return self.x * o.y - self.y * o.x

    def area(self, other: "Vec2") -> float:
        """Area of the parallelogram spanned by ``self`` and ``other`` (never negative)."""
        return abs(self.cross(other))

    def perp(self) -> "Vec2":
        """Orthogonal vector of the same length, rotated clockwise: ``(y, -x)``.

        >>> Vec2(2, 2).perp()
        Vec2(x=2.0, y=-2.0)
        """
        return Vec2(self.y, -self.x)

    def cross_z(self, k: Scalar) -> "Vec2":
        """Cross product with the out-of-plane vector ``k * e_z``."""
        return self.perp().mul(k)

    # -- metrics ------------------------------------------------------

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec2":
        """Unit vector co-directed with ``self``.

        The zero vector has no direction; it follows the zero-division policy.
        """
        return self.div(self.length())

    def sqr(self) -> "Vec2":
        """Squares of the components."""
        return self.hadamard(self)

    def sqrt(self) -> "Vec2":
        """Square roots of the components (negative components give ``nan``)."""
        return Vec2(sqrt_or_nan(self.x), sqrt_or_nan(self.y))

    def is_close(
        self,
        other: "Vec2",
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Componentwise ``math.isclose`` with tolerances from settings by default."""
        o = _require_vec2(other)
        return is_close_components(self.as_tuple(), o.as_tuple(), rel_tol, abs_tol)

    @staticmethod
    def dual_basis(basis: tuple["Vec2", "Vec2"]) -> tuple["Vec2", "Vec2"]:
        """Return the dual basis ``(b1, b2)`` of ``(a1, a2)``, with ``a_i . b_j = delta_ij``.

        Example
        -------
        >>> Vec2.dual_basis((Vec2(2, 0), Vec2(3, 4)))
        (Vec2(x=0.5, y=-0.375), Vec2(x=-0.0, y=0.25))

        A degenerate (collinear) basis follows the zero-division policy.
        """
        a, b = (_require_vec2(v, "basis vector") for v in basis)
        d = a.cross(b)
        return b.perp().div(d), a.perp().neg().div(d)

    # -- conversions --------------------------------------------------

    def as_tuple(self) -> Tuple2:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape ``(2,)``."""
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"{format_component(self.x)} {format_component(self.y)}"

    # -- operators ----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # componentwise, so a NaN component is never equal (even to itself)
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Vec2":
        if isinstance(other, Vec2):
            return self.hadamard(other)
        if is_scalar(other):
            return self.mul(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec2":
        if is_scalar(other):
            return self.mul(other)  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec2":
        if is_scalar(other):
            return self.div(other)  # type: ignore[arg-type]
        return NotImplemented

    def __neg__(self) -> "Vec2":
        return self.neg()

    def __pos__(self) -> "Vec2":
        return self


__all__ = ["Vec2"]
