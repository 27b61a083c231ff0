from __future__ import annotations

"""Vectors in 3-dimensional euclidean space."""

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .common.types import Scalar, Tuple3

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


def _require_vec3(value: object, name: str = "other") -> "Vec3":
    if not isinstance(value, Vec3):
        raise TypeError(f"{name} must be Vec3: got {type(value).__name__}")
    return value


@dataclass(frozen=True, eq=False)
class Vec3:
    """3D vector in cartesian coordinates.

    Same value semantics as :class:`linal.Vec2`, with a cross product that
    returns another :class:`Vec3`.
    """

    x: float
    y: float
    z: float

    # NumPy scalars on the left of an operator defer to our reflected methods.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_float(self.x, "x"))
        object.__setattr__(self, "y", to_float(self.y, "y"))
        object.__setattr__(self, "z", to_float(self.z, "z"))

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_spherical(cls, r: Scalar, theta: Scalar, phi: Scalar) -> "Vec3":
        """Build a vector from spherical coordinates.

        Parameters
        ----------
        r:
            Radius.
        theta:
            Polar angle from the +z axis, in radians.
        phi:
            Azimuth in the xy-plane from the +x axis, in radians.
        """
        r_f = to_float(r, "r")
        t_f = to_float(theta, "theta")
        p_f = to_float(phi, "phi")
        return cls(
            r_f * math.sin(t_f) * math.cos(p_f),
            r_f * math.sin(t_f) * math.sin(p_f),
            r_f * math.cos(t_f),
        )

    @classmethod
    def from_array(cls, arr: object) -> "Vec3":
        x, y, z = array_components(arr, 3, cls.__name__)
        return cls(x, y, z)

    @classmethod
    def parse(cls, text: str) -> "Vec3":
        """Parse three whitespace-separated numbers (``"1 2 3"``)."""
        x, y, z = parse_components(text, 3, cls.__name__)
        return cls(x, y, z)

    def add(self, other: "Vec3") -> "Vec3":
        o = _require_vec3(other)
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def sub(self, other: "Vec3") -> "Vec3":
        o = _require_vec3(other)
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def mul(self, k: Scalar) -> "Vec3":
        s = to_float(k, "k")
        return Vec3(self.x * s, self.y * s, self.z * s)

    def div(self, k: Scalar) -> "Vec3":
        """Divide every component by ``k`` (zero follows the ``zero_division`` setting)."""
        x, y, z = divide_components((self.x, self.y, self.z), k)
        return Vec3(x, y, z)

    def hadamard(self, other: "Vec3") -> "Vec3":
        o = _require_vec3(other)
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    def neg(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vec3") -> float:
        o = _require_vec3(other)
        return self.x * o.x + self.y * o.y + self.z * o.z

    def cross(self, other: "Vec3") -> "Vec3":
        """Cross product ``self x other``.

        The result is orthogonal to both operands, points along the right-hand
        rule and has the length of the spanned parallelogram's area.
        """
        o = _require_vec3(other)
        return Vec3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x,
        )

    def area(self, other: "Vec3") -> float:
        """Area of the parallelogram spanned by ``self`` and ``other``."""
        return self.cross(other).length()

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec3":
        """Unit vector co-directed with ``self`` (zero vector follows the zero-division policy)."""
        return self.div(self.length())

    def sqr(self) -> "Vec3":
        return self.hadamard(self)

    def sqrt(self) -> "Vec3":
        return Vec3(sqrt_or_nan(self.x), sqrt_or_nan(self.y), sqrt_or_nan(self.z))

    def is_close(
        self,
        other: "Vec3",
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        o = _require_vec3(other)
        return is_close_components(self.as_tuple(), o.as_tuple(), rel_tol, abs_tol)

    @staticmethod
    def dual_basis(basis: tuple["Vec3", "Vec3", "Vec3"]) -> tuple["Vec3", "Vec3", "Vec3"]:
        """Return the dual basis of ``(a1, a2, a3)``.

        Each dual vector is the cross product of the other two basis vectors
        divided by the scalar triple product ``(a1 x a2) . a3``; a coplanar
        basis (zero triple product) follows the zero-division policy.
        """
        a, b, c = (_require_vec3(v, "basis vector") for v in basis)
        triple = a.cross(b).dot(c)
        return b.cross(c).div(triple), c.cross(a).div(triple), a.cross(b).div(triple)

    def as_tuple(self) -> Tuple3:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return " ".join(format_component(c) for c in (self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __add__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return self.hadamard(other)
        if is_scalar(other):
            return self.mul(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec3":
        if is_scalar(other):
            return self.mul(other)  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec3":
        if is_scalar(other):
            return self.div(other)  # type: ignore[arg-type]
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return self.neg()

    def __pos__(self) -> "Vec3":
        return self


__all__ = ["Vec3"]
