"""Public entrypoint for the linal vector library.

This module re-exports the user-facing value types so that applications can
simply import from ``linal`` instead of individual submodules.
"""

from .point import Point
from .vec2 import Vec2
from .vec3 import Vec3

__version__ = "0.3.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Point",
]
