"""Scalar helpers shared by the vector types.

Every component that enters a vector passes through :func:`to_float`, and
every division by a scalar goes through :func:`divide_components` so that the
configured zero-division policy is applied in one place.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Sequence

import numpy as np

from .common import settings
from .common.types import ZERO_DIVISION_IEEE

logger = logging.getLogger(__name__)


def to_float(value: object, name: str = "value") -> float:
    """Convert a real number to ``float``.

    Python ``int``/``float``, ``fractions.Fraction`` and NumPy integer or
    floating scalars are accepted. ``bool`` is rejected even though it is an
    ``int`` subclass, and integers too large for a float raise ``ValueError``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number: got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"{name} is out of float range: {value!r}") from exc


def is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def divide_components(components: Sequence[float], divisor: object) -> tuple[float, ...]:
    """Divide every component by ``divisor``.

    Raises
    ------
    ZeroDivisionError
        If ``divisor`` is zero and the ``zero_division`` setting is ``"raise"``.
    """
    k = to_float(divisor, "divisor")
    if k != 0.0:
        return tuple(c / k for c in components)

    if settings.get().ZERO_DIVISION != ZERO_DIVISION_IEEE:
        raise ZeroDivisionError("vector division by zero")

    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.asarray(components, dtype=np.float64) / np.float64(k)
    logger.debug("IEEE division by %r produced %s", k, out.tolist())
    return tuple(float(c) for c in out)


def parse_components(text: str, count: int, type_name: str) -> tuple[float, ...]:
    """Parse ``count`` whitespace-separated floats (the ``str()`` form of a vector)."""
    if not isinstance(text, str):
        raise TypeError(f"{type_name}.parse expects str: got {type(text).__name__}")
    words = text.split()
    if len(words) != count:
        raise ValueError(f"{type_name} expects {count} components: got {text!r}")
    try:
        return tuple(float(w) for w in words)
    except ValueError as exc:
        raise ValueError(f"invalid {type_name} component in {text!r}") from exc


def array_components(arr: object, count: int, type_name: str) -> tuple[float, ...]:
    """Read ``count`` components from an array-like of shape ``(count,)``.

    Integer and floating arrays are accepted. Object arrays go through
    :func:`to_float` element by element; any other dtype (bool, complex,
    strings) raises ``TypeError``.
    """
    a = np.asarray(arr)
    if a.shape != (count,):
        raise ValueError(f"{type_name} expects an array of shape ({count},): got {a.shape}")
    if a.dtype.kind == "O":
        return tuple(to_float(c, f"{type_name} component") for c in a)
    if a.dtype.kind not in "iuf":
        raise TypeError(f"{type_name} components must be real numbers: got dtype {a.dtype}")
    return tuple(float(c) for c in a)


def format_component(value: float) -> str:
    """Format like ``str(float)`` but drop the ``.0`` of integral values."""
    if math.isfinite(value) and value == int(value):
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        return f"{sign}{abs(int(value))}"
    return repr(value)


def sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


def is_close_components(
    a: Sequence[float],
    b: Sequence[float],
    rel_tol: float | None = None,
    abs_tol: float | None = None,
) -> bool:
    cfg = settings.get()
    rt = cfg.APPROX_REL_TOL if rel_tol is None else rel_tol
    at = cfg.APPROX_ABS_TOL if abs_tol is None else abs_tol
    return all(math.isclose(x, y, rel_tol=rt, abs_tol=at) for x, y in zip(a, b))


__all__ = [
    "to_float",
    "is_scalar",
    "divide_components",
    "parse_components",
    "array_components",
    "format_component",
    "is_close_components",
    "sqrt_or_nan",
]
