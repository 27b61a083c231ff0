from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from linal._scalar import (
    divide_components,
    format_component,
    parse_components,
    to_float,
)


def test_to_float_accepts_reals() -> None:
    assert to_float(3) == 3.0
    assert to_float(np.int64(-2)) == -2.0
    assert to_float(np.float32(0.5)) == 0.5


@pytest.mark.parametrize("bad", [False, "2", 1j, np.bool_(True), object()])
def test_to_float_rejects(bad) -> None:
    with pytest.raises(TypeError, match="real number"):
        to_float(bad, "k")


def test_divide_components_raise_policy() -> None:
    assert divide_components((1.0, 3.0), 2) == (0.5, 1.5)
    with pytest.raises(ZeroDivisionError):
        divide_components((1.0, 3.0), 0)
    with pytest.raises(TypeError):
        divide_components((1.0,), "2")


@pytest.mark.usefixtures("ieee_division")
def test_divide_components_ieee_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="linal._scalar"):
        out = divide_components((1.0, -1.0, 0.0), -0.0)
    assert out[0] == -math.inf
    assert out[1] == math.inf
    assert math.isnan(out[2])
    assert "IEEE division" in caplog.text


@pytest.mark.parametrize(
    "value, text",
    [(1.0, "1"), (-0.0, "-0"), (0.1, "0.1"), (-2.5, "-2.5"), (math.inf, "inf"), (1e-20, "1e-20")],
)
def test_format_component(value: float, text: str) -> None:
    assert format_component(value) == text


def test_format_component_nan() -> None:
    assert format_component(math.nan) == "nan"


def test_parse_components_errors() -> None:
    assert parse_components("1 -2.5 3e2", 3, "Vec3") == (1.0, -2.5, 300.0)
    with pytest.raises(ValueError, match="expects 2 components"):
        parse_components("1 2 3", 2, "Vec2")
    with pytest.raises(TypeError):
        parse_components(b"1 2", 2, "Vec2")  # type: ignore[arg-type]


def test_to_float_overflow_is_value_error() -> None:
    assert to_float(10**300) == 1e300
    with pytest.raises(ValueError, match="k is out of float range"):
        to_float(10**400, "k")
