"""
どこで: `linal.common` の型定義。
何を: スカラーとタプル形式のベクトルを表す軽量エイリアス（組込みジェネリックで記述）。
なぜ: `linal` の各モジュールで同じ注釈を使い回し、分散定義を避けるため。
"""

from __future__ import annotations

import numbers
from typing import Union

Scalar = Union[int, float, numbers.Real]
Tuple2 = tuple[float, float]
Tuple3 = tuple[float, float, float]

ZERO_DIVISION_RAISE = "raise"
ZERO_DIVISION_IEEE = "ieee"
ZERO_DIVISION_POLICIES = (ZERO_DIVISION_RAISE, ZERO_DIVISION_IEEE)


__all__ = [
    "Scalar",
    "Tuple2",
    "Tuple3",
    "ZERO_DIVISION_RAISE",
    "ZERO_DIVISION_IEEE",
    "ZERO_DIVISION_POLICIES",
]
