"""
どこで: `linal.common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: 設定層で `os.getenv` + 例外/境界ガードを毎回書かずに済ませるため。
"""

from __future__ import annotations

import os
from typing import Iterable, Optional


def env_float(name: str, default: Optional[float] = None) -> Optional[float]:
    """浮動小数環境変数を取得（存在しない/不正値/非有限値は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    if val != val or val in (float("inf"), float("-inf")):
        return default
    return val


def env_choice(name: str, choices: Iterable[str], default: Optional[str] = None) -> Optional[str]:
    """列挙値の環境変数を取得（小文字化して `choices` に含まれなければ既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    return s if s in {c.lower() for c in choices} else default


__all__ = ["env_float", "env_choice"]
