"""
どこで: `linal.common.settings`
何を: linal の実行時設定（ゼロ除算ポリシー/近似比較の許容誤差）を型付きで一元管理し、起動時に読み込む。
なぜ: YAML と環境変数の解決を 1 か所に集約し、既定値/型の一貫性とテスト容易性を高めるため。

優先順（低 → 高）:
1) `_Settings` の既定値
2) `configs/default.yaml` / ルート `config.yaml` の `linal:` セクション
3) 環境変数 `LINAL_ZERO_DIVISION` / `LINAL_APPROX_REL_TOL` / `LINAL_APPROX_ABS_TOL`
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from ..util.utils import load_config

from .env import env_choice, env_float
from .types import ZERO_DIVISION_POLICIES, ZERO_DIVISION_RAISE

logger = logging.getLogger(__name__)

CONFIG_SECTION = "linal"


@dataclass
class _Settings:
    # ゼロ除算: "raise" | "ieee"
    ZERO_DIVISION: str = ZERO_DIVISION_RAISE

    # is_close の既定許容誤差
    APPROX_REL_TOL: float = 1e-9
    APPROX_ABS_TOL: float = 1e-12


_settings = _Settings()


def _policy_from_config(raw: Any, default: str) -> str:
    if raw is None:
        return default
    s = str(raw).strip().lower()
    if s in ZERO_DIVISION_POLICIES:
        return s
    logger.warning("invalid zero_division in config: %r (using %r)", raw, default)
    return default


def _tol_from_config(key: str, raw: Any, default: float) -> float:
    if raw is None:
        return default
    try:
        val = float(raw)
    except (TypeError, ValueError):
        logger.warning("invalid %s in config: %r (using %r)", key, raw, default)
        return default
    if not (val >= 0.0) or val == float("inf"):
        logger.warning("invalid %s in config: %r (using %r)", key, raw, default)
        return default
    return val


def _warn_invalid_env(name: str, valid: bool) -> None:
    if not valid:
        logger.warning("ignoring invalid %s=%r", name, os.getenv(name))


def _env_choice_valid(name: str) -> bool:
    raw = os.getenv(name)
    return raw is None or raw.strip().lower() in ZERO_DIVISION_POLICIES


def _tol_from_env(name: str, default: float) -> float:
    """許容誤差の環境変数を取得（不正値/非有限値/負値は警告して `default`）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    val = env_float(name)
    if val is None or val < 0.0:
        logger.warning("ignoring invalid %s=%r (using %r)", name, raw, default)
        return default
    return val


def reload_from_env(config: Mapping[str, Any] | None = None) -> None:
    """設定ファイルと環境変数から設定を再読込。

    - `config` を渡した場合はファイル読込の代わりにその辞書（`linal:` セクション相当）を使う。
    - 不正値は警告ログを出して下位の値にフォールバックする。
    """
    defaults = _Settings()
    if config is None:
        section = load_config().get(CONFIG_SECTION, {})
        config = section if isinstance(section, Mapping) else {}

    # 設定ファイル
    policy = _policy_from_config(config.get("zero_division"), defaults.ZERO_DIVISION)
    rel_tol = _tol_from_config("approx_rel_tol", config.get("approx_rel_tol"), defaults.APPROX_REL_TOL)
    abs_tol = _tol_from_config("approx_abs_tol", config.get("approx_abs_tol"), defaults.APPROX_ABS_TOL)

    # 環境変数（最優先）
    _settings.ZERO_DIVISION = env_choice("LINAL_ZERO_DIVISION", ZERO_DIVISION_POLICIES, policy) or policy
    _warn_invalid_env("LINAL_ZERO_DIVISION", _env_choice_valid("LINAL_ZERO_DIVISION"))
    _settings.APPROX_REL_TOL = _tol_from_env("LINAL_APPROX_REL_TOL", rel_tol)
    _settings.APPROX_ABS_TOL = _tol_from_env("LINAL_APPROX_ABS_TOL", abs_tol)

    logger.debug(
        "settings reloaded: zero_division=%s rel_tol=%g abs_tol=%g",
        _settings.ZERO_DIVISION,
        _settings.APPROX_REL_TOL,
        _settings.APPROX_ABS_TOL,
    )


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "CONFIG_SECTION"]
