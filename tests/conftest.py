"""共通フィクスチャ。

- 乱数シード固定
- セッション開始時に LINAL_* 環境変数を除去して設定を既定値へ戻す
- 設定を書き換えるテスト向けの復元フィクスチャ/ゼロ除算ポリシーの切替
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from linal.common import settings

LINAL_ENV_VARS = (
    "LINAL_ZERO_DIVISION",
    "LINAL_APPROX_REL_TOL",
    "LINAL_APPROX_ABS_TOL",
)


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(scope="session", autouse=True)
def default_settings() -> Iterator[None]:
    # hypothesis は function スコープの autouse フィクスチャを拒否するためセッション単位で行う
    with pytest.MonkeyPatch.context() as mp:
        for name in LINAL_ENV_VARS:
            mp.delenv(name, raising=False)
        settings.reload_from_env()
        yield
    settings.reload_from_env()


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を書き換えるテスト用。終了時に LINAL_* を消して設定を再読込する。"""
    yield monkeypatch
    for name in LINAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()


@pytest.fixture()
def ieee_division(settings_env: pytest.MonkeyPatch) -> Iterator[None]:
    settings_env.setenv("LINAL_ZERO_DIVISION", "ieee")
    settings.reload_from_env()
    yield
