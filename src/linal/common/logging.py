"""
linal 向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけで、ハンドラは設定しない。
- デモ/スクリプトなど上位のランナーが、設定が無い場合に最小構成を 1 度だけ適用する。
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 未知のレベル名は INFO として扱う
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "DEFAULT_FORMAT"]
