"""
どこで: `linal.common` パッケージ。
何を: linal 本体が使う軽量な共通基盤（環境変数ヘルパ/設定/ロギング/型エイリアス）。
なぜ: ベクトル型から設定解決の責務を分離し、依存の向きを単純化するため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
