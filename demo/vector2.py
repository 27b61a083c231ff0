"""
どこで: demo/vector2.py（デモ用スクリプト）
何を: Vec2 の全演算を 1 行ずつ計算して表示する。
なぜ: 公開 API の挙動（表示形式/演算子/ゼロ除算ポリシー）を手早く確認するため。

起動: `python demo/vector2.py`
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# src/ を import パスへ追加（未インストール環境向けの簡易ブート）
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from linal.common.logging import setup_default_logging  # noqa: E402
from linal import Vec2  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    a = Vec2(2.0, 4.0)
    b = Vec2(3.15, 3.0)
    k, n = 3.4, 8.0
    r, theta = 2.0, 3.14

    print(f"({a}) + ({b}) = ({a + b})")
    print(f"({b}) - ({a}) = ({b - a})")
    print(f"({a}) * {k} = ({a * k})")
    print(f"({b}) / {n} = ({b / n})")
    print(f"Vec2.zero() = ({Vec2.zero()})")
    print(f"from_polar({r}, {theta}) = ({Vec2.from_polar(r, theta)})")
    print(f"<({a}), ({b})> = {a.dot(b)}")
    print(f"({a}).cross({b}) = {a.cross(b)}")
    print(f"({a}).area({b}) = {a.area(b)}")
    print(f"({a}).cross_z({k}) = ({a.cross_z(k)})")
    print(f"({a}).perp() = ({a.perp()})")
    print(f"({a}).length() = {a.length()}")
    print(f"({b}).normalized() = ({b.normalized()})")
    print(f"({a}).sqr() = ({a.sqr()})")
    print(f"({b}).sqrt() = ({b.sqrt()})")
    print(f"-({a}) = ({-a})")
    print(f"({a}) == ({b}) = {a == b}")
    b1, b2 = Vec2.dual_basis((Vec2(2, 0), Vec2(3, 4)))
    print(f"dual_basis((2 0), (3 4)) = (({b1}), ({b2}))")
    text = "3.5 2.8"
    print(f"{text} --> ({Vec2.parse(text)})")
    logger.debug("vector2 demo finished")


if __name__ == "__main__":
    setup_default_logging()
    main()
