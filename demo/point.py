"""
どこで: demo/point.py（デモ用スクリプト）
何を: Point と Vec2 の相互演算（点 ± ベクトル、点 - 点）を表示する。

起動: `python demo/point.py`
"""

from __future__ import annotations

import sys
from pathlib import Path

# src/ を import パスへ追加（未インストール環境向けの簡易ブート）
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from linal.common.logging import setup_default_logging  # noqa: E402
from linal import Point, Vec2  # noqa: E402


def main() -> None:
    vec = Vec2(3.3, 5.5)
    a = Point(2.3, 4.5)
    b = Point.from_vec2(vec)

    print(f"a = ({a})")
    print(f"convert Vec2({vec}) to Point({b})")
    print(f"Point.zero() = ({Point.zero()})")
    print(f"({a}).position() = ({a.position()})")
    print(f"({a}) + ({vec}) = ({a + vec})")
    print(f"({a}) - ({vec}) = ({a - vec})")
    print(f"({a}) - ({b}) = ({a - b})")
    print(f"-({a}) = ({-a})")
    print(f"({a}) == ({b}) = {a == b}")
    text = "3.5 2.8"
    print(f"{text} --> ({Point.parse(text)})")


if __name__ == "__main__":
    setup_default_logging()
    main()
