"""
どこで: demo/vector3.py（デモ用スクリプト）
何を: Vec3 の全演算（球座標/双対基底/外積を含む）を表示する。

起動: `python demo/vector3.py`
"""

from __future__ import annotations

import sys
from pathlib import Path

# src/ を import パスへ追加（未インストール環境向けの簡易ブート）
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from linal.common.logging import setup_default_logging  # noqa: E402
from linal import Vec3  # noqa: E402


def main() -> None:
    a = Vec3(2.0, 4.0, 8.0)
    b = Vec3(3.15, 3.0, 3.3)
    k, n = 3.4, 8.0
    r, theta, phi = 2.0, 1.57, 3.14

    print(f"({a}) + ({b}) = ({a + b})")
    print(f"({b}) - ({a}) = ({b - a})")
    print(f"({a}) * {k} = ({a * k})")
    print(f"({b}) / {n} = ({b / n})")
    print(f"Vec3.zero() = ({Vec3.zero()})")
    print(f"from_spherical({r}, {theta}, {phi}) = ({Vec3.from_spherical(r, theta, phi)})")

    a1, a2, a3 = Vec3(2, 0, 0), Vec3(3, 4, 0), Vec3(3, 4, 5)
    b1, b2, b3 = Vec3.dual_basis((a1, a2, a3))
    print(f"dual_basis(({a1}), ({a2}), ({a3})) = (({b1}), ({b2}), ({b3}))")

    print(f"<({a}), ({b})> = {a.dot(b)}")
    print(f"({a}).cross({b}) = ({a.cross(b)})")
    print(f"({a}).area({b}) = {a.area(b)}")
    print(f"({a}).length() = {a.length()}")
    print(f"({b}).normalized() = ({b.normalized()})")
    print(f"({a}).sqr() = ({a.sqr()})")
    print(f"({b}).sqrt() = ({b.sqrt()})")
    print(f"-({a}) = ({-a})")
    print(f"({a}) == ({b}) = {a == b}")
    text = "3.5 2.8 2.71"
    print(f"{text} --> ({Vec3.parse(text)})")


if __name__ == "__main__":
    setup_default_logging()
    main()
