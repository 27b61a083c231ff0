from __future__ import annotations

import pytest

from linal.common.env import env_choice, env_float


def test_env_float(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINAL_TEST_FLOAT", "1e-3")
    assert env_float("LINAL_TEST_FLOAT") == 1e-3
    for bad in ("inf", "nan", "abc"):
        monkeypatch.setenv("LINAL_TEST_FLOAT", bad)
        assert env_float("LINAL_TEST_FLOAT", 2.0) == 2.0


def test_env_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINAL_TEST_CHOICE", " IEEE ")
    assert env_choice("LINAL_TEST_CHOICE", ("raise", "ieee")) == "ieee"
    monkeypatch.setenv("LINAL_TEST_CHOICE", "other")
    assert env_choice("LINAL_TEST_CHOICE", ("raise", "ieee"), "raise") == "raise"
