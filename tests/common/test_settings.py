from __future__ import annotations

import logging

import pytest

from linal.common import settings
from linal import Vec2


def test_defaults() -> None:
    cfg = settings.get()
    assert cfg.ZERO_DIVISION == "raise"
    assert cfg.APPROX_REL_TOL == 1e-9
    assert cfg.APPROX_ABS_TOL == 1e-12


def test_env_overrides_policy(settings_env: pytest.MonkeyPatch) -> None:
    settings_env.setenv("LINAL_ZERO_DIVISION", "IEEE")
    settings.reload_from_env()
    assert settings.get().ZERO_DIVISION == "ieee"
    v = Vec2(1, 1) / 0
    assert v.x == float("inf")


def test_invalid_env_policy_falls_back_with_warning(
    settings_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    settings_env.setenv("LINAL_ZERO_DIVISION", "silently")
    with caplog.at_level(logging.WARNING, logger="linal.common.settings"):
        settings.reload_from_env()
    assert settings.get().ZERO_DIVISION == "raise"
    assert "LINAL_ZERO_DIVISION" in caplog.text


def test_env_tolerances(settings_env: pytest.MonkeyPatch) -> None:
    settings_env.setenv("LINAL_APPROX_ABS_TOL", "0.5")
    settings_env.setenv("LINAL_APPROX_REL_TOL", "0")
    settings.reload_from_env()
    assert settings.get().APPROX_ABS_TOL == 0.5
    assert settings.get().APPROX_REL_TOL == 0.0
    assert Vec2(1, 1).is_close(Vec2(1.4, 0.6))


def test_invalid_env_tolerance_keeps_config_value(settings_env: pytest.MonkeyPatch) -> None:
    settings_env.setenv("LINAL_APPROX_ABS_TOL", "nan")
    settings.reload_from_env({"approx_abs_tol": 0.25})
    assert settings.get().APPROX_ABS_TOL == 0.25


def test_config_mapping_is_applied_and_env_wins(settings_env: pytest.MonkeyPatch) -> None:
    settings.reload_from_env({"zero_division": "ieee", "approx_rel_tol": "1e-6"})
    assert settings.get().ZERO_DIVISION == "ieee"
    assert settings.get().APPROX_REL_TOL == 1e-6

    settings_env.setenv("LINAL_ZERO_DIVISION", "raise")
    settings.reload_from_env({"zero_division": "ieee"})
    assert settings.get().ZERO_DIVISION == "raise"


def test_invalid_config_values_fall_back(
    settings_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="linal.common.settings"):
        settings.reload_from_env({"zero_division": 3, "approx_abs_tol": "wide"})
    assert settings.get().ZERO_DIVISION == "raise"
    assert settings.get().APPROX_ABS_TOL == 1e-12
    assert "zero_division" in caplog.text
    assert "approx_abs_tol" in caplog.text


def test_negative_env_tolerance_falls_back_with_warning(
    settings_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    settings_env.setenv("LINAL_APPROX_REL_TOL", "-1")
    with caplog.at_level(logging.WARNING, logger="linal.common.settings"):
        settings.reload_from_env({"approx_rel_tol": 1e-6})
    # YAML の不正値と同じく、警告を出して下位の値を使う
    assert settings.get().APPROX_REL_TOL == 1e-6
    assert "LINAL_APPROX_REL_TOL" in caplog.text
