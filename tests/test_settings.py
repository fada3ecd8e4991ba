"""Tests for environment-backed settings."""

from __future__ import annotations

import pytest

from cpu_carbon.settings import get_settings


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.cpu_power_kw is None
    assert settings.carbon_intensity is None
    assert settings.config_path is None
    assert settings.log_level == "WARNING"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CPU_CARBON_CPU_POWER_KW", " 0.12 ")
    monkeypatch.setenv("CPU_CARBON_CARBON_INTENSITY", "250")
    monkeypatch.setenv("CPU_CARBON_CONFIG_PATH", "/tmp/cpu_carbon.yml")
    monkeypatch.setenv("CPU_CARBON_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.cpu_power_kw == pytest.approx(0.12)
    assert settings.carbon_intensity == pytest.approx(250.0)
    assert settings.config_path == "/tmp/cpu_carbon.yml"
    assert settings.log_level == "DEBUG"


def test_malformed_numbers_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CPU_CARBON_CPU_POWER_KW", "fast")
    monkeypatch.setenv("CPU_CARBON_CARBON_INTENSITY", "")
    settings = get_settings()
    assert settings.cpu_power_kw is None
    assert settings.carbon_intensity is None
