"""Tests for override resolution."""

from __future__ import annotations

import dataclasses

import pytest

from cpu_carbon.estimation.configuration import EstimationConfig, resolve_parameters
from cpu_carbon.estimation.defaults import (
    DEFAULT_CARBON_INTENSITY,
    DEFAULT_CPU_POWER_KW,
)


def test_resolve_without_config_uses_defaults() -> None:
    params = resolve_parameters(None)
    assert params.cpu_power_kw == DEFAULT_CPU_POWER_KW
    assert params.carbon_intensity == DEFAULT_CARBON_INTENSITY
    assert params.cpu_power_is_default
    assert params.carbon_intensity_is_default


def test_resolve_is_per_field() -> None:
    """Supplying one override does not require the other."""
    params = resolve_parameters(EstimationConfig(carbon_intensity=120.0))
    assert params.cpu_power_kw == DEFAULT_CPU_POWER_KW
    assert params.cpu_power_is_default
    assert params.carbon_intensity == 120.0
    assert not params.carbon_intensity_is_default


@pytest.mark.parametrize("value", [0, 0.0, -0.0, -1.0])
def test_non_positive_overrides_fall_back(value: float) -> None:
    params = resolve_parameters(
        EstimationConfig(cpu_power_kw=value, carbon_intensity=value)
    )
    assert params.cpu_power_kw == DEFAULT_CPU_POWER_KW
    assert params.carbon_intensity == DEFAULT_CARBON_INTENSITY
    assert params.cpu_power_is_default
    assert params.carbon_intensity_is_default


def test_config_is_immutable() -> None:
    config = EstimationConfig(cpu_power_kw=0.1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.cpu_power_kw = 0.2  # type: ignore[misc]
