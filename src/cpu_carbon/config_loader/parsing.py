"""Parsing and transformation helpers for :mod:`cpu_carbon.config_loader`."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from cpu_carbon.estimation.configuration import EstimationConfig
from cpu_carbon.settings import CpuCarbonSettings

LOGGER = logging.getLogger(__name__)

_SECTION = "estimation"
_FIELDS = ("cpu_power_kw", "carbon_intensity")


def apply_environment_overrides(
    config: EstimationConfig, settings: CpuCarbonSettings
) -> EstimationConfig:
    """Apply environment-derived overrides to the configuration.

    Args:
        config: Base configuration instance.
        settings: Environment-derived settings.

    Returns:
        Configuration with environment overrides applied.
    """

    updated = config
    if settings.cpu_power_kw is not None:
        updated = replace(updated, cpu_power_kw=settings.cpu_power_kw)
    if settings.carbon_intensity is not None:
        updated = replace(updated, carbon_intensity=settings.carbon_intensity)
    return updated


def apply_structured_overrides(
    config: EstimationConfig, data: Mapping[str, object]
) -> EstimationConfig:
    """Apply overrides sourced from structured configuration data.

    Values are read from the ``estimation`` section when present, otherwise
    from the top level of ``data``.

    Args:
        config: Base configuration instance.
        data: Mapping parsed from a configuration file.

    Returns:
        Configuration updated according to the provided mapping.
    """

    section = _expect_mapping(data.get(_SECTION))
    if section is None:
        section = data

    updated = config
    for name in _FIELDS:
        if name not in section:
            continue
        value = _coerce_float(section[name])
        if value is None:
            LOGGER.warning("Ignoring non-numeric %s value: %r", name, section[name])
            continue
        updated = replace(updated, **{name: value})
    return updated


def apply_cli_overrides(
    config: EstimationConfig,
    *,
    cpu_power_kw: float | None = None,
    carbon_intensity: float | None = None,
) -> EstimationConfig:
    """Apply explicit caller overrides; ``None`` leaves a field untouched."""

    updated = config
    if cpu_power_kw is not None:
        updated = replace(updated, cpu_power_kw=cpu_power_kw)
    if carbon_intensity is not None:
        updated = replace(updated, carbon_intensity=carbon_intensity)
    return updated


def _coerce_float(value: object) -> float | None:
    """Parse a float from arbitrary input.

    Args:
        value: Raw value.

    Returns:
        Parsed float when conversion succeeds, otherwise ``None``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _expect_mapping(value: object) -> Mapping[str, object] | None:
    if not isinstance(value, Mapping):
        return None
    if not all(isinstance(key, str) for key in value.keys()):
        return None
    return value
