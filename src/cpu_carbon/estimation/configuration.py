"""Override handling for :mod:`cpu_carbon.estimation`.

Callers describe optional overrides with :class:`EstimationConfig`. Each field
is resolved on its own: a missing or non-positive value falls back to the
matching constant in :mod:`cpu_carbon.estimation.defaults`, so supplying one
override never forces the other.
"""

from __future__ import annotations

from dataclasses import dataclass

from cpu_carbon.estimation.defaults import (
    DEFAULT_CARBON_INTENSITY,
    DEFAULT_CPU_POWER_KW,
)

__all__ = ["EstimationConfig", "EffectiveParameters", "resolve_parameters"]


@dataclass(slots=True, frozen=True)
class EstimationConfig:
    """Optional overrides for a single estimate.

    Attributes:
        cpu_power_kw: Processor power draw in kilowatts. Used only when
            strictly positive.
        carbon_intensity: Grid carbon intensity in gCO2/kWh. Used only when
            strictly positive.
    """

    cpu_power_kw: float | None = None
    carbon_intensity: float | None = None


@dataclass(slots=True, frozen=True)
class EffectiveParameters:
    """Resolved parameters feeding the emission formula.

    Attributes:
        cpu_power_kw: Power draw applied to the CPU time, in kilowatts.
        carbon_intensity: Carbon intensity applied to the energy, in gCO2/kWh.
        cpu_power_is_default: ``True`` when ``cpu_power_kw`` came from the
            defaults.
        carbon_intensity_is_default: ``True`` when ``carbon_intensity`` came
            from the defaults.
    """

    cpu_power_kw: float
    carbon_intensity: float
    cpu_power_is_default: bool
    carbon_intensity_is_default: bool


def _pick(override: float | None, default: float) -> tuple[float, bool]:
    if override is not None and override > 0:
        return override, False
    return default, True


def resolve_parameters(config: EstimationConfig | None = None) -> EffectiveParameters:
    """Resolve effective parameters from optional overrides.

    Args:
        config: Optional overrides. ``None`` selects both defaults.

    Returns:
        A frozen :class:`EffectiveParameters` instance.
    """

    if config is None:
        return EffectiveParameters(
            cpu_power_kw=DEFAULT_CPU_POWER_KW,
            carbon_intensity=DEFAULT_CARBON_INTENSITY,
            cpu_power_is_default=True,
            carbon_intensity_is_default=True,
        )

    cpu_power_kw, power_default = _pick(config.cpu_power_kw, DEFAULT_CPU_POWER_KW)
    carbon_intensity, intensity_default = _pick(
        config.carbon_intensity, DEFAULT_CARBON_INTENSITY
    )
    return EffectiveParameters(
        cpu_power_kw=cpu_power_kw,
        carbon_intensity=carbon_intensity,
        cpu_power_is_default=power_default,
        carbon_intensity_is_default=intensity_default,
    )
