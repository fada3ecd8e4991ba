"""Result models for CPU carbon estimates.

:func:`cpu_carbon.estimation.estimate_co2` returns a bare ``float``; the
breakdown variant returns :class:`CO2Estimate` so callers can inspect every
intermediate value. Serialisation goes through
:class:`cpu_carbon.schemas.CO2EstimateRecord`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CO2Estimate:
    """Breakdown of a single CPU-time emission estimate."""

    grams: float
    cpu_seconds: float
    time_hours: float
    energy_kwh: float
    cpu_power_kw: float
    carbon_intensity_gco2_kwh: float
    cpu_power_is_default: bool = True
    carbon_intensity_is_default: bool = True
