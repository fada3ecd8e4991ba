"""CPU-time carbon estimation.

The model is linear: energy = power × time and emissions = energy × carbon
intensity. Both functions here are pure; they read only their arguments and
the module-level defaults, perform no I/O and do not log.
"""

from __future__ import annotations

from cpu_carbon.carbon_models import CO2Estimate
from cpu_carbon.errors import INVALID_CPU_SECONDS_MESSAGE, InvalidInputError
from cpu_carbon.estimation.configuration import EstimationConfig, resolve_parameters
from cpu_carbon.estimation.defaults import SECONDS_PER_HOUR

__all__ = ["estimate_co2", "estimate_co2_breakdown"]


def estimate_co2_breakdown(
    cpu_seconds: float, config: EstimationConfig | None = None
) -> CO2Estimate:
    """Estimate emissions for ``cpu_seconds`` and keep every intermediate value.

    Args:
        cpu_seconds: Processor time in seconds. Must be greater than zero.
        config: Optional overrides. Missing or non-positive fields fall back
            to the defaults.

    Returns:
        A :class:`~cpu_carbon.carbon_models.CO2Estimate` whose ``grams`` field
        equals :func:`estimate_co2` for the same arguments.

    Raises:
        InvalidInputError: If ``cpu_seconds`` is zero or negative.
    """

    # NaN compares false here and is passed through to the result.
    if cpu_seconds <= 0:
        raise InvalidInputError(INVALID_CPU_SECONDS_MESSAGE)

    params = resolve_parameters(config)

    time_hours = cpu_seconds / SECONDS_PER_HOUR
    energy_kwh = params.cpu_power_kw * time_hours
    co2_grams = energy_kwh * params.carbon_intensity

    return CO2Estimate(
        grams=co2_grams,
        cpu_seconds=cpu_seconds,
        time_hours=time_hours,
        energy_kwh=energy_kwh,
        cpu_power_kw=params.cpu_power_kw,
        carbon_intensity_gco2_kwh=params.carbon_intensity,
        cpu_power_is_default=params.cpu_power_is_default,
        carbon_intensity_is_default=params.carbon_intensity_is_default,
    )


def estimate_co2(cpu_seconds: float, config: EstimationConfig | None = None) -> float:
    """Estimate CO2 emissions in grams for ``cpu_seconds`` of processor time.

    Args:
        cpu_seconds: Processor time in seconds. Must be greater than zero.
        config: Optional overrides; ``None`` uses both defaults.

    Returns:
        Estimated emissions in grams of CO2.

    Raises:
        InvalidInputError: If ``cpu_seconds`` is zero or negative.
    """

    return estimate_co2_breakdown(cpu_seconds, config).grams
