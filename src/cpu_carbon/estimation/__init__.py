"""CPU carbon estimation package.

Provides :func:`estimate_co2` along with the override record, default
constants and the breakdown variant.
"""

from __future__ import annotations

from .configuration import EffectiveParameters, EstimationConfig, resolve_parameters
from .defaults import DEFAULT_CARBON_INTENSITY, DEFAULT_CPU_POWER_KW
from .estimator import estimate_co2, estimate_co2_breakdown

__all__ = [
    "DEFAULT_CARBON_INTENSITY",
    "DEFAULT_CPU_POWER_KW",
    "EffectiveParameters",
    "EstimationConfig",
    "estimate_co2",
    "estimate_co2_breakdown",
    "resolve_parameters",
]
