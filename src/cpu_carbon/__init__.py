"""CPU Carbon - CO2 estimates for processor time."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "CO2Estimate",
    "CO2EstimateRecord",
    "EstimationConfig",
    "InvalidInputError",
    "estimate_co2",
    "estimate_co2_breakdown",
    "load_config",
]

if TYPE_CHECKING:
    from .carbon_models import CO2Estimate
    from .config_loader import load_config
    from .errors import InvalidInputError
    from .estimation import EstimationConfig, estimate_co2, estimate_co2_breakdown
    from .schemas import CO2EstimateRecord


def __getattr__(name: str) -> Any:
    """Lazily import modules so the core does not pull in pydantic."""

    module_map = {
        "CO2Estimate": "carbon_models",
        "CO2EstimateRecord": "schemas",
        "EstimationConfig": "estimation",
        "InvalidInputError": "errors",
        "estimate_co2": "estimation",
        "estimate_co2_breakdown": "estimation",
        "load_config": "config_loader",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
