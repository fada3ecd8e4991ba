"""Default constants for CPU carbon estimation."""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_CPU_POWER_KW",
    "DEFAULT_CARBON_INTENSITY",
    "SECONDS_PER_HOUR",
]

DEFAULT_CPU_POWER_KW: Final[float] = 0.05  # 50 W
DEFAULT_CARBON_INTENSITY: Final[float] = 475.0  # global average, gCO2/kWh
SECONDS_PER_HOUR: Final[float] = 3600.0
