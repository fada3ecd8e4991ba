"""Exception types raised by :mod:`cpu_carbon`."""

from __future__ import annotations

__all__ = ["InvalidInputError", "INVALID_CPU_SECONDS_MESSAGE"]

INVALID_CPU_SECONDS_MESSAGE = "cpuSeconds must be greater than zero"


class InvalidInputError(ValueError):
    """Raised when an estimate is requested for a non-positive CPU time."""
