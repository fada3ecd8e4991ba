"""Public entry points for the :mod:`cpu_carbon` configuration loader."""

from __future__ import annotations

from cpu_carbon.config_loader.parsing import (
    apply_cli_overrides,
    apply_environment_overrides,
    apply_structured_overrides,
)
from cpu_carbon.config_loader.sources import load_structured_config
from cpu_carbon.estimation.configuration import EstimationConfig
from cpu_carbon.settings import CpuCarbonSettings, get_settings

__all__ = [
    "EstimationConfig",
    "apply_cli_overrides",
    "load_config",
]


def load_config(
    path: str | None = None, *, settings: CpuCarbonSettings | None = None
) -> EstimationConfig:
    """Load estimation overrides from environment and optional file sources.

    File values take precedence over environment values. Non-positive numbers
    are kept as-is; the estimator decides how to treat them.

    Args:
        path: Optional explicit path to a configuration file. When omitted the
            loader inspects the environment and default search locations.
        settings: Optional pre-instantiated environment settings. When omitted
            :func:`cpu_carbon.settings.get_settings` is used.

    Returns:
        A populated :class:`EstimationConfig`; fields without an override
        are ``None``.
    """

    env_settings = settings or get_settings()
    base = apply_environment_overrides(EstimationConfig(), env_settings)
    structured = load_structured_config(path, env_settings)
    if structured is None:
        return base
    return apply_structured_overrides(base, structured)
