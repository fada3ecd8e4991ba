"""Environment-backed settings primitives for :mod:`cpu_carbon`."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["CpuCarbonSettings", "get_settings"]


class CpuCarbonSettings(BaseSettings):
    """Expose environment-derived configuration knobs for cpu-carbon.

    All environment lookups go through this class. Every attribute maps to a
    documented environment variable and defaults to ``None`` (or an inline
    default) when the variable is not present.

    Attributes:
        cpu_power_kw: Processor power draw override in kilowatts.
        carbon_intensity: Carbon intensity override in gCO2/kWh.
        config_path: Explicit path to a JSON or YAML configuration file.
        log_level: Default log level name used by the command-line tool.
    """

    cpu_power_kw: float | None = Field(default=None, alias="CPU_CARBON_CPU_POWER_KW")
    carbon_intensity: float | None = Field(
        default=None, alias="CPU_CARBON_CARBON_INTENSITY"
    )
    config_path: str | None = Field(default=None, alias="CPU_CARBON_CONFIG_PATH")
    log_level: str = Field(default="WARNING", alias="CPU_CARBON_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("cpu_power_kw", "carbon_intensity", mode="before")
    @classmethod
    def _parse_optional_float(cls, value: object) -> float | None:
        """Parse optional float fields while tolerating malformed input.

        Args:
            value: Raw environment value.

        Returns:
            Parsed float when conversion succeeds, otherwise ``None``.
        """

        if value is None:
            return None
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

    @field_validator("config_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> str | None:
        if value in (None, ""):
            return None
        return str(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            return "WARNING"
        return value.strip().upper()


def get_settings() -> CpuCarbonSettings:
    """Return a :class:`CpuCarbonSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return CpuCarbonSettings()
