"""Pydantic models describing public cpu-carbon output schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from cpu_carbon.carbon_models import CO2Estimate

SchemaVersionLiteral = Literal["0.1.0"]
CURRENT_SCHEMA_VERSION: SchemaVersionLiteral = "0.1.0"


class CO2EstimateRecord(BaseModel):
    """Immutable, versioned JSON shape of a single estimate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["cpu_co2_estimate"] = Field(
        default="cpu_co2_estimate",
        description="Record type identifier.",
    )
    schema_version: SchemaVersionLiteral = Field(
        default=CURRENT_SCHEMA_VERSION,
        description="Semantic version of the record schema.",
    )
    cpu_seconds: float = Field(..., description="Processor time in seconds.")
    cpu_power_kw: float = Field(..., description="Power draw applied, in kW.")
    carbon_intensity_gco2_kwh: float = Field(
        ..., description="Carbon intensity applied, in gCO2/kWh."
    )
    energy_kwh: float = Field(..., description="Energy consumed, in kWh.")
    co2_grams: float = Field(..., description="Estimated emissions in grams.")
    defaults_used: list[Literal["cpu_power_kw", "carbon_intensity"]] = Field(
        default_factory=list,
        description="Parameters that fell back to their defaults.",
    )

    @classmethod
    def from_estimate(cls, estimate: CO2Estimate) -> "CO2EstimateRecord":
        """Build a record from a :class:`~cpu_carbon.carbon_models.CO2Estimate`."""

        defaults_used: list[Literal["cpu_power_kw", "carbon_intensity"]] = []
        if estimate.cpu_power_is_default:
            defaults_used.append("cpu_power_kw")
        if estimate.carbon_intensity_is_default:
            defaults_used.append("carbon_intensity")
        return cls(
            cpu_seconds=estimate.cpu_seconds,
            cpu_power_kw=estimate.cpu_power_kw,
            carbon_intensity_gco2_kwh=estimate.carbon_intensity_gco2_kwh,
            energy_kwh=estimate.energy_kwh,
            co2_grams=estimate.grams,
            defaults_used=defaults_used,
        )
