"""Usage profile — how, where and for how long a vehicle is driven."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UsagePattern(str, Enum):
    """Driving-style adjustment relative to the MIDC cycle."""

    CITY = "CITY"
    HIGHWAY = "HIGHWAY"
    MIXED = "MIXED"


class UsageProfile(BaseModel):
    """One owner's driving profile."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    daily_km: float = Field(gt=0, description="Average distance driven per day (km)")
    years: float = Field(gt=0, description="Ownership period (years)")
    usage_pattern: UsagePattern = Field(default=UsagePattern.MIXED, description="CITY | HIGHWAY | MIXED")
    grid_intensity: float = Field(
        gt=0,
        description="State grid carbon intensity (kg CO₂/kWh). The caller resolves "
                    "unknown states to a default; the engine never does.",
    )
