"""Regional inputs — grid intensity and energy prices for one state.

This is the caller-side layer that owns the fallback values used when a
state is missing from the data store. Engine functions only ever receive
the resolved numbers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from carbonwise.config.usage import UsagePattern, UsageProfile
from carbonwise.config.vehicle import FuelType

DEFAULT_GRID_INTENSITY = 0.71
"""kg CO₂/kWh — national average, used when a state has no grid record."""

DEFAULT_FUEL_PRICE = 100.0
"""₹ per litre / kg when a state has no fuel price record."""

DEFAULT_ELECTRICITY_PRICE = 8.0
"""₹ per kWh when a state has no electricity tariff record."""


class GridCategory(str, Enum):
    VERY_CLEAN = "Very Clean"
    CLEAN = "Clean"
    MODERATE = "Moderate"
    CARBON_HEAVY = "Carbon Heavy"
    VERY_CARBON_HEAVY = "Very Carbon Heavy"


# Upper bound (kg CO₂/kWh, inclusive) of each band; anything above is VERY_CARBON_HEAVY
GRID_CATEGORY_BOUNDS: tuple[tuple[float, GridCategory], ...] = (
    (0.30, GridCategory.VERY_CLEAN),
    (0.50, GridCategory.CLEAN),
    (0.70, GridCategory.MODERATE),
    (0.85, GridCategory.CARBON_HEAVY),
)


def grid_category(intensity: float) -> GridCategory:
    """Band a grid intensity falls into."""
    for upper, category in GRID_CATEGORY_BOUNDS:
        if intensity <= upper:
            return category
    return GridCategory.VERY_CARBON_HEAVY


class RegionProfile(BaseModel):
    """Grid and price data for one Indian state."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    state_name: str = Field(description="State / UT name as stored")
    grid_intensity: float = Field(default=DEFAULT_GRID_INTENSITY, gt=0, description="kg CO₂/kWh")
    renewable_pct: float | None = Field(default=None, ge=0, le=100, description="Renewable share of generation (%)")
    fuel_prices: dict[FuelType, float] = Field(
        default_factory=dict,
        description="₹ per unit keyed by fuel type (PETROL, DIESEL, CNG)",
    )
    default_fuel_price: float = Field(default=DEFAULT_FUEL_PRICE, gt=0)
    electricity_price: float = Field(default=DEFAULT_ELECTRICITY_PRICE, gt=0, description="₹ per kWh")

    @property
    def grid_category(self) -> GridCategory:
        return grid_category(self.grid_intensity)

    def fuel_price_for(self, fuel_type: FuelType) -> float:
        """Price per unit of the fuel a vehicle tanks up with.

        Hybrids buy petrol; electric vehicles buy electricity.
        """
        if fuel_type is FuelType.ELECTRIC:
            return self.electricity_price
        lookup = FuelType.PETROL if fuel_type is FuelType.HYBRID else fuel_type
        return self.fuel_prices.get(lookup, self.default_fuel_price)

    def usage(
        self,
        daily_km: float,
        years: float,
        usage_pattern: UsagePattern = UsagePattern.MIXED,
    ) -> UsageProfile:
        """Usage profile for driving in this state."""
        return UsageProfile(
            daily_km=daily_km,
            years=years,
            usage_pattern=usage_pattern,
            grid_intensity=self.grid_intensity,
        )
