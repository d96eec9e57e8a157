"""Total cost of ownership — purchase + energy + insurance + maintenance (₹)."""

from __future__ import annotations

from carbonwise.config.vehicle import FuelType, VehicleProfile
from carbonwise.engine.factors import (
    INSURANCE_RATE_PER_YEAR,
    MAINTENANCE_PER_YEAR_DEFAULT,
    MAINTENANCE_PER_YEAR_ELECTRIC,
)
from carbonwise.engine.lifecycle import total_distance_km
from carbonwise.engine.operational import electricity_consumption_per_km, fuel_consumption_per_km
from carbonwise.engine.rounding import round_half_up
from carbonwise.engine.validation import require_finite, require_non_negative, require_positive
from carbonwise.errors import InvalidInput
from carbonwise.models.results import TCOBreakdown


def calculate_tco(
    vehicle: VehicleProfile,
    daily_km: float,
    years: float,
    fuel_price: float,
    electricity_price: float,
) -> TCOBreakdown:
    """Cost of owning ``vehicle`` for ``years`` at ``daily_km``.

    Energy use comes from the same per-km consumption model as the emission
    calculation: fuel at ``fuel_price`` per litre/kg, grid electricity
    (charging losses included) at ``electricity_price`` per kWh.

    Raises
    ------
    InvalidInput
        Missing price or efficiency, or non-positive distance / duration.
    """
    require_positive("daily_km", daily_km)
    require_positive("years", years)
    require_non_negative("fuel_price", fuel_price)
    require_non_negative("electricity_price", electricity_price)
    purchase_cost = vehicle.purchase_price
    if purchase_cost is None:
        raise InvalidInput(f"{vehicle.display_name or 'vehicle'} has no price")

    distance_km = total_distance_km(daily_km, years)
    fuel_cost = (
        distance_km * fuel_consumption_per_km(vehicle) * fuel_price
        + distance_km * electricity_consumption_per_km(vehicle) * electricity_price
    )

    insurance_cost = purchase_cost * INSURANCE_RATE_PER_YEAR * years
    maintenance_per_year = (
        MAINTENANCE_PER_YEAR_ELECTRIC if vehicle.fuel_type == FuelType.ELECTRIC
        else MAINTENANCE_PER_YEAR_DEFAULT
    )
    maintenance_cost = maintenance_per_year * years

    total_cost = require_finite("total cost", purchase_cost + fuel_cost + insurance_cost + maintenance_cost)

    return TCOBreakdown(
        purchase_cost=round_half_up(purchase_cost),
        fuel_cost=round_half_up(fuel_cost),
        insurance_cost=round_half_up(insurance_cost),
        maintenance_cost=round_half_up(maintenance_cost),
        total_cost=round_half_up(total_cost),
        cost_per_km=round_half_up(total_cost / distance_km, 2),
        total_distance_km=distance_km,
    )
