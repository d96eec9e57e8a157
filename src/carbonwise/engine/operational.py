"""Operational emission model — kg CO₂ per km for each fuel type.

Energy use per km is computed once (``fuel_consumption_per_km`` /
``electricity_consumption_per_km``) and priced in two ways: by emission
factor here, and by unit price in ``engine.tco``.
"""

from __future__ import annotations

from carbonwise.config.vehicle import FuelType, VehicleProfile
from carbonwise.engine.factors import (
    CHARGING_LOSS_FACTOR,
    COMBUSTION_EMISSION_FACTORS,
    HYBRID_ELECTRIC_EFFICIENCY_PENALTY,
    HYBRID_ELECTRIC_FRACTION,
    PETROL_KG_CO2_PER_LITRE,
)
from carbonwise.engine.validation import require_efficiency, require_positive
from carbonwise.errors import UnknownFuelType


def fuel_consumption_per_km(vehicle: VehicleProfile) -> float:
    """Litres (kg for CNG) of fuel burned per km."""
    fuel = vehicle.fuel_type
    if fuel in COMBUSTION_EMISSION_FACTORS:
        return 1.0 / require_efficiency(vehicle)
    if fuel == FuelType.ELECTRIC:
        return 0.0
    if fuel == FuelType.HYBRID:
        return (1.0 - HYBRID_ELECTRIC_FRACTION) / require_efficiency(vehicle)
    raise UnknownFuelType(fuel)


def electricity_consumption_per_km(vehicle: VehicleProfile) -> float:
    """kWh drawn from the grid per km, charging losses included.

    For a hybrid this is the electric share of each km, driven at the
    penalised efficiency of a hybrid drivetrain.
    """
    fuel = vehicle.fuel_type
    if fuel in COMBUSTION_EMISSION_FACTORS:
        return 0.0
    if fuel == FuelType.ELECTRIC:
        return CHARGING_LOSS_FACTOR / require_efficiency(vehicle)
    if fuel == FuelType.HYBRID:
        efficiency = require_efficiency(vehicle) * HYBRID_ELECTRIC_EFFICIENCY_PENALTY
        return HYBRID_ELECTRIC_FRACTION * CHARGING_LOSS_FACTOR / efficiency
    raise UnknownFuelType(fuel)


def operational_emission_per_km(vehicle: VehicleProfile, grid_intensity: float) -> float:
    """Tailpipe plus grid emissions per km (kg CO₂/km), before usage adjustment.

    - PETROL / DIESEL / CNG: fuel per km × combustion factor
    - ELECTRIC: grid kWh per km × grid intensity
    - HYBRID: 65 % petrol, 35 % electric; the electric share counts only
      when the vehicle has a traction battery

    Raises
    ------
    UnknownFuelType
        Fuel type outside the five recognised values.
    InvalidInput
        Missing / non-positive efficiency or grid intensity.
    """
    require_positive("grid_intensity", grid_intensity)
    fuel = vehicle.fuel_type

    if fuel in COMBUSTION_EMISSION_FACTORS:
        return fuel_consumption_per_km(vehicle) * COMBUSTION_EMISSION_FACTORS[fuel]

    if fuel == FuelType.ELECTRIC:
        return electricity_consumption_per_km(vehicle) * grid_intensity

    if fuel == FuelType.HYBRID:
        petrol_part = fuel_consumption_per_km(vehicle) * PETROL_KG_CO2_PER_LITRE
        electric_part = (
            electricity_consumption_per_km(vehicle) * grid_intensity
            if vehicle.battery_capacity_kwh
            else 0.0
        )
        return petrol_part + electric_part

    raise UnknownFuelType(fuel)
