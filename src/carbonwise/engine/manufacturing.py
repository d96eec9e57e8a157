"""Manufacturing and disposal emissions.

Lab figures are used as-is when present. Manufacturing falls back to a
weight + battery heuristic; disposal is never estimated.
"""

from __future__ import annotations

from carbonwise.config.vehicle import VehicleProfile
from carbonwise.engine.factors import (
    BATTERY_KG_CO2_PER_KWH,
    DEFAULT_KERB_WEIGHT_KG,
    MANUFACTURING_KG_CO2_PER_KG,
    UNMANAGED_BATTERY_THRESHOLD_KWH,
    UNMANAGED_DISPOSAL_PENALTY,
)


def estimate_manufacturing_emissions(vehicle: VehicleProfile) -> float:
    """Heuristic cradle-to-gate emissions (kg CO₂).

    kerb_weight × 4.0 + battery_kWh × 150, with a 1200 kg default weight.
    """
    weight = vehicle.kerb_weight_kg or DEFAULT_KERB_WEIGHT_KG
    emissions = weight * MANUFACTURING_KG_CO2_PER_KG
    if vehicle.battery_capacity_kwh:
        emissions += vehicle.battery_capacity_kwh * BATTERY_KG_CO2_PER_KWH
    return emissions


def resolve_manufacturing_emissions(vehicle: VehicleProfile) -> float:
    if vehicle.manufacturing_emissions_kg is not None:
        return vehicle.manufacturing_emissions_kg
    return estimate_manufacturing_emissions(vehicle)


def has_unmanaged_battery(vehicle: VehicleProfile) -> bool:
    """Battery above 5 kWh with no manufacturer recycling programme."""
    return (
        not vehicle.has_recycling_program
        and (vehicle.battery_capacity_kwh or 0.0) > UNMANAGED_BATTERY_THRESHOLD_KWH
    )


def resolve_disposal_emissions(vehicle: VehicleProfile) -> float:
    """Known disposal figure (0 when absent), ×1.5 for an unmanaged battery."""
    disposal = vehicle.disposal_emissions_kg or 0.0
    if has_unmanaged_battery(vehicle):
        disposal *= UNMANAGED_DISPOSAL_PENALTY
    return disposal


def upfront_emissions(vehicle: VehicleProfile) -> float:
    """Manufacturing + disposal — the emissions not tied to distance driven."""
    return resolve_manufacturing_emissions(vehicle) + resolve_disposal_emissions(vehicle)
