"""Plain-English explanations for recommended vehicles."""

from __future__ import annotations

from carbonwise.config.vehicle import FuelType, VehicleProfile
from carbonwise.models.results import EmissionsResult


def explain_recommendation(
    vehicle: VehicleProfile,
    emissions: EmissionsResult,
    state: str,
    grid_intensity: float,
    rank: int,
) -> str:
    """One-paragraph reason why ``vehicle`` sits at ``rank`` (0-based)."""
    name = vehicle.display_name
    daily_km = f"{emissions.daily_km:g}"
    years = f"{emissions.years:g}"
    total = f"{emissions.total_kg:,}"
    manufacturing = f"{emissions.manufacturing_kg:,}"
    fuel = vehicle.fuel_type

    if rank == 0:
        if fuel == FuelType.CNG:
            return (
                f"At {daily_km} km/day in {state} for {years} years, the {name} achieves the lowest "
                f"lifecycle carbon footprint of {total} kg CO₂. CNG's low manufacturing emissions "
                f"({manufacturing} kg) and competitive per-km efficiency make it the cleanest choice "
                f"at your usage pattern."
            )
        if fuel == FuelType.ELECTRIC:
            return (
                f"At {daily_km} km/day in {state} for {years} years, the {name} has the lowest total "
                f"footprint at {total} kg CO₂. Despite higher manufacturing emissions ({manufacturing} kg), "
                f"{state}'s grid intensity of {grid_intensity:g} kg CO₂/kWh enables the EV to offset its "
                f"carbon debt within your ownership period."
            )
        if fuel == FuelType.HYBRID:
            return (
                f"The {name} tops our recommendation at {total} kg CO₂ total. Its hybrid powertrain "
                f"combines low petrol consumption with electric efficiency, resulting in the best carbon "
                f"outcome for {state} at your driving pattern."
            )
        unit = vehicle.midc_efficiency_unit or fuel.efficiency_unit
        return (
            f"At {daily_km} km/day in {state} for {years} years, the {name} has the lowest lifecycle "
            f"footprint at {total} kg CO₂. Its fuel efficiency of {vehicle.midc_efficiency:g} {unit} "
            f"keeps operational emissions competitive."
        )

    if fuel == FuelType.ELECTRIC:
        return (
            f"The {name} totals {total} kg CO₂. Its battery manufacturing adds {manufacturing} kg upfront. "
            f"At {state}'s grid intensity of {grid_intensity:g} kg CO₂/kWh, the EV needs extended driving "
            f"to offset compared to lower-emission alternatives."
        )

    return (
        f"The {name} totals {total} kg CO₂ over {years} years. Manufacturing contributes {manufacturing} kg "
        f"and operations add {emissions.operational_kg:,} kg at your {daily_km} km/day usage in {state}."
    )
