"""Greenwash audit — rule checks of common marketing claims against vehicle data.

Each rule looks at the vehicle (and the local grid) independently; several
can fire at once. Flags come back in rule order, not severity order. The
audit never raises: a vehicle matching no rule yields an empty list.
"""

from __future__ import annotations

from typing import Callable

from carbonwise.config.vehicle import FuelType, VehicleProfile
from carbonwise.engine.factors import (
    HEAVY_EV_THRESHOLD_KG,
    HIGH_GRID_INTENSITY_THRESHOLD,
    REFERENCE_PETROL_KG_PER_KM,
    ZERO_EMISSION_MANUFACTURING_THRESHOLD_KG,
)
from carbonwise.engine.manufacturing import has_unmanaged_battery
from carbonwise.engine.rounding import round_half_up
from carbonwise.models.results import FlagKind, GreenwashFlag, Severity


def _misleading_zero_emission(vehicle: VehicleProfile, grid_intensity: float) -> GreenwashFlag | None:
    manufacturing = vehicle.manufacturing_emissions_kg
    if vehicle.fuel_type != FuelType.ELECTRIC or manufacturing is None:
        return None
    if manufacturing <= ZERO_EMISSION_MANUFACTURING_THRESHOLD_KG:
        return None
    petrol_km = round_half_up(manufacturing / REFERENCE_PETROL_KG_PER_KM)
    return GreenwashFlag(
        kind=FlagKind.MISLEADING_ZERO_EMISSION,
        severity=Severity.HIGH,
        claim='"Zero Emission Vehicle"',
        reality=(
            f"Manufacturing this vehicle emits {manufacturing:,.0f} kg CO₂, equivalent to "
            f"driving a petrol car {petrol_km:,} km."
        ),
        recommendation='The "zero emission" label only applies to tailpipe emissions, not lifecycle emissions.',
    )


def _high_grid_intensity(vehicle: VehicleProfile, grid_intensity: float) -> GreenwashFlag | None:
    if vehicle.fuel_type != FuelType.ELECTRIC or grid_intensity is None:
        return None
    if grid_intensity <= HIGH_GRID_INTENSITY_THRESHOLD:
        return None
    return GreenwashFlag(
        kind=FlagKind.HIGH_GRID_INTENSITY,
        severity=Severity.MEDIUM,
        claim='"Clean energy driving"',
        reality=(
            f"Your state's grid intensity is {grid_intensity:g} kg CO₂/kWh. Charging this EV may "
            f"produce more lifecycle CO₂ than a comparable CNG vehicle."
        ),
        recommendation="Consider CNG alternatives in coal-heavy grid states, or charge during solar hours if possible.",
    )


def _wltp_not_midc(vehicle: VehicleProfile, grid_intensity: float) -> GreenwashFlag | None:
    if not vehicle.wltp_efficiency:
        return None
    estimated = "Estimated" in (vehicle.data_source or "")
    if vehicle.midc_efficiency and not estimated:
        return None
    unit = vehicle.fuel_type.efficiency_unit if isinstance(vehicle.fuel_type, FuelType) else "km/L"
    return GreenwashFlag(
        kind=FlagKind.WLTP_NOT_MIDC,
        severity=Severity.LOW,
        claim=f'"{vehicle.wltp_efficiency:g} {unit} efficiency"',
        reality=(
            "This figure uses WLTP (European test cycle), not MIDC (Indian driving conditions). "
            "Real-world Indian efficiency is typically 10-20% lower."
        ),
        recommendation="Always compare vehicles using MIDC figures for India-specific accuracy.",
    )


def _no_recycling_program(vehicle: VehicleProfile, grid_intensity: float) -> GreenwashFlag | None:
    if vehicle.fuel_type not in (FuelType.ELECTRIC, FuelType.HYBRID):
        return None
    if not has_unmanaged_battery(vehicle):
        return None
    if vehicle.disposal_emissions_kg is None:
        disposal = "an undisclosed amount of CO₂"
    else:
        disposal = f"{vehicle.disposal_emissions_kg:,.0f} kg CO₂"
    return GreenwashFlag(
        kind=FlagKind.NO_RECYCLING_PROGRAM,
        severity=Severity.MEDIUM,
        claim='"Eco-friendly vehicle"',
        reality=(
            f"This vehicle has a {vehicle.battery_capacity_kwh:g} kWh battery with no disclosed "
            f"recycling program. Battery disposal adds {disposal} and potential toxic waste."
        ),
        recommendation="Ask the manufacturer about their battery end-of-life plan before purchasing.",
    )


def _heavy_ev(vehicle: VehicleProfile, grid_intensity: float) -> GreenwashFlag | None:
    weight = vehicle.kerb_weight_kg
    if vehicle.fuel_type != FuelType.ELECTRIC or weight is None or weight <= HEAVY_EV_THRESHOLD_KG:
        return None
    return GreenwashFlag(
        kind=FlagKind.HIGH_WEIGHT_EV,
        severity=Severity.LOW,
        claim='"Green transportation"',
        reality=(
            f"At {weight:,.0f} kg, this is a heavy EV. Heavier vehicles have higher manufacturing "
            f"emissions and tire/brake particulate matter, even with zero tailpipe emissions."
        ),
        recommendation="Consider lighter EV alternatives for lower overall environmental impact.",
    )


GREENWASH_RULES: tuple[Callable[[VehicleProfile, float], GreenwashFlag | None], ...] = (
    _misleading_zero_emission,
    _high_grid_intensity,
    _wltp_not_midc,
    _no_recycling_program,
    _heavy_ev,
)


def detect_greenwash_flags(vehicle: VehicleProfile, grid_intensity: float) -> list[GreenwashFlag]:
    """Run every rule against ``vehicle``; return the flags that fired, in rule order."""
    flags: list[GreenwashFlag] = []
    for rule in GREENWASH_RULES:
        flag = rule(vehicle, grid_intensity)
        if flag is not None:
            flags.append(flag)
    return flags
