"""Lifecycle aggregator — manufacturing + operational + disposal.

Pure arithmetic: vehicle + usage → EmissionsResult. Rounding happens only
when the result record is built.
"""

from __future__ import annotations

import logging

from carbonwise.config.usage import UsagePattern, UsageProfile
from carbonwise.config.vehicle import VehicleProfile
from carbonwise.engine.factors import DAYS_PER_YEAR, USAGE_MULTIPLIERS
from carbonwise.engine.manufacturing import (
    has_unmanaged_battery,
    resolve_disposal_emissions,
    resolve_manufacturing_emissions,
)
from carbonwise.engine.operational import operational_emission_per_km
from carbonwise.engine.rounding import round_half_up
from carbonwise.engine.validation import require_finite
from carbonwise.models.results import EmissionsResult

logger = logging.getLogger(__name__)


def total_distance_km(daily_km: float, years: float) -> float:
    return daily_km * DAYS_PER_YEAR * years


def adjusted_emission_per_km(
    vehicle: VehicleProfile,
    grid_intensity: float,
    usage_pattern: UsagePattern = UsagePattern.MIXED,
) -> float:
    """Operational rate scaled by the driving-style multiplier (full precision)."""
    return operational_emission_per_km(vehicle, grid_intensity) * USAGE_MULTIPLIERS[usage_pattern]


def calculate_lifecycle_emissions(vehicle: VehicleProfile, usage: UsageProfile) -> EmissionsResult:
    """Compute the lifecycle footprint of ``vehicle`` driven per ``usage``.

    Raises
    ------
    UnknownFuelType
        Propagated from the operational model.
    InvalidInput
        Missing efficiency or a non-finite intermediate value.
    """
    distance_km = total_distance_km(usage.daily_km, usage.years)

    # ── Manufacturing ──────────────────────────────────────────────────
    warnings: list[str] = []
    manufacturing_estimated = vehicle.manufacturing_emissions_kg is None
    manufacturing_kg = resolve_manufacturing_emissions(vehicle)
    if manufacturing_estimated:
        warnings.append(
            f"No lab manufacturing figure; estimated {manufacturing_kg:,.0f} kg "
            f"from kerb weight and battery capacity."
        )

    # ── Operational ────────────────────────────────────────────────────
    emission_per_km = adjusted_emission_per_km(vehicle, usage.grid_intensity, usage.usage_pattern)
    operational_kg = require_finite("operational emissions", emission_per_km * distance_km)

    # ── Disposal ───────────────────────────────────────────────────────
    # Missing disposal figure is taken as 0 kg; flagged when it most likely isn't.
    disposal_kg = resolve_disposal_emissions(vehicle)
    if vehicle.disposal_emissions_kg is None and has_unmanaged_battery(vehicle):
        warnings.append(
            f"No disposal figure for a {vehicle.battery_capacity_kwh:g} kWh battery without "
            f"a recycling program; end-of-life emissions assumed 0 kg."
        )

    for note in warnings:
        logger.warning("%s: %s", vehicle.display_name or vehicle.id, note)

    manufacturing_rounded = round_half_up(manufacturing_kg)
    operational_rounded = round_half_up(operational_kg)
    disposal_rounded = round_half_up(disposal_kg)

    logger.debug(
        "lifecycle %s: %.0f km, %.4f kg/km, mfg=%.1f op=%.1f disp=%.1f",
        vehicle.display_name, distance_km, emission_per_km,
        manufacturing_kg, operational_kg, disposal_kg,
    )

    return EmissionsResult(
        manufacturing_kg=manufacturing_rounded,
        operational_kg=operational_rounded,
        disposal_kg=disposal_rounded,
        total_kg=manufacturing_rounded + operational_rounded + disposal_rounded,
        emission_per_km=round_half_up(emission_per_km, 3),
        total_distance_km=distance_km,
        daily_km=usage.daily_km,
        years=usage.years,
        usage_pattern=usage.usage_pattern,
        grid_intensity_used=usage.grid_intensity,
        manufacturing_estimated=manufacturing_estimated,
        warnings=tuple(warnings),
    )
