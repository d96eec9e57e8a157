"""Side-by-side comparison of several vehicles under one usage profile."""

from __future__ import annotations

import logging
from typing import Sequence

from carbonwise.config.usage import UsageProfile
from carbonwise.config.vehicle import FuelType, VehicleProfile
from carbonwise.engine.breakeven import calculate_breakeven
from carbonwise.engine.factors import MONTHS_PER_YEAR
from carbonwise.engine.greenwash import detect_greenwash_flags
from carbonwise.engine.lifecycle import calculate_lifecycle_emissions
from carbonwise.engine.rounding import round_half_up
from carbonwise.engine.timeline import generate_monthly_timeline
from carbonwise.errors import InvalidInput
from carbonwise.models.results import (
    BreakevenPairing,
    ComparisonEntry,
    ComparisonResult,
    VehicleSummary,
)

logger = logging.getLogger(__name__)


def summarize_vehicle(vehicle: VehicleProfile) -> VehicleSummary:
    """Identity fields of ``vehicle`` for batch results."""
    return VehicleSummary(
        id=vehicle.id,
        make=vehicle.make,
        model=vehicle.model,
        variant=vehicle.variant,
        fuel_type=vehicle.fuel_type,
        price_lakh=vehicle.price_lakh,
        battery_capacity_kwh=vehicle.battery_capacity_kwh,
        midc_efficiency=vehicle.midc_efficiency,
        midc_efficiency_unit=vehicle.midc_efficiency_unit,
        kerb_weight_kg=vehicle.kerb_weight_kg,
        seating_capacity=vehicle.seating_capacity,
        body_type=vehicle.body_type,
        segment=vehicle.segment,
        data_source=vehicle.data_source,
    )


def compare_vehicles(vehicles: Sequence[VehicleProfile], usage: UsageProfile) -> ComparisonResult:
    """Lifecycle emissions, timelines, audit flags and EV-vs-ICE break-even.

    Entries are ordered by ``total_kg`` ascending; ties keep input order.
    Every electric vehicle is paired with every combustion vehicle for the
    break-even analysis, in that same order.

    Raises
    ------
    InvalidInput
        If ``vehicles`` is empty.
    """
    if not vehicles:
        raise InvalidInput("compare_vehicles needs at least one vehicle")

    horizon_months = max(1, round_half_up(usage.years * MONTHS_PER_YEAR))

    scored: list[tuple[VehicleProfile, ComparisonEntry]] = []
    for vehicle in vehicles:
        emissions = calculate_lifecycle_emissions(vehicle, usage)
        timeline = generate_monthly_timeline(vehicle, usage.grid_intensity, usage.daily_km, horizon_months)
        scored.append((vehicle, ComparisonEntry(
            vehicle=summarize_vehicle(vehicle),
            emissions=emissions,
            timeline=tuple(timeline),
            greenwash_flags=tuple(detect_greenwash_flags(vehicle, usage.grid_intensity)),
        )))

    # sorted() is stable: equal totals keep their input order
    scored = sorted(scored, key=lambda pair: pair[1].emissions.total_kg)

    electric = [pair for pair in scored if pair[0].fuel_type == FuelType.ELECTRIC]
    combustion = [pair for pair in scored if pair[0].fuel_type.is_combustion]

    pairings: list[BreakevenPairing] = []
    for ev_vehicle, ev_entry in electric:
        for ice_vehicle, ice_entry in combustion:
            pairings.append(BreakevenPairing(
                ev=ev_vehicle.display_name,
                ice=ice_vehicle.display_name,
                result=calculate_breakeven(ev_entry.emissions, ice_entry.emissions, ev_vehicle, ice_vehicle),
            ))

    logger.debug("compared %d vehicles, %d break-even pairings", len(scored), len(pairings))

    return ComparisonResult(
        daily_km=usage.daily_km,
        years=usage.years,
        usage_pattern=usage.usage_pattern,
        grid_intensity=usage.grid_intensity,
        entries=tuple(entry for _, entry in scored),
        breakeven_analysis=tuple(pairings),
    )
