"""Recommendation engine — filter, score, rank and diversify a catalogue.

Pipeline:
  1. Hard filters (budget, fuel preference, seating)
  2. Score every survivor: lifecycle emissions, TCO at regional prices, audit flags
  3. Stable sort by lifecycle total
  4. Diversity selection (distinct make + fuel → distinct make → fill)
  5. Rank labels and plain-English explanations
"""

from __future__ import annotations

import logging
from typing import Sequence

from carbonwise.analysis.compare import summarize_vehicle
from carbonwise.analysis.diversity import select_diverse
from carbonwise.analysis.narrative import explain_recommendation
from carbonwise.config.filters import RecommendationFilters
from carbonwise.config.region import RegionProfile
from carbonwise.config.usage import UsagePattern
from carbonwise.config.vehicle import VehicleProfile
from carbonwise.engine.greenwash import detect_greenwash_flags
from carbonwise.engine.lifecycle import calculate_lifecycle_emissions
from carbonwise.engine.rounding import round_half_up
from carbonwise.engine.tco import calculate_tco
from carbonwise.models.results import (
    EmissionsResult,
    GreenwashFlag,
    Recommendation,
    RecommendationReport,
    TCOBreakdown,
)

logger = logging.getLogger(__name__)

RANK_LABELS: tuple[str, ...] = (
    "Best Carbon Choice",
    "Greener Alternative",
    "Premium Carbon-Efficient Pick",
)


def passes_filters(vehicle: VehicleProfile, filters: RecommendationFilters) -> bool:
    """True when ``vehicle`` satisfies every set filter.

    A budget bound of 0 counts as unset. A vehicle missing the field a set
    filter tests is excluded by that filter.
    """
    if filters.min_budget_lakh:
        if vehicle.price_lakh is None or vehicle.price_lakh < filters.min_budget_lakh:
            return False
    if filters.max_budget_lakh:
        if vehicle.price_lakh is None or vehicle.price_lakh > filters.max_budget_lakh:
            return False
    if filters.fuel_type_preference is not None and vehicle.fuel_type != filters.fuel_type_preference:
        return False
    if filters.min_seating is not None:
        if vehicle.seating_capacity is None or vehicle.seating_capacity < filters.min_seating:
            return False
    return True


def recommend_vehicles(
    catalog: Sequence[VehicleProfile],
    region: RegionProfile,
    daily_km: float,
    years: float,
    usage_pattern: UsagePattern = UsagePattern.MIXED,
    filters: RecommendationFilters | None = None,
) -> RecommendationReport:
    """Recommend the lowest-carbon, diverse set of vehicles for one buyer.

    Parameters
    ----------
    catalog : Sequence[VehicleProfile]
        Vehicles to consider.
    region : RegionProfile
        Grid intensity and energy prices for the buyer's state.
    daily_km, years : float
        Driving profile.
    usage_pattern : UsagePattern
        Driving-style adjustment.
    filters : RecommendationFilters | None
        Hard constraints; ``None`` applies no filter and three slots.

    Returns
    -------
    RecommendationReport
        Up to ``filters.slots`` ranked picks plus catalogue-wide context.
    """
    filters = filters or RecommendationFilters()
    usage = region.usage(daily_km, years, usage_pattern)

    survivors = [vehicle for vehicle in catalog if passes_filters(vehicle, filters)]

    scored: list[tuple[VehicleProfile, EmissionsResult, TCOBreakdown | None, list[GreenwashFlag]]] = []
    for vehicle in survivors:
        emissions = calculate_lifecycle_emissions(vehicle, usage)
        tco = None
        if vehicle.purchase_price is not None:
            tco = calculate_tco(
                vehicle,
                daily_km=usage.daily_km,
                years=usage.years,
                fuel_price=region.fuel_price_for(vehicle.fuel_type),
                electricity_price=region.electricity_price,
            )
        else:
            logger.debug("%s has no listed price, skipping cost of ownership", vehicle.display_name)
        scored.append((vehicle, emissions, tco, detect_greenwash_flags(vehicle, usage.grid_intensity)))

    # Stable: equal totals keep catalogue order
    scored.sort(key=lambda item: item[1].total_kg)

    picks = select_diverse([(item[0].make, item[0].fuel_type) for item in scored], filters.slots)

    avg_carbon = round_half_up(sum(item[1].total_kg for item in scored) / len(scored)) if scored else 0

    recommendations: list[Recommendation] = []
    for rank, index in enumerate(picks):
        vehicle, emissions, tco, flags = scored[index]
        recommendations.append(Recommendation(
            rank=rank + 1,
            label=RANK_LABELS[rank] if rank < len(RANK_LABELS) else "",
            explanation=explain_recommendation(vehicle, emissions, region.state_name, usage.grid_intensity, rank),
            vehicle=summarize_vehicle(vehicle),
            emissions=emissions,
            tco=tco,
            greenwash_flags=tuple(flags),
        ))

    logger.info(
        "recommend %s: %d of %d vehicles passed filters, %d picked",
        region.state_name, len(survivors), len(catalog), len(recommendations),
    )

    return RecommendationReport(
        state=region.state_name,
        grid_intensity=usage.grid_intensity,
        renewable_pct=region.renewable_pct,
        daily_km=usage.daily_km,
        years=usage.years,
        usage_pattern=usage.usage_pattern,
        total_evaluated=len(survivors),
        avg_budget_carbon_kg=avg_carbon,
        recommendations=tuple(recommendations),
    )
