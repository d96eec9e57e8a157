"""Break-even between a candidate vehicle and a baseline.

Cumulative emissions of each vehicle are linear in distance once the upfront
(manufacturing + disposal) figure is fixed, so the crossover is a closed-form
intersection:

    breakeven_km = (upfront_A − upfront_B) / (per_km_B − per_km_A)

Rates and upfront figures are recomputed at full precision from the vehicle
records and the inputs echoed on each ``EmissionsResult``; the rounded
display values on the results are never fed back into the arithmetic.
"""

from __future__ import annotations

import logging

from carbonwise.config.vehicle import VehicleProfile
from carbonwise.engine.factors import DAYS_PER_YEAR, MONTHS_PER_YEAR
from carbonwise.engine.lifecycle import adjusted_emission_per_km
from carbonwise.engine.manufacturing import upfront_emissions
from carbonwise.engine.rounding import round_half_up
from carbonwise.models.results import BreakevenResult, EmissionsResult

logger = logging.getLogger(__name__)


def calculate_breakeven(
    candidate_result: EmissionsResult,
    baseline_result: EmissionsResult,
    candidate: VehicleProfile,
    baseline: VehicleProfile,
) -> BreakevenResult:
    """When does ``candidate`` (usually an EV) overtake ``baseline`` on lifecycle CO₂?

    Parameters
    ----------
    candidate_result, baseline_result : EmissionsResult
        Lifecycle results computed for the two vehicles.
    candidate, baseline : VehicleProfile
        The vehicle records those results were computed from.

    Returns
    -------
    BreakevenResult
        ``will_breakeven=False`` with a reason when the candidate's per-km
        rate is not lower; otherwise the crossover distance and time.
        A candidate whose upfront emissions are already lower breaks even
        immediately (0 km).
    """
    candidate_per_km = adjusted_emission_per_km(
        candidate, candidate_result.grid_intensity_used, candidate_result.usage_pattern,
    )
    baseline_per_km = adjusted_emission_per_km(
        baseline, baseline_result.grid_intensity_used, baseline_result.usage_pattern,
    )

    if candidate_per_km >= baseline_per_km:
        return BreakevenResult(
            will_breakeven=False,
            reason=(
                f"{candidate.fuel_type.value} per-km emissions ({candidate_per_km:.3f} kg) ≥ "
                f"{baseline.fuel_type.value} per-km emissions ({baseline_per_km:.3f} kg) "
                f"at current grid intensity"
            ),
        )

    emission_debt = upfront_emissions(candidate) - upfront_emissions(baseline)
    savings_per_km = baseline_per_km - candidate_per_km
    breakeven_km = max(emission_debt / savings_per_km, 0.0)

    breakeven_days = breakeven_km / candidate_result.daily_km
    breakeven_years = breakeven_days / DAYS_PER_YEAR

    logger.debug(
        "breakeven %s vs %s: debt=%.1f kg, savings=%.5f kg/km, %.0f km",
        candidate.display_name, baseline.display_name, emission_debt, savings_per_km, breakeven_km,
    )

    return BreakevenResult(
        will_breakeven=True,
        breakeven_km=round_half_up(breakeven_km),
        breakeven_years=round_half_up(breakeven_years, 1),
        breakeven_months=round_half_up(breakeven_years * MONTHS_PER_YEAR),
        emission_debt_kg=round_half_up(emission_debt),
        savings_per_km=round_half_up(savings_per_km, 3),
    )
