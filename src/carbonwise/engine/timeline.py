"""Monthly cumulative-emission timeline.

Starts from the manufacturing "debt" and adds one month of driving per
step. An optional annual grid-improvement rate lowers the grid intensity
linearly over time (floored at 0.05 kg/kWh), so electric and hybrid
curves bend downwards while combustion curves stay straight. Disposal
lands once, on the final month.
"""

from __future__ import annotations

import numpy as np

from carbonwise.config.vehicle import VehicleProfile
from carbonwise.engine.factors import AVG_DAYS_PER_MONTH, MIN_GRID_INTENSITY, MONTHS_PER_YEAR
from carbonwise.engine.manufacturing import resolve_disposal_emissions, resolve_manufacturing_emissions
from carbonwise.engine.operational import operational_emission_per_km
from carbonwise.engine.rounding import round_half_up
from carbonwise.engine.validation import require_non_negative, require_positive
from carbonwise.errors import InvalidInput
from carbonwise.models.results import TimelinePoint

DEFAULT_HORIZON_MONTHS = 120


def grid_trajectory(
    grid_intensity: float,
    months: int,
    grid_improvement_rate: float = 0.0,
) -> np.ndarray:
    """Effective grid intensity for each month ``0..months`` (inclusive).

    ``grid × (1 − rate × m/12)``, floored at ``MIN_GRID_INTENSITY``.
    """
    month_index = np.arange(months + 1, dtype=float)
    projected = grid_intensity * (1.0 - grid_improvement_rate * month_index / MONTHS_PER_YEAR)
    return np.maximum(projected, MIN_GRID_INTENSITY)


def generate_monthly_timeline(
    vehicle: VehicleProfile,
    grid_intensity: float,
    daily_km: float,
    months: int = DEFAULT_HORIZON_MONTHS,
    grid_improvement_rate: float = 0.0,
) -> list[TimelinePoint]:
    """Cumulative emissions at the end of each month ``0..months``.

    Parameters
    ----------
    vehicle : VehicleProfile
        Vehicle being driven.
    grid_intensity : float
        Grid intensity today (kg CO₂/kWh).
    daily_km : float
        Average distance per day.
    months : int
        Horizon; the result has ``months + 1`` points.
    grid_improvement_rate : float
        Annual fractional decline of grid intensity (0 = static grid).

    Returns
    -------
    list[TimelinePoint]
        Point 0 equals manufacturing emissions; the final point includes
        disposal.
    """
    require_positive("grid_intensity", grid_intensity)
    require_positive("daily_km", daily_km)
    require_non_negative("grid_improvement_rate", grid_improvement_rate)
    if isinstance(months, bool) or not isinstance(months, (int, np.integer)) or months < 1:
        raise InvalidInput(f"months must be a positive integer, got {months!r}")

    manufacturing = resolve_manufacturing_emissions(vehicle)
    disposal = resolve_disposal_emissions(vehicle)
    monthly_km = daily_km * AVG_DAYS_PER_MONTH

    # Driving during month m uses month m's grid.
    grid_by_month = grid_trajectory(grid_intensity, months, grid_improvement_rate)
    monthly_emissions = np.array([
        operational_emission_per_km(vehicle, float(grid)) * monthly_km
        for grid in grid_by_month[:months]
    ])
    cumulative = manufacturing + np.concatenate(([0.0], np.cumsum(monthly_emissions)))
    cumulative[-1] += disposal

    timeline: list[TimelinePoint] = []
    for m in range(months + 1):
        timeline.append(TimelinePoint(
            month=m,
            year=round_half_up(m / MONTHS_PER_YEAR, 1),
            cumulative_kg=round_half_up(float(cumulative[m])),
            label=f"{m // MONTHS_PER_YEAR}y {m % MONTHS_PER_YEAR}m",
        ))
    return timeline
