"""Result types — the contract between the engine and its callers.

Every record is frozen and holds plain values only, so it can be handed
straight to ``model_dump_json`` for an API response or cached by the caller.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from carbonwise.config.usage import UsagePattern
from carbonwise.config.vehicle import FuelType


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Lifecycle emissions
# ═══════════════════════════════════════════════════════════════════════════

class EmissionsResult(_Record):
    """Lifecycle footprint of one vehicle under one usage profile.

    The three ``_kg`` components are each rounded once from full-precision
    values; ``total_kg`` is their sum.
    """

    manufacturing_kg: int
    """Cradle-to-gate emissions — lab figure, or estimated from weight and battery."""

    operational_kg: int
    """Usage-adjusted per-km rate × total distance."""

    disposal_kg: int
    """End-of-life figure, including the unmanaged-battery penalty where it applies."""

    total_kg: int
    """manufacturing_kg + operational_kg + disposal_kg."""

    emission_per_km: float
    """Usage-adjusted operational rate (kg CO₂/km), 3 decimals."""

    total_distance_km: float
    """daily_km × 365 × years."""

    # --- Echo of the inputs ---
    daily_km: float
    years: float
    usage_pattern: UsagePattern
    grid_intensity_used: float

    # --- Data quality ---
    manufacturing_estimated: bool = False
    """True when no lab figure existed and the weight/battery heuristic was used."""

    warnings: tuple[str, ...] = ()
    """Human-readable notes about assumptions made for missing data."""


# ═══════════════════════════════════════════════════════════════════════════
# Break-even and timeline
# ═══════════════════════════════════════════════════════════════════════════

class BreakevenResult(_Record):
    """Crossover between a low-per-km candidate and a baseline vehicle.

    Either ``will_breakeven`` is False with a ``reason`` and every crossover
    field ``None``, or it is True with every crossover field set.
    """

    will_breakeven: bool
    breakeven_km: int | None = None
    """Distance at which cumulative emissions are equal (0 = immediate)."""

    breakeven_years: float | None = None
    """1 decimal."""

    breakeven_months: int | None = None
    emission_debt_kg: int | None = None
    """Extra upfront (manufacturing + disposal) emissions of the candidate."""

    savings_per_km: float | None = None
    """Baseline per-km − candidate per-km, 3 decimals."""

    reason: str | None = None


class TimelinePoint(_Record):
    """Cumulative emissions after ``month`` months of ownership."""

    month: int
    year: float
    cumulative_kg: int
    label: str
    """e.g. '2y 5m'."""


# ═══════════════════════════════════════════════════════════════════════════
# Cost of ownership
# ═══════════════════════════════════════════════════════════════════════════

class TCOBreakdown(_Record):
    """Total cost of ownership (₹), each component rounded to the rupee."""

    purchase_cost: int
    fuel_cost: int
    """Fuel or electricity (charging losses included)."""

    insurance_cost: int
    maintenance_cost: int
    total_cost: int
    cost_per_km: float
    """2 decimals."""

    total_distance_km: float


# ═══════════════════════════════════════════════════════════════════════════
# Greenwash audit
# ═══════════════════════════════════════════════════════════════════════════

class FlagKind(str, Enum):
    MISLEADING_ZERO_EMISSION = "MISLEADING_ZERO_EMISSION"
    HIGH_GRID_INTENSITY = "HIGH_GRID_INTENSITY"
    WLTP_NOT_MIDC = "WLTP_NOT_MIDC"
    NO_RECYCLING_PROGRAM = "NO_RECYCLING_PROGRAM"
    HIGH_WEIGHT_EV = "HIGH_WEIGHT_EV"


class Severity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class GreenwashFlag(_Record):
    """One marketing claim that the vehicle's own data contradicts."""

    kind: FlagKind
    severity: Severity
    claim: str
    reality: str
    recommendation: str


# ═══════════════════════════════════════════════════════════════════════════
# Batch analyses
# ═══════════════════════════════════════════════════════════════════════════

class VehicleSummary(_Record):
    """Identity fields carried alongside batch results."""

    id: str | None
    make: str
    model: str
    variant: str | None
    fuel_type: FuelType
    price_lakh: float | None
    battery_capacity_kwh: float | None
    midc_efficiency: float | None
    midc_efficiency_unit: str | None
    kerb_weight_kg: float | None
    seating_capacity: int | None
    body_type: str | None
    segment: str | None
    data_source: str | None


class ComparisonEntry(_Record):
    vehicle: VehicleSummary
    emissions: EmissionsResult
    timeline: tuple[TimelinePoint, ...]
    greenwash_flags: tuple[GreenwashFlag, ...]


class BreakevenPairing(_Record):
    """Break-even of one electric vehicle against one combustion vehicle."""

    ev: str
    ice: str
    result: BreakevenResult


class ComparisonResult(_Record):
    """Side-by-side comparison, entries ordered by ``total_kg`` (stable)."""

    daily_km: float
    years: float
    usage_pattern: UsagePattern
    grid_intensity: float
    entries: tuple[ComparisonEntry, ...]
    breakeven_analysis: tuple[BreakevenPairing, ...]


class Recommendation(_Record):
    rank: int
    """1-based."""

    label: str
    explanation: str
    vehicle: VehicleSummary
    emissions: EmissionsResult
    greenwash_flags: tuple[GreenwashFlag, ...]
    tco: TCOBreakdown | None = None
    """None when the vehicle has no listed price."""


class RecommendationReport(_Record):
    state: str
    grid_intensity: float
    renewable_pct: float | None
    daily_km: float
    years: float
    usage_pattern: UsagePattern
    total_evaluated: int
    """Vehicles surviving the hard filters."""

    avg_budget_carbon_kg: int
    """Mean total_kg of the evaluated vehicles (0 when none)."""

    recommendations: tuple[Recommendation, ...]
