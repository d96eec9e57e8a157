"""Emission factors, loss factors and cost rates.

Grouped by the physical quantity each constant represents so every formula
in the engine can be audited against one table.
"""

from __future__ import annotations

from carbonwise.config.usage import UsagePattern
from carbonwise.config.vehicle import FuelType

# ── Fuel combustion factors ───────────────────────────────────────────────
PETROL_KG_CO2_PER_LITRE = 2.31
DIESEL_KG_CO2_PER_LITRE = 2.68
CNG_KG_CO2_PER_KG = 2.75

COMBUSTION_EMISSION_FACTORS: dict[FuelType, float] = {
    FuelType.PETROL: PETROL_KG_CO2_PER_LITRE,
    FuelType.DIESEL: DIESEL_KG_CO2_PER_LITRE,
    FuelType.CNG: CNG_KG_CO2_PER_KG,
}
"""kg CO₂ per unit of fuel (litre, or kg for CNG)."""

# ── Loss and blend factors ────────────────────────────────────────────────
CHARGING_LOSS_FACTOR = 1.15
"""Grid energy drawn per kWh delivered to the wheels (charger + cable + battery round trip)."""

HYBRID_ELECTRIC_FRACTION = 0.35
"""Share of hybrid driving done on battery."""

HYBRID_ELECTRIC_EFFICIENCY_PENALTY = 1.3
"""Multiplier on the efficiency denominator for a hybrid's electric share."""

# ── Usage-pattern adjustment (MIDC is a mixed cycle) ──────────────────────
USAGE_MULTIPLIERS: dict[UsagePattern, float] = {
    UsagePattern.CITY: 1.15,
    UsagePattern.HIGHWAY: 0.90,
    UsagePattern.MIXED: 1.0,
}

# ── Manufacturing heuristic ───────────────────────────────────────────────
MANUFACTURING_KG_CO2_PER_KG = 4.0
"""Body, powertrain and assembly emissions per kg of kerb weight."""

BATTERY_KG_CO2_PER_KWH = 150.0
"""Cell production emissions, industry average."""

DEFAULT_KERB_WEIGHT_KG = 1200.0

# ── End of life ───────────────────────────────────────────────────────────
UNMANAGED_DISPOSAL_PENALTY = 1.5
"""Applied to the disposal figure when a large battery has no take-back scheme."""

UNMANAGED_BATTERY_THRESHOLD_KWH = 5.0

# ── Time ──────────────────────────────────────────────────────────────────
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
AVG_DAYS_PER_MONTH = 30.44

MIN_GRID_INTENSITY = 0.05
"""Floor (kg CO₂/kWh) for projected grid intensity under decarbonisation."""

# ── Cost rates (₹) ────────────────────────────────────────────────────────
INSURANCE_RATE_PER_YEAR = 0.03
"""Annual premium as a fraction of purchase price."""

MAINTENANCE_PER_YEAR_ELECTRIC = 5_000.0
MAINTENANCE_PER_YEAR_DEFAULT = 12_000.0

# ── Audit thresholds ──────────────────────────────────────────────────────
ZERO_EMISSION_MANUFACTURING_THRESHOLD_KG = 5_000.0
HIGH_GRID_INTENSITY_THRESHOLD = 0.75
HEAVY_EV_THRESHOLD_KG = 1_800.0
REFERENCE_PETROL_KG_PER_KM = 0.13
"""Typical petrol hatchback, used to express manufacturing debt as driving distance."""
