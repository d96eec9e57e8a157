"""Engine — pure lifecycle-emission, cost and audit computations."""

from carbonwise.engine.operational import (
    electricity_consumption_per_km,
    fuel_consumption_per_km,
    operational_emission_per_km,
)
from carbonwise.engine.manufacturing import (
    estimate_manufacturing_emissions,
    resolve_disposal_emissions,
    resolve_manufacturing_emissions,
)
from carbonwise.engine.lifecycle import adjusted_emission_per_km, calculate_lifecycle_emissions
from carbonwise.engine.breakeven import calculate_breakeven
from carbonwise.engine.timeline import generate_monthly_timeline
from carbonwise.engine.tco import calculate_tco
from carbonwise.engine.greenwash import detect_greenwash_flags

__all__ = [
    "operational_emission_per_km",
    "fuel_consumption_per_km",
    "electricity_consumption_per_km",
    "estimate_manufacturing_emissions",
    "resolve_manufacturing_emissions",
    "resolve_disposal_emissions",
    "adjusted_emission_per_km",
    "calculate_lifecycle_emissions",
    "calculate_breakeven",
    "generate_monthly_timeline",
    "calculate_tco",
    "detect_greenwash_flags",
]
