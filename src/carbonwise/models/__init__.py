"""Result models — engine output contracts."""

from carbonwise.models.results import (
    BreakevenPairing,
    BreakevenResult,
    ComparisonEntry,
    ComparisonResult,
    EmissionsResult,
    FlagKind,
    GreenwashFlag,
    Recommendation,
    RecommendationReport,
    Severity,
    TCOBreakdown,
    TimelinePoint,
    VehicleSummary,
)

__all__ = [
    "BreakevenPairing",
    "BreakevenResult",
    "ComparisonEntry",
    "ComparisonResult",
    "EmissionsResult",
    "FlagKind",
    "GreenwashFlag",
    "Recommendation",
    "RecommendationReport",
    "Severity",
    "TCOBreakdown",
    "TimelinePoint",
    "VehicleSummary",
]
