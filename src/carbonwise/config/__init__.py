"""Configuration models — every input record the engine accepts."""

from carbonwise.config.vehicle import FuelType, VehicleProfile, vehicle_from_record
from carbonwise.config.usage import UsagePattern, UsageProfile
from carbonwise.config.region import GridCategory, RegionProfile, grid_category
from carbonwise.config.filters import RecommendationFilters

__all__ = [
    "FuelType",
    "VehicleProfile",
    "vehicle_from_record",
    "UsagePattern",
    "UsageProfile",
    "GridCategory",
    "RegionProfile",
    "grid_category",
    "RecommendationFilters",
]
