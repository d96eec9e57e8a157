"""Recommendation filters — hard constraints applied before scoring."""

from pydantic import BaseModel, ConfigDict, Field

from carbonwise.config.vehicle import FuelType


class RecommendationFilters(BaseModel):
    """Budget, fuel and seating constraints for the recommender."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    min_budget_lakh: float | None = Field(default=None, ge=0, description="Lowest acceptable price (₹ lakh); 0 = no bound")
    max_budget_lakh: float | None = Field(default=None, ge=0, description="Highest acceptable price (₹ lakh); 0 = no bound")
    fuel_type_preference: FuelType | None = Field(default=None, description="None = any fuel type")
    min_seating: int | None = Field(default=None, ge=1)
    slots: int = Field(default=3, ge=1, le=10, description="Number of recommendations to return")
