"""Batch analyses built on the engine — comparison and recommendation."""

from carbonwise.analysis.compare import compare_vehicles, summarize_vehicle
from carbonwise.analysis.diversity import DiversitySelector, SelectionPass, select_diverse
from carbonwise.analysis.narrative import explain_recommendation
from carbonwise.analysis.recommend import RANK_LABELS, passes_filters, recommend_vehicles

__all__ = [
    "compare_vehicles",
    "summarize_vehicle",
    "DiversitySelector",
    "SelectionPass",
    "select_diverse",
    "explain_recommendation",
    "RANK_LABELS",
    "passes_filters",
    "recommend_vehicles",
]
