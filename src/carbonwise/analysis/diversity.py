"""Diversity selection over a ranked list of vehicles.

Three passes over the same score-ordered list, strictly in sequence:

  1. DISTINCT_MAKE_AND_FUEL — take a vehicle only if both its make and its
     fuel type are new to the selection
  2. DISTINCT_MAKE          — relax to a new make only
  3. FILL                   — take whatever remains, in score order

A pass never removes or reorders vehicles chosen by an earlier pass.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from carbonwise.config.vehicle import FuelType
from carbonwise.errors import InvalidInput


class SelectionPass(str, Enum):
    DISTINCT_MAKE_AND_FUEL = "DISTINCT_MAKE_AND_FUEL"
    DISTINCT_MAKE = "DISTINCT_MAKE"
    FILL = "FILL"


PASS_ORDER: tuple[SelectionPass, ...] = (
    SelectionPass.DISTINCT_MAKE_AND_FUEL,
    SelectionPass.DISTINCT_MAKE,
    SelectionPass.FILL,
)


class DiversitySelector:
    """Picks up to ``slots`` candidates from a ranked list.

    Usage::

        selector = DiversitySelector(slots=3)
        picks = selector.select([("Tata", FuelType.ELECTRIC), ("Maruti", FuelType.CNG), ...])
        # picks → indices into the ranked list, in selection order
        # selector.picked_in → which pass chose each pick

    Parameters
    ----------
    slots : int
        Maximum number of picks.
    """

    def __init__(self, slots: int = 3) -> None:
        if slots < 1:
            raise InvalidInput(f"slots must be >= 1, got {slots}")
        self._slots = slots
        self._selected: list[int] = []
        self._picked_in: list[SelectionPass] = []
        self._used_makes: set[str] = set()
        self._used_fuels: set[FuelType] = set()

    @property
    def is_full(self) -> bool:
        return len(self._selected) >= self._slots

    @property
    def selected(self) -> list[int]:
        return list(self._selected)

    @property
    def picked_in(self) -> list[SelectionPass]:
        return list(self._picked_in)

    def select(self, ranked: Sequence[tuple[str, FuelType]]) -> list[int]:
        """Run every pass over ``ranked`` (make, fuel) keys; return chosen indices."""
        for selection_pass in PASS_ORDER:
            if self.is_full:
                break
            self.run_pass(selection_pass, ranked)
        return self.selected

    def run_pass(self, selection_pass: SelectionPass, ranked: Sequence[tuple[str, FuelType]]) -> None:
        """Scan ``ranked`` once, appending every candidate ``selection_pass`` accepts."""
        taken = set(self._selected)
        for index, (make, fuel) in enumerate(ranked):
            if self.is_full:
                return
            if index in taken or not self._accepts(selection_pass, make, fuel):
                continue
            self._selected.append(index)
            self._picked_in.append(selection_pass)
            self._used_makes.add(make)
            self._used_fuels.add(fuel)

    def _accepts(self, selection_pass: SelectionPass, make: str, fuel: FuelType) -> bool:
        if selection_pass is SelectionPass.DISTINCT_MAKE_AND_FUEL:
            return make not in self._used_makes and fuel not in self._used_fuels
        if selection_pass is SelectionPass.DISTINCT_MAKE:
            return make not in self._used_makes
        return True


def select_diverse(ranked: Sequence[tuple[str, FuelType]], slots: int = 3) -> list[int]:
    """Indices of the diverse picks from ``ranked`` (already in score order)."""
    return DiversitySelector(slots).select(ranked)
