"""Tests for engine/manufacturing.py — heuristic and end-of-life penalty."""

from __future__ import annotations

import pytest

from carbonwise.config import FuelType, VehicleProfile
from carbonwise.engine.manufacturing import (
    estimate_manufacturing_emissions,
    has_unmanaged_battery,
    resolve_disposal_emissions,
    resolve_manufacturing_emissions,
    upfront_emissions,
)


def test_estimate_from_weight_only():
    vehicle = VehicleProfile(fuel_type=FuelType.PETROL, midc_efficiency=18, kerb_weight_kg=1_000)
    # 1000 × 4.0 = 4000
    assert estimate_manufacturing_emissions(vehicle) == pytest.approx(4_000)


def test_estimate_adds_battery():
    vehicle = VehicleProfile(
        fuel_type=FuelType.ELECTRIC, midc_efficiency=6, kerb_weight_kg=1_500, battery_capacity_kwh=30,
    )
    # 1500 × 4.0 + 30 × 150 = 6000 + 4500
    assert estimate_manufacturing_emissions(vehicle) == pytest.approx(10_500)


def test_default_kerb_weight():
    vehicle = VehicleProfile(fuel_type=FuelType.CNG, midc_efficiency=25)
    assert estimate_manufacturing_emissions(vehicle) == pytest.approx(1_200 * 4.0)


def test_explicit_figure_wins(ev: VehicleProfile):
    assert resolve_manufacturing_emissions(ev) == 7_000


def test_disposal_defaults_to_zero(ev: VehicleProfile):
    assert resolve_disposal_emissions(ev) == 0.0


def test_unmanaged_battery_penalty():
    vehicle = VehicleProfile(
        fuel_type=FuelType.ELECTRIC, midc_efficiency=6, battery_capacity_kwh=30,
        disposal_emissions_kg=400, has_recycling_program=False,
    )
    assert has_unmanaged_battery(vehicle)
    assert resolve_disposal_emissions(vehicle) == pytest.approx(600)


def test_small_battery_not_penalised(hybrid: VehicleProfile):
    with_disposal = hybrid.model_copy(update={"disposal_emissions_kg": 100})
    assert not has_unmanaged_battery(with_disposal)  # 1.6 kWh ≤ 5
    assert resolve_disposal_emissions(with_disposal) == 100


def test_recycling_program_not_penalised(ev: VehicleProfile):
    with_disposal = ev.model_copy(update={"disposal_emissions_kg": 400})
    assert resolve_disposal_emissions(with_disposal) == 400


def test_upfront_is_manufacturing_plus_disposal(petrol: VehicleProfile):
    assert upfront_emissions(petrol) == 4_700
