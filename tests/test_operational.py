"""Tests for engine/operational.py — hand-calculated per-km rates."""

from __future__ import annotations

import pytest

from carbonwise.config import FuelType, VehicleProfile
from carbonwise.engine.operational import (
    electricity_consumption_per_km,
    fuel_consumption_per_km,
    operational_emission_per_km,
)
from carbonwise.errors import InvalidInput, UnknownFuelType


def test_electric_rate(ev: VehicleProfile):
    # (1/6) × 0.71 × 1.15 = 0.136083…
    assert operational_emission_per_km(ev, 0.71) == pytest.approx(0.71 * 1.15 / 6)


def test_petrol_rate(petrol: VehicleProfile):
    # (1/18) × 2.31 = 0.128333…
    assert operational_emission_per_km(petrol, 0.71) == pytest.approx(2.31 / 18)


def test_diesel_rate(diesel: VehicleProfile):
    assert operational_emission_per_km(diesel, 0.71) == pytest.approx(2.68 / 20)


def test_cng_rate(cng: VehicleProfile):
    assert operational_emission_per_km(cng, 0.71) == pytest.approx(2.75 / 25)


def test_hybrid_blend(hybrid: VehicleProfile):
    petrol_part = (1 / 25) * 2.31
    electric_part = (1 / (25 * 1.3)) * 0.71 * 1.15
    expected = 0.65 * petrol_part + 0.35 * electric_part
    assert operational_emission_per_km(hybrid, 0.71) == pytest.approx(expected)


def test_hybrid_without_battery_has_no_electric_share(hybrid: VehicleProfile):
    mild = hybrid.model_copy(update={"battery_capacity_kwh": None})
    assert operational_emission_per_km(mild, 0.71) == pytest.approx(0.65 * 2.31 / 25)


def test_combustion_ignores_grid(petrol: VehicleProfile, cng: VehicleProfile):
    for vehicle in (petrol, cng):
        assert operational_emission_per_km(vehicle, 0.2) == operational_emission_per_km(vehicle, 0.9)


def test_electric_scales_with_grid(ev: VehicleProfile):
    assert operational_emission_per_km(ev, 0.9) > operational_emission_per_km(ev, 0.3)


def test_better_mileage_lowers_rate(petrol: VehicleProfile):
    rates = [
        operational_emission_per_km(petrol.model_copy(update={"midc_efficiency": eff}), 0.71)
        for eff in (8, 12, 18, 24, 30)
    ]
    assert all(a > b > 0 for a, b in zip(rates, rates[1:]))


def test_every_fuel_type_has_a_model():
    for fuel in FuelType:
        vehicle = VehicleProfile(fuel_type=fuel, midc_efficiency=10.0, battery_capacity_kwh=10.0)
        assert operational_emission_per_km(vehicle, 0.71) > 0


def test_consumption_split(ev: VehicleProfile, petrol: VehicleProfile, hybrid: VehicleProfile):
    assert fuel_consumption_per_km(ev) == 0.0
    assert electricity_consumption_per_km(petrol) == 0.0
    assert electricity_consumption_per_km(ev) == pytest.approx(1.15 / 6)
    assert fuel_consumption_per_km(hybrid) == pytest.approx(0.65 / 25)
    assert electricity_consumption_per_km(hybrid) == pytest.approx(0.35 * 1.15 / (25 * 1.3))


def test_unknown_fuel_type_raises():
    vehicle = VehicleProfile.model_construct(fuel_type="HYDROGEN", midc_efficiency=10.0)
    with pytest.raises(UnknownFuelType) as exc_info:
        operational_emission_per_km(vehicle, 0.71)
    assert exc_info.value.fuel_type == "HYDROGEN"
    assert exc_info.value.error_code == "unknown_fuel_type"


def test_missing_efficiency_raises():
    with pytest.raises(InvalidInput):
        operational_emission_per_km(VehicleProfile(fuel_type=FuelType.PETROL), 0.71)


def test_non_positive_grid_raises(ev: VehicleProfile):
    with pytest.raises(InvalidInput):
        operational_emission_per_km(ev, 0.0)
    with pytest.raises(InvalidInput):
        operational_emission_per_km(ev, float("nan"))
