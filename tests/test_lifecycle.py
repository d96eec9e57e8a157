"""Tests for engine/lifecycle.py — totals, rounding and usage adjustment."""

from __future__ import annotations

import logging

import pytest

from carbonwise.config import FuelType, UsagePattern, UsageProfile, VehicleProfile
from carbonwise.engine.lifecycle import calculate_lifecycle_emissions
from carbonwise.errors import InvalidInput


def test_ev_reference_scenario(ev: VehicleProfile, usage: UsageProfile):
    """Nexon-class EV, 40 km/day, 8 years, 0.71 kg/kWh grid."""
    r = calculate_lifecycle_emissions(ev, usage)
    # 40 × 365 × 8 = 116,800 km
    assert r.total_distance_km == 116_800
    # (1/6) × 0.71 × 1.15 = 0.136083 kg/km → 0.136
    assert r.emission_per_km == 0.136
    # 0.136083 × 116,800 ≈ 15,894.5
    assert abs(r.operational_kg - 15_894) <= 1
    assert r.manufacturing_kg == 7_000
    assert r.disposal_kg == 0
    assert abs(r.total_kg - 22_894) <= 1


def test_total_is_exact_sum_of_components(catalog: list[VehicleProfile], usage: UsageProfile):
    for vehicle in catalog:
        r = calculate_lifecycle_emissions(vehicle, usage)
        assert r.total_kg == r.manufacturing_kg + r.operational_kg + r.disposal_kg


def test_inputs_are_echoed(petrol: VehicleProfile):
    usage = UsageProfile(daily_km=55.5, years=5, usage_pattern=UsagePattern.CITY, grid_intensity=0.82)
    r = calculate_lifecycle_emissions(petrol, usage)
    assert r.daily_km == 55.5
    assert r.years == 5
    assert r.usage_pattern is UsagePattern.CITY
    assert r.grid_intensity_used == 0.82


def test_usage_pattern_ordering(catalog: list[VehicleProfile]):
    """CITY ≥ MIXED ≥ HIGHWAY for identical inputs."""
    for vehicle in catalog:
        totals = {
            pattern: calculate_lifecycle_emissions(
                vehicle, UsageProfile(daily_km=40, years=8, usage_pattern=pattern, grid_intensity=0.71),
            ).total_kg
            for pattern in UsagePattern
        }
        assert totals[UsagePattern.CITY] >= totals[UsagePattern.MIXED] >= totals[UsagePattern.HIGHWAY]


def test_usage_multiplier_only_touches_operational(petrol: VehicleProfile):
    mixed = calculate_lifecycle_emissions(
        petrol, UsageProfile(daily_km=40, years=8, usage_pattern=UsagePattern.MIXED, grid_intensity=0.71),
    )
    city = calculate_lifecycle_emissions(
        petrol, UsageProfile(daily_km=40, years=8, usage_pattern=UsagePattern.CITY, grid_intensity=0.71),
    )
    assert city.manufacturing_kg == mixed.manufacturing_kg
    assert city.disposal_kg == mixed.disposal_kg
    # 0.128333 × 1.15 × 116,800
    assert abs(city.operational_kg - (2.31 / 18) * 1.15 * 116_800) <= 0.5


def test_estimated_manufacturing_is_flagged(caplog: pytest.LogCaptureFixture, usage: UsageProfile):
    vehicle = VehicleProfile(
        make="Generic", model="Hatch", fuel_type=FuelType.PETROL, midc_efficiency=20, kerb_weight_kg=1_000,
    )
    with caplog.at_level(logging.WARNING, logger="carbonwise.engine.lifecycle"):
        r = calculate_lifecycle_emissions(vehicle, usage)
    assert r.manufacturing_estimated is True
    assert r.manufacturing_kg == 4_000
    assert len(r.warnings) == 1
    assert "estimated" in caplog.text


def test_missing_disposal_for_unmanaged_battery_is_flagged(usage: UsageProfile):
    vehicle = VehicleProfile(
        fuel_type=FuelType.ELECTRIC, midc_efficiency=7, battery_capacity_kwh=30,
        manufacturing_emissions_kg=8_000, has_recycling_program=False,
    )
    r = calculate_lifecycle_emissions(vehicle, usage)
    assert r.disposal_kg == 0
    assert r.manufacturing_estimated is False
    assert any("30 kWh" in note for note in r.warnings)


def test_penalised_disposal_enters_total(usage: UsageProfile):
    vehicle = VehicleProfile(
        fuel_type=FuelType.ELECTRIC, midc_efficiency=7, battery_capacity_kwh=30,
        manufacturing_emissions_kg=8_000, disposal_emissions_kg=500, has_recycling_program=False,
    )
    r = calculate_lifecycle_emissions(vehicle, usage)
    assert r.disposal_kg == 750
    assert r.warnings == ()


def test_half_kilograms_round_up(usage: UsageProfile):
    estimated = VehicleProfile(
        make="Generic", model="Hatch", fuel_type=FuelType.PETROL, midc_efficiency=20, kerb_weight_kg=1_000.125,
    )
    # 1000.125 kg × 4.0 = 4000.5 kg
    assert calculate_lifecycle_emissions(estimated, usage).manufacturing_kg == 4_001

    unmanaged = VehicleProfile(
        fuel_type=FuelType.ELECTRIC, midc_efficiency=7, battery_capacity_kwh=30,
        manufacturing_emissions_kg=8_000, disposal_emissions_kg=299, has_recycling_program=False,
    )
    # 299 × 1.5 = 448.5 kg
    r = calculate_lifecycle_emissions(unmanaged, usage)
    assert r.disposal_kg == 449
    assert r.total_kg == r.manufacturing_kg + r.operational_kg + r.disposal_kg


def test_identical_calls_give_identical_results(ev: VehicleProfile, usage: UsageProfile):
    assert calculate_lifecycle_emissions(ev, usage) == calculate_lifecycle_emissions(ev, usage)


def test_missing_efficiency_fails_fast(usage: UsageProfile):
    with pytest.raises(InvalidInput):
        calculate_lifecycle_emissions(VehicleProfile(fuel_type=FuelType.DIESEL), usage)
